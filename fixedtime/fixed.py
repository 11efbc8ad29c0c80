"""Fixed-point time quantity shared by Instant and Duration.

A FixedTime is a (whole_seconds, nanosecond_remainder) pair with
0 <= nanosecond_remainder < 1_000_000_000. Every constructor goes through
__post_init__, which carries an oversized remainder into whole_seconds, so
no instance can hold an unnormalized pair.

Arithmetic runs on exact integer nanoseconds. Results saturate at zero and
at max() (whole_seconds is an unsigned 64-bit count); use checked_sub() to
detect subtraction underflow.
"""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from typing import Any

from loguru import logger
from typing_extensions import Self, override

from fixedtime.util import (
    MICROS_PER_SECOND,
    MILLIS_PER_SECOND,
    NANOS_PER_SECOND,
    U64_MAX,
)


@dataclass(frozen=True, order=True, kw_only=True)
class FixedTime:
    whole_seconds: int = 0
    nanosecond_remainder: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a meaningful count
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"FixedTime.{f.name} must be an int.\n"
                    f"Got {type(value).__name__!r}: {value!r}\n"
                    f"Hint: Use FixedTime.from_seconds_f() for float seconds."
                )
            if value < 0:
                raise ValueError(
                    f"FixedTime.{f.name} must be >= 0, got {value}.\n"
                    f"Hint: FixedTime only represents non-negative elapsed time."
                )

        if self.nanosecond_remainder >= NANOS_PER_SECOND:
            carry, remainder = divmod(self.nanosecond_remainder, NANOS_PER_SECOND)
            object.__setattr__(self, "whole_seconds", self.whole_seconds + carry)
            object.__setattr__(self, "nanosecond_remainder", remainder)

        # whole_seconds is an unsigned 64-bit field
        if self.whole_seconds > U64_MAX:
            logger.debug("Saturating {} s to the largest FixedTime", self.whole_seconds)
            object.__setattr__(self, "whole_seconds", U64_MAX)
            object.__setattr__(self, "nanosecond_remainder", NANOS_PER_SECOND - 1)

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @classmethod
    def max(cls) -> Self:
        """The largest representable value; overflowing results saturate here."""
        return cls(whole_seconds=U64_MAX, nanosecond_remainder=NANOS_PER_SECOND - 1)

    @classmethod
    def from_parts(cls, whole_seconds: int, nanos: int) -> Self:
        """Build from a seconds/nanoseconds pair, carrying nanos >= 1e9."""
        return cls(whole_seconds=whole_seconds, nanosecond_remainder=nanos)

    @classmethod
    def from_nanos(cls, total_nanos: int) -> Self:
        whole, remainder = divmod(total_nanos, NANOS_PER_SECOND)
        return cls(whole_seconds=whole, nanosecond_remainder=remainder)

    @classmethod
    def from_seconds_f(cls, seconds: float) -> Self:
        """Build from float seconds.

        The whole part is truncated toward zero and the fraction is rounded
        to the nearest nanosecond. Inputs with no non-negative meaning do not
        raise: negative values and NaN give zero, +inf and values beyond the
        unsigned 64-bit range saturate to max().
        """
        if math.isnan(seconds) or seconds <= 0:
            return cls.zero()
        if math.isinf(seconds) or seconds >= U64_MAX:
            logger.debug("Saturating {!r} seconds to the largest FixedTime", seconds)
            return cls.max()

        whole = math.trunc(seconds)
        nanos = round((seconds - whole) * NANOS_PER_SECOND)
        return cls(whole_seconds=whole, nanosecond_remainder=nanos)

    @classmethod
    def from_millis(cls, millis: float) -> Self:
        return cls.from_seconds_f(millis / MILLIS_PER_SECOND)

    @classmethod
    def from_micros(cls, micros: float) -> Self:
        return cls.from_seconds_f(micros / MICROS_PER_SECOND)

    @classmethod
    def from_hertz(cls, hertz: float) -> Self:
        """Build the period of a frequency. Zero hertz is an infinite period."""
        if hertz == 0:
            return cls.from_seconds_f(math.inf)
        return cls.from_seconds_f(1.0 / hertz)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        try:
            return cls(
                whole_seconds=data["whole_seconds"],
                nanosecond_remainder=data["nanosecond_remainder"],
            )
        except KeyError as exc:
            raise ValueError(
                f"FixedTime data is missing field {exc.args[0]!r}.\n"
                f"Got: {dict(data)!r}\n"
                f"Hint: Expected {{'whole_seconds': int, "
                f"'nanosecond_remainder': int}}"
            ) from exc

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def as_seconds(self) -> float:
        return self.whole_seconds + self.nanosecond_remainder / NANOS_PER_SECOND

    def as_millis(self) -> float:
        return self.whole_seconds * MILLIS_PER_SECOND + (
            self.nanosecond_remainder / (NANOS_PER_SECOND // MILLIS_PER_SECOND)
        )

    def as_micros(self) -> float:
        return self.whole_seconds * MICROS_PER_SECOND + (
            self.nanosecond_remainder / (NANOS_PER_SECOND // MICROS_PER_SECOND)
        )

    def as_nanos(self) -> int:
        """Total nanoseconds, exact."""
        return self.whole_seconds * NANOS_PER_SECOND + self.nanosecond_remainder

    def as_hertz(self) -> float:
        """Frequency whose period is this value; infinite for zero."""
        seconds = self.as_seconds()
        if seconds == 0:
            return math.inf
        return 1.0 / seconds

    def checked_sub(self, other: "FixedTime") -> "FixedTime | None":
        """Subtract, returning None instead of saturating when other > self."""
        difference = self.as_nanos() - other.as_nanos()
        if difference < 0:
            return None
        return FixedTime.from_nanos(difference)

    def __add__(self, other: "FixedTime") -> "FixedTime":
        if not isinstance(other, FixedTime):
            return NotImplemented
        return FixedTime.from_nanos(self.as_nanos() + other.as_nanos())

    def __sub__(self, other: "FixedTime") -> "FixedTime":
        if not isinstance(other, FixedTime):
            return NotImplemented
        difference = self.checked_sub(other)
        if difference is None:
            logger.trace("Saturating {} - {} at zero", self, other)
            return FixedTime.zero()
        return difference

    @override
    def __str__(self) -> str:
        return f"{self.whole_seconds}.{self.nanosecond_remainder:09d}s"


@dataclass(frozen=True, order=True, kw_only=True)
class TimeValue:
    """Base for value types that wrap a single FixedTime.

    Storage, ordering and unit conversions all delegate to ``time``;
    subclasses only add the arithmetic that gives them meaning.
    """

    time: FixedTime = field(default_factory=FixedTime)

    def __post_init__(self) -> None:
        if not isinstance(self.time, FixedTime):
            raise TypeError(
                f"{type(self).__name__}.time must be a FixedTime.\n"
                f"Got {type(self.time).__name__!r}: {self.time!r}\n"
                f"Hint: Use {type(self).__name__}.from_seconds_f() or "
                f"{type(self).__name__}.from_nanos() to build from raw units."
            )

    @classmethod
    def zero(cls) -> Self:
        return cls()

    @classmethod
    def from_parts(cls, whole_seconds: int, nanos: int) -> Self:
        return cls(time=FixedTime.from_parts(whole_seconds, nanos))

    @classmethod
    def from_seconds_f(cls, seconds: float) -> Self:
        return cls(time=FixedTime.from_seconds_f(seconds))

    @classmethod
    def from_millis(cls, millis: float) -> Self:
        return cls(time=FixedTime.from_millis(millis))

    @classmethod
    def from_micros(cls, micros: float) -> Self:
        return cls(time=FixedTime.from_micros(micros))

    @classmethod
    def from_nanos(cls, total_nanos: int) -> Self:
        return cls(time=FixedTime.from_nanos(total_nanos))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        if "time" not in data:
            raise ValueError(
                f"{cls.__name__} data is missing field 'time'.\n"
                f"Got: {dict(data)!r}\n"
                f"Hint: Expected {{'time': {{'whole_seconds': int, "
                f"'nanosecond_remainder': int}}}}"
            )
        return cls(time=FixedTime.from_dict(data["time"]))

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"time": self.time.to_dict()}

    def as_seconds(self) -> float:
        return self.time.as_seconds()

    def as_millis(self) -> float:
        return self.time.as_millis()

    def as_micros(self) -> float:
        return self.time.as_micros()

    def as_nanos(self) -> int:
        return self.time.as_nanos()

    @override
    def __str__(self) -> str:
        return f"{type(self).__name__}({self.time})"
