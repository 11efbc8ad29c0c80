"""Relative elapsed time."""

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from loguru import logger
from typing_extensions import Self

from fixedtime.fixed import FixedTime, TimeValue
from fixedtime.util import NANOS_PER_MICRO

if TYPE_CHECKING:
    from fixedtime.instant import Instant

_HOST_DURATION_MAX = FixedTime(
    whole_seconds=timedelta.max.days * 86400 + timedelta.max.seconds,
    nanosecond_remainder=timedelta.max.microseconds * NANOS_PER_MICRO,
)


@dataclass(frozen=True, order=True, kw_only=True)
class Duration(TimeValue):
    """How long something took, never negative.

    Subtracting a larger duration from a smaller one saturates at zero,
    following FixedTime.
    """

    @classmethod
    def new_from_points(cls, start: "Instant", end: "Instant") -> "Duration":
        """Span from ``start`` to ``end``; zero if ``end`` is earlier."""
        return end - start

    @classmethod
    def from_hertz(cls, hertz: float) -> Self:
        return cls(time=FixedTime.from_hertz(hertz))

    @classmethod
    def from_host_duration(cls, delta: timedelta) -> Self:
        """Convert a ``datetime.timedelta``. Exact for every non-negative delta.

        Raises:
            ValueError: If ``delta`` is negative
        """
        if delta < timedelta(0):
            raise ValueError(
                f"Duration cannot be built from a negative timedelta.\n"
                f"Got: {delta!r}\n"
                f"Hint: Use abs(delta) if only the magnitude matters."
            )
        return cls(
            time=FixedTime(
                whole_seconds=delta.days * 86400 + delta.seconds,
                nanosecond_remainder=delta.microseconds * NANOS_PER_MICRO,
            )
        )

    def to_host_duration(self) -> timedelta:
        """Convert to ``datetime.timedelta``.

        timedelta resolves microseconds, so any sub-microsecond remainder is
        truncated. Durations beyond ``timedelta.max`` (about 2.7 million
        years, e.g. the period of zero hertz) clamp to ``timedelta.max``.
        """
        if self.time > _HOST_DURATION_MAX:
            logger.debug("Clamping {} to timedelta.max", self)
            return timedelta.max
        return timedelta(
            seconds=self.time.whole_seconds,
            microseconds=self.time.nanosecond_remainder // NANOS_PER_MICRO,
        )

    def as_hertz(self) -> float:
        return self.time.as_hertz()

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(time=self.time + other.time)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(time=self.time - other.time)
