"""Absolute points in time, measured from the Unix epoch."""

from dataclasses import dataclass
from typing import overload

from typing_extensions import Self, override

from fixedtime import clock
from fixedtime.duration import Duration
from fixedtime.fixed import FixedTime, TimeValue


@dataclass(frozen=True, order=True, kw_only=True)
class Instant(TimeValue):
    """A point in time: ``time`` elapsed since the Unix epoch.

    Instant - Instant gives a Duration and Instant + Duration gives an
    Instant. Both saturate at zero rather than going negative.
    """

    @classmethod
    def now(cls) -> Self:
        """Sample the system wall clock.

        Raises:
            ClockBeforeEpochError: If the system clock is set before the epoch
        """
        return cls(time=FixedTime.from_nanos(clock.wall_clock_ns()))

    @classmethod
    def from_fixed(cls, time: FixedTime) -> Self:
        return cls(time=time)

    def elapsed(self) -> Duration:
        """Time from this instant until now; zero if this instant is in the future."""
        return type(self).now() - self

    def __add__(self, other: Duration) -> "Instant":
        if not isinstance(other, Duration):
            return NotImplemented
        return Instant(time=self.time + other.time)

    def __radd__(self, other: Duration) -> "Instant":
        return self.__add__(other)

    @overload
    def __sub__(self, other: "Instant") -> Duration: ...

    @overload
    def __sub__(self, other: Duration) -> "Instant": ...

    def __sub__(self, other: "Instant | Duration") -> "Duration | Instant":
        if isinstance(other, Instant):
            return Duration(time=self.time - other.time)
        if isinstance(other, Duration):
            return Instant(time=self.time - other.time)
        return NotImplemented

    @override
    def __str__(self) -> str:
        return f"Instant(epoch+{self.time})"
