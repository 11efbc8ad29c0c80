"""Host wall-clock access.

Instants are measured from the Unix epoch, so values sampled by different
processes on the same host compare meaningfully. They are not monotonic:
a wall-clock adjustment between two reads shows up in their difference.
"""

from time import time_ns as current_time_ns

from loguru import logger


class ClockBeforeEpochError(RuntimeError):
    """The system clock reported a time before the Unix epoch."""


def wall_clock_ns() -> int:
    """Nanoseconds since the Unix epoch.

    Raises:
        ClockBeforeEpochError: If the system clock is set before the epoch
    """
    nanos = current_time_ns()
    if nanos < 0:
        logger.critical("System clock reads {} ns, before the Unix epoch", nanos)
        raise ClockBeforeEpochError(
            f"System clock is {-nanos} ns before the Unix epoch.\n"
            f"Hint: Check the host's clock configuration."
        )
    return nanos
