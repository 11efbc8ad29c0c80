from loguru import logger

from .clock import ClockBeforeEpochError, wall_clock_ns
from .duration import Duration
from .fixed import FixedTime, TimeValue
from .instant import Instant
from .util import NANOS_PER_MICRO, NANOS_PER_MILLI, NANOS_PER_SECOND

# Library code stays silent until the application opts in with
# logger.enable("fixedtime")
logger.disable(__name__)

__all__ = [
    "FixedTime",
    "TimeValue",
    "Duration",
    "Instant",
    "ClockBeforeEpochError",
    "wall_clock_ns",
    "NANOS_PER_SECOND",
    "NANOS_PER_MILLI",
    "NANOS_PER_MICRO",
]
