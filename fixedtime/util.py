"""Unit constants for fixedtime.

Scale factors are expressed in nanoseconds, the resolution of every
value in this package.
"""

# Nanoseconds per unit
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

# Sub-second scales used by the float accessors
MILLIS_PER_SECOND = 1_000
MICROS_PER_SECOND = 1_000_000

# Largest whole-second count a FixedTime saturates to (unsigned 64-bit)
U64_MAX = 2**64 - 1
