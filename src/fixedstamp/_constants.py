"""Arithmetic limits and scale constants for fixed-point timestamps."""

MAX_POW10_EXPONENT = 38
"""Largest exponent whose power of ten fits in an unsigned 128-bit integer."""

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1

NANOS_PER_SECOND = 1_000_000_000
NANO_EXPONENT = 9
"""Decimal exponent of nanoseconds relative to seconds."""

UNO = 0
MILLI = -3
MICRO = -6
NANO = -9
