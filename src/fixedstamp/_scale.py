"""Power-of-ten scaling between decimal exponents.

All intermediate magnitudes live in the unsigned 128-bit range; results
that would leave it are reported as ``None`` rather than wrapped.
"""

from __future__ import annotations

import logging

from fixedstamp._constants import MAX_POW10_EXPONENT, NANO_EXPONENT, U128_MAX
from fixedstamp.storage import IntStorage

logger = logging.getLogger(__name__)

_POW10: tuple[int, ...] = tuple(10**exp for exp in range(MAX_POW10_EXPONENT + 1))


def pow10(exp: int) -> int | None:
    """Return ``10**exp``, or None if it would overflow u128."""
    if exp < 0:
        raise ValueError(f"exponent must be non-negative, got {exp}")
    if exp > MAX_POW10_EXPONENT:
        return None
    return _POW10[exp]


def scale(value: int, diff: int) -> int | None:
    """Multiply ``value`` by ``10**diff``, truncating when ``diff`` is negative.

    Returns None when a multiplication leaves the u128 range. Division by a
    power beyond the u128 bound is a valid underflow to zero.
    """
    if not 0 <= value <= U128_MAX:
        raise ValueError(f"value {value} is outside the unsigned 128-bit range")

    if diff == 0:
        return value

    if diff > 0:
        if value == 0:
            return 0
        factor = pow10(diff)
        if factor is None:
            return None
        product = value * factor
        if product > U128_MAX:
            return None
        return product

    divisor = pow10(-diff)
    if divisor is None:
        return 0
    return value // divisor


def timestamp_value_to_nanoseconds(value: int, power: int) -> int | None:
    return scale(value, power + NANO_EXPONENT)


def nanoseconds_to_timestamp_value(total_ns: int, power: int) -> int | None:
    return scale(total_ns, -NANO_EXPONENT - power)


def scale_signed(value: int, diff: int) -> int | None:
    """``scale`` applied to the magnitude of ``value``, sign restored.

    Truncates toward zero. Returns None when the magnitude of ``value`` or
    of the result leaves the u128 range.
    """
    if abs(value) > U128_MAX:
        return None
    magnitude = scale(abs(value), diff)
    if magnitude is None or value >= 0:
        return magnitude
    return -magnitude


def saturate(n: int, storage: IntStorage) -> int:
    """Clamp ``n`` into the range of ``storage``."""
    if n > storage.max:
        logger.debug("saturating %d to %s max", n, storage)
        return storage.max
    if n < storage.min:
        logger.debug("saturating %d to %s min", n, storage)
        return storage.min
    return n
