"""Conversions between timestamps and ``numpy.datetime64``.

Requires the ``numpy`` extra. Timestamps convert to ``datetime64[ns]``,
whose range is the signed 64-bit nanosecond range (the minimum value is
reserved for NaT).
"""

from __future__ import annotations

import logging

import numpy as np

from fixedstamp._constants import NANO_EXPONENT
from fixedstamp._errors import (
    ERR_MSG_DATETIME_CONSTRUCTION,
    ERR_MSG_DATETIME_OUT_OF_RANGE,
    ERR_MSG_DATETIME_SCALE_FAILED,
    DateTimeConstructionError,
    DateTimeOutOfRangeError,
    DateTimeScaleFailedError,
)
from fixedstamp._scale import nanoseconds_to_timestamp_value, saturate, scale_signed
from fixedstamp.storage import I64
from fixedstamp.timestamp import Timestamp

logger = logging.getLogger(__name__)

_MIN_NANOS = I64.min + 1
_MAX_NANOS = I64.max

# datetime64 unit -> decimal exponent relative to seconds
_DECIMAL_UNITS: dict[str, int] = {
    "s": 0,
    "ms": -3,
    "us": -6,
    "ns": -9,
    "ps": -12,
    "fs": -15,
    "as": -18,
}

# datetime64 unit -> whole seconds per unit
_SECONDS_UNITS: dict[str, int] = {
    "m": 60,
    "h": 3_600,
    "D": 86_400,
    "W": 604_800,
}


def _unix_nanos(dt64: np.datetime64) -> int:
    unit, count = np.datetime_data(dt64.dtype)
    if unit in ("Y", "M"):
        dt64 = dt64.astype("datetime64[D]")
        unit, count = "D", 1
    ticks = int(dt64.astype(np.int64)) * count

    if unit in _SECONDS_UNITS:
        return ticks * _SECONDS_UNITS[unit] * 10**NANO_EXPONENT
    diff = _DECIMAL_UNITS[unit] + NANO_EXPONENT
    if diff >= 0:
        return ticks * 10**diff
    return ticks // 10**-diff


def from_datetime64(cls: type[Timestamp], dt64: np.datetime64) -> Timestamp:
    """Convert ``dt64`` to a timestamp of type ``cls``.

    NaT and instants at or before the epoch read as zero; instants beyond
    the storage range saturate to its maximum. Never raises.
    """
    if np.isnat(dt64):
        return cls(0)
    total_ns = _unix_nanos(dt64)
    if total_ns <= 0:
        return cls(0)
    value = nanoseconds_to_timestamp_value(total_ns, cls.power)
    if value is None:
        logger.debug("saturating %s to %s max", dt64, cls.storage)
        return cls(cls.storage.max)
    return cls(saturate(value, cls.storage))


def to_datetime64(ts: Timestamp) -> np.datetime64:
    """Convert ``ts`` to ``datetime64[ns]``.

    Raises:
        DateTimeScaleFailedError: If the value cannot be expressed in nanoseconds.
        DateTimeOutOfRangeError: If the nanosecond count does not fit int64.
        DateTimeConstructionError: If numpy rejects the value.
    """
    total_ns = scale_signed(ts.value, ts.power + NANO_EXPONENT)
    if total_ns is None:
        raise DateTimeScaleFailedError(
            ERR_MSG_DATETIME_SCALE_FAILED,
            ts.value,
            f"{ts!r} overflows 128 bits at nanosecond precision",
        )
    if not _MIN_NANOS <= total_ns <= _MAX_NANOS:
        raise DateTimeOutOfRangeError(
            ERR_MSG_DATETIME_OUT_OF_RANGE,
            total_ns,
            f"{total_ns} ns is outside the datetime64[ns] range",
        )
    try:
        return np.datetime64(total_ns, "ns")
    except (OverflowError, ValueError) as e:
        raise DateTimeConstructionError(
            ERR_MSG_DATETIME_CONSTRUCTION,
            total_ns,
            f"numpy rejected {total_ns} ns: {e}",
            wrapped=e,
        ) from e
