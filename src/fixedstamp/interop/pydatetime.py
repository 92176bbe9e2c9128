"""Conversions between timestamps and ``datetime.datetime``.

``datetime`` only resolves microseconds, so converting to it truncates
any finer digits toward zero. Naive datetimes are read as UTC.
"""

from __future__ import annotations

import datetime as _dt
import logging

from fixedstamp._constants import NANO_EXPONENT
from fixedstamp._errors import (
    ERR_MSG_DATETIME_CONSTRUCTION,
    ERR_MSG_DATETIME_OUT_OF_RANGE,
    ERR_MSG_DATETIME_SCALE_FAILED,
    DateTimeConstructionError,
    DateTimeOutOfRangeError,
    DateTimeScaleFailedError,
)
from fixedstamp._scale import (
    nanoseconds_to_timestamp_value,
    saturate,
    scale_signed,
)
from fixedstamp.timestamp import Timestamp

logger = logging.getLogger(__name__)

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)


def _unix_nanos(dt: _dt.datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_dt.timezone.utc)
    delta = dt - _EPOCH
    total_us = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return total_us * 1_000


_MIN_NANOS = _unix_nanos(_dt.datetime.min)
_MAX_NANOS = _unix_nanos(_dt.datetime.max)


def from_datetime(cls: type[Timestamp], dt: _dt.datetime) -> Timestamp:
    """Convert ``dt`` to a timestamp of type ``cls``.

    Instants at or before the epoch read as zero and instants beyond the
    storage range saturate to its maximum; this direction never raises.
    """
    total_ns = _unix_nanos(dt)
    if total_ns <= 0:
        return cls(0)
    value = nanoseconds_to_timestamp_value(total_ns, cls.power)
    if value is None:
        logger.debug("saturating %s to %s max", dt, cls.storage)
        return cls(cls.storage.max)
    return cls(saturate(value, cls.storage))


def to_datetime(ts: Timestamp) -> _dt.datetime:
    """Convert ``ts`` to an aware UTC datetime.

    Raises:
        DateTimeScaleFailedError: If the value cannot be expressed in nanoseconds.
        DateTimeOutOfRangeError: If the instant is outside the ``datetime`` range.
        DateTimeConstructionError: If ``datetime`` rejects the instant.
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
            f"{total_ns} ns is outside [{_MIN_NANOS}, {_MAX_NANOS}]",
        )
    try:
        return _EPOCH + _dt.timedelta(microseconds=scale_signed(total_ns, -3))
    except (OverflowError, ValueError) as e:
        raise DateTimeConstructionError(
            ERR_MSG_DATETIME_CONSTRUCTION,
            total_ns,
            f"datetime rejected {total_ns} ns: {e}",
            wrapped=e,
        ) from e
