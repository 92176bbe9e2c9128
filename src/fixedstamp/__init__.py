"""fixedstamp - Fixed-point Unix timestamps with selectable storage and precision."""

from __future__ import annotations

try:
    from fixedstamp._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging

from fixedstamp._constants import MAX_POW10_EXPONENT, MICRO, MILLI, NANO, UNO
from fixedstamp._errors import (
    DateTimeConstructionError,
    DateTimeConversionError,
    DateTimeOutOfRangeError,
    DateTimeScaleFailedError,
    InvalidTimestampLiteralError,
    NarrowingFailedError,
    ScaleFailedError,
    TimestampError,
    UnsupportedStorageError,
)
from fixedstamp._format import format_as_seconds, format_seconds
from fixedstamp._parse import parse_seconds
from fixedstamp._scale import (
    nanoseconds_to_timestamp_value,
    pow10,
    scale,
    timestamp_value_to_nanoseconds,
)
from fixedstamp.duration import EpochDuration
from fixedstamp.interop import from_datetime, to_datetime
from fixedstamp.storage import (
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    IntStorage,
    StorageName,
)
from fixedstamp.timestamp import (
    Timestamp,
    TimestampMs,
    TimestampNs,
    TimestampS,
    TimestampUs,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Timestamp",
    "TimestampS",
    "TimestampMs",
    "TimestampUs",
    "TimestampNs",
    "EpochDuration",
    "IntStorage",
    "StorageName",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "UNO",
    "MILLI",
    "MICRO",
    "NANO",
    "MAX_POW10_EXPONENT",
    "pow10",
    "scale",
    "timestamp_value_to_nanoseconds",
    "nanoseconds_to_timestamp_value",
    "format_as_seconds",
    "format_seconds",
    "parse_seconds",
    "from_datetime",
    "to_datetime",
    "TimestampError",
    "ScaleFailedError",
    "NarrowingFailedError",
    "UnsupportedStorageError",
    "DateTimeConversionError",
    "DateTimeScaleFailedError",
    "DateTimeOutOfRangeError",
    "DateTimeConstructionError",
    "InvalidTimestampLiteralError",
]
