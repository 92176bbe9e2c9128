"""Exception hierarchy for fixed-point timestamp conversions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fixedstamp.storage import IntStorage


class TimestampError(Exception):
    """Base exception for fixed-point timestamp errors.

    Provides dual messaging: a short user-facing message and
    internal details (offending numbers included) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ScaleFailedError(TimestampError):
    """Raised when a decimal rescale overflows the 128-bit intermediate."""

    def __init__(self, value: int, power_in: int, power_out: int) -> None:
        super().__init__(
            ERR_MSG_SCALE_FAILED,
            f"cannot rescale {value} from 10^{power_in} to 10^{power_out}",
        )
        self.value = value
        self.power_in = power_in
        self.power_out = power_out


class NarrowingFailedError(TimestampError):
    """Raised when a rescaled value does not fit the target storage."""

    def __init__(self, value: int, power_out: int) -> None:
        super().__init__(
            ERR_MSG_NARROWING_FAILED,
            f"rescaled value {value} at 10^{power_out} does not fit the storage type",
        )
        self.value = value
        self.power_out = power_out


class UnsupportedStorageError(TimestampError):
    """Raised when an operation requires unsigned storage of at most 128 bits."""

    def __init__(self, storage: IntStorage, operation: str) -> None:
        super().__init__(
            ERR_MSG_UNSUPPORTED_STORAGE,
            f"{operation} is not defined for {storage.name} storage",
        )
        self.storage = storage


class DateTimeConversionError(TimestampError):
    """Base class for failures converting a timestamp to a calendar type."""

    def __init__(
        self,
        user_message: str,
        value: int,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.value = value


class DateTimeScaleFailedError(DateTimeConversionError):
    """Raised when the mantissa cannot be rescaled to nanoseconds."""


class DateTimeOutOfRangeError(DateTimeConversionError):
    """Raised when the nanosecond count is outside the calendar type's range."""


class DateTimeConstructionError(DateTimeConversionError):
    """Raised when the calendar type's constructor rejects the value."""


class InvalidTimestampLiteralError(TimestampError):
    """Raised when decimal-seconds text cannot be read exactly."""


# Sanitized user-facing error message constants
ERR_MSG_SCALE_FAILED = "timestamp rescale overflowed"
ERR_MSG_NARROWING_FAILED = "rescaled timestamp does not fit its storage"
ERR_MSG_UNSUPPORTED_STORAGE = "operation requires unsigned storage"
ERR_MSG_DATETIME_SCALE_FAILED = "timestamp cannot be expressed in nanoseconds"
ERR_MSG_DATETIME_OUT_OF_RANGE = "timestamp is out of range for the date-time type"
ERR_MSG_DATETIME_CONSTRUCTION = "date-time type rejected the timestamp"
ERR_MSG_INVALID_LITERAL = "invalid timestamp literal"
ERR_MSG_INEXACT_LITERAL = "timestamp literal has more precision than its type"
