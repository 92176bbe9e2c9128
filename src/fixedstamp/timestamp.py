"""Fixed-point Unix timestamp type.

A timestamp is a mantissa ``value`` read as ``value * 10**power`` seconds
since the Unix epoch. The storage type and the exponent are properties
of the class, not of the instance: ``Timestamp.of(U64, MILLI)`` returns a
cached subclass bound to that pair, and instances of different subclasses
never compare equal and cannot be ordered against each other.
"""

from __future__ import annotations

import logging
import operator
import threading
import time
from io import StringIO
from typing import Any, ClassVar

from fixedstamp._constants import MICRO, MILLI, NANO, UNO
from fixedstamp._errors import (
    ERR_MSG_INVALID_LITERAL,
    InvalidTimestampLiteralError,
    NarrowingFailedError,
    ScaleFailedError,
    UnsupportedStorageError,
)
from fixedstamp._format import TextSink, format_as_seconds
from fixedstamp._parse import parse_seconds
from fixedstamp._scale import (
    nanoseconds_to_timestamp_value,
    saturate,
    scale,
    timestamp_value_to_nanoseconds,
)
from fixedstamp.duration import EpochDuration
from fixedstamp.storage import U64, U128, IntStorage, StorageName, get_storage

logger = logging.getLogger(__name__)

_specializations: dict[tuple[StorageName, int], type[Timestamp]] = {}
_specializations_lock = threading.Lock()


class Timestamp:
    """``value * 10**power`` seconds since the Unix epoch.

    The bare class stores ``u64`` seconds; use :meth:`of` for any other
    storage type or exponent.
    """

    __slots__ = ("_value",)

    storage: ClassVar[IntStorage] = U64
    power: ClassVar[int] = UNO

    def __init__(self, value: int) -> None:
        object.__setattr__(self, "_value", operator.index(value))

    @classmethod
    def of(cls, storage: IntStorage | str, power: int) -> type[Timestamp]:
        """Return the timestamp class for ``storage`` at exponent ``power``."""
        if isinstance(storage, str):
            storage = get_storage(storage)
        power = operator.index(power)
        key = (storage.name, power)
        with _specializations_lock:
            specialized = _specializations.get(key)
            if specialized is None:
                specialized = type(
                    "Timestamp",
                    (Timestamp,),
                    {"__slots__": (), "storage": storage, "power": power},
                )
                _specializations[key] = specialized
        return specialized

    @classmethod
    def new(cls, value: int) -> Timestamp:
        return cls(value)

    from_value = new

    # --- Mantissa access ---

    @property
    def value(self) -> int:
        return self._value

    def into_value(self) -> int:
        return self._value

    def replace(self, value: int) -> Timestamp:
        """Return a timestamp of the same type holding ``value``."""
        return type(self)(value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    # --- Comparison (same storage and power only) ---

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._value == other._value  # type: ignore[attr-defined]
        if isinstance(other, Timestamp):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.storage.name, self.power, self._value))

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value <= other._value  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value > other._value  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value >= other._value  # type: ignore[attr-defined]

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore, (str(self.storage.name), self.power, self._value)

    # --- Text ---

    def format_as_seconds(self, w: TextSink) -> None:
        format_as_seconds(self._value, self.power, w)

    def __str__(self) -> str:
        w = StringIO()
        self.format_as_seconds(w)
        return w.getvalue()

    def __repr__(self) -> str:
        return f"Timestamp[{self.storage}, {self.power}]({self._value})"

    def to_scientific(self) -> str:
        return f"{self._value}e{self.power}"

    @classmethod
    def parse(cls, text: str) -> Timestamp:
        """Read decimal seconds (``"1.500"``, ``"15e-1"``) exactly.

        Raises:
            InvalidTimestampLiteralError: If the text is malformed, too
                precise for ``power``, or out of the storage range.
        """
        value = parse_seconds(text, cls.power)
        if not cls.storage.contains(value):
            raise InvalidTimestampLiteralError(
                ERR_MSG_INVALID_LITERAL,
                f"{text!r} is {value} at 10^{cls.power}, outside {cls.storage}",
            )
        return cls(value)

    # --- Rescaling ---

    def try_scale(self, power_out: int) -> Timestamp:
        """Return this instant at exponent ``power_out``, same storage.

        Moving to a coarser exponent truncates toward zero.

        Raises:
            ScaleFailedError: If the rescale overflows 128 bits.
            NarrowingFailedError: If the result does not fit the storage.
            UnsupportedStorageError: If the storage is signed or wider
                than 128 bits.
        """
        self._require_u128_storage("try_scale")
        power_out = operator.index(power_out)
        if not U128.contains(self._value):
            logger.debug("%r is outside the u128 range", self)
            raise NarrowingFailedError(self._value, self.power)
        scaled = scale(self._value, self.power - power_out)
        if scaled is None:
            logger.debug("rescale of %r to 10^%d overflowed", self, power_out)
            raise ScaleFailedError(self._value, self.power, power_out)
        if not self.storage.contains(scaled):
            logger.debug(
                "rescale of %r to 10^%d gives %d, outside %s",
                self,
                power_out,
                scaled,
                self.storage,
            )
            raise NarrowingFailedError(scaled, power_out)
        return Timestamp.of(self.storage, power_out)(scaled)

    def to_duration(self) -> EpochDuration:
        """Convert to a duration since the epoch, saturating at ``EpochDuration.MAX``.

        Mantissas outside the u128 range are clamped first.
        """
        self._require_u128_storage("to_duration")
        total_ns = timestamp_value_to_nanoseconds(
            saturate(self._value, U128), self.power
        )
        if total_ns is None:
            logger.debug("saturating %r to EpochDuration.MAX", self)
            return EpochDuration.MAX
        return EpochDuration.from_nanos(total_ns)

    @classmethod
    def from_duration(cls, duration: EpochDuration) -> Timestamp:
        """Convert from a duration since the epoch, saturating at the storage max."""
        cls._require_u128_storage("from_duration")
        value = nanoseconds_to_timestamp_value(duration.as_nanos(), cls.power)
        if value is None:
            logger.debug("saturating %s to %s max", duration, cls.storage)
            return cls(cls.storage.max)
        return cls(saturate(value, cls.storage))

    @classmethod
    def now(cls) -> Timestamp:
        """Current wall-clock time; a clock before the epoch reads as zero."""
        return cls.from_duration(EpochDuration.from_nanos(time.time_ns()))

    @classmethod
    def _require_u128_storage(cls, operation: str) -> None:
        if not cls.storage.widens_to_u128:
            raise UnsupportedStorageError(cls.storage, operation)


_specializations[(U64.name, UNO)] = Timestamp


def _restore(storage: str, power: int, value: int) -> Timestamp:
    return Timestamp.of(storage, power)(value)


TimestampS = Timestamp.of(U64, UNO)
TimestampMs = Timestamp.of(U64, MILLI)
TimestampUs = Timestamp.of(U64, MICRO)
TimestampNs = Timestamp.of(U64, NANO)
