"""Nanosecond-resolution duration since the Unix epoch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from fixedstamp._constants import NANOS_PER_SECOND, U64_MAX

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class EpochDuration:
    """Whole seconds plus a sub-second nanosecond remainder.

    ``seconds`` is bounded by u64 and ``nanoseconds`` by one second,
    so ``MAX`` is the largest duration any conversion saturates to.
    """

    seconds: int = 0
    nanoseconds: int = 0

    ZERO: ClassVar[EpochDuration]
    MAX: ClassVar[EpochDuration]

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= U64_MAX:
            raise ValueError(f"seconds must be within [0, {U64_MAX}], got {self.seconds}")
        if not 0 <= self.nanoseconds < NANOS_PER_SECOND:
            raise ValueError(
                f"nanoseconds must be within [0, {NANOS_PER_SECOND}), got {self.nanoseconds}"
            )

    @classmethod
    def from_nanos(cls, total_ns: int) -> EpochDuration:
        """Build a duration from a nanosecond count, saturating at the bounds."""
        if total_ns <= 0:
            return cls.ZERO
        seconds, nanoseconds = divmod(total_ns, NANOS_PER_SECOND)
        if seconds > U64_MAX:
            logger.debug("saturating %d ns to EpochDuration.MAX", total_ns)
            return cls.MAX
        return cls(seconds, nanoseconds)

    def as_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> EpochDuration:
        total_us = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_nanos(total_us * 1_000)

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``, truncating below one microsecond.

        Raises:
            OverflowError: If the duration exceeds ``timedelta.max``.
        """
        return timedelta(seconds=self.seconds, microseconds=self.nanoseconds // 1_000)


EpochDuration.ZERO = EpochDuration(0, 0)
EpochDuration.MAX = EpochDuration(U64_MAX, NANOS_PER_SECOND - 1)
