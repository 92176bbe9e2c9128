"""Conversions between timestamps and calendar date-time types.

``datetime.datetime`` support is always available; ``numpy.datetime64``
support needs the ``numpy`` extra and is imported on first use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fixedstamp.interop.pydatetime import from_datetime, to_datetime

if TYPE_CHECKING:
    from fixedstamp.timestamp import Timestamp

__all__ = [
    "from_datetime",
    "from_datetime64",
    "to_datetime",
    "to_datetime64",
]


def from_datetime64(cls: type[Timestamp], dt64: Any) -> Timestamp:
    """Convert a ``numpy.datetime64`` to a timestamp of type ``cls``.

    See :func:`fixedstamp.interop.datetime64.from_datetime64`.
    """
    from fixedstamp.interop.datetime64 import from_datetime64 as _from_datetime64

    return _from_datetime64(cls, dt64)


def to_datetime64(ts: Timestamp) -> Any:
    """Convert a timestamp to ``numpy.datetime64[ns]``.

    See :func:`fixedstamp.interop.datetime64.to_datetime64`.
    """
    from fixedstamp.interop.datetime64 import to_datetime64 as _to_datetime64

    return _to_datetime64(ts)
