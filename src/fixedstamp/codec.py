"""Transparent serialization of timestamps.

A timestamp serializes exactly as its bare mantissa would. The exponent
and storage type are properties of the class, so they are encoded nowhere
and the reader must know which class to decode into.
"""

from __future__ import annotations

import json
import operator
from typing import Any

from fixedstamp.timestamp import Timestamp


def encode(ts: Timestamp) -> int:
    return ts.value


def decode(cls: type[Timestamp], raw: Any) -> Timestamp:
    """Rebuild a ``cls`` timestamp from a serialized mantissa.

    Raises:
        TypeError: If ``raw`` is not an integer.
    """
    if isinstance(raw, bool):
        raise TypeError("a timestamp mantissa cannot be a bool")
    return cls(operator.index(raw))


class TimestampJSONEncoder(json.JSONEncoder):
    """``json`` encoder that writes timestamps as bare integers."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Timestamp):
            return encode(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    return json.dumps(obj, cls=TimestampJSONEncoder, **kwargs)
