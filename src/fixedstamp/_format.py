"""Decimal rendering of fixed-point mantissas.

The decimal point is placed by string slicing on the mantissa's digits,
so no floating point or rounding is ever involved.
"""

from __future__ import annotations

from io import StringIO
from typing import Protocol


class TextSink(Protocol):
    def write(self, s: str, /) -> int: ...


def format_as_seconds(value: int, power: int, w: TextSink) -> None:
    """Write ``value * 10**power`` to ``w`` as a decimal number of seconds."""
    raw = str(value)
    sign, digits = ("-", raw[1:]) if raw.startswith("-") else ("", raw)

    if power == 0:
        w.write(sign)
        w.write(digits)
        return

    if power > 0:
        w.write(sign)
        w.write(digits)
        w.write("0" * power)
        return

    scale = -power
    w.write(sign)

    if len(digits) > scale:
        split = len(digits) - scale
        w.write(digits[:split])
        w.write(".")
        w.write(digits[split:])
        return

    w.write("0.")
    w.write("0" * (scale - len(digits)))
    w.write(digits)


def format_seconds(value: int, power: int) -> str:
    w = StringIO()
    format_as_seconds(value, power, w)
    return w.getvalue()
