"""Reading decimal-seconds text back into fixed-point mantissas.

Accepts the formatter's output (``"1.500"``, ``"-0.005"``, ``"12300"``)
as well as scientific notation (``"1500e-3"``). Conversion is exact:
digits that the target exponent cannot hold must be zeros.
"""

from __future__ import annotations

import logging

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput
from lark.visitors import Interpreter

from fixedstamp._constants import MAX_POW10_EXPONENT, U128_MAX
from fixedstamp._errors import (
    ERR_MSG_INEXACT_LITERAL,
    ERR_MSG_INVALID_LITERAL,
    InvalidTimestampLiteralError,
)

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
start: SIGN? DIGITS fraction? exponent?

fraction: "." DIGITS
exponent: EXP_MARK SIGN? DIGITS

SIGN: "+" | "-"
DIGITS: /[0-9]+/
EXP_MARK: /[eE]/
"""

_parser = Lark(_GRAMMAR, parser="lalr")

# Decimal digits in U128_MAX
_MAX_SIGNIFICANT_DIGITS = len(str(U128_MAX))
_MAX_EXPONENT_DIGITS = 18


class _DecimalLiteral:
    __slots__ = ("negative", "digits", "exponent")

    def __init__(self, negative: bool, digits: str, exponent: int) -> None:
        self.negative = negative
        self.digits = digits
        self.exponent = exponent


class _LiteralReader(Interpreter):
    """Collects sign, significant digits and the decimal exponent of a literal."""

    def start(self, tree: Tree) -> _DecimalLiteral:
        negative = False
        digits = ""
        exponent = 0
        for child in tree.children:
            if isinstance(child, Token):
                if child.type == "SIGN":
                    negative = child == "-"
                else:
                    digits = str(child)
            elif child.data == "fraction":
                fraction = self.visit(child)
                digits += fraction
                exponent -= len(fraction)
            else:
                exponent += self.visit(child)
        return _DecimalLiteral(negative, digits, exponent)

    def fraction(self, tree: Tree) -> str:
        return str(tree.children[0])

    def exponent(self, tree: Tree) -> int:
        sign = 1
        magnitude = 0
        for child in tree.children[1:]:
            if child.type == "SIGN":
                sign = -1 if child == "-" else 1
            else:
                significant = child.lstrip("0")
                if len(significant) > _MAX_EXPONENT_DIGITS:
                    raise InvalidTimestampLiteralError(
                        ERR_MSG_INVALID_LITERAL,
                        f"exponent with {len(significant)} digits is out of range",
                    )
                magnitude = int(significant or "0")
        return sign * magnitude


def parse_seconds(text: str, power: int) -> int:
    """Return the mantissa of ``text`` seconds at exponent ``power``.

    Raises:
        InvalidTimestampLiteralError: If the text is malformed, carries
            nonzero digits finer than ``10**power``, or leaves the
            128-bit magnitude range.
    """
    try:
        tree = _parser.parse(text.strip())
    except UnexpectedInput as e:
        raise InvalidTimestampLiteralError(
            ERR_MSG_INVALID_LITERAL,
            f"cannot parse {text!r} as decimal seconds",
            wrapped=e,
        ) from e

    literal: _DecimalLiteral = _LiteralReader().visit(tree)
    digits = literal.digits.lstrip("0")
    if not digits:
        return 0
    significant = digits.rstrip("0")
    exponent = literal.exponent + len(digits) - len(significant)

    diff = exponent - power
    # significant has no trailing zeros, so any digit below 10**power is nonzero.
    if diff < 0:
        raise _inexact(text, power)
    if (
        len(significant) > _MAX_SIGNIFICANT_DIGITS
        or diff > MAX_POW10_EXPONENT
        or int(significant) * 10**diff > U128_MAX
    ):
        raise InvalidTimestampLiteralError(
            ERR_MSG_INVALID_LITERAL,
            f"{text!r} exceeds the 128-bit range at 10^{power}",
        )

    magnitude = int(significant) * 10**diff
    return -magnitude if literal.negative else magnitude


def _inexact(text: str, power: int) -> InvalidTimestampLiteralError:
    logger.debug("rejecting %r: finer than 10^%d", text, power)
    return InvalidTimestampLiteralError(
        ERR_MSG_INEXACT_LITERAL,
        f"{text!r} has nonzero digits below 10^{power}",
    )
