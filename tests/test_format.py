"""Decimal formatter tests."""

from io import StringIO

import pytest

from fixedstamp import format_as_seconds, format_seconds


class TestFormatSeconds:
    @pytest.mark.parametrize(
        "value,power,expected",
        [
            (1500, -3, "1.500"),
            (5, -3, "0.005"),
            (123, 2, "12300"),
            (-42, 0, "-42"),
            (0, 0, "0"),
            (0, -3, "0.000"),
            (100, -3, "0.100"),
            (1000, -3, "1.000"),
            (-5, -3, "-0.005"),
            (-1500, -3, "-1.500"),
            (1_700_000_000_123_456_789, -9, "1700000000.123456789"),
            (7, 1, "70"),
        ],
    )
    def test_cases(self, value, power, expected):
        assert format_seconds(value, power) == expected

    def test_large_mantissa(self):
        value = 2**128 - 1
        assert format_seconds(value, -38) == "3.40282366920938463463374607431768211455"


class TestFormatAsSeconds:
    def test_writes_to_string_io(self):
        w = StringIO()
        w.write("t=")
        format_as_seconds(1500, -3, w)
        assert w.getvalue() == "t=1.500"

    def test_writes_to_custom_sink(self):
        chunks: list[str] = []

        class Sink:
            def write(self, s: str) -> int:
                chunks.append(s)
                return len(s)

        format_as_seconds(-5, -3, Sink())
        assert "".join(chunks) == "-0.005"
