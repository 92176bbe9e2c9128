"""Decimal-seconds parser tests."""

import pytest

from fixedstamp import (
    U8,
    InvalidTimestampLiteralError,
    Timestamp,
    TimestampMs,
    TimestampS,
    format_seconds,
    parse_seconds,
)

EXPONENTS = [-18, -9, -6, -3, -1, 0, 1, 3]


class TestParseSeconds:
    @pytest.mark.parametrize(
        "text,power,expected",
        [
            ("1.500", -3, 1500),
            ("1.5", -3, 1500),
            ("0.005", -3, 5),
            ("12300", 2, 123),
            ("-42", 0, -42),
            ("+3", 0, 3),
            (" 7 ", 0, 7),
            ("1500e-3", -3, 1500),
            ("1.5E3", 0, 1500),
            ("15e+2", 0, 1500),
            ("1.0000", -3, 1000),
            ("0", -9, 0),
            ("-0.000", 0, 0),
            ("0e999", 0, 0),
            ("1", -9, 1_000_000_000),
        ],
    )
    def test_cases(self, text, power, expected):
        assert parse_seconds(text, power) == expected

    @pytest.mark.parametrize(
        "text,power",
        [
            ("0.0001", -3),
            ("1.0001", -3),
            ("12345", 2),
            ("1e-999", 0),
        ],
    )
    def test_rejects_digits_below_precision(self, text, power):
        with pytest.raises(InvalidTimestampLiteralError) as exc_info:
            parse_seconds(text, power)
        assert "precision" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "abc", "1.", ".5", "1.5.5", "1e", "--1", "1 2"])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidTimestampLiteralError) as exc_info:
            parse_seconds(text, 0)
        assert exc_info.value.wrapped is not None

    def test_rejects_beyond_128_bits(self):
        with pytest.raises(InvalidTimestampLiteralError):
            parse_seconds("1e39", 0)
        with pytest.raises(InvalidTimestampLiteralError):
            parse_seconds("1e999999999", 0)

    def test_rejects_overlong_digits(self):
        with pytest.raises(InvalidTimestampLiteralError):
            parse_seconds("1" * 5000, 0)
        with pytest.raises(InvalidTimestampLiteralError):
            parse_seconds("0." + "0" * 5000 + "1", -9)
        with pytest.raises(InvalidTimestampLiteralError):
            parse_seconds("1e" + "9" * 5000, 0)

    def test_long_zero_padding_is_ignored(self):
        assert parse_seconds("0" * 5000 + "1.5", -3) == 1500
        assert parse_seconds("1." + "0" * 5000, 0) == 1
        assert parse_seconds("1e" + "0" * 5000 + "3", 0) == 1000

    @pytest.mark.parametrize("power", EXPONENTS)
    @pytest.mark.parametrize("value", [0, 1, 7, 1500, -42, 1_700_000_000_123])
    def test_inverse_of_formatter(self, value, power):
        assert parse_seconds(format_seconds(value, power), power) == value


class TestTimestampParse:
    def test_millis(self):
        assert TimestampMs.parse("1.5") == TimestampMs(1500)

    def test_str_round_trip(self):
        ts = TimestampMs(1_700_000_000_123)
        assert TimestampMs.parse(str(ts)) == ts

    def test_out_of_storage_range(self):
        with pytest.raises(InvalidTimestampLiteralError):
            Timestamp.of(U8, 0).parse("256")

    def test_negative_unsigned(self):
        with pytest.raises(InvalidTimestampLiteralError):
            TimestampS.parse("-1")
