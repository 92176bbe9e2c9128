"""Scaling engine tests."""

import pytest

from fixedstamp import (
    MAX_POW10_EXPONENT,
    U8,
    nanoseconds_to_timestamp_value,
    pow10,
    scale,
    timestamp_value_to_nanoseconds,
)
from fixedstamp._constants import U128_MAX
from fixedstamp._scale import saturate, scale_signed
from fixedstamp.storage import I8


class TestPow10:
    def test_zero(self):
        assert pow10(0) == 1

    def test_bound(self):
        assert MAX_POW10_EXPONENT == 38
        assert pow10(38) == 10**38

    def test_beyond_bound(self):
        assert pow10(39) is None

    def test_negative_exponent(self):
        with pytest.raises(ValueError):
            pow10(-1)


class TestScale:
    @pytest.mark.parametrize("value", [0, 1, 1500, U128_MAX])
    def test_zero_diff_is_identity(self, value):
        assert scale(value, 0) == value

    def test_multiply(self):
        assert scale(15, 3) == 15000

    def test_divide_truncates(self):
        assert scale(1500, -3) == 1
        assert scale(1999, -3) == 1
        assert scale(999, -3) == 0

    def test_division_underflow_beyond_bound(self):
        assert scale(5, -100) == 0
        assert scale(U128_MAX, -39) == 0

    def test_divide_at_bound(self):
        assert scale(U128_MAX, -38) == 3

    def test_multiplication_beyond_bound(self):
        assert scale(10, 40) is None

    def test_zero_times_anything(self):
        assert scale(0, 40) == 0

    def test_multiplication_at_bound(self):
        assert scale(1, 38) == 10**38
        assert scale(3, 38) == 3 * 10**38

    def test_multiplication_overflow(self):
        assert scale(4, 38) is None
        assert scale(U128_MAX, 1) is None

    @pytest.mark.parametrize("value", [-1, U128_MAX + 1])
    def test_value_outside_u128(self, value):
        with pytest.raises(ValueError):
            scale(value, 0)


class TestScaleSigned:
    def test_positive(self):
        assert scale_signed(1999, -3) == 1

    def test_negative_truncates_toward_zero(self):
        assert scale_signed(-1999, -3) == -1

    def test_negative_multiply(self):
        assert scale_signed(-42, 2) == -4200

    def test_overflow(self):
        assert scale_signed(-10, 40) is None

    def test_magnitude_beyond_u128(self):
        assert scale_signed(-(U128_MAX + 1), 0) is None
        assert scale_signed(U128_MAX + 1, -3) is None


class TestNanosecondBridge:
    def test_seconds_to_nanoseconds(self):
        assert timestamp_value_to_nanoseconds(1, 0) == 1_000_000_000

    def test_millis_to_nanoseconds(self):
        assert timestamp_value_to_nanoseconds(1500, -3) == 1_500_000_000

    def test_finer_than_nanoseconds(self):
        assert timestamp_value_to_nanoseconds(1_999, -12) == 1

    def test_nanoseconds_to_millis(self):
        assert nanoseconds_to_timestamp_value(1_500_000_000, -3) == 1500

    def test_nanoseconds_to_seconds(self):
        assert nanoseconds_to_timestamp_value(1_999_999_999, 0) == 1

    def test_nanoseconds_at_nano_power(self):
        assert nanoseconds_to_timestamp_value(123, -9) == 123

    def test_overflow(self):
        assert timestamp_value_to_nanoseconds(1, 30) is None

    @pytest.mark.parametrize("power", [-9, -6, -3, 0])
    def test_inverse(self, power):
        value = 1_234_567
        total_ns = timestamp_value_to_nanoseconds(value, power)
        assert nanoseconds_to_timestamp_value(total_ns, power) == value


class TestSaturate:
    def test_within_range(self):
        assert saturate(17, U8) == 17

    def test_above_max(self):
        assert saturate(1000, U8) == 255

    def test_below_min(self):
        assert saturate(-1, U8) == 0
        assert saturate(-1000, I8) == -128
