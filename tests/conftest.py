"""Shared test fixtures."""

from datetime import timezone

import pytest

from fixedstamp import U8, U32, U128, Timestamp


@pytest.fixture
def u8_seconds():
    return Timestamp.of(U8, 0)


@pytest.fixture
def u32_seconds():
    return Timestamp.of(U32, 0)


@pytest.fixture
def u128_seconds():
    return Timestamp.of(U128, 0)


@pytest.fixture
def utc():
    return timezone.utc
