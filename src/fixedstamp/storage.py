"""Integer storage descriptors for timestamp mantissas."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from fixedstamp._constants import U128_MAX


class StorageName(enum.StrEnum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"


@dataclass(frozen=True)
class IntStorage:
    """Fixed-width integer type a mantissa is stored in.

    Python integers are unbounded, so the width only matters at the
    points that narrow or saturate a result.
    """

    name: StorageName
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def widens_to_u128(self) -> bool:
        """Whether every value of this type converts losslessly to u128."""
        return not self.signed and self.max <= U128_MAX

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def __str__(self) -> str:
        return str(self.name)


U8 = IntStorage(StorageName.U8, 8, False)
U16 = IntStorage(StorageName.U16, 16, False)
U32 = IntStorage(StorageName.U32, 32, False)
U64 = IntStorage(StorageName.U64, 64, False)
U128 = IntStorage(StorageName.U128, 128, False)
I8 = IntStorage(StorageName.I8, 8, True)
I16 = IntStorage(StorageName.I16, 16, True)
I32 = IntStorage(StorageName.I32, 32, True)
I64 = IntStorage(StorageName.I64, 64, True)
I128 = IntStorage(StorageName.I128, 128, True)

ALL_STORAGES: tuple[IntStorage, ...] = (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)

_BY_NAME: dict[str, IntStorage] = {s.name: s for s in ALL_STORAGES}


def get_storage(name: str) -> IntStorage:
    """Look up a storage descriptor by name (``"u64"``, ``"i128"``, ...)."""
    try:
        return _BY_NAME[name.lower()]
    except KeyError:
        raise ValueError(f"unknown storage type: {name!r}") from None
