"""Fixed-width numeric kinds.

Python's ``int`` is arbitrary precision, so range checking needs an explicit
bit width. Request one of these kinds to get the range of the corresponding
machine type:

    matchvalues.get(match, UInt8)   # raises NumericOverflowError for "300"

Parsed values are instances of the requested kind and compare equal to plain
numbers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar


class _SizedInt(int):
    bits: ClassVar[int]
    signed: ClassVar[bool]
    min_value: ClassVar[int]
    max_value: ClassVar[int]

    def __init_subclass__(cls, *, bits: int, signed: bool, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.bits = bits
        cls.signed = signed
        if signed:
            cls.min_value = -(1 << (bits - 1))
            cls.max_value = (1 << (bits - 1)) - 1
        else:
            cls.min_value = 0
            cls.max_value = (1 << bits) - 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Int8(_SizedInt, bits=8, signed=True):
    """Signed 8-bit integer."""


class Int16(_SizedInt, bits=16, signed=True):
    """Signed 16-bit integer."""


class Int32(_SizedInt, bits=32, signed=True):
    """Signed 32-bit integer."""


class Int64(_SizedInt, bits=64, signed=True):
    """Signed 64-bit integer."""


class UInt8(_SizedInt, bits=8, signed=False):
    """Unsigned 8-bit integer."""


class UInt16(_SizedInt, bits=16, signed=False):
    """Unsigned 16-bit integer."""


class UInt32(_SizedInt, bits=32, signed=False):
    """Unsigned 32-bit integer."""


class UInt64(_SizedInt, bits=64, signed=False):
    """Unsigned 64-bit integer."""


class Float32(float):
    """IEEE single-precision float."""

    def __repr__(self) -> str:
        return f"Float32({float(self)!r})"


Float64 = float

# 96-bit unsigned mantissa with zero scale.
DECIMAL_MAX = Decimal(2**96 - 1)

SIZED_INTEGER_KINDS: tuple[type[_SizedInt], ...] = (
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    "DECIMAL_MAX",
    "SIZED_INTEGER_KINDS",
]
