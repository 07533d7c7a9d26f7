"""A 32-bit signed integer whose arithmetic is built from bitwise operations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_BITS = 32
_MASK = (1 << _BITS) - 1
_SIGN = 1 << (_BITS - 1)

Operand = Union["BinaryInt", int]


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer (two's complement)."""
    value &= _MASK
    return value - (1 << _BITS) if value & _SIGN else value


def _as_int(value: Operand) -> int:
    return value.value if isinstance(value, BinaryInt) else _wrap(int(value))


def adder(a: int, b: int) -> int:
    """Add two 32-bit integers using only XOR, AND and shifts."""
    a &= _MASK
    b &= _MASK
    while b:
        carry = a & b
        a ^= b
        b = (carry << 1) & _MASK
    return _wrap(a)


@dataclass(frozen=True)
class BinaryInt:
    """Immutable signed 32-bit integer with bitwise-built arithmetic."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap(int(self.value)))

    def __int__(self) -> int:
        return self.value

    def __neg__(self) -> BinaryInt:
        return BinaryInt(adder(~self.value, 1))

    def __add__(self, other: Operand) -> BinaryInt:
        return BinaryInt(adder(self.value, _as_int(other)))

    def __sub__(self, other: Operand) -> BinaryInt:
        return self + (-BinaryInt(_as_int(other)))

    def __mul__(self, other: Operand) -> BinaryInt:
        """Product; a non-positive multiplier yields zero."""
        times = _as_int(other)
        result = 0
        addend = self.value
        while times > 0:
            if times & 1:
                result = adder(result, addend)
            addend = _wrap(addend << 1)
            times >>= 1
        return BinaryInt(result)

    def __lshift__(self, other: Operand) -> BinaryInt:
        return BinaryInt(self.value << _as_int(other))

    def __rshift__(self, other: Operand) -> BinaryInt:
        return BinaryInt(self.value >> _as_int(other))

    def __and__(self, other: Operand) -> BinaryInt:
        return BinaryInt(self.value & _as_int(other))

    def __lt__(self, other: Operand) -> bool:
        return self.value < _as_int(other)

    def __str__(self) -> str:
        return format(self.value & _MASK, f"0{_BITS}b")

    def split_bits(self) -> tuple[BinaryInt, BinaryInt]:
        """Return the high half (kept in place) and the low half of the bits."""
        half = _BITS // 2
        low_mask = (BinaryInt(1) << half) - 1
        high = ((self >> half) & low_mask) << half
        low = self & low_mask
        return high, low


def main(argv: Optional[Sequence[str]] = None) -> int:
    a = BinaryInt(128)
    out = sys.stdout
    out.write(str(a))
    out.write(f"{a + a - 1} {a * 10} \n{a}\n")
    before = a
    a = a + 1
    out.write(f"{before}\n{a}\n")
    a = a + 1
    out.write(f"{a}\n")
    high, low = BinaryInt((1 << 31) - 1).split_bits()
    out.write(f"{high} {low}")
    return 0


if __name__ == "__main__":
    sys.exit(main())