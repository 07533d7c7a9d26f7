"""A 32-bit vector of logical values with the classic binary connectives."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import AlgoError, ErrorCode

_BITS = 32
_MASK = (1 << _BITS) - 1


@dataclass(frozen=True)
class LogicalValuesArray:
    """Immutable unsigned 32-bit value; each bit is one logical value."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & _MASK)

    def inversion(self) -> LogicalValuesArray:
        return LogicalValuesArray(~self.value)

    def conjunction(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return LogicalValuesArray(self.value & other.value)

    def disjunction(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return LogicalValuesArray(self.value | other.value)

    def implication(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.inversion().disjunction(other)

    def coimplication(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.implication(other).inversion()

    def exclusive_disjunction(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.inversion().conjunction(other).disjunction(
            self.conjunction(other.inversion())
        )

    def equivalence(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.exclusive_disjunction(other).inversion()

    def peirce_arrow(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.disjunction(other).inversion()

    def sheffer_stroke(self, other: LogicalValuesArray) -> LogicalValuesArray:
        return self.conjunction(other).inversion()

    @staticmethod
    def equals(a: LogicalValuesArray, b: LogicalValuesArray) -> bool:
        return a.value == b.value

    def get_bit(self, pos: int) -> int:
        """The bit at ``pos`` left in place (``value & (1 << pos)``)."""
        if not 0 <= pos < _BITS:
            raise AlgoError(ErrorCode.OUT_OF_BOUNDS)
        return self.value & (1 << pos)

    def __str__(self) -> str:
        return "".join("1" if self.get_bit(pos) else "0" for pos in reversed(range(_BITS)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    a = LogicalValuesArray(3)
    b = LogicalValuesArray(5)
    print(f"a: {a.value}")
    print(f"b: {b.value}")
    print(f"Binary a: {a}")
    print(f"Binary b: {b}")
    print(f"Inversion a: {a.inversion()}")
    print(f"Conjunction a & b: {a.conjunction(b)}")
    print(f"Disjunction a | b: {a.disjunction(b)}")
    print(f"Implication a -> b: {a.implication(b)}")
    print(f"Coimplication a <-> b: {a.coimplication(b)}")
    print(f"Exclusive Disjunction a ^ b: {a.exclusive_disjunction(b)}")
    print(f"Equivalence a == b: {a.equivalence(b)}")
    print(f"Peirce Arrow a \u2193 b: {a.peirce_arrow(b)}")
    print(f"Sheffer Stroke a | b: {a.sheffer_stroke(b)}")
    print(f"a equals b: {int(LogicalValuesArray.equals(a, b))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())