"""Complex numbers with explicit arithmetic, modulus and argument."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class ComplexNumber:
    """Immutable complex number ``real + imaginary*i``."""

    real: float = 0.0
    imaginary: float = 0.0

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def __sub__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.imaginary * other.real + self.real * other.imaginary,
        )

    def __truediv__(self, other: ComplexNumber) -> ComplexNumber:
        if other.real == 0 and other.imaginary == 0:
            raise ZeroDivisionError("Division by zero")
        denom = other.sqabs()
        return ComplexNumber(
            (other.real * self.real + other.imaginary * self.imaginary) / denom,
            (self.imaginary * other.real - self.real * other.imaginary) / denom,
        )

    def sqabs(self) -> float:
        """Square of the modulus."""
        return self.real * self.real + self.imaginary * self.imaginary

    def __abs__(self) -> float:
        return math.sqrt(self.sqabs())

    def arg(self) -> float:
        """Argument in radians; a negative real number reports 0."""
        if self.real == 0:
            if self.imaginary > 0:
                return math.pi / 2
            if self.imaginary < 0:
                return -math.pi / 2
            return 0.0
        result = math.atan(self.imaginary / self.real)
        if self.imaginary > 0 and self.real < 0:
            result += math.pi
        elif self.imaginary < 0 and self.real < 0:
            result -= math.pi
        return result

    def __str__(self) -> str:
        parts = []
        if self.real != 0:
            parts.append(f"{self.real:g}")
        if self.imaginary == 0:
            return parts[0] if parts else "0"
        parts.append("-" if self.imaginary < 0 else "+")
        parts.append(f"{abs(self.imaginary):g}i")
        return " ".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    c1 = ComplexNumber(3.0, 4.0)
    c2 = ComplexNumber(1.0, -2.0)
    print(f"Sum: {c1 + c2}")
    print(f"Difference: {c1 - c2}")
    print(f"Product: {c1 * c2}")
    try:
        print(f"Quotient: {c1 / c2}")
    except ZeroDivisionError as err:
        print(f"Error: {err}", file=sys.stderr)
    print(f"Absolute value of c1: {abs(c1):g}")
    print(f"Argument of c1: {c1.arg():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())