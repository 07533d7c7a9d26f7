"""Digit-string arithmetic, scanf-style parsing, bit-level integers, RC4, bitwise logic, complex numbers, a vector and a warehouse model."""

__version__ = "0.1.0"