"""Digit-string arithmetic, character classes and token reading helpers."""

from __future__ import annotations

from typing import Callable, Optional, TextIO

from .errors import AlgoError, ErrorCode

LETTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)


def value_to_str(value: int) -> str:
    """Decimal digits of a non-negative value; zero gives an empty string."""
    return value_to_base(value, 10)


def value_to_base(value: int, base: int) -> str:
    """Digits of a non-negative value in ``base``; zero gives an empty string."""
    _check_base(base)
    if value < 0:
        raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)
    digits = []
    while value > 0:
        value, rem = divmod(value, base)
        digits.append(LETTERS[rem])
    return "".join(reversed(digits))


def strip_leading_zeros(text: str) -> str:
    """Drop the zeros that lead the text."""
    return text.lstrip("0")


def str_to_int(text: str) -> int:
    """Parse an optionally negative decimal string; an empty string is zero."""
    sign = 1
    if text.startswith("-"):
        sign, text = -1, text[1:]
    result = 0
    for ch in text:
        if not is_num(ch):
            raise AlgoError(ErrorCode.NOT_A_NUMBER)
        result = result * 10 + ord(ch) - ord("0")
    return sign * result


def add_decimal(a: str, b: str) -> str:
    """Sum of two decimal digit strings."""
    return add_base(a, b, 10)


def _digit(ch: str, base: int) -> int:
    value = base_char_to_dec(ch)
    if value >= base:
        raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)
    return value


def add_base(a: str, b: str, base: int) -> str:
    """Sum of two digit strings written in ``base`` (2 to 36)."""
    _check_base(base)
    ra, rb = a[::-1], b[::-1]
    out = []
    carry = 0
    for pos in range(max(len(ra), len(rb))):
        total = carry
        if pos < len(ra):
            total += _digit(ra[pos], base)
        if pos < len(rb):
            total += _digit(rb[pos], base)
        carry, rem = divmod(total, base)
        out.append(LETTERS[rem])
    while carry > 0:
        carry, rem = divmod(carry, base)
        out.append(LETTERS[rem])
    return "".join(reversed(out))


def multiply_digit(a: str, digit: int, base: int) -> str:
    """Product of a digit string in ``base`` and a single integer factor."""
    _check_base(base)
    out = []
    carry = 0
    for ch in reversed(a):
        carry, rem = divmod(base_char_to_dec(ch) * digit + carry, base)
        out.append(LETTERS[rem])
    while carry > 0:
        carry, rem = divmod(carry, base)
        out.append(LETTERS[rem])
    return "".join(reversed(out))


def multiply_base(a: str, b: str, base: int) -> str:
    """Product of two digit strings written in ``base``."""
    _check_base(base)
    result = "0"
    shifted = "0"
    for ch in b:
        partial = multiply_digit(a, _digit(ch, base), base)
        result = add_base(partial, shifted, base)
        shifted = result + "0"
    return result


def slice_digits(text: str, start: int, stop: int, step: int) -> str:
    """Characters at ``range(start, stop, step)``, leading zeros dropped."""
    out: list[str] = []
    for pos in range(start, stop, step):
        if pos >= len(text):
            raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)
        if not out and text[pos] == "0":
            continue
        out.append(text[pos])
    return "".join(out)


def is_num(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def is_alnum(ch: str) -> bool:
    return is_num(ch) or is_letter(ch)


def is_special_character(ch: str) -> bool:
    """True for anything but letters, digits, quotes, ``#`` and ``_``."""
    return not is_alnum(ch) and ch not in "'\"#_"


def to_lower(ch: str) -> str:
    """Lower-case an ASCII capital letter; other characters pass through."""
    if "A" <= ch <= "Z":
        return chr(ord(ch) + ord("a") - ord("A"))
    return ch


def base_char_to_dec(ch: str) -> int:
    """Value of a digit character: 0-9, then letters from 10 upward."""
    if is_num(ch):
        return ord(ch) - ord("0")
    if is_letter(ch):
        return ord(to_lower(ch)) - ord("a") + 10
    raise AlgoError(ErrorCode.INCORRECT_INPUT_DATA)


def compare(a: str, b: str) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


def _printable(ch: str) -> bool:
    return ch > " "


def seek_char(stream: TextIO) -> Optional[str]:
    """Skip whitespace and return the next character, or None at end of input."""
    if stream is None:
        raise AlgoError(ErrorCode.FILE_ERROR)
    while True:
        ch = stream.read(1)
        if not ch:
            return None
        if _printable(ch):
            return ch


def _read_while(stream: TextIO, first: Optional[str], accept: Callable[[str], bool]) -> str:
    parts = [first] if first else []
    seekable = stream.seekable()
    while True:
        pos = stream.tell() if seekable else None
        ch = stream.read(1)
        if not ch or not accept(ch):
            if ch and pos is not None:
                stream.seek(pos)
            break
        parts.append(ch)
    return "".join(parts)


def read_value(stream: TextIO, first: Optional[str] = None) -> str:
    """Read a whitespace-delimited token, prefixed by ``first`` if given."""
    return _read_while(stream, first, _printable)


def read_value_to_sc(stream: TextIO, first: Optional[str] = None) -> str:
    """Read a token that stops at whitespace or a special character."""
    return _read_while(
        stream, first, lambda ch: _printable(ch) and not is_special_character(ch)
    )