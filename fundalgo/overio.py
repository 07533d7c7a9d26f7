"""Extended scanf-style reading with Roman, Zeckendorf and base-N conversions.

Besides the usual conversions (``%d %i %u %o %x %f %e %g %s %c``, with
optional ``*`` suppression and field width), a format may contain:

``%Ro``
    a Roman numeral, returned as an int;
``%Zr``
    a Zeckendorf code: whitespace-separated 0/1 digits closed by ``1 1``;
``%Cv`` / ``%CV``
    a number written in a base taken from the next extra argument;
``%S``, ``%Se``, ``%Sn``
    a whitespace-delimited token, returned as a str.

Non-blank format characters must appear in the input (blanks before them
are skipped) and are checked just before the next conversion; literals
after the last conversion are not checked. Results come back as a list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, TextIO, Union

from .arrays import base_char_to_dec, is_num
from .errors import AlgoError, ErrorCode

_UINT_MASK = 0xFFFFFFFF

_CUSTOM = ("Ro", "Zr", "Cv", "CV", "Se", "Sn", "S")
_STANDARD = re.compile(r"(\*?)(\d*)(?:hh|h|ll|l|L|j|z|t)?([diuoxXfFeEgGsc])")
_INT_BASES = {"d": 10, "u": 10, "i": 0, "o": 8, "x": 16, "X": 16}
_FLOAT_KINDS = frozenset("fFeEgG")
_TOKEN_KINDS = frozenset({"s", "S", "Se", "Sn"})

Scanned = Union[int, float, str]


class _Source(Protocol):
    def getc(self) -> str: ...

    def ungetc(self, ch: str) -> None: ...


class _StreamCursor:
    """Character reader over a text stream with one character of push-back."""

    def __init__(self, stream: TextIO) -> None:
        if stream is None:
            raise AlgoError(ErrorCode.FILE_ERROR)
        self._stream = stream
        seekable = getattr(stream, "seekable", None)
        self._seekable = bool(seekable and seekable())
        self._mark: Optional[int] = None
        self._pending = ""

    def getc(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        if self._seekable:
            self._mark = self._stream.tell()
        return self._stream.read(1)

    def ungetc(self, ch: str) -> None:
        if not ch:
            return
        if self._seekable and self._mark is not None:
            self._stream.seek(self._mark)
            self._mark = None
        else:
            self._pending = ch


class _TextCursor:
    """Character reader over an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def getc(self) -> str:
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def ungetc(self, ch: str) -> None:
        if ch:
            self._pos -= 1


class _Budget:
    """Limits how many characters a conversion may take from a source."""

    def __init__(self, source: _Source, width: int) -> None:
        self._source = source
        self._left = width

    def getc(self) -> str:
        if self._left <= 0:
            return ""
        ch = self._source.getc()
        if ch:
            self._left -= 1
        return ch

    def ungetc(self, ch: str) -> None:
        if ch:
            self._source.ungetc(ch)
            self._left += 1


@dataclass(frozen=True)
class _Spec:
    kind: str
    suppress: bool = False
    width: Optional[int] = None


def _parse_format(fmt: str) -> list[Union[str, _Spec]]:
    items: list[Union[str, _Spec]] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            if ch > " ":
                items.append(ch)
            i += 1
            continue
        if fmt.startswith("%%", i):
            items.append("%")
            i += 2
            continue
        custom = next((name for name in _CUSTOM if fmt.startswith(name, i + 1)), None)
        if custom is not None:
            items.append(_Spec(custom))
            i += 1 + len(custom)
            continue
        match = _STANDARD.match(fmt, i + 1)
        if match is None:
            raise AlgoError(ErrorCode.INCORRECT_OPTION)
        width = int(match[2]) if match[2] else None
        items.append(_Spec(match[3], bool(match[1]), width or None))
        i = match.end()
    return items


def _skip_ws(source: _Source) -> Optional[str]:
    while True:
        ch = source.getc()
        if not ch:
            return None
        if ch > " ":
            return ch


def _is_digit(ch: str, base: int) -> bool:
    return bool(ch) and ch.isascii() and ch.isalnum() and int(ch, 36) < base


def _read_token(source: _Source) -> str:
    parts = []
    ch = source.getc()
    while ch and ch > " ":
        parts.append(ch)
        ch = source.getc()
    source.ungetc(ch)
    return "".join(parts)


def _read_int(source: _Source, base: int) -> int:
    text = ""
    ch = source.getc()
    if ch and ch in "+-":
        text += ch
        ch = source.getc()
    if base == 0:
        if ch == "0":
            text += ch
            ch = source.getc()
            if ch and ch in "xX":
                base = 16
                ch = source.getc()
            else:
                base = 8
        else:
            base = 10
    elif base == 16 and ch == "0":
        text += ch
        ch = source.getc()
        if ch and ch in "xX":
            ch = source.getc()
    while _is_digit(ch, base):
        text += ch
        ch = source.getc()
    source.ungetc(ch)
    if not text.lstrip("+-"):
        raise AlgoError(ErrorCode.NOT_A_NUMBER)
    return int(text, base)


def _read_digits(source: _Source, ch: str) -> tuple[str, str, int]:
    text = ""
    count = 0
    while ch and is_num(ch):
        text += ch
        count += 1
        ch = source.getc()
    return text, ch, count


def _read_float(source: _Source) -> float:
    text = ""
    ch = source.getc()
    if ch and ch in "+-":
        text += ch
        ch = source.getc()
    digits, ch, mantissa = _read_digits(source, ch)
    text += digits
    if ch == ".":
        text += ch
        digits, ch, count = _read_digits(source, source.getc())
        text += digits
        mantissa += count
    if mantissa == 0:
        source.ungetc(ch)
        raise AlgoError(ErrorCode.NOT_A_NUMBER)
    if ch and ch in "eE":
        text += ch
        ch = source.getc()
        if ch and ch in "+-":
            text += ch
            ch = source.getc()
        digits, ch, count = _read_digits(source, ch)
        if count == 0:
            source.ungetc(ch)
            raise AlgoError(ErrorCode.NOT_A_NUMBER)
        text += digits
    source.ungetc(ch)
    return float(text)


def _scan_int(source: _Source) -> int:
    first = _skip_ws(source)
    if first is None:
        raise EOFError("input ended before a number")
    source.ungetc(first)
    return _read_int(source, 10)


def _unzeckendorf(source: _Source) -> int:
    result = 0
    prev = cur = 0
    a, b = 0, 1
    i = 0
    while True:
        prev = cur
        try:
            cur = _scan_int(source)
        except AlgoError:
            raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS) from None
        if prev == 1 and cur == 1:
            break
        if i % 2:
            a += b
            result += a * cur
        else:
            b += a
            result += b * cur
        i += 1
    return result & _UINT_MASK


def _match_literal(source: _Source, literal: str) -> None:
    ch = _skip_ws(source)
    if ch is None:
        raise EOFError("input ended before an expected literal")
    if ch != literal:
        raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS)


def _read_chars(source: _Source, count: int) -> str:
    parts = []
    for _ in range(count):
        ch = source.getc()
        if not ch:
            break
        parts.append(ch)
    if not parts:
        raise EOFError("input ended before a character")
    return "".join(parts)


def _convert(source: _Source, spec: _Spec, extra: Iterator[object]) -> Scanned:
    if spec.kind == "c":
        return _read_chars(source, spec.width or 1)
    first = _skip_ws(source)
    if first is None:
        raise EOFError("input ended before a conversion")
    source.ungetc(first)
    field: _Source = _Budget(source, spec.width) if spec.width else source

    if spec.kind == "Ro":
        return unroman(_read_token(field))
    if spec.kind == "Zr":
        return _unzeckendorf(source)
    if spec.kind in ("Cv", "CV"):
        try:
            base = next(extra)
        except StopIteration:
            raise AlgoError(ErrorCode.INCORRECT_ARGUMENTS) from None
        return to_decimal(_read_token(field), int(base))
    if spec.kind in _TOKEN_KINDS:
        return _read_token(field)
    if spec.kind in _INT_BASES:
        return _read_int(field, _INT_BASES[spec.kind])
    if spec.kind in _FLOAT_KINDS:
        return _read_float(field)
    raise AlgoError(ErrorCode.INCORRECT_OPTION)


def _scan(source: _Source, fmt: str, args: tuple) -> list[Scanned]:
    items = _parse_format(fmt)
    extra = iter(args)
    values: list[Scanned] = []
    pending: list[str] = []
    for item in items:
        if isinstance(item, str):
            pending.append(item)
            continue
        for literal in pending:
            _match_literal(source, literal)
        pending.clear()
        value = _convert(source, item, extra)
        if not item.suppress:
            values.append(value)
    return values


def overfscanf(stream: TextIO, fmt: str, *args: object) -> list[Scanned]:
    """Read values from ``stream`` as described by ``fmt``.

    Extra arguments supply the bases of ``%Cv`` conversions, in order.
    Raises EOFError if the input ends before a conversion is satisfied and
    AlgoError for mismatched literals, bad numbers or unknown conversions.
    """
    return _scan(_StreamCursor(stream), fmt, args)


def oversscanf(text: str, fmt: str, *args: object) -> list[Scanned]:
    """Read values from the string ``text``; see :func:`overfscanf`."""
    return _scan(_TextCursor(text), fmt, args)


def roman_value(ch: str) -> int:
    """Value of one Roman digit; 0 for anything else."""
    return {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}.get(ch, 0)


def unroman(text: str) -> int:
    """Integer value of a Roman numeral; unknown characters count as 0."""
    total = 0
    prev = 0
    for ch in text:
        current = roman_value(ch)
        total += current
        if current > prev:
            total -= prev * 2
        prev = current
    return total


def unzeckendorf(stream: TextIO) -> int:
    """Decode a Zeckendorf code of blank-separated digits ending in ``1 1``."""
    return _unzeckendorf(_StreamCursor(stream))


def unzeckendorf_str(text: str) -> int:
    """Decode a Zeckendorf code held in a string; see :func:`unzeckendorf`."""
    return _unzeckendorf(_TextCursor(text))


def to_decimal(digits: str, base: int) -> int:
    """Value of ``digits`` read as a number in ``base``."""
    result = 0
    for ch in digits:
        result = result * base + base_char_to_dec(ch)
    return result


def skip_to_end_line(stream: TextIO) -> bool:
    """Discard the rest of the current line; True if input ended instead."""
    while True:
        ch = stream.read(1)
        if not ch or ch == "\0":
            return True
        if ch == "\n":
            return False