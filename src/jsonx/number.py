"""JSON number literal validation (RFC 8259 section 6)."""

from __future__ import annotations

from typing import Final

_ZERO: Final = ord("0")
_NINE: Final = ord("9")
_MINUS: Final = ord("-")
_PLUS: Final = ord("+")
_DOT: Final = ord(".")
_EXP: Final = frozenset(b"eE")


def _is_digit(c: int) -> bool:
    return _ZERO <= c <= _NINE


def _skip_digits(data: bytes | bytearray, pos: int) -> int:
    """Returns the position of the first non-digit at or after ``pos``."""
    end = len(data)
    while pos < end and _is_digit(data[pos]):
        pos += 1
    return pos


def is_number(data: bytes | bytearray) -> bool:
    """
    Reports whether data is exactly one JSON number literal.

    Implements the JSON number grammar without building a value:

        number = ["-"] int ["." frac] [("e"|"E") ["+"|"-"] exp]
        int    = "0" | digit1-9 digit*
        frac   = digit+
        exp    = digit+

    The whole input has to be consumed, so surrounding whitespace, leading
    zeros ("01"), a bare sign, a dangling "." or exponent marker, and names
    like "NaN" are all rejected.
    """
    end = len(data)
    if end == 0:
        return False

    pos = 0

    # Optional minus
    if data[pos] == _MINUS:
        pos += 1
        if pos == end:
            return False

    # Integer part: a lone zero, or a non-zero digit followed by digits
    first = data[pos]
    if first == _ZERO:
        pos += 1
    elif _ZERO < first <= _NINE:
        pos = _skip_digits(data, pos + 1)
    else:
        return False

    # Fraction: "." followed by at least one digit
    if pos < end and data[pos] == _DOT:
        pos += 1
        if pos == end or not _is_digit(data[pos]):
            return False
        pos = _skip_digits(data, pos)

    # Exponent: e or E, optional sign, at least one digit
    if pos < end and data[pos] in _EXP:
        pos += 1
        if pos < end and data[pos] in (_PLUS, _MINUS):
            pos += 1
        if pos == end or not _is_digit(data[pos]):
            return False
        pos = _skip_digits(data, pos)

    return pos == end
