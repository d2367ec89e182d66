"""
Structural sniffing of raw JSON fragments.

Every predicate looks only at exact literals or at the boundary bytes of the
whitespace-trimmed fragment. Nothing here parses, so malformed input such as
``[1,,]`` or ``"unterminated\\"`` can still match; callers that need a
guarantee of well-formedness must hand the bytes to a real decoder.
"""

from __future__ import annotations

from enum import Enum
from typing import Final
from typing import TypeAlias

from jsonx._profile import PROFILE_HOT_PATHS
from jsonx._profile import ProfileContext
from jsonx._tables import FALSE
from jsonx._tables import NULL
from jsonx._tables import TRUE
from jsonx.number import is_number

Fragment: TypeAlias = bytes | bytearray

_QUOTE: Final = ord('"')
_LBRACE: Final = ord("{")
_RBRACE: Final = ord("}")
_LBRACKET: Final = ord("[")
_RBRACKET: Final = ord("]")
_BACKSLASH: Final = ord("\\")

# Same set bytes.strip() removes
_WHITESPACE: Final = frozenset(b" \t\n\r\x0b\x0c")


class Kind(Enum):
    """
    Type category of a raw fragment.

    Exactly one kind is attributed to any fragment by ``type_of``.
    """

    INVALID = "invalid"
    EMPTY = "empty"
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


def _starts_and_ends_with(d: Fragment, start: int, end: int) -> bool:
    if len(d) < 2:
        return False
    return d[0] == start and d[-1] == end


def _is_empty(d: Fragment) -> bool:
    """Reports whether d holds exactly two non-whitespace bytes."""
    count = 0
    for c in d:
        if c not in _WHITESPACE:
            count += 1
            if count > 2:
                return False
    return count == 2


def is_null(d: Fragment) -> bool:
    return d == NULL


def is_true(d: Fragment) -> bool:
    """
    Reports whether d is exactly the literal ``true``.

    No trimming and no case folding: ``True`` and ``true `` do not match.
    """
    return d == TRUE


def is_false(d: Fragment) -> bool:
    """Reports whether d is exactly the literal ``false``."""
    return d == FALSE


def is_bool(d: Fragment) -> bool:
    return is_true(d) or is_false(d)


def is_string(d: Fragment) -> bool:
    """
    Reports whether d looks like a JSON string.

    Checks the surrounding quotes only; escapes inside are not validated.
    """
    return _starts_and_ends_with(d.strip(), _QUOTE, _QUOTE)


def is_object(d: Fragment) -> bool:
    """Reports whether d looks like a JSON object. Malformed members pass."""
    return _starts_and_ends_with(d.strip(), _LBRACE, _RBRACE)


def is_array(d: Fragment) -> bool:
    """Reports whether d looks like a JSON array. Malformed elements pass."""
    return _starts_and_ends_with(d.strip(), _LBRACKET, _RBRACKET)


def is_empty_array(d: Fragment) -> bool:
    """Reports whether d is ``[]``, ignoring whitespace anywhere in it."""
    return is_array(d) and _is_empty(d)


def is_empty_object(d: Fragment) -> bool:
    """Reports whether d is ``{}``, ignoring whitespace anywhere in it."""
    return is_object(d) and _is_empty(d)


def contains_escape_rune(d: Fragment) -> bool:
    """Reports whether d contains a backslash anywhere."""
    return _BACKSLASH in d


def _sniff(d: Fragment) -> Kind:
    if len(d) == 0:
        return Kind.EMPTY
    if is_array(d):
        return Kind.ARRAY
    if is_object(d):
        return Kind.OBJECT
    if is_string(d):
        return Kind.STRING
    if is_number(d):
        return Kind.NUMBER
    if is_bool(d):
        return Kind.BOOL
    if is_null(d):
        return Kind.NULL
    return Kind.INVALID


def type_of(d: Fragment) -> Kind:
    """
    Resolves the single best-matching kind of a fragment.

    Rules are tried in a fixed order and the first match wins: empty, array,
    object, string, number, bool, null. Ambiguous or malformed fragments are
    therefore classified by whichever structural rule they satisfy first.
    """
    if PROFILE_HOT_PATHS:
        with ProfileContext("type_of", len(d)):
            return _sniff(d)
    return _sniff(d)
