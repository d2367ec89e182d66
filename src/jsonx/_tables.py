"""Immutable byte tables and literal constants shared by the classifier and encoder."""

from __future__ import annotations

from typing import Final

# Canonical literal byte sequences, compared by exact equality
NULL: Final = b"null"
TRUE: Final = b"true"
FALSE: Final = b"false"

HEX: Final = b"0123456789abcdef"

# ASCII bytes that always need a backslash escape inside a JSON string
_ALWAYS_ESCAPED: Final = frozenset(range(0x20)) | frozenset(b'"\\')

# Characters that can turn JSON into markup when served to browsers
_HTML_SENSITIVE: Final = frozenset(b"<>&")

PLAIN_SAFE: Final[tuple[bool, ...]] = tuple(
    b not in _ALWAYS_ESCAPED for b in range(128)
)
"""Bytes that may appear verbatim in a JSON string when HTML escaping is off."""

HTML_SAFE: Final[tuple[bool, ...]] = tuple(
    safe and b not in _HTML_SENSITIVE for b, safe in enumerate(PLAIN_SAFE)
)
"""Bytes that may appear verbatim even when the output ends up inside HTML."""

# Short escape forms, preferred over \u00XX for these bytes
SHORT_ESCAPES: Final = {
    ord("\\"): b"\\\\",
    ord('"'): b'\\"',
    ord("\n"): b"\\n",
    ord("\r"): b"\\r",
    ord("\t"): b"\\t",
}
