"""
Raw JSON fragments and objects of raw members.

``RawMessage`` owns bytes believed to be JSON text and answers the classifier's
questions about them without decoding. ``Object`` keeps each member value of a
JSON object as a ``RawMessage`` so members can be inspected or forwarded
untouched.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from json.decoder import scanstring
from typing import Final
from typing import Protocol
from typing import runtime_checkable

from jsonx import classify
from jsonx._tables import NULL
from jsonx._utf8 import RUNE_ERROR
from jsonx.classify import Kind
from jsonx.encode import BufferSink
from jsonx.encode import encode_into
from jsonx.errors import EmptyFragmentError
from jsonx.number import is_number


@runtime_checkable
class RawMarshaler(Protocol):
    """Produces its own JSON text, already encoded."""

    def to_raw_bytes(self) -> bytes: ...


@runtime_checkable
class RawUnmarshaler(Protocol):
    """Accepts JSON text and stores it however it likes."""

    def from_raw_bytes(self, data: bytes | bytearray, /) -> None: ...


class RawMessage:
    """
    A raw JSON fragment.

    Nothing is validated at construction. ``RawMessage()`` is *unset* and
    marshals as ``null``; ``RawMessage(b"")`` is set but zero-length. The
    predicates treat an unset message as zero-length input.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        self._data = None if data is None else bytes(data)

    @property
    def data(self) -> bytes | None:
        return self._data

    @property
    def is_unset(self) -> bool:
        return self._data is None

    def _bytes(self) -> bytes:
        return b"" if self._data is None else self._data

    def __len__(self) -> int:
        return len(self._bytes())

    def __bytes__(self) -> bytes:
        return self._bytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RawMessage):
            return self._data == other._data
        if isinstance(other, bytes | bytearray):
            return self._data is not None and self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"RawMessage({self._data!r})"

    def to_raw_bytes(self) -> bytes:
        """Returns the fragment verbatim, or ``null`` when unset."""
        if self._data is None:
            return NULL
        return self._data

    def from_raw_bytes(self, data: bytes | bytearray, /) -> None:
        """Replaces the fragment with a copy of data. No validation."""
        self._data = bytes(data)

    def equal(self, data: bytes | bytearray) -> bool:
        """Byte equality where unset and zero-length compare equal."""
        return self._bytes() == data

    def contains_escape_rune(self) -> bool:
        return classify.contains_escape_rune(self._bytes())

    def type_of(self) -> Kind:
        return classify.type_of(self._bytes())

    def is_null(self) -> bool:
        return classify.is_null(self._bytes())

    def is_bool(self) -> bool:
        """
        Reports whether the fragment is exactly ``true`` or ``false``.

        String contents are never inspected, so ``"true"`` is not a bool.
        """
        return classify.is_bool(self._bytes())

    def is_true(self) -> bool:
        return classify.is_true(self._bytes())

    def is_false(self) -> bool:
        return classify.is_false(self._bytes())

    def is_number(self) -> bool:
        return is_number(self._bytes())

    def is_string(self) -> bool:
        return classify.is_string(self._bytes())

    def is_array(self) -> bool:
        """
        Reports whether the fragment looks like an array.

        Only the brackets are checked, so malformed arrays are reported too.
        """
        return classify.is_array(self._bytes())

    def is_object(self) -> bool:
        return classify.is_object(self._bytes())

    def is_empty_array(self) -> bool:
        return classify.is_empty_array(self._bytes())

    def is_empty_object(self) -> bool:
        return classify.is_empty_object(self._bytes())


_LBRACE: Final = ord("{")
_RBRACE: Final = ord("}")
_COMMA: Final = ord(",")
_COLON: Final = ord(":")

_WHITESPACE: Final = " \t\n\r"
_decoder: Final = json.JSONDecoder()
_SURROGATE: Final = re.compile(f"[{chr(0xD800)}-{chr(0xDFFF)}]")
_REPLACEMENT: Final = chr(RUNE_ERROR)


def _skip_whitespace(text: str, pos: int) -> int:
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _split_members(text: str) -> Iterator[tuple[str, str]]:
    """
    Yields (key, raw value text) for each member of a JSON object.

    Keys are decoded; values are sliced out of text exactly as written. The
    standard library decoder finds where each value ends, so malformed values
    raise ``json.JSONDecodeError``.
    """
    end = len(text)
    pos = _skip_whitespace(text, 0)
    if not text.startswith("{", pos):
        raise json.JSONDecodeError("Expecting object", text, pos)
    pos = _skip_whitespace(text, pos + 1)

    if text.startswith("}", pos):
        pos = _skip_whitespace(text, pos + 1)
    else:
        while True:
            if not text.startswith('"', pos):
                raise json.JSONDecodeError(
                    "Expecting property name enclosed in double quotes",
                    text,
                    pos,
                )
            key, pos = scanstring(text, pos + 1)

            pos = _skip_whitespace(text, pos)
            if not text.startswith(":", pos):
                raise json.JSONDecodeError(
                    "Expecting ':' delimiter", text, pos
                )
            pos = _skip_whitespace(text, pos + 1)

            _, value_end = _decoder.raw_decode(text, pos)
            yield key, text[pos:value_end]

            pos = _skip_whitespace(text, value_end)
            if text.startswith(",", pos):
                pos = _skip_whitespace(text, pos + 1)
                continue
            if text.startswith("}", pos):
                pos = _skip_whitespace(text, pos + 1)
                break
            raise json.JSONDecodeError("Expecting ',' delimiter", text, pos)

    if pos != end:
        raise json.JSONDecodeError("Extra data", text, pos)


class Object(dict[str, RawMessage]):
    """
    A JSON object whose member values stay raw.

    Decoding keeps every value's bytes exactly as they appeared; encoding
    writes keys as escaped string literals in sorted order and values
    verbatim.
    """

    def to_raw_bytes(self) -> bytes:
        sink = BufferSink()
        sink.write_byte(_LBRACE)
        for n, key in enumerate(sorted(self)):
            raw = self[key].to_raw_bytes()
            if not raw:
                raise EmptyFragmentError(f"value of member {key!r}")
            if n:
                sink.write_byte(_COMMA)
            encode_into(sink, key)
            sink.write_byte(_COLON)
            sink.write(raw)
        sink.write_byte(_RBRACE)
        return sink.getvalue()

    def from_raw_bytes(self, data: bytes | bytearray, /) -> None:
        """
        Replaces the contents with the members of the object in data.

        ``null`` clears the object. Later duplicates of a key win. Invalid
        UTF-8 is kept byte for byte in values and becomes U+FFFD in keys, as
        do lone surrogates.
        """
        if classify.is_null(data.strip()):
            self.clear()
            return

        text = bytes(data).decode("utf-8", "surrogateescape")
        members = {
            _SURROGATE.sub(_REPLACEMENT, key): RawMessage(
                raw.encode("utf-8", "surrogateescape")
            )
            for key, raw in _split_members(text)
        }
        self.clear()
        self.update(members)
