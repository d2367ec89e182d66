"""
JSON string literal encoding.

Text is walked rune by rune over its UTF-8 bytes. Runs of bytes that need no
escaping are written to the sink in one call; only escape boundaries cause
additional writes.
"""

from __future__ import annotations

from typing import IO
from typing import Final
from typing import Protocol
from typing import TypeAlias

from jsonx._profile import PROFILE_HOT_PATHS
from jsonx._profile import ProfileContext
from jsonx._tables import HEX
from jsonx._tables import HTML_SAFE
from jsonx._tables import PLAIN_SAFE
from jsonx._tables import SHORT_ESCAPES
from jsonx._utf8 import RUNE_ERROR
from jsonx._utf8 import RUNE_SELF
from jsonx._utf8 import decode_rune

Text: TypeAlias = str | bytes | bytearray | memoryview

_QUOTE: Final = ord('"')
_LINE_SEPARATOR: Final = 0x2028
_PARAGRAPH_SEPARATOR: Final = 0x2029


class Sink(Protocol):
    """
    Destination for encoded output.

    Return values are ignored. Exceptions raised by any method propagate out
    of the encoder and abort the encode, leaving a partial literal behind.
    """

    def write(self, b: bytes | bytearray | memoryview, /) -> object: ...

    def write_byte(self, c: int, /) -> object: ...

    def write_string(self, s: str, /) -> object: ...


class BufferSink:
    """Sink that appends everything to an in-memory ``bytearray``."""

    __slots__ = ("buffer",)

    def __init__(self, buffer: bytearray | None = None) -> None:
        self.buffer = bytearray() if buffer is None else buffer

    def write(self, b: bytes | bytearray | memoryview, /) -> None:
        self.buffer += b

    def write_byte(self, c: int, /) -> None:
        self.buffer.append(c)

    def write_string(self, s: str, /) -> None:
        self.buffer += s.encode("utf-8")

    def getvalue(self) -> bytes:
        return bytes(self.buffer)


class StreamSink:
    """Sink forwarding to a binary file-like object. No buffering is added."""

    __slots__ = ("fp",)

    def __init__(self, fp: IO[bytes]) -> None:
        if not hasattr(fp, "write"):
            raise TypeError("fp must have a write() method")
        self.fp = fp

    def write(self, b: bytes | bytearray | memoryview, /) -> None:
        self.fp.write(b)

    def write_byte(self, c: int, /) -> None:
        self.fp.write(bytes((c,)))

    def write_string(self, s: str, /) -> None:
        self.fp.write(s.encode("utf-8"))


def _as_utf8(text: Text) -> bytes | bytearray:
    """Returns the UTF-8 bytes to scan; lone surrogates stay invalid bytes."""
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, bytes | bytearray):
        return text
    if isinstance(text, memoryview):
        return text.tobytes()
    msg = f"text must be str or bytes-like, not {type(text).__name__}"
    raise TypeError(msg)


def _write_escaped(sink: Sink, s: bytes | bytearray, escape_html: bool) -> None:
    safe = HTML_SAFE if escape_html else PLAIN_SAFE
    end = len(s)
    with memoryview(s) as view:
        sink.write_byte(_QUOTE)
        start = 0
        i = 0
        while i < end:
            b = s[i]
            if b < RUNE_SELF:
                if safe[b]:
                    i += 1
                    continue
                if start < i:
                    sink.write(view[start:i])
                short = SHORT_ESCAPES.get(b)
                if short is not None:
                    sink.write(short)
                else:
                    # Remaining control bytes, plus <, > and & in HTML mode
                    sink.write(b"\\u00")
                    sink.write_byte(HEX[b >> 4])
                    sink.write_byte(HEX[b & 0xF])
                i += 1
                start = i
                continue

            rune, size = decode_rune(s, i)
            if rune == RUNE_ERROR and size == 1:
                if start < i:
                    sink.write(view[start:i])
                sink.write_string("\\ufffd")
                i += size
                start = i
                continue

            # U+2028 and U+2029 are valid in JSON strings but terminate
            # lines in JavaScript, so they are escaped in every mode.
            if rune in (_LINE_SEPARATOR, _PARAGRAPH_SEPARATOR):
                if start < i:
                    sink.write(view[start:i])
                sink.write_string("\\u202")
                sink.write_byte(HEX[rune & 0xF])
                i += size
                start = i
                continue

            i += size

        if start < end:
            sink.write(view[start:])
        sink.write_byte(_QUOTE)


def encode_into(sink: Sink, text: Text, escape_html: bool = True) -> None:
    """
    Writes text to sink as a quoted, escaped JSON string literal.

    Quotes, backslashes and control characters are escaped, using the short
    forms (\\n, \\r, \\t, \\\\, \\") where JSON has them and lowercase \\u00XX
    otherwise. With ``escape_html`` the bytes <, > and & are written as \\u003c,
    \\u003e and \\u0026. Invalid UTF-8 bytes become \\ufffd one byte at a time.
    U+2028 and U+2029 are always escaped. Everything else passes through as
    UTF-8.
    """
    s = _as_utf8(text)
    if PROFILE_HOT_PATHS:
        with ProfileContext("encode_into", len(s)):
            _write_escaped(sink, s, escape_html)
    else:
        _write_escaped(sink, s, escape_html)


def encode_string(text: Text, escape_html: bool = True) -> bytes:
    """Returns text encoded as a JSON string literal. See ``encode_into``."""
    sink = BufferSink()
    encode_into(sink, text, escape_html)
    return sink.getvalue()
