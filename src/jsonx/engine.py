"""
Pass-throughs to the standard library JSON engine.

Encoding and decoding of whole documents is left to :mod:`json`. This module
only builds validated configuration, lets raw fragments take part in encoding,
and hands raw bytes to ``from_raw_bytes`` targets.
"""

import json
import logging
import re
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from typing import IO
from typing import Any

from jsonx.errors import EmptyFragmentError
from jsonx.errors import NilTargetError
from jsonx.raw import RawMarshaler
from jsonx.raw import RawUnmarshaler

logger = logging.getLogger(__name__)

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None
ParseConstantHook = Callable[[str], Any] | None
DefaultHook = Callable[[Any], Any] | None

_COMPACT_SEPARATORS = (",", ":")

# Always escaped: JavaScript line terminators that JSON allows in strings
_JS_ESCAPES = {0x2028: "\\u2028", 0x2029: "\\u2029"}
_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    **_JS_ESCAPES,
}


@dataclass(frozen=True)
class DecodeConfig:
    """
    Configures decoding with immutable settings.

    Every field is forwarded to :func:`json.loads`; unset hooks are left out.
    """

    strict: bool = True
    parse_float: ParseFloatHook = None
    parse_int: ParseIntHook = None
    parse_constant: ParseConstantHook = None
    object_pairs_hook: ObjectPairsHook = None
    object_hook: ObjectHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")

    def as_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"strict": self.strict}
        for name in (
            "parse_float",
            "parse_int",
            "parse_constant",
            "object_pairs_hook",
            "object_hook",
        ):
            hook = getattr(self, name)
            if hook is not None:
                kwargs[name] = hook
        return kwargs


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures encoding with immutable settings.

    ``escape_html`` rewrites <, > and & as \\u003c, \\u003e and \\u0026 so the
    output can be embedded in HTML. U+2028 and U+2029 are escaped regardless.
    """

    skipkeys: bool = False
    ensure_ascii: bool = True
    sort_keys: bool = False
    escape_html: bool = True
    separators: tuple[str, str] | None = None
    default: DefaultHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.escape_html, bool):
            raise TypeError("escape_html must be a boolean")


class _RawSplicer:
    """
    Stands in for raw fragments while :func:`json.dumps` runs.

    Each fragment is replaced by a quoted placeholder carrying a per-encode
    token, and the placeholders are swapped for the fragment text afterwards,
    so nested raw bytes reach the output exactly as given. Bytes that are not
    UTF-8 ride along as surrogate escapes.
    """

    def __init__(self) -> None:
        self.token = secrets.token_hex(8)
        self.fragments: list[str] = []

    def hold(self, obj: Any) -> str:
        raw = obj.to_raw_bytes()
        if not raw:
            raise EmptyFragmentError(f"nested {type(obj).__name__}")
        logger.debug(
            "splicing %d byte raw fragment from %s",
            len(raw),
            type(obj).__name__,
        )
        self.fragments.append(raw.decode("utf-8", "surrogateescape"))
        return f"jsonx-raw:{self.token}:{len(self.fragments) - 1}"

    def splice(self, text: str) -> str:
        if not self.fragments:
            return text
        pattern = re.compile(f'"jsonx-raw:{self.token}:([0-9]+)"')
        return pattern.sub(lambda m: self.fragments[int(m.group(1))], text)


def _make_default(
    config: EncodeConfig, splicer: _RawSplicer
) -> Callable[[Any], Any]:
    """Builds the ``default`` hook that lets raw fragments nest in containers."""

    def default(obj: Any) -> Any:
        if isinstance(obj, RawMarshaler):
            return splicer.hold(obj)
        if config.default is not None:
            return config.default(obj)
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)

    return default


def _encode(obj: Any, config: EncodeConfig, separators: Any) -> str:
    splicer = _RawSplicer()
    text = json.dumps(
        obj,
        skipkeys=config.skipkeys,
        ensure_ascii=config.ensure_ascii,
        sort_keys=config.sort_keys,
        separators=separators,
        default=_make_default(config, splicer),
    )
    table = _HTML_ESCAPES if config.escape_html else _JS_ESCAPES
    return splicer.splice(text.translate(table))


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes obj with :func:`json.dumps`, honouring raw fragments.

    Nested raw fragments are copied into the result as is; any bytes in them
    that are not UTF-8 appear as surrogate escapes.
    """
    config = EncodeConfig(**kwargs)
    return _encode(obj, config, config.separators)


def marshal(obj: Any, **kwargs: Any) -> bytes:
    """
    Serializes obj to compact UTF-8 JSON bytes.

    Objects that produce their own raw bytes are returned as is, without
    validation, and so are raw fragments nested in containers. Everything
    else goes through :func:`json.dumps`. A zero-length nested fragment
    raises ``EmptyFragmentError``.
    """
    config = EncodeConfig(**kwargs)
    if isinstance(obj, RawMarshaler):
        return obj.to_raw_bytes()
    separators = config.separators or _COMPACT_SEPARATORS
    text = _encode(obj, config, separators)
    return text.encode("utf-8", "surrogateescape")


def loads(s: str | bytes | bytearray, **kwargs: Any) -> Any:
    """Parses a JSON document with :func:`json.loads`."""
    if not isinstance(s, str | bytes | bytearray):
        msg = (
            "the JSON object must be str, bytes or bytearray, "
            f"not {type(s).__name__}"
        )
        raise TypeError(msg)

    config = DecodeConfig(**kwargs)
    return json.loads(s, **config.as_kwargs())


def unmarshal(data: bytes | bytearray, target: RawUnmarshaler | None) -> None:
    """
    Stores raw JSON bytes in target via its ``from_raw_bytes`` hook.

    Raises:
        NilTargetError: target is None
        TypeError: target has no ``from_raw_bytes``
    """
    if target is None:
        raise NilTargetError("unmarshal into a nil target")
    if not isinstance(target, RawUnmarshaler):
        msg = f"cannot unmarshal raw JSON into {type(target).__name__}"
        raise TypeError(msg)

    target.from_raw_bytes(data)


def load(fp: IO[str] | IO[bytes], **kwargs: Any) -> Any:
    """
    Parses a JSON document read from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes obj to a text file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))
