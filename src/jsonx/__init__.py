"""
Byte-level inspection and string encoding for raw JSON fragments.

Answers structural questions about bytes believed to hold JSON text (is it
null, a bool, a number, a string, an empty array?) from boundary bytes alone,
and writes correctly escaped JSON string literals straight into a sink.
Whole-document encoding and decoding is delegated to the standard library
:mod:`json` module.
"""

from jsonx._profile import HotPathStats
from jsonx._profile import clear_hot_path_stats
from jsonx._profile import get_hot_path_stats
from jsonx._tables import FALSE
from jsonx._tables import HTML_SAFE
from jsonx._tables import NULL
from jsonx._tables import PLAIN_SAFE
from jsonx._tables import TRUE
from jsonx.classify import Kind
from jsonx.classify import contains_escape_rune
from jsonx.classify import is_array
from jsonx.classify import is_bool
from jsonx.classify import is_empty_array
from jsonx.classify import is_empty_object
from jsonx.classify import is_false
from jsonx.classify import is_null
from jsonx.classify import is_object
from jsonx.classify import is_string
from jsonx.classify import is_true
from jsonx.classify import type_of
from jsonx.encode import BufferSink
from jsonx.encode import Sink
from jsonx.encode import StreamSink
from jsonx.encode import encode_into
from jsonx.encode import encode_string
from jsonx.engine import DecodeConfig
from jsonx.engine import EncodeConfig
from jsonx.engine import dump
from jsonx.engine import dumps
from jsonx.engine import load
from jsonx.engine import loads
from jsonx.engine import marshal
from jsonx.engine import unmarshal
from jsonx.errors import EmptyFragmentError
from jsonx.errors import JsonxError
from jsonx.errors import NilTargetError
from jsonx.number import is_number
from jsonx.raw import Object
from jsonx.raw import RawMarshaler
from jsonx.raw import RawMessage
from jsonx.raw import RawUnmarshaler

__version__ = "0.1.0"

__all__ = [
    "FALSE",
    "HTML_SAFE",
    "NULL",
    "PLAIN_SAFE",
    "TRUE",
    "BufferSink",
    "DecodeConfig",
    "EmptyFragmentError",
    "EncodeConfig",
    "HotPathStats",
    "JsonxError",
    "Kind",
    "NilTargetError",
    "Object",
    "RawMarshaler",
    "RawMessage",
    "RawUnmarshaler",
    "Sink",
    "StreamSink",
    "clear_hot_path_stats",
    "contains_escape_rune",
    "dump",
    "dumps",
    "encode_into",
    "encode_string",
    "get_hot_path_stats",
    "is_array",
    "is_bool",
    "is_empty_array",
    "is_empty_object",
    "is_false",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "is_true",
    "load",
    "loads",
    "marshal",
    "type_of",
    "unmarshal",
]
