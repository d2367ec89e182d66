"""
Pytest configuration and shared fixtures for jsonx tests.

Provides immutable fragment cases for the classifier, reusing the json.org
JSON_checker documents to show what structural sniffing does and does not
catch.
"""

from dataclasses import dataclass

import pytest

from jsonx import Kind


@dataclass(frozen=True)
class FragmentCase:
    """
    Immutable container for a raw fragment and its expected classification.
    """

    description: str
    input_data: bytes
    expected_kind: Kind


@pytest.fixture
def json_checker_fail_cases() -> list[FragmentCase]:
    """
    Provides json.org JSON_checker failure documents with the kind sniffing
    attributes to them.

    None of these are valid JSON. Most still carry the outer delimiters of an
    array or object, which is all the classifier looks at, so they are
    classified as containers anyway.
    """
    docs = [
        # fail1.json is a valid string payload
        (b'"A JSON payload should be an object or array, not a string."', Kind.STRING),
        (b'["Unclosed array"', Kind.INVALID),
        (b'{unquoted_key: "keys must be quoted"}', Kind.OBJECT),
        (b'["extra comma",]', Kind.ARRAY),
        (b'["double extra comma",,]', Kind.ARRAY),
        (b'[   , "<-- missing value"]', Kind.ARRAY),
        (b'["Comma after the close"],', Kind.INVALID),
        (b'["Extra close"]]', Kind.ARRAY),
        (b'{"Extra comma": true,}', Kind.OBJECT),
        (b'{"Extra value after close": true} "misplaced quoted value"', Kind.INVALID),
        (b'{"Illegal expression": 1 + 2}', Kind.OBJECT),
        (b'{"Illegal invocation": alert()}', Kind.OBJECT),
        (b'{"Numbers cannot have leading zeroes": 013}', Kind.OBJECT),
        (b'{"Numbers cannot be hex": 0x14}', Kind.OBJECT),
        (b'["Illegal backslash escape: \\x15"]', Kind.ARRAY),
        (b"[\\naked]", Kind.ARRAY),
        (b'["Illegal backslash escape: \\017"]', Kind.ARRAY),
        (b'{"Missing colon" null}', Kind.OBJECT),
        (b'{"Double colon":: null}', Kind.OBJECT),
        (b'{"Comma instead of colon", null}', Kind.OBJECT),
        (b'["Colon instead of comma": false]', Kind.ARRAY),
        (b'["Bad value", truth]', Kind.ARRAY),
        (b"['single quote']", Kind.ARRAY),
        (b'["\ttab\tcharacter\tin\tstring\t"]', Kind.ARRAY),
        (b'["line\nbreak"]', Kind.ARRAY),
        (b"[0e]", Kind.ARRAY),
        (b'{"Comma instead if closing brace": true,', Kind.INVALID),
        (b'["mismatch"}', Kind.INVALID),
    ]
    return [
        FragmentCase(f"fail{idx + 1}", doc, kind)
        for idx, (doc, kind) in enumerate(docs)
    ]


@pytest.fixture
def json_checker_pass_cases() -> list[FragmentCase]:
    """
    Provides well-formed json.org JSON_checker documents.
    """
    return [
        FragmentCase(
            "pass1.json - complex nested structure",
            b"""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "array":[  ],
        "object":{  },
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]
""",
            Kind.ARRAY,
        ),
        FragmentCase(
            "pass2.json - deep nesting",
            b'[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            Kind.ARRAY,
        ),
        FragmentCase(
            "pass3.json - simple object",
            b"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
""",
            Kind.OBJECT,
        ),
    ]


@pytest.fixture
def basic_fragments() -> list[FragmentCase]:
    """
    Provides one fragment of every kind.
    """
    return [
        FragmentCase("empty fragment", b"", Kind.EMPTY),
        FragmentCase("null", b"null", Kind.NULL),
        FragmentCase("true", b"true", Kind.BOOL),
        FragmentCase("false", b"false", Kind.BOOL),
        FragmentCase("integer", b"42", Kind.NUMBER),
        FragmentCase("negative float", b"-3.14", Kind.NUMBER),
        FragmentCase("empty string", b'""', Kind.STRING),
        FragmentCase("simple string", b'"x"', Kind.STRING),
        FragmentCase("empty array", b"[]", Kind.ARRAY),
        FragmentCase("empty object", b"{}", Kind.OBJECT),
        FragmentCase("simple array", b"[1, 2, 3]", Kind.ARRAY),
        FragmentCase("simple object", b'{"key": "value"}', Kind.OBJECT),
        FragmentCase("bare word", b"abc", Kind.INVALID),
        FragmentCase("whitespace only", b"   ", Kind.INVALID),
    ]
