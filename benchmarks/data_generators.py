"""
Test data generators for encoding and classification benchmarks.

Creates inputs that stress different paths of the encoder and classifier:
- Long unescaped runs (plain ASCII)
- Dense escapes (quotes, backslashes, control characters, markup)
- Multi-byte runes and JavaScript line terminators
- Raw fragments of every kind, as a decoder would hand them over
"""

import json
import random
import string

# Constants for random data generation
_ESCAPE_PROBABILITY = 0.3
_SEED = 8259

_ESCAPE_CHARS = ['"', "\\", "\n", "\r", "\t", "\x00", "\x1f"]
_HTML_CHARS = ["<", ">", "&"]
_UNICODE_CHARS = [
    "\N{LATIN SMALL LETTER E WITH ACUTE}",
    "\N{GREEK SMALL LETTER ALPHA}",
    "\N{CJK UNIFIED IDEOGRAPH-4E2D}",
    "\N{SNOWMAN}",
    "\N{GRINNING FACE}",
    "\N{LINE SEPARATOR}",
]

TEXT_TYPES = [
    "ascii_short",
    "ascii_long",
    "escape_heavy",
    "html_heavy",
    "unicode_heavy",
]


def generate_test_text(text_type: str) -> str:
    """Generates text to encode based on specified type."""
    generators = {
        "ascii_short": _generate_ascii_short,
        "ascii_long": _generate_ascii_long,
        "escape_heavy": _generate_escape_heavy,
        "html_heavy": _generate_html_heavy,
        "unicode_heavy": _generate_unicode_heavy,
    }

    if text_type not in generators:
        raise ValueError(f"Unknown text type: {text_type}")

    return generators[text_type](random.Random(_SEED))


def generate_fragments() -> list[bytes]:
    """
    Generates raw fragments of every kind, with and without padding.

    Fragments are sliced out of a decoded document the way a raw-preserving
    decoder would return them.
    """
    rng = random.Random(_SEED)
    values: list[object] = [
        None,
        True,
        False,
        0,
        -17,
        3.14159,
        1.5e-9,
        _random_string(rng, 20),
        [],
        {},
        [1, 2, 3],
        {"key": "value", "nested": {"list": [1, None, "x"]}},
    ]
    fragments = [json.dumps(v).encode("utf-8") for v in values]
    fragments += [b" " + f + b"\n" for f in fragments]
    fragments += [b"", b"[ ]", b"{\n}", b"abc", b"01", b'{"unclosed": ']
    return fragments


def _generate_ascii_short(rng: random.Random) -> str:
    """Generates a short identifier-like string with nothing to escape."""
    return _random_string(rng, 16)


def _generate_ascii_long(rng: random.Random) -> str:
    """Generates a long (> 10KB) string of safe ASCII."""
    alphabet = string.ascii_letters + string.digits + " .,;:/-_"
    return "".join(rng.choices(alphabet, k=16 * 1024))


def _generate_escape_heavy(rng: random.Random) -> str:
    """Generates text where about 30% of characters need an escape."""
    chars = []
    for _ in range(4096):
        if rng.random() < _ESCAPE_PROBABILITY:
            chars.append(rng.choice(_ESCAPE_CHARS))
        else:
            chars.append(rng.choice(string.ascii_letters + " "))
    return "".join(chars)


def _generate_html_heavy(rng: random.Random) -> str:
    """Generates markup with frequent <, > and & characters."""
    parts = []
    for i in range(200):
        tag = _random_string(rng, rng.randint(1, 6)).lower()
        text = _random_string(rng, rng.randint(5, 30))
        sep = rng.choice(_HTML_CHARS)
        parts.append(f'<{tag} id="n{i}">{text} {sep} {text}</{tag}>')
    return "\n".join(parts)


def _generate_unicode_heavy(rng: random.Random) -> str:
    """Generates text mixing multi-byte runes into ASCII runs."""
    chars = []
    for _ in range(4096):
        if rng.random() < _ESCAPE_PROBABILITY:
            chars.append(rng.choice(_UNICODE_CHARS))
        else:
            chars.append(rng.choice(string.ascii_letters))
    return "".join(chars)


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
