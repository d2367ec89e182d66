"""Rune-at-a-time UTF-8 decoding over byte buffers."""

from __future__ import annotations

from typing import Final

RUNE_SELF: Final = 0x80  # bytes below this are a rune on their own
RUNE_ERROR: Final = 0xFFFD

_CONTINUATION_LO: Final = 0x80
_CONTINUATION_HI: Final = 0xBF


def _sequence_shape(lead: int) -> tuple[int, int, int, int] | None:
    """Describes the sequence started by a leading byte.

    Args:
        lead: The first byte of the sequence (>= 0x80)

    Returns:
        Tuple of (size, payload bits of the lead byte, low bound, high bound)
        where the bounds constrain the second byte, or None when the byte
        can never start a sequence.
    """
    if 0xC2 <= lead <= 0xDF:
        return 2, lead & 0x1F, _CONTINUATION_LO, _CONTINUATION_HI
    if 0xE0 <= lead <= 0xEF:
        if lead == 0xE0:
            # Overlong three-byte forms
            return 3, lead & 0x0F, 0xA0, _CONTINUATION_HI
        if lead == 0xED:
            # Surrogate halves U+D800..U+DFFF
            return 3, lead & 0x0F, _CONTINUATION_LO, 0x9F
        return 3, lead & 0x0F, _CONTINUATION_LO, _CONTINUATION_HI
    if 0xF0 <= lead <= 0xF4:
        if lead == 0xF0:
            return 4, lead & 0x07, 0x90, _CONTINUATION_HI
        if lead == 0xF4:
            # Anything above U+10FFFF
            return 4, lead & 0x07, _CONTINUATION_LO, 0x8F
        return 4, lead & 0x07, _CONTINUATION_LO, _CONTINUATION_HI
    return None


def decode_rune(buf: bytes | bytearray, pos: int) -> tuple[int, int]:
    """Decodes the rune starting at ``pos``.

    Only shortest-form encodings of scalar values are accepted. Anything else
    (stray continuation bytes, truncated sequences, overlong forms, surrogate
    halves, values past U+10FFFF) decodes as ``(RUNE_ERROR, 1)`` so the caller
    can step over exactly one byte.

    Args:
        buf: UTF-8 encoded bytes
        pos: Byte offset of the rune, must be < len(buf)

    Returns:
        Tuple of (code point, encoded size in bytes)
    """
    lead = buf[pos]
    if lead < RUNE_SELF:
        return lead, 1

    shape = _sequence_shape(lead)
    if shape is None:
        return RUNE_ERROR, 1

    size, rune, lo, hi = shape
    if pos + size > len(buf):
        return RUNE_ERROR, 1

    second = buf[pos + 1]
    if not lo <= second <= hi:
        return RUNE_ERROR, 1
    rune = (rune << 6) | (second & 0x3F)

    for offset in range(2, size):
        cont = buf[pos + offset]
        if not _CONTINUATION_LO <= cont <= _CONTINUATION_HI:
            return RUNE_ERROR, 1
        rune = (rune << 6) | (cont & 0x3F)

    return rune, size
