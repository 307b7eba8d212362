"""UTF-8 codec for single code points (RFC 3629).

Both directions lean on Python's own ``utf-8`` codec with the
``surrogatepass`` error handler, so surrogate-range values pass through
undisturbed and the per-character path agrees with the bulk path used by the
dispatcher on what counts as malformed.
"""

from __future__ import annotations

from ..const import MAX_CODEPOINT

UTF8_CODEC = "utf-8"
UTF8_ERRORS = "surrogatepass"


def _sequence_length(lead: int) -> int:
    """Return the expected sequence length for a lead byte, or 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def utf8_enc(cp: int, bigendian: bool = False) -> bytes | None:
    """Encode a code point to UTF-8.

    Does not check that cp is a real character; the surrogate range is
    encoded like any other value.

    Args:
        cp: Unicode code point.
        bigendian: Ignored, UTF-8 has no byte order.

    Returns:
        The encoded bytes, or None if cp is not an int in 0..0x10FFFF.
    """
    if not isinstance(cp, int) or cp < 0 or cp > MAX_CODEPOINT:
        return None
    return chr(cp).encode(UTF8_CODEC, UTF8_ERRORS)


def utf8_dec(
    buf: bytes, pos: int = 0, bigendian: bool = False
) -> tuple[int, int] | tuple[None, str]:
    """Decode the UTF-8 sequence starting at pos.

    Args:
        buf: Buffer holding the sequence.
        pos: Offset of the first byte of the sequence.
        bigendian: Ignored, UTF-8 has no byte order.

    Returns:
        ``(next_pos, cp)`` on success, or ``(None, message)`` when the bytes at
        pos are not a valid sequence.
    """
    if pos < 0 or pos >= len(buf):
        return None, f"position {pos} out of range"
    lead = buf[pos]
    length = _sequence_length(lead)
    if not length:
        return None, f"invalid UTF-8 lead byte 0x{lead:02x} at position {pos}"
    try:
        text = bytes(buf[pos : pos + length]).decode(UTF8_CODEC, UTF8_ERRORS)
    except UnicodeDecodeError as err:
        return None, f"invalid UTF-8 code at position {pos}: {err.reason}"
    return pos + length, ord(text)
