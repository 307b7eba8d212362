"""UTF-16 codec for single code points (RFC 2781).

Windows releases before 2000 only understand UCS-2, so beware encoding code
points above 0xFFFF for such peers.
"""

from __future__ import annotations

import struct

from ..const import (
    LOW_SURROGATE_MIN,
    MAX_CODEPOINT,
    SUPPLEMENTARY_BASE,
    SURROGATE_MAX,
    SURROGATE_MIN,
)

_UNIT_LE = struct.Struct("<H")
_UNIT_BE = struct.Struct(">H")
_PAIR_LE = struct.Struct("<HH")
_PAIR_BE = struct.Struct(">HH")


def utf16_enc(cp: int, bigendian: bool = False) -> bytes | None:
    """Encode a code point to UTF-16.

    Args:
        cp: Unicode code point.
        bigendian: Encode big-endian units instead of little-endian.

    Returns:
        Two or four bytes, or None if cp is not an int in 0..0x10FFFF.
    """
    if not isinstance(cp, int) or cp < 0 or cp > MAX_CODEPOINT:
        return None
    if cp <= 0xFFFF:
        return (_UNIT_BE if bigendian else _UNIT_LE).pack(cp)
    cp -= SUPPLEMENTARY_BASE
    return (_PAIR_BE if bigendian else _PAIR_LE).pack(
        SURROGATE_MIN + (cp >> 10), LOW_SURROGATE_MIN + (cp & 0x3FF)
    )


def utf16_dec(
    buf: bytes, pos: int = 0, bigendian: bool = False
) -> tuple[int, int] | tuple[None, str]:
    """Decode one UTF-16 character.

    Any unit in 0xD800..0xDFFF is taken as a lead surrogate and the next unit
    is combined with it as the trail, without checking either. Out-of-order or
    lone surrogates therefore produce a nonsensical code point, not a failure.

    Args:
        buf: Buffer holding the character.
        pos: Offset of the first byte of the character.
        bigendian: Decode big-endian units instead of little-endian.

    Returns:
        ``(next_pos, cp)``, or ``(None, message)`` if the buffer ends before a
        full unit (or a full surrogate pair) is available.
    """
    unit = _UNIT_BE if bigendian else _UNIT_LE
    if pos < 0 or pos + 2 > len(buf):
        return None, f"truncated UTF-16 code unit at position {pos}"
    (cp,) = unit.unpack_from(buf, pos)
    pos += 2
    if SURROGATE_MIN <= cp <= SURROGATE_MAX:
        if pos + 2 > len(buf):
            return None, f"truncated UTF-16 surrogate pair at position {pos - 2}"
        high = (cp - SURROGATE_MIN) << 10
        (cp,) = unit.unpack_from(buf, pos)
        pos += 2
        cp = SUPPLEMENTARY_BASE + high + cp - LOW_SURROGATE_MIN
    return pos, cp
