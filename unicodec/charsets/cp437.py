"""Code Page 437, the native US-English IBM PC / Windows OEM code page.

Bytes below 0x80 are ASCII. The upper half holds accented Latin letters,
Greek letters, box drawing, block elements and mathematical symbols.
"""

from __future__ import annotations

from types import MappingProxyType

# Code points for bytes 0x80..0xFF, in byte order
_UPPER_HALF: tuple[int, ...] = (
    0x00C7, 0x00FC, 0x00E9, 0x00E2, 0x00E4, 0x00E0, 0x00E5, 0x00E7,  # 0x80
    0x00EA, 0x00EB, 0x00E8, 0x00EF, 0x00EE, 0x00EC, 0x00C4, 0x00C5,  # 0x88
    0x00C9, 0x00E6, 0x00C6, 0x00F4, 0x00F6, 0x00F2, 0x00FB, 0x00F9,  # 0x90
    0x00FF, 0x00D6, 0x00DC, 0x00A2, 0x00A3, 0x00A5, 0x20A7, 0x0192,  # 0x98
    0x00E1, 0x00ED, 0x00F3, 0x00FA, 0x00F1, 0x00D1, 0x00AA, 0x00BA,  # 0xA0
    0x00BF, 0x2310, 0x00AC, 0x00BD, 0x00BC, 0x00A1, 0x00AB, 0x00BB,  # 0xA8
    0x2591, 0x2592, 0x2593, 0x2502, 0x2524, 0x2561, 0x2562, 0x2556,  # 0xB0
    0x2555, 0x2563, 0x2551, 0x2557, 0x255D, 0x255C, 0x255B, 0x2510,  # 0xB8
    0x2514, 0x2534, 0x252C, 0x251C, 0x2500, 0x253C, 0x255E, 0x255F,  # 0xC0
    0x255A, 0x2554, 0x2569, 0x2566, 0x2560, 0x2550, 0x256C, 0x2567,  # 0xC8
    0x2568, 0x2564, 0x2565, 0x2559, 0x2558, 0x2552, 0x2553, 0x256B,  # 0xD0
    0x256A, 0x2518, 0x250C, 0x2588, 0x2584, 0x258C, 0x2590, 0x2580,  # 0xD8
    0x03B1, 0x00DF, 0x0393, 0x03C0, 0x03A3, 0x03C3, 0x00B5, 0x03C4,  # 0xE0
    0x03A6, 0x0398, 0x03A9, 0x03B4, 0x221E, 0x03C6, 0x03B5, 0x2229,  # 0xE8
    0x2261, 0x00B1, 0x2265, 0x2264, 0x2320, 0x2321, 0x00F7, 0x2248,  # 0xF0
    0x00B0, 0x2219, 0x00B7, 0x221A, 0x207F, 0x00B2, 0x25A0, 0x00A0,  # 0xF8
)  # fmt: skip

# Byte value -> code point, upper half only
CP437_DECODE: MappingProxyType[int, int] = MappingProxyType(
    {0x80 + offset: cp for offset, cp in enumerate(_UPPER_HALF)}
)

# Code point -> byte value, exact inverse of CP437_DECODE
CP437_ENCODE: MappingProxyType[int, int] = MappingProxyType(
    {cp: byte for byte, cp in CP437_DECODE.items()}
)


def cp437_enc(cp: int, bigendian: bool = False) -> bytes | None:
    """Encode a code point to CP437.

    Args:
        cp: Unicode code point.
        bigendian: Ignored, CP437 is a single-byte code page.

    Returns:
        A single byte, or None if cp has no CP437 representation.
    """
    if not isinstance(cp, int) or cp < 0:
        return None
    if cp < 0x80:
        return bytes((cp,))
    byte = CP437_ENCODE.get(cp)
    if byte is None:
        return None
    return bytes((byte,))


def cp437_dec(
    buf: bytes, pos: int = 0, bigendian: bool = False
) -> tuple[int, int] | tuple[None, str]:
    """Decode one CP437 character.

    Args:
        buf: Buffer holding the character.
        pos: Offset of the byte to decode.
        bigendian: Ignored, CP437 is a single-byte code page.

    Returns:
        ``(pos + 1, cp)``, or ``(None, message)`` if pos is past the end.
    """
    if pos < 0 or pos >= len(buf):
        return None, f"position {pos} out of range"
    byte = buf[pos]
    if byte < 0x80:
        return pos + 1, byte
    return pos + 1, CP437_DECODE[byte]
