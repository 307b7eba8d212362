"""Heuristic charset detection.

The detector only looks at a prefix of the buffer and picks one of five
labels. It checks for a byte-order mark, then walks the prefix once:

- The first NUL byte decides UTF-16 on the spot. Text that is mostly ASCII
  puts its zero bytes at odd offsets in little-endian and at even offsets in
  big-endian.
- Bytes above 0x7F are tried as UTF-8 sequences until one fails, after which
  the buffer is only tracked as "has high bytes".

No backtracking is done; a failed UTF-8 decode is never reconsidered.
"""

from __future__ import annotations

import logging

from .charsets.utf8 import utf8_dec
from .const import (
    BOM_UTF8,
    BOM_UTF16_BE,
    BOM_UTF16_LE,
    CHARSET_ASCII,
    CHARSET_OTHER,
    CHARSET_UTF8,
    CHARSET_UTF16_BE,
    CHARSET_UTF16_LE,
    DEFAULT_CHARDET_LENGTH,
)

_LOGGER = logging.getLogger(__name__)


def _check_bom(buf: bytes, limit: int) -> str | None:
    if limit >= 2:
        head = bytes(buf[:2])
        if head == BOM_UTF16_LE:
            return CHARSET_UTF16_LE
        if head == BOM_UTF16_BE:
            return CHARSET_UTF16_BE
        if limit >= 3 and bytes(buf[:3]) == BOM_UTF8:
            return CHARSET_UTF8
    return None


def chardet(buf: bytes, length: int = DEFAULT_CHARDET_LENGTH) -> str:
    """Guess the charset of a buffer.

    Args:
        buf: Bytes to inspect.
        length: Maximum number of leading bytes to look at.

    Returns:
        One of "ascii", "utf-8", "utf-16be", "utf-16le" or "other".
    """
    limit = min(length, len(buf))

    label = _check_bom(buf, limit)
    if label is not None:
        _LOGGER.debug("Detected %s from byte-order mark", label)
        return label

    pos = 0
    high = False
    is_utf8 = True
    while pos < limit - 1:
        byte = buf[pos]
        if byte == 0:
            label = CHARSET_UTF16_LE if pos % 2 else CHARSET_UTF16_BE
            _LOGGER.debug("Detected %s from NUL byte at %d", label, pos)
            return label
        if byte > 127:
            high = True
            if is_utf8:
                next_pos, _ = utf8_dec(buf, pos)
                if next_pos is not None:
                    pos = next_pos
                    continue
                is_utf8 = False
        pos += 1

    if not high:
        return CHARSET_ASCII
    return CHARSET_UTF8 if is_utf8 else CHARSET_OTHER
