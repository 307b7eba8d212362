"""Detection-driven decoding and lossy encoding.

These helpers sit on top of the strict dispatcher:

1. decode_detected() runs chardet, strips any byte-order mark and decodes the
   rest with the codec the label points to. Buffers labelled "other" fall
   back to the configured codec (CP437 unless told otherwise).

2. encode_lossy() never fails on an unencodable code point. It tries, in
   order:
   a. Direct encoding with the target codec
   b. The LOOKALIKE_MAP ASCII fallback, if every character of it encodes
   c. The configured replacement character
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from ..charsets import Codec, resolve_codec
from ..config import CodecConfig
from ..const import (
    BOM_UTF8,
    BOM_UTF16_BE,
    BOM_UTF16_LE,
    CHARSET_ASCII,
    CHARSET_UTF8,
    CHARSET_UTF16_BE,
    CHARSET_UTF16_LE,
)
from ..detect import chardet
from ..dispatch import CodecArg, decode, encode
from .lookalike_map import LOOKALIKE_MAP

_LOGGER = logging.getLogger(__name__)

# Checked in this order, UTF-16 first like chardet
_BOMS: tuple[tuple[str, bytes], ...] = (
    (CHARSET_UTF16_LE, BOM_UTF16_LE),
    (CHARSET_UTF16_BE, BOM_UTF16_BE),
    (CHARSET_UTF8, BOM_UTF8),
)


def strip_bom(buf: bytes) -> tuple[str | None, bytes]:
    """Identify and remove a leading byte-order mark.

    Args:
        buf: Bytes that may start with a BOM.

    Returns:
        The charset label the BOM announces (or None) and the remaining bytes.
    """
    buf = bytes(buf)
    for label, bom in _BOMS:
        if buf.startswith(bom):
            return label, buf[len(bom) :]
    return None, buf


def decode_detected(buf: bytes, config: CodecConfig | None = None) -> list[int]:
    """Decode a buffer of unknown encoding.

    Args:
        buf: Bytes to decode.
        config: Detection length and fallback codec; defaults apply if None.

    Returns:
        The decoded code points, without any byte-order mark.

    Raises:
        MalformedSequenceError: If the buffer does not decode with the codec
            picked for it.
    """
    config = config or CodecConfig()
    label = chardet(buf, config.chardet_length)
    _, payload = strip_bom(buf)

    if label in (CHARSET_ASCII, CHARSET_UTF8):
        return decode(payload, Codec.UTF8)

    if label in (CHARSET_UTF16_LE, CHARSET_UTF16_BE):
        if len(payload) % 2:
            _LOGGER.warning(
                "Dropping trailing byte of odd-length %s buffer (%d bytes)",
                label,
                len(payload),
            )
            payload = payload[:-1]
        return decode(payload, Codec.UTF16, label == CHARSET_UTF16_BE)

    codec, bigendian = config.fallback()
    _LOGGER.debug("Charset not recognised, decoding as %s", codec.value)
    return decode(payload, codec, bigendian)


def to_utf8(buf: bytes, config: CodecConfig | None = None) -> bytes:
    """Re-encode a buffer of unknown encoding as UTF-8."""
    return encode(decode_detected(buf, config), Codec.UTF8)


def _lookalike(codec: Codec, cp: int, bigendian: bool) -> bytes | None:
    replacement = LOOKALIKE_MAP.get(cp)
    if replacement is None:
        return None
    chunks = []
    for char in replacement:
        chunk = codec.enc(ord(char), bigendian)
        if chunk is None:
            return None
        chunks.append(chunk)
    return b"".join(chunks)


def encode_lossy(
    codepoints: Iterable[int],
    encoder: CodecArg | None = None,
    config: CodecConfig | None = None,
) -> bytes:
    """Encode code points, substituting any the encoder rejects.

    Args:
        codepoints: Code points to encode.
        encoder: Target codec or name; the configured codec if None.
        config: Byte order, look-alike and replacement options.

    Returns:
        The encoded bytes.
    """
    config = config or CodecConfig()
    if encoder is None:
        codec, bigendian = config.target()
    else:
        codec, bigendian = resolve_codec(encoder, config.bigendian)
    replacement = codec.enc(ord(config.replace_char), bigendian) or b""

    chunks: list[bytes] = []
    replaced = 0
    for cp in codepoints:
        chunk = codec.enc(cp, bigendian)
        if chunk is None and config.apply_lookalikes:
            chunk = _lookalike(codec, cp, bigendian)
        if chunk is None:
            replaced += 1
            chunk = replacement
        chunks.append(chunk)

    if replaced:
        _LOGGER.warning(
            "Replaced %d unencodable code point(s) with %r for %s",
            replaced,
            config.replace_char,
            codec.value,
        )
    return b"".join(chunks)


def get_unencodable(codepoints: Iterable[int], encoder: CodecArg) -> list[int]:
    """Get the code points an encoder cannot represent.

    Code points covered by a look-alike are not reported.

    Args:
        codepoints: Code points to check.
        encoder: Target codec or name.

    Returns:
        Unique unencodable code points, in first-seen order.
    """
    codec, bigendian = resolve_codec(encoder)
    unencodable: list[int] = []
    for cp in codepoints:
        if cp in unencodable:
            continue
        if codec.enc(cp, bigendian) is None and _lookalike(codec, cp, bigendian) is None:
            unencodable.append(cp)
    return unencodable
