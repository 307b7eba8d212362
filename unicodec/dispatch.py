"""Whole-buffer decode, encode and transcode over a chosen codec.

The per-character codec steps signal failure by return value. This module is
where those failures become exceptions: a decode step returning
``(None, message)`` raises MalformedSequenceError and an encode step returning
None raises UnencodableValueError.

When one side of a conversion is UTF-8 the work is handed to Python's own
``utf-8`` codec in one call. The ``surrogatepass`` error handler keeps the
bulk path in agreement with the per-character UTF-8 steps.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from .charsets import Codec, resolve_codec
from .charsets.utf8 import UTF8_CODEC, UTF8_ERRORS
from .exceptions import MalformedSequenceError, UnencodableValueError

_LOGGER = logging.getLogger(__name__)

CodecArg = Codec | str


def _bulk_utf8_decode(buf: bytes) -> str:
    """Decode a whole UTF-8 buffer, raising MalformedSequenceError on bad input."""
    try:
        return bytes(buf).decode(UTF8_CODEC, UTF8_ERRORS)
    except UnicodeDecodeError as err:
        _LOGGER.debug("Bulk UTF-8 decode failed at %d: %s", err.start, err.reason)
        raise MalformedSequenceError(
            f"invalid UTF-8 code at position {err.start}: {err.reason}", err.start
        ) from err


def _iter_decode(buf: bytes, codec: Codec, bigendian: bool) -> Iterable[int]:
    """Yield code points by stepping the codec's decoder over buf."""
    pos = 0
    end = len(buf)
    while pos < end:
        next_pos, value = codec.dec(buf, pos, bigendian)
        if next_pos is None:
            raise MalformedSequenceError(str(value), pos)
        yield value
        pos = next_pos


def _encode_one(codec: Codec, cp: int, index: int, bigendian: bool) -> bytes:
    chunk = codec.enc(cp, bigendian)
    if chunk is None:
        raise UnencodableValueError(cp, index, codec.value)
    return chunk


def decode(buf: bytes, decoder: CodecArg, bigendian: bool = False) -> list[int]:
    """Decode a buffer into a list of code points.

    Args:
        buf: Bytes to decode.
        decoder: Codec (or codec name) the buffer is encoded in.
        bigendian: Byte order for UTF-16; ignored by the other codecs.

    Returns:
        The code points in buffer order.

    Raises:
        MalformedSequenceError: If the buffer holds an invalid or truncated
            sequence.
        UnknownCodecError: If decoder is an unknown codec name.
    """
    codec, bigendian = resolve_codec(decoder, bigendian)
    if codec is Codec.UTF8:
        return [ord(char) for char in _bulk_utf8_decode(buf)]
    return list(_iter_decode(buf, codec, bigendian))


def encode(
    codepoints: Iterable[int], encoder: CodecArg, bigendian: bool = False
) -> bytes:
    """Encode a sequence of code points into a buffer.

    Args:
        codepoints: Code points to encode, in order.
        encoder: Codec (or codec name) to encode with.
        bigendian: Byte order for UTF-16; ignored by the other codecs.

    Returns:
        The concatenated encoded bytes.

    Raises:
        UnencodableValueError: If a code point has no representation in the
            target codec.
        UnknownCodecError: If encoder is an unknown codec name.
    """
    codec, bigendian = resolve_codec(encoder, bigendian)
    codepoints = list(codepoints)
    if codec is Codec.UTF8:
        try:
            return "".join(map(chr, codepoints)).encode(UTF8_CODEC, UTF8_ERRORS)
        except (TypeError, ValueError, OverflowError):
            # Fall through so the offending item is reported by index
            _LOGGER.debug("Bulk UTF-8 encode failed, locating bad code point")
    return b"".join(
        _encode_one(codec, cp, index, bigendian) for index, cp in enumerate(codepoints)
    )


def transcode(
    buf: bytes,
    decoder: CodecArg,
    encoder: CodecArg,
    bigendian_dec: bool = False,
    bigendian_enc: bool = False,
) -> bytes:
    """Convert a buffer from one codec to another.

    Gives the same result as ``encode(decode(buf, ...), ...)`` without building
    the intermediate list of code points.

    Args:
        buf: Bytes to convert.
        decoder: Codec (or codec name) the buffer is encoded in.
        encoder: Codec (or codec name) to produce.
        bigendian_dec: Byte order of the input when it is UTF-16.
        bigendian_enc: Byte order of the output when it is UTF-16.

    Returns:
        The re-encoded bytes.

    Raises:
        MalformedSequenceError: If the input holds an invalid or truncated
            sequence.
        UnencodableValueError: If a decoded code point cannot be encoded.
        UnknownCodecError: If either codec name is unknown.
    """
    dec_codec, bigendian_dec = resolve_codec(decoder, bigendian_dec)
    enc_codec, bigendian_enc = resolve_codec(encoder, bigendian_enc)

    if dec_codec is Codec.UTF8:
        text = _bulk_utf8_decode(buf)
        if enc_codec is Codec.UTF8:
            return text.encode(UTF8_CODEC, UTF8_ERRORS)
        return b"".join(
            _encode_one(enc_codec, ord(char), index, bigendian_enc)
            for index, char in enumerate(text)
        )

    if enc_codec is Codec.UTF8:
        chars: list[str] = []
        for index, cp in enumerate(_iter_decode(buf, dec_codec, bigendian_dec)):
            try:
                chars.append(chr(cp))
            except ValueError as err:
                raise UnencodableValueError(cp, index, enc_codec.value) from err
        return "".join(chars).encode(UTF8_CODEC, UTF8_ERRORS)

    return b"".join(
        _encode_one(enc_codec, cp, index, bigendian_enc)
        for index, cp in enumerate(_iter_decode(buf, dec_codec, bigendian_dec))
    )


def utf16to8(buf: bytes) -> bytes:
    """Convert little-endian UTF-16 to UTF-8."""
    return transcode(buf, Codec.UTF16, Codec.UTF8)


def utf8to16(buf: bytes) -> bytes:
    """Convert UTF-8 to little-endian UTF-16."""
    return transcode(buf, Codec.UTF8, Codec.UTF16)
