"""Single-character codecs and the Codec variants that select them."""

from __future__ import annotations

from .codec_mapping import (
    CODEC_ALIASES,
    get_byte_order,
    get_codec,
    is_known_codec,
    resolve_codec,
)
from .cp437 import CP437_DECODE, CP437_ENCODE, cp437_dec, cp437_enc
from .registry import Codec, DecodeResult
from .utf8 import utf8_dec, utf8_enc
from .utf16 import utf16_dec, utf16_enc

__all__ = [
    "CODEC_ALIASES",
    "CP437_DECODE",
    "CP437_ENCODE",
    "Codec",
    "DecodeResult",
    "cp437_dec",
    "cp437_enc",
    "get_byte_order",
    "get_codec",
    "is_known_codec",
    "resolve_codec",
    "utf16_dec",
    "utf16_enc",
    "utf8_dec",
    "utf8_enc",
]
