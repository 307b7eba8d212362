"""Byte buffer <-> Unicode code point conversion and charset detection.

Supported codecs are UTF-8, UTF-16 (either byte order) and IBM Code Page 437.
"""

from __future__ import annotations

from .charsets import (
    Codec,
    cp437_dec,
    cp437_enc,
    utf8_dec,
    utf8_enc,
    utf16_dec,
    utf16_enc,
)
from .config import CodecConfig
from .detect import chardet
from .dispatch import decode, encode, transcode, utf8to16, utf16to8
from .exceptions import (
    MalformedSequenceError,
    UnencodableValueError,
    UnicodecError,
    UnknownCodecError,
)

__all__ = [
    "Codec",
    "CodecConfig",
    "MalformedSequenceError",
    "UnencodableValueError",
    "UnicodecError",
    "UnknownCodecError",
    "chardet",
    "cp437_dec",
    "cp437_enc",
    "decode",
    "encode",
    "transcode",
    "utf16_dec",
    "utf16_enc",
    "utf16to8",
    "utf8_dec",
    "utf8_enc",
    "utf8to16",
]
