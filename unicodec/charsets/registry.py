"""The closed set of codecs understood by the dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .cp437 import cp437_dec, cp437_enc
from .utf8 import utf8_dec, utf8_enc
from .utf16 import utf16_dec, utf16_enc

DecodeResult = tuple[int, int] | tuple[None, str]
Decoder = Callable[[bytes, int, bool], DecodeResult]
Encoder = Callable[[int, bool], "bytes | None"]


class Codec(Enum):
    """A fixed encoding with single-character decode and encode steps."""

    UTF8 = "utf-8"
    UTF16 = "utf-16"
    CP437 = "cp437"

    def dec(self, buf: bytes, pos: int = 0, bigendian: bool = False) -> DecodeResult:
        """Decode one character at pos, see the per-codec decoders."""
        return _DECODERS[self](buf, pos, bigendian)

    def enc(self, cp: int, bigendian: bool = False) -> bytes | None:
        """Encode one code point, see the per-codec encoders."""
        return _ENCODERS[self](cp, bigendian)


_DECODERS: dict[Codec, Decoder] = {
    Codec.UTF8: utf8_dec,
    Codec.UTF16: utf16_dec,
    Codec.CP437: cp437_dec,
}

_ENCODERS: dict[Codec, Encoder] = {
    Codec.UTF8: utf8_enc,
    Codec.UTF16: utf16_enc,
    Codec.CP437: cp437_enc,
}
