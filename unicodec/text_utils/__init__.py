"""Text helpers built on the strict codecs.

Character Mapping Strategy:
---------------------------
encode_lossy() always tries direct encoding first. Only code points the
target codec rejects are looked up in LOOKALIKE_MAP, and only look-alikes
the target can itself encode are used. Anything left becomes the configured
replacement character.
"""

from __future__ import annotations

# Re-export codec name helpers so callers need a single import
from ..charsets.codec_mapping import (
    CODEC_ALIASES,
    get_byte_order,
    get_codec,
    is_known_codec,
)
from .lookalike_map import LOOKALIKE_MAP
from .transcoding import (
    decode_detected,
    encode_lossy,
    get_unencodable,
    strip_bom,
    to_utf8,
)

__all__ = [
    "CODEC_ALIASES",
    "LOOKALIKE_MAP",
    "decode_detected",
    "encode_lossy",
    "get_byte_order",
    "get_codec",
    "get_unencodable",
    "is_known_codec",
    "strip_bom",
    "to_utf8",
]
