"""Constants for the unicodec package."""

from __future__ import annotations

# Largest Unicode scalar value
MAX_CODEPOINT = 0x10FFFF

# UTF-16 surrogate ranges
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
LOW_SURROGATE_MIN = 0xDC00
SUPPLEMENTARY_BASE = 0x10000

# Byte-order marks
BOM_UTF8 = b"\xef\xbb\xbf"
BOM_UTF16_LE = b"\xff\xfe"
BOM_UTF16_BE = b"\xfe\xff"

# Charset detector labels
CHARSET_ASCII = "ascii"
CHARSET_UTF8 = "utf-8"
CHARSET_UTF16_BE = "utf-16be"
CHARSET_UTF16_LE = "utf-16le"
CHARSET_OTHER = "other"

CHARSET_LABELS = (
    CHARSET_ASCII,
    CHARSET_UTF8,
    CHARSET_UTF16_BE,
    CHARSET_UTF16_LE,
    CHARSET_OTHER,
)

# Option keys
CONF_CODEC = "codec"
CONF_BIGENDIAN = "bigendian"
CONF_CHARDET_LENGTH = "chardet_length"
CONF_FALLBACK_CODEC = "fallback_codec"
CONF_REPLACE_CHAR = "replace_char"
CONF_APPLY_LOOKALIKES = "apply_lookalikes"

# Default values
DEFAULT_CODEC = "UTF-8"
DEFAULT_BIGENDIAN = False
DEFAULT_CHARDET_LENGTH = 100
DEFAULT_FALLBACK_CODEC = "CP437"
DEFAULT_REPLACE_CHAR = "?"
DEFAULT_APPLY_LOOKALIKES = True
