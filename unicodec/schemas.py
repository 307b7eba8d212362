"""Validation schemas for codec options."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from .charsets import Codec, is_known_codec
from .const import (
    CONF_APPLY_LOOKALIKES,
    CONF_BIGENDIAN,
    CONF_CHARDET_LENGTH,
    CONF_CODEC,
    CONF_FALLBACK_CODEC,
    CONF_REPLACE_CHAR,
    DEFAULT_APPLY_LOOKALIKES,
    DEFAULT_BIGENDIAN,
    DEFAULT_CHARDET_LENGTH,
    DEFAULT_CODEC,
    DEFAULT_FALLBACK_CODEC,
    DEFAULT_REPLACE_CHAR,
)


def codec_name(value: Any) -> str:
    """Validate that a value names a supported codec."""
    if isinstance(value, Codec):
        return value.value
    if not isinstance(value, str) or not is_known_codec(value):
        raise vol.Invalid(f"Unknown codec: {value!r}")
    return value


CODEC_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_CODEC, default=DEFAULT_CODEC): codec_name,
        vol.Optional(CONF_BIGENDIAN, default=DEFAULT_BIGENDIAN): vol.Boolean(),
        vol.Optional(CONF_CHARDET_LENGTH, default=DEFAULT_CHARDET_LENGTH): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(CONF_FALLBACK_CODEC, default=DEFAULT_FALLBACK_CODEC): codec_name,
        vol.Optional(CONF_REPLACE_CHAR, default=DEFAULT_REPLACE_CHAR): vol.All(
            str, vol.Match(r"^[\x00-\x7f]\Z")
        ),
        vol.Optional(CONF_APPLY_LOOKALIKES, default=DEFAULT_APPLY_LOOKALIKES): (
            vol.Boolean()
        ),
    }
)
