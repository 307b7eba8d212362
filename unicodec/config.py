"""Configuration dataclass for detection and lossy encoding helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .charsets import Codec, resolve_codec
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
from .schemas import CODEC_OPTIONS_SCHEMA


@dataclass(frozen=True)
class CodecConfig:
    """Options shared by the detection-driven decoding and lossy encoding."""

    codec: str = DEFAULT_CODEC
    bigendian: bool = DEFAULT_BIGENDIAN
    chardet_length: int = DEFAULT_CHARDET_LENGTH
    fallback_codec: str = DEFAULT_FALLBACK_CODEC
    replace_char: str = DEFAULT_REPLACE_CHAR
    apply_lookalikes: bool = DEFAULT_APPLY_LOOKALIKES

    @classmethod
    def from_options(cls, options: dict[str, Any] | None = None) -> CodecConfig:
        """Build a config from an options dict.

        Raises:
            voluptuous.Invalid: If the options do not pass validation.
        """
        data = CODEC_OPTIONS_SCHEMA(dict(options or {}))
        return cls(
            codec=data[CONF_CODEC],
            bigendian=data[CONF_BIGENDIAN],
            chardet_length=data[CONF_CHARDET_LENGTH],
            fallback_codec=data[CONF_FALLBACK_CODEC],
            replace_char=data[CONF_REPLACE_CHAR],
            apply_lookalikes=data[CONF_APPLY_LOOKALIKES],
        )

    def target(self) -> tuple[Codec, bool]:
        """Resolve the configured codec and its byte order."""
        return resolve_codec(self.codec, self.bigendian)

    def fallback(self) -> tuple[Codec, bool]:
        """Resolve the codec used for buffers detected as "other"."""
        return resolve_codec(self.fallback_codec, self.bigendian)
