"""Codec name to Codec variant mapping.

This module provides the CODEC_ALIASES dictionary and the get_codec and
get_byte_order functions for turning user-facing encoding names into the
Codec variants the dispatcher understands.
"""

from __future__ import annotations

from ..exceptions import UnknownCodecError
from .registry import Codec

# Mapping from normalized encoding names to (codec, forced byte order).
# A byte order of None leaves the choice to the caller.
CODEC_ALIASES: dict[str, tuple[Codec, bool | None]] = {
    "UTF8": (Codec.UTF8, None),
    "UTF16": (Codec.UTF16, None),
    "UTF16LE": (Codec.UTF16, False),
    "UTF16BE": (Codec.UTF16, True),
    "UCS2": (Codec.UTF16, None),
    "UCS2LE": (Codec.UTF16, False),
    "UCS2BE": (Codec.UTF16, True),
    "CP437": (Codec.CP437, None),
    "IBM437": (Codec.CP437, None),
    "437": (Codec.CP437, None),
    "CSPC8CODEPAGE437": (Codec.CP437, None),
}


def _normalize(name: str) -> str:
    """Normalize an encoding name for lookup.

    Case, hyphens, underscores and spaces are ignored, so "utf-16-le",
    "UTF_16LE" and "utf 16 le" all match.
    """
    return name.upper().replace("-", "").replace("_", "").replace(" ", "")


def _lookup(name: str | Codec) -> tuple[Codec, bool | None]:
    if isinstance(name, Codec):
        return name, None
    entry = CODEC_ALIASES.get(_normalize(name))
    if entry is None:
        raise UnknownCodecError(f"Unknown codec '{name}'")
    return entry


def get_codec(name: str | Codec) -> Codec:
    """Get the Codec variant for an encoding name.

    Args:
        name: Encoding name (e.g., "UTF-8", "utf-16be", "IBM437") or a Codec.

    Returns:
        The matching Codec.

    Raises:
        UnknownCodecError: If the name is not a supported encoding.
    """
    return _lookup(name)[0]


def get_byte_order(name: str | Codec) -> bool | None:
    """Get the byte order an encoding name forces, if any.

    Args:
        name: Encoding name or Codec.

    Returns:
        True for big-endian names, False for little-endian names, None when
        the name does not imply a byte order.

    Raises:
        UnknownCodecError: If the name is not a supported encoding.
    """
    return _lookup(name)[1]


def is_known_codec(name: str) -> bool:
    """Check whether an encoding name resolves to a supported codec."""
    return _normalize(name) in CODEC_ALIASES


def resolve_codec(name: str | Codec, bigendian: bool = False) -> tuple[Codec, bool]:
    """Resolve a codec argument and the byte order to use with it.

    Args:
        name: Encoding name or Codec.
        bigendian: Byte order requested by the caller.

    Returns:
        The Codec and the effective byte order. Names that carry a byte order
        ("utf-16be", "utf-16le") override the requested one.
    """
    codec, forced = _lookup(name)
    return codec, bigendian if forced is None else forced
