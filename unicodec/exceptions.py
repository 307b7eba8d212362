"""Exceptions raised by the unicodec dispatcher and helpers."""

from __future__ import annotations


class UnicodecError(Exception):
    """Base class for unicodec errors."""


class MalformedSequenceError(UnicodecError, ValueError):
    """Bytes at a position do not form a valid unit in the chosen codec."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class UnencodableValueError(UnicodecError, ValueError):
    """A code point has no representation in the target codec."""

    def __init__(self, codepoint: object, index: int, codec: str) -> None:
        super().__init__(f"Cannot encode {codepoint!r} (item {index}) as {codec}")
        self.codepoint = codepoint
        self.index = index
        self.codec = codec


class UnknownCodecError(UnicodecError, LookupError):
    """A codec name could not be resolved."""
