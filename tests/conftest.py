from typing import Any

import pytest

from unicodec import CodecConfig


@pytest.fixture
def cp437_config() -> CodecConfig:
    """Config targeting CP437 with default fallbacks."""
    return CodecConfig.from_options({"codec": "CP437"})


@pytest.fixture
def make_config() -> Any:
    """Build a CodecConfig from keyword options."""

    def _make(**options: Any) -> CodecConfig:
        return CodecConfig.from_options(options)

    return _make
