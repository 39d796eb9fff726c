"""
Shared test fixtures for the hero sprite test suite.
"""

import pytest

from common.src.hero_sprites import Palette


# The palette used throughout the hero builder acceptance tests
SAMPLE_PALETTE = {
    "skin": "#ffdbac",
    "hair": "#593208",
    "clothing": "#0000ff",
    "accent": "#ffff00",
}


@pytest.fixture
def sample_palette_dict() -> dict:
    """A complete palette as a plain mapping."""
    return dict(SAMPLE_PALETTE)


@pytest.fixture
def sample_palette() -> Palette:
    """A complete, validated palette."""
    return Palette.from_dict(SAMPLE_PALETTE)
