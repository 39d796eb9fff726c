"""
Test fixtures for unit tests.

Fast fixtures with no I/O and no shared state between tests.
"""

import pytest
import pytest_asyncio

from common.src.hero_sprites import MissingSlotPolicy, SegmentPolicy, UnknownSlotPolicy
from server.src.core.config import Settings
from server.src.services.filter_registry import (
    FilterRegistry,
    get_filter_registry,
    reset_filter_registry,
)


@pytest.fixture
def strict_settings() -> Settings:
    """Settings that reject every kind of questionable input."""
    return Settings(
        SEGMENT_POLICY=SegmentPolicy.REJECT,
        MISSING_SLOT_POLICY=MissingSlotPolicy.REJECT,
        UNKNOWN_SLOT_POLICY=UnknownSlotPolicy.REJECT,
        FILTER_CACHE_SIZE=100,
    )


@pytest.fixture
def lenient_settings() -> Settings:
    """Settings that encode, substitute and ignore instead of rejecting."""
    return Settings(
        SEGMENT_POLICY=SegmentPolicy.PERCENT_ENCODE,
        MISSING_SLOT_POLICY=MissingSlotPolicy.TRANSPARENT,
        UNKNOWN_SLOT_POLICY=UnknownSlotPolicy.IGNORE,
        FILTER_CACHE_SIZE=100,
    )


@pytest_asyncio.fixture
async def filter_registry() -> FilterRegistry:
    """Create a fresh filter registry for each test."""
    reset_filter_registry()
    registry = get_filter_registry()
    yield registry
    await registry.clear_all()
    reset_filter_registry()
