"""
Filter Registry Service - Rendering-side cache of recolor filter passes.

The hero sprite core only computes filters; it never caches them. This
registry is the external cache a rendering layer keeps on top of it, keyed
by the stable filter id of each (hero, slot) pair.

Key concepts:
- Filter id: "filter-<entity>-<slot>", stable and collision-free
- Palette hash: 12-char hash used to detect palette changes per hero
- Invalidation: a hero's cached passes are dropped when its palette hash changes

Usage:
    from server.src.services.filter_registry import get_filter_registry

    registry = get_filter_registry()

    # Get (and cache) the composed filter for a hero's palette
    css = await registry.get_color_filter("hero-123", palette)

    # Look up a single cached pass by filter id
    tint = await registry.get_tint_pass("filter-hero-123-skin")
"""

from typing import Dict, Optional, Set
from collections import OrderedDict
import asyncio

from common.src.hero_sprites import (
    Palette,
    SegmentPolicy,
    TintPass,
    build_tint_passes,
    compose_tint_passes,
    compute_filter_id,
)
from server.src.core.config import get_settings
from server.src.core.logging_config import get_logger

logger = get_logger(__name__)


class FilterRegistry:
    """
    Registry of tint passes keyed by filter id.

    Thread-safe via asyncio locks. Stores:
    1. Filter id -> TintPass mapping (LRU cache)
    2. Entity -> current palette hash (for change detection)
    3. Entity -> filter ids cached for it (for invalidation)

    Correctness relies on filter ids being stable and injective; the
    registry never hashes or truncates them.
    """

    def __init__(
        self,
        max_cache_size: Optional[int] = None,
        segment_policy: Optional[SegmentPolicy] = None,
    ):
        settings = get_settings()
        if max_cache_size is None:
            max_cache_size = settings.FILTER_CACHE_SIZE
        if max_cache_size < 1:
            raise ValueError(f"max_cache_size must be at least 1, got {max_cache_size}")
        self.max_cache_size = max_cache_size
        self.segment_policy = segment_policy if segment_policy is not None else settings.SEGMENT_POLICY

        self._lock = asyncio.Lock()

        # Filter id -> TintPass (LRU cache using OrderedDict)
        self._filter_cache: OrderedDict[str, TintPass] = OrderedDict()

        # Entity ID -> current palette hash
        self._entity_hashes: Dict[str, str] = {}

        # Entity ID -> filter ids cached for that entity
        self._entity_filters: Dict[str, Set[str]] = {}

    async def register_palette(
        self,
        entity_id: str,
        palette: Palette,
        segment_policy: Optional[SegmentPolicy] = None,
    ) -> Dict[str, TintPass]:
        """
        Register an entity's palette and return its tint passes by filter id.

        If the palette hash differs from the one last registered for the
        entity, the entity's cached passes are dropped and rebuilt.

        Args:
            entity_id: Hero instance id (e.g. "hero-123")
            palette: The hero's validated palette
            segment_policy: Overrides the registry's policy for building
                            filter ids (callers with their own settings)

        Returns:
            Filter id -> TintPass, in canonical slot order.
        """
        palette_hash = palette.compute_hash()
        if segment_policy is None:
            segment_policy = self.segment_policy
        passes = build_tint_passes(palette)
        filter_ids = [
            compute_filter_id(entity_id, tint.slot, segment_policy)
            for tint in passes
        ]

        async with self._lock:
            old_hash = self._entity_hashes.get(entity_id)
            if old_hash is not None and old_hash != palette_hash:
                logger.debug(
                    "Palette changed, invalidating filters",
                    extra={"entity_id": entity_id, "old_hash": old_hash, "new_hash": palette_hash},
                )
                self._drop_entity_filters(entity_id)
            self._entity_hashes[entity_id] = palette_hash

            result: Dict[str, TintPass] = {}
            for filter_id, tint in zip(filter_ids, passes):
                if filter_id in self._filter_cache:
                    # Move to end of LRU queue
                    self._filter_cache.move_to_end(filter_id)
                else:
                    self._filter_cache[filter_id] = tint
                self._entity_filters.setdefault(entity_id, set()).add(filter_id)
                result[filter_id] = self._filter_cache[filter_id]

            # Evict oldest entries if over capacity
            while len(self._filter_cache) > self.max_cache_size:
                evicted, _ = self._filter_cache.popitem(last=False)
                self._forget_evicted(evicted)

        return result

    async def get_color_filter(
        self,
        entity_id: str,
        palette: Palette,
        segment_policy: Optional[SegmentPolicy] = None,
    ) -> str:
        """
        Get the composed recolor filter for an entity, via the cache.

        Returns text identical to synthesize_color_filter(palette).
        """
        passes = await self.register_palette(entity_id, palette, segment_policy)
        return compose_tint_passes(passes.values())

    async def get_tint_pass(self, filter_id: str) -> Optional[TintPass]:
        """
        Retrieve a cached tint pass by filter id.

        Returns:
            TintPass if cached, None otherwise.
        """
        async with self._lock:
            tint = self._filter_cache.get(filter_id)
            if tint is not None:
                self._filter_cache.move_to_end(filter_id)
            return tint

    async def get_entity_hash(self, entity_id: str) -> Optional[str]:
        """Get the palette hash last registered for an entity."""
        async with self._lock:
            return self._entity_hashes.get(entity_id)

    async def has_palette_changed(self, entity_id: str, palette_hash: str) -> bool:
        """
        Check if an entity's palette hash has changed.

        Returns:
            True if the hash differs from the stored value (or entity is new).
        """
        async with self._lock:
            return self._entity_hashes.get(entity_id) != palette_hash

    async def remove_entity(self, entity_id: str) -> None:
        """
        Remove all cached data for a despawned entity.

        Args:
            entity_id: The entity's identifier.
        """
        async with self._lock:
            self._drop_entity_filters(entity_id)
            self._entity_hashes.pop(entity_id, None)

    async def get_stats(self) -> dict:
        """
        Get statistics about the registry for monitoring.

        Returns:
            Dictionary with cache sizes and counts.
        """
        async with self._lock:
            return {
                "filter_cache_size": len(self._filter_cache),
                "entity_count": len(self._entity_hashes),
                "max_cache_size": self.max_cache_size,
            }

    async def clear_all(self) -> None:
        """
        Clear all cached data.

        Used for testing and restarts.
        """
        async with self._lock:
            self._filter_cache.clear()
            self._entity_hashes.clear()
            self._entity_filters.clear()

    def _drop_entity_filters(self, entity_id: str) -> None:
        # Caller must hold self._lock
        for filter_id in self._entity_filters.pop(entity_id, set()):
            self._filter_cache.pop(filter_id, None)

    def _forget_evicted(self, filter_id: str) -> None:
        # Caller must hold self._lock. An entity with no cached passes left
        # is forgotten entirely, so tracking stays bounded by the cache.
        for entity_id, ids in list(self._entity_filters.items()):
            if filter_id in ids:
                ids.discard(filter_id)
                if not ids:
                    del self._entity_filters[entity_id]
                    self._entity_hashes.pop(entity_id, None)


# Singleton instance
_filter_registry: Optional[FilterRegistry] = None


def get_filter_registry() -> FilterRegistry:
    """
    Get or create the singleton FilterRegistry instance.

    Returns:
        The global FilterRegistry instance.
    """
    global _filter_registry
    if _filter_registry is None:
        _filter_registry = FilterRegistry()
    return _filter_registry


def reset_filter_registry() -> None:
    """
    Reset the singleton instance.

    Used for testing to ensure clean state between tests.
    """
    global _filter_registry
    _filter_registry = None
