"""
Service layer for hero visual resolution.

Combines the three pure hero sprite operations (sprite path, filter ids,
recolor filter) into a single HeroVisual for the rendering layer, applying
the configured input policies and logging rejected input.
"""

from typing import Dict, Optional

from common.src.hero_sprites import (
    AnimationType,
    HeroClass,
    Palette,
    SpriteResolutionError,
    compute_filter_ids,
    resolve_sprite_path,
    synthesize_color_filter,
)
from server.src.core.config import Settings, get_settings
from server.src.core.logging_config import get_logger
from server.src.schemas.hero_visual import HeroVisual, HeroVisualRequest
from server.src.services.filter_registry import FilterRegistry

logger = get_logger(__name__)


class HeroVisualService:
    """Service for resolving hero sprite paths and recolor filters."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[FilterRegistry] = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry

    def sprite_path(self, hero_class: str | HeroClass, animation_state: str | AnimationType) -> str:
        """
        Get the sprite sheet path for a hero class and animation state.

        Raises:
            InvalidInputError: If a tag is empty or unsafe under the segment policy
        """
        return resolve_sprite_path(hero_class, animation_state, self.settings.SEGMENT_POLICY)

    def filter_ids(self, entity_id: str) -> Dict[str, str]:
        """Get slot -> filter id for a hero."""
        return compute_filter_ids(entity_id, self.settings.SEGMENT_POLICY)

    def parse_palette(self, palette: Dict[str, str] | Palette) -> Palette:
        """
        Validate a palette with the configured slot policies.

        Raises:
            InvalidColorError, MissingSlotError, UnknownSlotError
        """
        return Palette.from_dict(
            palette,
            missing_slot_policy=self.settings.MISSING_SLOT_POLICY,
            unknown_slot_policy=self.settings.UNKNOWN_SLOT_POLICY,
        )

    def color_filter(self, palette: Dict[str, str] | Palette) -> str:
        """Synthesize the recolor filter for a palette."""
        return synthesize_color_filter(
            palette,
            missing_slot_policy=self.settings.MISSING_SLOT_POLICY,
            unknown_slot_policy=self.settings.UNKNOWN_SLOT_POLICY,
        )

    async def resolve(self, request: HeroVisualRequest) -> HeroVisual:
        """
        Resolve all visuals for one hero.

        Uses the filter registry when one is attached, otherwise synthesizes
        the filter directly. Either way the filter text is identical, and the
        registry keys its passes with this service's segment policy.

        Args:
            request: Hero id, class, animation state and palette

        Returns:
            HeroVisual bundle for the rendering layer

        Raises:
            SpriteResolutionError: If any input is rejected. Nothing is
                                   returned for partially valid input.
        """
        try:
            palette = self.parse_palette(request.palette)
            sprite_path = self.sprite_path(request.hero_class, request.animation_state)
            filter_ids = self.filter_ids(request.entity_id)

            if self.registry is not None:
                css = await self.registry.get_color_filter(
                    request.entity_id, palette, self.settings.SEGMENT_POLICY
                )
            else:
                css = self.color_filter(palette)
        except SpriteResolutionError as e:
            logger.warning(
                "Rejected hero visual request",
                extra={
                    "entity_id": request.entity_id,
                    "hero_class": request.hero_class,
                    "error": str(e),
                },
            )
            raise

        logger.debug(
            "Resolved hero visual",
            extra={"entity_id": request.entity_id, "sprite_path": sprite_path},
        )

        return HeroVisual(
            entity_id=request.entity_id,
            sprite_path=sprite_path,
            filter=css,
            filter_ids=filter_ids,
            palette=palette.to_dict(),
            palette_hash=palette.compute_hash(),
        )
