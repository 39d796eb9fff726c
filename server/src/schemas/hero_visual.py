"""
Pydantic schemas for hero visual resolution.

HeroVisualRequest is what a rendering/UI layer sends; HeroVisual is the
bundle it gets back: sprite sheet path, composed recolor filter and the
per-slot filter ids it can use as cache keys.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Dict


class HeroVisualRequest(BaseModel):
    """
    Everything needed to resolve one hero's visuals.

    Palette values are validated by the service, using the configured
    missing/unknown slot policies.
    """
    entity_id: str = Field(..., min_length=1, description="Hero instance id (e.g. 'hero-123')")
    hero_class: str = Field(..., min_length=1, description="Hero class tag (e.g. 'Warrior')")
    animation_state: str = Field(default="idle", min_length=1, description="Animation state tag")
    palette: Dict[str, str] = Field(default_factory=dict, description="Slot -> hex color")


class HeroVisual(BaseModel):
    """
    Resolved visuals for one hero.
    """
    model_config = ConfigDict(frozen=True)

    entity_id: str = Field(..., description="Hero instance id")
    sprite_path: str = Field(..., description="Sprite sheet path, e.g. '/sprites/warrior_idle.png'")
    filter: str = Field(..., description="Composed drop-shadow recolor filter")
    filter_ids: Dict[str, str] = Field(..., description="Slot -> stable filter id")
    palette: Dict[str, str] = Field(..., description="Normalized slot -> color")
    palette_hash: str = Field(..., description="12-char palette hash for change detection")

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump()
