"""
Hero Sprite System - Deterministic sprite addressing and palette recoloring.

Resolves which sprite sheet a hero shows and how to recolor it from the
hero's palette, without storing pre-rendered recolored images.

## Components

- **paths**: Sprite sheet path construction from (class, animation state)
- **filters**: Stable filter ids and drop-shadow recolor filter synthesis
- **palette**: Palette value type, color validation and presets
- **animation**: Frame counts and timing per animation state
- **enums**: Hero classes, animation states, palette slots and policies
- **exceptions**: Error hierarchy

Every function here is pure: no I/O, no caching, no shared state. Safe to
call from any thread or task.

## Quick Start

```python
from common.src.hero_sprites import (
    HeroClass,
    AnimationType,
    resolve_sprite_path,
    compute_filter_id,
    synthesize_color_filter,
)

path = resolve_sprite_path(HeroClass.WARRIOR, AnimationType.IDLE)
# "/sprites/warrior_idle.png"

filter_id = compute_filter_id("hero-123", "skin")
# "filter-hero-123-skin"

css = synthesize_color_filter({
    "skin": "#ffdbac",
    "hair": "#593208",
    "clothing": "#0000ff",
    "accent": "#ffff00",
})
# "drop-shadow(0px 0px 0px #ffdbac) drop-shadow(0px 0px 0px #593208) ..."
```
"""

# =============================================================================
# Enums
# =============================================================================

from .enums import (
    HeroClass,
    AnimationType,
    PaletteSlot,
    PALETTE_SLOT_ORDER,

    # Policies
    SegmentPolicy,
    MissingSlotPolicy,
    UnknownSlotPolicy,

    parse_palette_slot,
)

# =============================================================================
# Errors
# =============================================================================

from .exceptions import (
    SpriteResolutionError,
    InvalidInputError,
    UnknownSlotError,
    InvalidColorError,
    MissingSlotError,
)

# =============================================================================
# Palette
# =============================================================================

from .palette import (
    Palette,
    PalettePresets,
    TRANSPARENT,
    normalize_color,
    hex_to_rgb,
)

# =============================================================================
# Paths - Sprite sheet path construction
# =============================================================================

from .paths import (
    SpritePaths,
    resolve_sprite_path,
    get_class_sprite_paths,
)

# =============================================================================
# Filters - Identifiers and recolor synthesis
# =============================================================================

from .filters import (
    FILTER_PREFIX,
    FILTER_SEPARATOR,
    TintPass,
    compute_filter_id,
    compute_filter_ids,
    build_tint_passes,
    compose_tint_passes,
    synthesize_color_filter,
)

# =============================================================================
# Animation - Frame timing
# =============================================================================

from .animation import (
    AnimationConfig,
    ANIMATION_CONFIGS,
    get_animation_config,
    get_frame_index,
)

# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Enums
    "HeroClass",
    "AnimationType",
    "PaletteSlot",
    "SegmentPolicy",
    "MissingSlotPolicy",
    "UnknownSlotPolicy",

    # Errors
    "SpriteResolutionError",
    "InvalidInputError",
    "UnknownSlotError",
    "InvalidColorError",
    "MissingSlotError",

    # Dataclasses
    "Palette",
    "PalettePresets",
    "TintPass",
    "AnimationConfig",

    # Constants
    "PALETTE_SLOT_ORDER",
    "TRANSPARENT",
    "FILTER_PREFIX",
    "FILTER_SEPARATOR",
    "ANIMATION_CONFIGS",

    # Functions
    "parse_palette_slot",
    "normalize_color",
    "hex_to_rgb",
    "get_animation_config",
    "get_frame_index",

    # Path utilities
    "SpritePaths",
    "resolve_sprite_path",
    "get_class_sprite_paths",

    # Filter utilities
    "compute_filter_id",
    "compute_filter_ids",
    "build_tint_passes",
    "compose_tint_passes",
    "synthesize_color_filter",
]
