"""
Palette recoloring filters for hero sprites.

Renderers without native palette swapping recolor a sprite by stacking
drop-shadow passes: each pass has zero offset and zero blur, so it acts as
a flat color overlay restricted to the sprite's opaque silhouette. One pass
is emitted per palette slot, always in PALETTE_SLOT_ORDER.

Filter ids name the per-slot passes for renderers that materialize them
(e.g. one SVG <filter> element per slot): "filter-hero-123-skin".

Example:
    palette = {"skin": "#ffdbac", "hair": "#593208",
               "clothing": "#0000ff", "accent": "#ffff00"}
    synthesize_color_filter(palette)
    # 'drop-shadow(0px 0px 0px #ffdbac) drop-shadow(0px 0px 0px #593208) '
    # 'drop-shadow(0px 0px 0px #0000ff) drop-shadow(0px 0px 0px #ffff00)'
"""

from dataclasses import dataclass
import re
from typing import Any, Dict, Mapping, Tuple, Union

from .enums import (
    MissingSlotPolicy,
    PaletteSlot,
    PALETTE_SLOT_ORDER,
    SegmentPolicy,
    UnknownSlotPolicy,
    parse_palette_slot,
)
from .palette import Palette
from .segments import check_segment

FILTER_PREFIX = "filter"
FILTER_SEPARATOR = "-"

# One safe character of an entity id. "-" is allowed: slot values never
# contain it, so the last separator always splits entity from slot.
_ENTITY_SAFE_CHAR = re.compile(r"[A-Za-z0-9_-]")

PaletteLike = Union[Palette, Mapping[Any, Any]]


# =============================================================================
# Filter identifiers
# =============================================================================

def compute_filter_id(
    entity_id: str,
    slot: Union[PaletteSlot, str],
    segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
) -> str:
    """
    Get the stable filter id for one slot of one hero.

    Equal inputs always give equal ids and distinct inputs distinct ids,
    so the id is safe to use as a cache key.

    Args:
        entity_id: Opaque id of the hero instance (e.g. "hero-123")
        slot: Palette slot (member or value)
        segment_policy: REJECT (default) or PERCENT_ENCODE unsafe characters

    Returns:
        Id like "filter-hero-123-skin"

    Raises:
        InvalidInputError: Empty entity id, or unsafe id under REJECT
        UnknownSlotError: slot is not a PaletteSlot
    """
    slot = parse_palette_slot(slot)
    entity_token = check_segment(entity_id, _ENTITY_SAFE_CHAR, segment_policy, "entity id")
    return FILTER_SEPARATOR.join((FILTER_PREFIX, entity_token, slot.value))


def compute_filter_ids(
    entity_id: str,
    segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
) -> Dict[str, str]:
    """Get {slot: filter id} for every slot of a hero, in canonical order."""
    return {
        slot.value: compute_filter_id(entity_id, slot, segment_policy)
        for slot in PALETTE_SLOT_ORDER
    }


# =============================================================================
# Filter synthesis
# =============================================================================

@dataclass(frozen=True)
class TintPass:
    """
    One drop-shadow tint pass.

    Attributes:
        slot: Palette slot this pass recolors
        color: Normalized hex color, or "transparent" for a no-op pass
        offset_x: Shadow x offset in px (0 keeps it on the silhouette)
        offset_y: Shadow y offset in px
        blur: Blur radius in px (0 gives a flat overlay)
    """
    slot: PaletteSlot
    color: str
    offset_x: int = 0
    offset_y: int = 0
    blur: int = 0

    def to_css(self) -> str:
        return f"drop-shadow({self.offset_x}px {self.offset_y}px {self.blur}px {self.color})"


def build_tint_passes(
    palette: PaletteLike,
    missing_slot_policy: MissingSlotPolicy = MissingSlotPolicy.REJECT,
    unknown_slot_policy: UnknownSlotPolicy = UnknownSlotPolicy.REJECT,
) -> Tuple[TintPass, ...]:
    """
    Validate a palette and build one tint pass per slot.

    The palette is fully validated first; an invalid palette raises before
    any pass exists.

    Raises:
        InvalidColorError: A color is not well-formed
        MissingSlotError: A slot is absent under MissingSlotPolicy.REJECT
        UnknownSlotError: Unknown key under UnknownSlotPolicy.REJECT
    """
    resolved = Palette.from_dict(
        palette,
        missing_slot_policy=missing_slot_policy,
        unknown_slot_policy=unknown_slot_policy,
    )
    return tuple(TintPass(slot=slot, color=color) for slot, color in resolved.items())


def compose_tint_passes(passes) -> str:
    """Join tint passes into a single CSS filter value, in the given order."""
    return " ".join(tint.to_css() for tint in passes)


def synthesize_color_filter(
    palette: PaletteLike,
    missing_slot_policy: MissingSlotPolicy = MissingSlotPolicy.REJECT,
    unknown_slot_policy: UnknownSlotPolicy = UnknownSlotPolicy.REJECT,
) -> str:
    """
    Compose the recolor filter for a palette.

    Pure function of the palette's value: equal palettes give textually
    identical output, whatever order their entries were inserted in.

    Args:
        palette: Palette or slot -> color mapping
        missing_slot_policy: REJECT (default) or TRANSPARENT
        unknown_slot_policy: REJECT (default) or IGNORE

    Returns:
        CSS filter value with one drop-shadow pass per slot

    Raises:
        InvalidColorError: A color is not well-formed
        MissingSlotError: A slot is absent under MissingSlotPolicy.REJECT
        UnknownSlotError: Unknown key under UnknownSlotPolicy.REJECT
    """
    passes = build_tint_passes(palette, missing_slot_policy, unknown_slot_policy)
    return compose_tint_passes(passes)
