"""
Hero Sprite Enums

Type-safe enumerations for hero classes, animation states, palette slots
and the policies that govern how unsafe or incomplete input is handled.

Values match the naming of the sprite sheets under /sprites/ and the keys
of a hero's color palette.
"""

from enum import Enum
from typing import Tuple

from .exceptions import UnknownSlotError


class HeroClass(str, Enum):
    """
    Playable hero classes.

    Each class owns one sprite family: /sprites/<class>_<state>.png
    """
    WARRIOR = "warrior"
    MAGE = "mage"
    ROGUE = "rogue"
    CLERIC = "cleric"

    @property
    def display_name(self) -> str:
        """Capitalized name shown in the hero builder (e.g. "Warrior")."""
        return self.value.capitalize()


class AnimationType(str, Enum):
    """
    Animation states with a sprite sheet per hero class.

    IDLE is the two-frame "breathing" loop shown in the hero preview.
    """
    IDLE = "idle"
    WALK = "walk"
    ATTACK = "attack"
    HURT = "hurt"


class PaletteSlot(str, Enum):
    """
    Semantic color regions of a hero sprite.

    Each slot is recolored independently. Slot values never contain
    the filter id separator ("-").
    """
    SKIN = "skin"
    HAIR = "hair"
    CLOTHING = "clothing"
    ACCENT = "accent"


# Canonical order used whenever slots are iterated. Filter passes are
# emitted in this order regardless of how a palette was built.
PALETTE_SLOT_ORDER: Tuple[PaletteSlot, ...] = (
    PaletteSlot.SKIN,
    PaletteSlot.HAIR,
    PaletteSlot.CLOTHING,
    PaletteSlot.ACCENT,
)


# =============================================================================
# Policies
# =============================================================================

class SegmentPolicy(str, Enum):
    """
    What to do with tags that are not safe inside a path or identifier.

    REJECT raises InvalidInputError. PERCENT_ENCODE replaces every unsafe
    byte with %XX, which keeps distinct inputs distinct.
    """
    REJECT = "reject"
    PERCENT_ENCODE = "percent_encode"


class MissingSlotPolicy(str, Enum):
    """
    What to do when a palette lacks one of the recognized slots.

    TRANSPARENT substitutes a no-op tint so every slot keeps its position
    in the composed filter.
    """
    REJECT = "reject"
    TRANSPARENT = "transparent"


class UnknownSlotPolicy(str, Enum):
    """What to do with palette keys that are not a PaletteSlot."""
    REJECT = "reject"
    IGNORE = "ignore"


def parse_palette_slot(slot) -> PaletteSlot:
    """
    Convert a slot name or member to a PaletteSlot.

    Args:
        slot: PaletteSlot member or its string value ("skin", "hair", ...)

    Returns:
        The matching PaletteSlot

    Raises:
        UnknownSlotError: If the slot is not recognized
    """
    if isinstance(slot, PaletteSlot):
        return slot
    try:
        return PaletteSlot(slot)
    except ValueError:
        raise UnknownSlotError(
            f"Unknown palette slot {slot!r}. "
            f"Expected one of: {', '.join(s.value for s in PALETTE_SLOT_ORDER)}"
        ) from None
