"""
Palette - Per-hero color assignment for each recolorable sprite region.

A palette maps every PaletteSlot to a normalized 24-bit hex color. It is the
only input the filter synthesizer needs, and its hash is what a rendering
layer compares to decide whether cached filters are still valid.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union
import hashlib
import json
import re

from .enums import (
    MissingSlotPolicy,
    PaletteSlot,
    PALETTE_SLOT_ORDER,
    UnknownSlotPolicy,
    parse_palette_slot,
)
from .exceptions import InvalidColorError, InvalidInputError, MissingSlotError, UnknownSlotError

# No-op tint substituted for absent slots under MissingSlotPolicy.TRANSPARENT.
# Never accepted as user input.
TRANSPARENT = "transparent"

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def normalize_color(value: Any, slot: str = "?") -> str:
    """
    Normalize a hex color to lowercase #rrggbb.

    Accepts #rrggbb and #rgb in any case. Anything else is rejected
    rather than guessed at.

    Args:
        value: Color value from a palette
        slot: Slot name, used in the error message

    Returns:
        Normalized color like "#ffdbac"

    Raises:
        InvalidColorError: If the value is not a well-formed hex color
    """
    if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value):
        raise InvalidColorError(slot, value)

    digits = value[1:].lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert a hex color (#rrggbb or #rgb) to an (r, g, b) tuple."""
    digits = normalize_color(color)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class Palette:
    """
    Colors for every recolorable region of a hero sprite.

    This class is immutable (frozen=True) so equal palettes always hash and
    synthesize identically. Colors are validated and normalized on
    construction; "transparent" is only ever produced by from_dict() under
    MissingSlotPolicy.TRANSPARENT.

    Attributes:
        skin: Skin color
        hair: Hair color
        clothing: Primary clothing color
        accent: Accent/trim color
    """
    skin: str
    hair: str
    clothing: str
    accent: str

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, normalize_color(getattr(self, f.name), f.name))

    @classmethod
    def _from_resolved(cls, colors: Mapping[PaletteSlot, str]) -> "Palette":
        # colors is already validated; TRANSPARENT entries come only from
        # MissingSlotPolicy.TRANSPARENT, so __post_init__ is bypassed.
        palette = object.__new__(cls)
        for slot in PALETTE_SLOT_ORDER:
            object.__setattr__(palette, slot.value, colors[slot])
        return palette

    def get(self, slot: Union[PaletteSlot, str]) -> str:
        """Get the color assigned to a slot."""
        return getattr(self, parse_palette_slot(slot).value)

    def items(self) -> Tuple[Tuple[PaletteSlot, str], ...]:
        """(slot, color) pairs in canonical slot order."""
        return tuple((slot, self.get(slot)) for slot in PALETTE_SLOT_ORDER)

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to dictionary for JSON/network serialization.

        Returns:
            Dictionary keyed by slot value, in canonical slot order.
        """
        return {slot.value: color for slot, color in self.items()}

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[Any, Any]],
        missing_slot_policy: MissingSlotPolicy = MissingSlotPolicy.REJECT,
        unknown_slot_policy: UnknownSlotPolicy = UnknownSlotPolicy.REJECT,
    ) -> "Palette":
        """
        Create a Palette from a slot -> color mapping.

        Keys may be PaletteSlot members or their string values. The whole
        mapping is validated before anything is built, so a bad palette
        never yields a partial result.

        Args:
            data: Mapping of slot names to hex colors, or None for an
                  empty mapping (subject to the missing slot policy).
            missing_slot_policy: REJECT raises, TRANSPARENT substitutes a no-op tint
            unknown_slot_policy: REJECT raises, IGNORE drops unknown keys

        Returns:
            Validated Palette

        Raises:
            InvalidInputError: data is not a mapping
            UnknownSlotError: Unknown key under UnknownSlotPolicy.REJECT
            InvalidColorError: A value is not a hex color
            MissingSlotError: A slot is absent under MissingSlotPolicy.REJECT
        """
        if isinstance(data, Palette):
            return data
        data = data or {}
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"Palette must be a mapping of slot to color, got {type(data).__name__}")

        colors: Dict[PaletteSlot, str] = {}
        unknown = []
        for key, value in data.items():
            try:
                slot = PaletteSlot(key)
            except ValueError:
                unknown.append(str(key))
                continue
            colors[slot] = normalize_color(value, slot.value)

        if unknown and unknown_slot_policy == UnknownSlotPolicy.REJECT:
            raise UnknownSlotError(f"Unknown palette slot(s): {', '.join(sorted(unknown))}")

        missing = [slot.value for slot in PALETTE_SLOT_ORDER if slot not in colors]
        if missing:
            if missing_slot_policy == MissingSlotPolicy.REJECT:
                raise MissingSlotError(missing)
            for name in missing:
                colors[PaletteSlot(name)] = TRANSPARENT

        return cls._from_resolved(colors)

    def compute_hash(self) -> str:
        """
        Compute a stable hash for this palette.

        The hash is deterministic - equal palettes always produce the same
        hash. A rendering layer uses it to detect palette changes.

        Returns:
            12-character hexadecimal hash string.
        """
        data_str = json.dumps(self.to_dict(), sort_keys=True)
        return hashlib.md5(data_str.encode()).hexdigest()[:12]

    def with_changes(self, **kwargs) -> "Palette":
        """
        Create a new Palette with some slots changed.

        Example:
            red_cloak = palette.with_changes(clothing="#ef4444")
        """
        current = dict(self.items())
        for key, value in kwargs.items():
            slot = parse_palette_slot(key)
            current[slot] = normalize_color(value, slot.value)
        return Palette._from_resolved(current)


# =============================================================================
# Presets
# =============================================================================

class PalettePresets:
    """
    Stock palettes for new heroes and tests.
    """

    # Hero builder starting colors
    DEFAULT = Palette(
        skin="#fdbcb4",
        hair="#8b4513",
        clothing="#ef4444",
        accent="#ffffff",
    )

    FOREST_RANGER = Palette(
        skin="#e0ac69",
        hair="#3b2f2f",
        clothing="#2e7d32",
        accent="#c0a060",
    )

    ARCANE = Palette(
        skin="#ffdbac",
        hair="#e0e0e0",
        clothing="#4a148c",
        accent="#ffd700",
    )
