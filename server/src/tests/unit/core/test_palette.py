"""
Unit tests for the Palette value type and color helpers.
"""

import pytest

from common.src.hero_sprites import (
    InvalidColorError,
    InvalidInputError,
    MissingSlotError,
    MissingSlotPolicy,
    Palette,
    PalettePresets,
    PaletteSlot,
    TRANSPARENT,
    UnknownSlotError,
    UnknownSlotPolicy,
    hex_to_rgb,
    normalize_color,
)


class TestNormalizeColor:
    """Tests for normalize_color()."""

    def test_lowercases(self):
        assert normalize_color("#FFDBAC") == "#ffdbac"

    def test_expands_short_form(self):
        assert normalize_color("#F0a") == "#ff00aa"

    def test_passthrough(self):
        assert normalize_color("#593208") == "#593208"

    @pytest.mark.parametrize("bad", ["593208", "#59320", "#5932088", "#zzzzzz", " #593208", "rgb(0,0,0)"])
    def test_rejects(self, bad):
        with pytest.raises(InvalidColorError):
            normalize_color(bad, "hair")

    def test_error_carries_slot_and_value(self):
        with pytest.raises(InvalidColorError) as exc_info:
            normalize_color("blue", "clothing")
        assert exc_info.value.slot == "clothing"
        assert exc_info.value.value == "blue"
        assert "clothing" in str(exc_info.value)


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb("#ffffff") == (255, 255, 255)

    def test_skin(self):
        assert hex_to_rgb("#ffdbac") == (255, 219, 172)

    def test_short(self):
        assert hex_to_rgb("#00f") == (0, 0, 255)

    def test_invalid(self):
        with pytest.raises(InvalidColorError):
            hex_to_rgb("blue")


class TestPaletteFromDict:
    """Tests for Palette.from_dict()."""

    def test_complete(self, sample_palette_dict):
        palette = Palette.from_dict(sample_palette_dict)
        assert palette.skin == "#ffdbac"
        assert palette.accent == "#ffff00"

    def test_enum_keys(self):
        palette = Palette.from_dict({
            PaletteSlot.SKIN: "#111111",
            PaletteSlot.HAIR: "#222222",
            PaletteSlot.CLOTHING: "#333333",
            PaletteSlot.ACCENT: "#444444",
        })
        assert palette.get(PaletteSlot.CLOTHING) == "#333333"

    def test_palette_passthrough(self, sample_palette):
        assert Palette.from_dict(sample_palette) is sample_palette

    def test_none_is_empty(self):
        with pytest.raises(MissingSlotError):
            Palette.from_dict(None)

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidInputError):
            Palette.from_dict(["#ffdbac", "#593208"])

    def test_transparent_substitution(self):
        palette = Palette.from_dict({"skin": "#ffdbac"}, missing_slot_policy=MissingSlotPolicy.TRANSPARENT)
        assert palette.skin == "#ffdbac"
        assert palette.hair == TRANSPARENT
        assert palette.clothing == TRANSPARENT

    def test_unknown_rejected(self, sample_palette_dict):
        with pytest.raises(UnknownSlotError) as exc_info:
            Palette.from_dict(dict(sample_palette_dict, cape="#000000", boots="#111111"))
        assert "boots, cape" in str(exc_info.value)

    def test_unknown_ignored(self, sample_palette_dict):
        palette = Palette.from_dict(
            dict(sample_palette_dict, cape="#000000"),
            unknown_slot_policy=UnknownSlotPolicy.IGNORE,
        )
        assert palette.to_dict() == sample_palette_dict

    def test_unknown_value_not_validated_when_ignored(self, sample_palette_dict):
        palette = Palette.from_dict(
            dict(sample_palette_dict, cape="not-a-color"),
            unknown_slot_policy=UnknownSlotPolicy.IGNORE,
        )
        assert palette.to_dict() == sample_palette_dict


class TestPalette:
    """Tests for Palette behaviour."""

    def test_to_dict_in_slot_order(self, sample_palette):
        assert list(sample_palette.to_dict()) == ["skin", "hair", "clothing", "accent"]

    def test_equality_by_value(self, sample_palette_dict):
        reordered = dict(reversed(list(sample_palette_dict.items())))
        assert Palette.from_dict(sample_palette_dict) == Palette.from_dict(reordered)

    def test_immutable(self, sample_palette):
        with pytest.raises(AttributeError):
            sample_palette.skin = "#000000"

    def test_direct_construction_normalizes(self):
        palette = Palette(skin="#FFF", hair="#000000", clothing="#ABCDEF", accent="#123")
        assert palette.skin == "#ffffff"
        assert palette.clothing == "#abcdef"
        assert palette.accent == "#112233"

    def test_direct_construction_validates(self):
        with pytest.raises(InvalidColorError):
            Palette(skin="peach", hair="#000000", clothing="#000000", accent="#000000")

    def test_direct_construction_rejects_transparent(self):
        with pytest.raises(InvalidColorError) as exc_info:
            Palette(skin=TRANSPARENT, hair="#000", clothing="#111", accent="#222")
        assert exc_info.value.slot == "skin"

    def test_with_changes_keeps_substituted_slots(self):
        palette = Palette.from_dict({"skin": "#ffdbac"}, missing_slot_policy=MissingSlotPolicy.TRANSPARENT)
        changed = palette.with_changes(hair="#593208")
        assert changed.hair == "#593208"
        assert changed.clothing == TRANSPARENT
        assert changed == Palette.from_dict(
            {"skin": "#ffdbac", "hair": "#593208"}, missing_slot_policy=MissingSlotPolicy.TRANSPARENT
        )

    def test_with_changes_rejects_transparent(self, sample_palette):
        with pytest.raises(InvalidColorError):
            sample_palette.with_changes(hair=TRANSPARENT)

    def test_get_unknown_slot(self, sample_palette):
        with pytest.raises(UnknownSlotError):
            sample_palette.get("eyes")

    def test_hash_stable(self, sample_palette_dict):
        a = Palette.from_dict(sample_palette_dict).compute_hash()
        b = Palette.from_dict(dict(reversed(list(sample_palette_dict.items())))).compute_hash()
        assert a == b
        assert len(a) == 12
        assert all(c in "0123456789abcdef" for c in a)

    def test_hash_changes_with_color(self, sample_palette):
        assert sample_palette.compute_hash() != sample_palette.with_changes(hair="#000000").compute_hash()

    def test_with_changes(self, sample_palette):
        changed = sample_palette.with_changes(clothing="#EF4444")
        assert changed.clothing == "#ef4444"
        assert changed.skin == sample_palette.skin
        assert sample_palette.clothing == "#0000ff"

    def test_with_changes_validates(self, sample_palette):
        with pytest.raises(InvalidColorError):
            sample_palette.with_changes(hair="brown")
        with pytest.raises(UnknownSlotError):
            sample_palette.with_changes(cape="#000000")


class TestPalettePresets:
    def test_default_matches_hero_builder(self):
        assert PalettePresets.DEFAULT.to_dict() == {
            "skin": "#fdbcb4",
            "hair": "#8b4513",
            "clothing": "#ef4444",
            "accent": "#ffffff",
        }

    @pytest.mark.parametrize("preset", [PalettePresets.DEFAULT, PalettePresets.FOREST_RANGER, PalettePresets.ARCANE])
    def test_presets_complete(self, preset):
        assert TRANSPARENT not in preset.to_dict().values()
