"""
Sprite path builder for hero sprite sheets.

Maps (character class, animation state) to a sprite sheet path by string
composition. There is no lookup table and no I/O: whether the file exists
is the renderer's concern.

Paths look like "/sprites/warrior_idle.png".
"""

import re
from typing import List, Union

from .enums import AnimationType, HeroClass, SegmentPolicy
from .exceptions import InvalidInputError
from .segments import check_segment


class SpritePaths:
    """
    Naming scheme for hero sprite sheets.

    Changing the asset layout means changing these constants only.
    """

    SPRITE_BASE = "/sprites"
    SEPARATOR = "_"
    EXTENSION = "png"

    # One safe character in a normalized tag. The separator is excluded.
    SAFE_CHAR = re.compile(r"[a-z0-9-]")

    @classmethod
    def normalize_tag(
        cls,
        tag: Union[str, HeroClass, AnimationType],
        segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
        what: str = "tag",
    ) -> str:
        """
        Case-fold a class or state tag into a filesystem-safe token.

        Args:
            tag: Tag string or enum member ("Warrior", HeroClass.MAGE, "idle")
            segment_policy: How to treat characters outside [a-z0-9-]
            what: Name used in error messages

        Returns:
            Lowercase token like "warrior"

        Raises:
            InvalidInputError: Empty tag, or unsafe tag under SegmentPolicy.REJECT
        """
        if isinstance(tag, (HeroClass, AnimationType)):
            tag = tag.value
        if not isinstance(tag, str) or not tag.strip():
            raise InvalidInputError(f"{what} must be a non-empty string, got {tag!r}")
        return check_segment(tag.lower(), cls.SAFE_CHAR, segment_policy, what)

    @classmethod
    def sheet(
        cls,
        character_class: Union[str, HeroClass],
        animation_state: Union[str, AnimationType],
        segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
    ) -> str:
        """
        Get the file name of a sprite sheet.

        Returns:
            File name like "warrior_idle.png"
        """
        class_token = cls.normalize_tag(character_class, segment_policy, "character class")
        state_token = cls.normalize_tag(animation_state, segment_policy, "animation state")
        return f"{class_token}{cls.SEPARATOR}{state_token}.{cls.EXTENSION}"

    @classmethod
    def get_full_path(cls, file_name: str) -> str:
        """Prefix a sheet file name with the sprite base directory."""
        return f"{cls.SPRITE_BASE}/{file_name}"


# =============================================================================
# Convenience Functions
# =============================================================================

def resolve_sprite_path(
    character_class: Union[str, HeroClass],
    animation_state: Union[str, AnimationType],
    segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
) -> str:
    """
    Get the sprite sheet path for a hero class in an animation state.

    Args:
        character_class: Hero class tag ("Warrior", HeroClass.MAGE)
        animation_state: Animation state tag ("idle", AnimationType.WALK)
        segment_policy: REJECT (default) or PERCENT_ENCODE unsafe characters

    Returns:
        Path like "/sprites/warrior_idle.png"

    Raises:
        InvalidInputError: Empty tag, or unsafe tag under SegmentPolicy.REJECT
    """
    return SpritePaths.get_full_path(
        SpritePaths.sheet(character_class, animation_state, segment_policy)
    )


def get_class_sprite_paths(
    character_class: Union[str, HeroClass],
    segment_policy: SegmentPolicy = SegmentPolicy.REJECT,
) -> List[str]:
    """Get the sprite sheet path of every animation state for a class."""
    return [
        resolve_sprite_path(character_class, animation, segment_policy)
        for animation in AnimationType
    ]
