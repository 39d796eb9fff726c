"""
Animation timing for hero sprite sheets.

Each sheet (/sprites/<class>_<state>.png) is a horizontal strip of equally
sized frames. This module says how many frames a state has and how long
each one is shown, so a renderer can pick the frame for a point in time.
"""

from dataclasses import dataclass
from typing import Dict, Union

from .enums import AnimationType
from .exceptions import InvalidInputError


@dataclass(frozen=True)
class AnimationConfig:
    """
    Configuration for a single animation state.

    Attributes:
        frame_count: Number of frames in the strip
        frame_duration: Seconds per frame
        loops: Whether playback wraps (False for one-shot like hurt)
    """
    frame_count: int
    frame_duration: float
    loops: bool = True

    @property
    def duration(self) -> float:
        """Length of one full pass through the strip, in seconds."""
        return self.frame_count * self.frame_duration


ANIMATION_CONFIGS: Dict[AnimationType, AnimationConfig] = {
    # Idle: two-frame breathing loop, frame B sits 1px lower
    AnimationType.IDLE: AnimationConfig(
        frame_count=2,
        frame_duration=0.6,
        loops=True,
    ),

    AnimationType.WALK: AnimationConfig(
        frame_count=4,
        frame_duration=0.15,
        loops=True,
    ),

    AnimationType.ATTACK: AnimationConfig(
        frame_count=4,
        frame_duration=0.1,
        loops=False,
    ),

    AnimationType.HURT: AnimationConfig(
        frame_count=2,
        frame_duration=0.2,
        loops=False,
    ),
}


def get_animation_config(animation_state: Union[str, AnimationType]) -> AnimationConfig:
    """
    Get the configuration for an animation state.

    Unknown states fall back to IDLE, matching the renderer's behaviour of
    showing the idle strip for anything it has no timing for.

    Args:
        animation_state: AnimationType member or tag ("walk", "Idle").

    Returns:
        AnimationConfig for the state (or IDLE).
    """
    if not isinstance(animation_state, AnimationType):
        try:
            animation_state = AnimationType(str(animation_state).lower())
        except ValueError:
            animation_state = AnimationType.IDLE
    return ANIMATION_CONFIGS[animation_state]


def get_frame_index(animation_state: Union[str, AnimationType], elapsed: float) -> int:
    """
    Get the frame to show a given time after the animation started.

    Looping animations wrap around; one-shot animations hold their last
    frame once finished.

    Args:
        animation_state: AnimationType member or tag.
        elapsed: Seconds since the animation started.

    Returns:
        Zero-based frame index.

    Raises:
        InvalidInputError: If elapsed is negative.
    """
    if elapsed < 0:
        raise InvalidInputError(f"elapsed must be >= 0, got {elapsed}")

    config = get_animation_config(animation_state)
    frame = int(elapsed // config.frame_duration)
    if config.loops:
        return frame % config.frame_count
    return min(frame, config.frame_count - 1)
