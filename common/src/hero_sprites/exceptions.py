"""
Errors raised while resolving a hero's sprite path or color filter.

All errors derive from ValueError so schema validators report them as
ordinary validation failures.
"""


class SpriteResolutionError(ValueError):
    """Base exception for hero sprite resolution failures"""
    pass


class InvalidInputError(SpriteResolutionError):
    """Raised when a tag or identifier cannot be composed safely"""
    pass


class UnknownSlotError(InvalidInputError):
    """Raised when a palette slot name is not recognized"""
    pass


class InvalidColorError(SpriteResolutionError):
    """Raised when a palette value is not a well-formed hex color"""
    def __init__(self, slot: str, value: object):
        self.slot = slot
        self.value = value
        super().__init__(f"Invalid color for slot {slot!r}: {value!r} (expected #rrggbb or #rgb)")


class MissingSlotError(SpriteResolutionError):
    """Raised when a palette lacks required slots"""
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Palette is missing required slot(s): {', '.join(missing)}")
