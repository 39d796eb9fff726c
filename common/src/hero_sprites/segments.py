"""
Segment safety for composed paths and identifiers.

A segment is one caller-supplied piece (class tag, state tag, entity id)
that gets joined with a fixed separator. Segments must never contain the
separator or other unsafe characters, otherwise two distinct inputs could
compose to the same string.
"""

import re

from .enums import SegmentPolicy
from .exceptions import InvalidInputError


def percent_encode(value: str, safe: re.Pattern) -> str:
    """
    Percent-encode every character of value not matched by safe.

    Unsafe characters are UTF-8 encoded and each byte written as %XX
    (uppercase hex). "%" itself is always unsafe, so encoding is injective.
    """
    out = []
    for char in value:
        if safe.fullmatch(char):
            out.append(char)
        else:
            out.extend(f"%{byte:02X}" for byte in char.encode("utf-8"))
    return "".join(out)


def check_segment(value: str, safe: re.Pattern, policy: SegmentPolicy, what: str) -> str:
    """
    Validate or encode a single segment.

    Args:
        value: Segment to check (already case-normalized by the caller)
        safe: Pattern matching one safe character
        policy: REJECT or PERCENT_ENCODE
        what: Human-readable name for error messages ("character class")

    Returns:
        The segment, unchanged if safe or percent-encoded under PERCENT_ENCODE

    Raises:
        InvalidInputError: If value is empty, or unsafe under REJECT
    """
    if not isinstance(value, str) or not value:
        raise InvalidInputError(f"{what} must be a non-empty string, got {value!r}")

    if all(safe.fullmatch(char) for char in value):
        return value

    if SegmentPolicy(policy) == SegmentPolicy.PERCENT_ENCODE:
        return percent_encode(value, safe)

    raise InvalidInputError(f"{what} {value!r} contains characters that are not allowed")
