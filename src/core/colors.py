"""
Color token resolution.
"""

from collections.abc import Mapping

from core.config import COLORS, DEFAULT_COLOR
from core.errors import UnrecognizedColor

RGBA = tuple[int, int, int, int]


def resolve_color(token: str | None, table: Mapping[str, RGBA] = COLORS) -> RGBA:
    """
    Resolve a color token from a sheet cell to a concrete RGBA value.

    Empty tokens (including missing cells) resolve to opaque black. Matching
    is exact and case-sensitive; anything else raises UnrecognizedColor.
    """
    if token is None or token == "":
        return DEFAULT_COLOR

    try:
        r, g, b, _ = table[token]
    except KeyError:
        raise UnrecognizedColor(token) from None

    return (r, g, b, 255)
