"""
Font and color normalization for case- and whitespace-insensitive matching.
"""

import re
from typing import Iterable, List, Optional

from .color_model import color_name_from_hex, get_color_hex, normalize_hex

_STRIP_RE = re.compile(r"[\s\-]+")


def normalize_font(font) -> str:
    """Canonical key for a CSS font-family string: first family only."""
    if not isinstance(font, str):
        return ""
    family = font.split(",", 1)[0].replace('"', "").replace("'", "")
    return _STRIP_RE.sub("", family.lower())


def normalize_color_name(name) -> str:
    if not isinstance(name, str):
        return ""
    return _STRIP_RE.sub("", name.lower())


def color_label(value) -> Optional[str]:
    """Display name for a color given as a name or hex string."""
    hex_value = normalize_hex(value)
    if hex_value:
        return color_name_from_hex(hex_value)
    if get_color_hex(value):
        return value.strip()
    return None


def colors_match(color1, color2) -> bool:
    """
    Two colors match when their normalized names are equal OR their resolved
    hex values are equal.
    """
    name1 = normalize_color_name(color_label(color1) or color1)
    name2 = normalize_color_name(color_label(color2) or color2)
    if name1 and name1 == name2:
        return True
    hex1 = get_color_hex(color1)
    return hex1 is not None and hex1 == get_color_hex(color2)


def color_in(color, candidates: Iterable[str]) -> bool:
    return any(colors_match(color, candidate) for candidate in candidates)


def unique_fonts(fonts: Iterable[str]) -> List[str]:
    """Drop fonts whose normalized form was already seen, keeping order."""
    seen = set()
    result = []
    for font in fonts:
        key = normalize_font(font)
        if key and key not in seen:
            seen.add(key)
            result.append(font)
    return result


def unique_colors(colors: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for color in colors:
        key = normalize_color_name(color)
        if key and key not in seen:
            seen.add(key)
            result.append(color)
    return result
