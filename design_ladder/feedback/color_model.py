"""
Color Model
===========

Hex/RGB conversion, WCAG relative luminance and contrast ratio, and color
name resolution for poster colors.

Nothing in this module raises on malformed input: unparseable colors come
back as ``None`` and contrast falls back to a ratio of 1.
"""

import re
from typing import Dict, NamedTuple, Optional

_HEX_RE = re.compile(r"^([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_SHORT_HEX_RE = re.compile(r"^[a-f\d]{3}$", re.IGNORECASE)

TRANSPARENT = "transparent"
WHITE_HEX = "#ffffff"
BLACK_HEX = "#000000"


# Named colors offered by the scheme picker, the toolbar and the wizard presets.
# The first name listed for a hex wins when resolving a hex back to a name.
COLOR_MAP: Dict[str, str] = {
    "Black": "#000000",
    "White": "#ffffff",
    "Gray": "#808080",
    "Dark Gray": "#333333",
    "Light Gray": "#d3d3d3",
    "Red": "#ff0000",
    "Orange": "#ffa500",
    "Yellow": "#ffff00",
    "Green": "#008000",
    "Blue": "#0000ff",
    "Purple": "#800080",
    "Pink": "#ffc0cb",
    "Red-Orange": "#ff4500",
    "Yellow-Green": "#9acd32",
    "Blue-Purple": "#8a2be2",
    "Navy": "#000080",
    "Teal": "#008080",
    "Burgundy": "#800020",
    "Forest Green": "#228b22",
    "Maroon": "#800000",
    "Brown": "#a52a2a",
    "Gold": "#ffd700",
    "Cream": "#fffdd0",
    "Cyan": "#00ffff",
    "Magenta": "#ff00ff",
    "Lime": "#00ff00",
}

_NAME_BY_HEX: Dict[str, str] = {}
for _name, _hex in COLOR_MAP.items():
    _NAME_BY_HEX.setdefault(_hex, _name)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def normalize_hex(value) -> Optional[str]:
    """Canonical ``#rrggbb`` for a 3- or 6-digit hex string, else ``None``."""
    if not isinstance(value, str):
        return None
    digits = value.strip().lower().lstrip("#")
    if _SHORT_HEX_RE.match(digits):
        digits = "".join(ch * 2 for ch in digits)
    if not _HEX_RE.match(digits):
        return None
    return f"#{digits}"


def hex_to_rgb(hex_color) -> Optional[RGB]:
    """Parse a 6-digit hex color, with or without ``#``."""
    if not hex_color or not isinstance(hex_color, str):
        return None
    match = _HEX_RE.match(hex_color.replace("#", "").lower())
    if not match:
        return None
    return RGB(*(int(part, 16) for part in match.groups()))


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def relative_luminance(rgb: RGB) -> float:
    """WCAG 2.1 relative luminance of an sRGB color."""
    def linear(value: int) -> float:
        value = value / 255
        return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(v) for v in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color1, color2) -> float:
    """
    WCAG contrast ratio between two hex colors, from 1 to 21.

    Returns 1 when either color cannot be parsed so that bad data never
    blocks scoring.
    """
    rgb1 = hex_to_rgb(normalize_hex(color1))
    rgb2 = hex_to_rgb(normalize_hex(color2))
    if rgb1 is None or rgb2 is None:
        return 1.0

    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    return (max(lum1, lum2) + 0.05) / (min(lum1, lum2) + 0.05)


def is_transparent(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip().lower() in ("", TRANSPARENT, "none"))


def get_color_hex(value) -> Optional[str]:
    """Resolve a color name or hex string to ``#rrggbb``."""
    if not isinstance(value, str) or is_transparent(value):
        return None
    hex_value = normalize_hex(value)
    if hex_value:
        return hex_value
    # normalizer imports this module
    from .normalizer import normalize_color_name
    wanted = normalize_color_name(value)
    for name, hex_value in COLOR_MAP.items():
        if normalize_color_name(name) == wanted:
            return hex_value
    return None


def color_name_from_hex(hex_color) -> Optional[str]:
    """
    Name a hex color.

    Exact matches against ``COLOR_MAP`` come first. Anything else goes through
    a dominant-channel heuristic that only knows a handful of hue families, so
    the result is a best-effort label rather than the nearest named color.
    """
    hex_value = normalize_hex(hex_color)
    if hex_value is None:
        return None
    if hex_value in _NAME_BY_HEX:
        return _NAME_BY_HEX[hex_value]
    return _classify(hex_to_rgb(hex_value))


def _classify(rgb: RGB) -> str:
    r, g, b = rgb
    high, low = max(rgb), min(rgb)

    if high < 50:
        return "Black"
    if low > 220:
        return "White"
    if high - low < 30:
        return "Gray"

    if r >= g and r >= b:
        if g >= 0.8 * r and b < 0.5 * r:
            return "Yellow"
        if b >= 0.5 * r:
            return "Pink" if g >= 0.35 * r else "Purple"
        if g >= 0.45 * r:
            return "Orange"
        if g >= 0.2 * r:
            return "Red-Orange"
        return "Red"

    if g >= r and g >= b:
        if b >= 0.8 * g:
            return "Teal"
        if r >= 0.8 * g:
            return "Yellow"
        if r >= 0.5 * g:
            return "Yellow-Green"
        return "Green"

    # blue dominant
    if g >= 0.8 * b:
        return "Teal"
    if r >= 0.7 * b:
        return "Purple"
    if r >= 0.4 * b:
        return "Blue-Purple"
    return "Blue"
