"""
Template Feature Extractor
==========================

Derives the fonts and colors a template implies from its explicit palette,
its background and the styling of its element slots.
"""

from typing import Iterable, List, Optional

from ..models.canvas_models import Template
from .color_model import is_transparent
from .normalizer import color_label, normalize_color_name, unique_colors, unique_fonts

DEFAULT_FONTS = ["Arial"]


def extract_fonts(template: Optional[Template]) -> List[str]:
    """Font families of the template's text slots, first seen first."""
    if template is None:
        return []
    fonts = []
    for spec in template.layout.elements:
        style = spec.style_object
        if spec.type == "text" and style and style.font_family:
            fonts.append(style.font_family)
    return unique_fonts(fonts)


def extract_colors(template: Optional[Template]) -> List[str]:
    """
    Color names implied by a template.

    The explicit palette comes first in its own order, followed by the
    background (unless white) and each slot's text fill (unless black) and
    background (unless white or transparent).
    """
    if template is None:
        return []
    colors = [c for c in template.color_palette if isinstance(c, str)]

    background = color_label(template.layout.background)
    if background and normalize_color_name(background) != "white":
        colors.append(background)

    for spec in template.layout.elements:
        style = spec.style_object
        if style is None:
            continue
        fill = color_label(style.fill)
        if fill and normalize_color_name(fill) != "black":
            colors.append(fill)
        if not is_transparent(style.background_color):
            bg = color_label(style.background_color)
            if bg and normalize_color_name(bg) != "white":
                colors.append(bg)

    return unique_colors(colors)


def suggested_fonts(template: Optional[Template], extra: Optional[Iterable[str]] = None) -> List[str]:
    """Template fonts plus caller supplied fonts. May be empty."""
    return unique_fonts(extract_fonts(template) + [f for f in (extra or []) if isinstance(f, str)])


def suggested_colors(template: Optional[Template], extra: Optional[Iterable[str]] = None) -> List[str]:
    """Template colors plus caller supplied colors. May be empty."""
    return unique_colors(extract_colors(template) + [c for c in (extra or []) if isinstance(c, str)])


def display_fonts(fonts: List[str]) -> List[str]:
    return fonts or list(DEFAULT_FONTS)
