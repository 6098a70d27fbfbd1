"""
Metric Checkers
===============

Independent scoring functions, one per design dimension. Each takes the
canvas element list (plus whatever template or scheme data it compares
against) and returns a typed result whose ``score`` is an integer 0-100.

A checker with nothing to compare scores 100: it cannot penalize what is
not defined.
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence

from ..models.canvas_models import CanvasElement, Template
from ..models.config_models import FeedbackConfig
from ..models.feedback_models import (
    ColorMatchResult,
    ColorSchemeResult,
    CompletenessResult,
    ContrastIssue,
    ContrastResult,
    FontMatchResult,
    RequiredSectionsResult,
    SchemeIssue,
    SpacingIssue,
    SpacingResult,
)
from .accessibility import is_large_text, required_ratio
from .color_model import WHITE_HEX, contrast_ratio, get_color_hex, is_transparent
from .normalizer import (
    color_in,
    color_label,
    normalize_color_name,
    normalize_font,
    unique_colors,
)
from .template_features import extract_colors, extract_fonts

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = [
    ("title", "title"),
    ("subtitle or heading", "subheading"),
    ("body text", "body"),
    ("visual element", "element"),
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percent(part: float, whole: float) -> int:
    if not whole:
        return 100
    return max(0, min(100, round_half_up(part / whole * 100)))


def id_key(element_id) -> Optional[str]:
    return None if element_id is None else str(element_id)


def with_ids(elements: Sequence[CanvasElement]) -> List[CanvasElement]:
    """Elements with missing ids filled in as ``element-<index>``."""
    return [
        e if e.id is not None else e.model_copy(update={"id": f"element-{index}"})
        for index, e in enumerate(elements)
    ]


# ── Required sections ─────────────────────────────────────────────────────────

def check_required_sections(elements: Sequence[CanvasElement]) -> RequiredSectionsResult:
    """Title, subtitle/heading, body text and at least one visual element."""
    found = {
        "title": any(e.is_text and e.style == "title" for e in elements),
        "subheading": any(e.is_text and e.style in ("subtitle", "heading") for e in elements),
        "body": any(e.is_text and e.style == "body" for e in elements),
        "element": any(e.type == "element" for e in elements),
    }
    missing = [label for label, key in REQUIRED_SECTIONS if not found[key]]
    met = len(REQUIRED_SECTIONS) - len(missing)
    logger.debug(f"[CHECKERS] Required sections: {met}/{len(REQUIRED_SECTIONS)}, missing {missing}")
    return RequiredSectionsResult(
        score=percent(met, len(REQUIRED_SECTIONS)),
        met=met,
        total=len(REQUIRED_SECTIONS),
        missing=missing,
    )


# ── Template completeness ─────────────────────────────────────────────────────

def check_template_completeness(template: Optional[Template],
                                elements: Sequence[CanvasElement]) -> CompletenessResult:
    """Share of template slots whose id is present on the canvas."""
    specs = [s for s in (template.layout.elements if template else []) if s.id is not None]
    if not specs:
        return CompletenessResult(score=100)

    canvas_ids = {id_key(e.id) for e in elements}
    missing = [s.id for s in specs if id_key(s.id) not in canvas_ids]
    present = len(specs) - len(missing)
    logger.debug(f"[CHECKERS] Template completeness: {present}/{len(specs)} slots present")
    return CompletenessResult(
        score=percent(present, len(specs)),
        present=present,
        total=len(specs),
        missing_ids=missing,
    )


# ── Font matching ─────────────────────────────────────────────────────────────

def used_fonts(elements: Sequence[CanvasElement]) -> List[str]:
    """Distinct fonts used by text elements, first seen first."""
    seen = set()
    fonts = []
    for element in elements:
        key = normalize_font(element.font) if element.is_text else ""
        if key and key not in seen:
            seen.add(key)
            fonts.append(element.font.split(",", 1)[0].strip().strip("'\""))
    return fonts


def check_font_matching(template: Optional[Template], elements: Sequence[CanvasElement],
                        suggested: Optional[Iterable[str]] = None) -> FontMatchResult:
    """Share of fonts in use that the template (or caller) suggests."""
    fonts = used_fonts(elements)
    allowed = {normalize_font(f) for f in extract_fonts(template) + list(suggested or [])}
    allowed.discard("")
    if not allowed or not fonts:
        return FontMatchResult(score=100, used_fonts=fonts, total=len(fonts), matched=len(fonts))

    unmatched = [f for f in fonts if normalize_font(f) not in allowed]
    matched = len(fonts) - len(unmatched)
    logger.debug(f"[CHECKERS] Font matching: {matched}/{len(fonts)} fonts match, unmatched {unmatched}")
    return FontMatchResult(
        score=percent(matched, len(fonts)),
        matched=matched,
        total=len(fonts),
        used_fonts=fonts,
        unmatched_fonts=unmatched,
    )


# ── Color matching ────────────────────────────────────────────────────────────

def element_colors(element: CanvasElement) -> List[str]:
    """Text color and non-transparent background color of an element."""
    colors = []
    if element.color and not is_transparent(element.color):
        colors.append(element.color)
    if not is_transparent(element.background_color):
        colors.append(element.background_color)
    return colors


def used_colors(elements: Sequence[CanvasElement]) -> List[str]:
    """Distinct color names in use; unnamed colors keep their raw value."""
    return unique_colors(
        color_label(color) or color
        for element in elements
        for color in element_colors(element)
    )


def check_color_matching(template: Optional[Template], elements: Sequence[CanvasElement],
                         suggested: Optional[Iterable[str]] = None) -> ColorMatchResult:
    """Share of element colors found in the template palette (or caller list)."""
    allowed = extract_colors(template) + [c for c in (suggested or []) if isinstance(c, str)]
    colors = [c for e in elements for c in element_colors(e)]
    names = used_colors(elements)
    if not allowed or not colors:
        return ColorMatchResult(score=100, used_colors=names, total=len(colors), matched=len(colors))

    unmatched = [c for c in colors if not color_in(c, allowed)]
    matched = len(colors) - len(unmatched)
    logger.debug(f"[CHECKERS] Color matching: {matched}/{len(colors)} colors in palette")
    return ColorMatchResult(
        score=percent(matched, len(colors)),
        matched=matched,
        total=len(colors),
        used_colors=names,
        unmatched_colors=unique_colors(color_label(c) or c for c in unmatched),
    )


# ── Contrast ──────────────────────────────────────────────────────────────────

def effective_background(element: CanvasElement, canvas_background: Optional[str] = None) -> str:
    """Own background, else the canvas background, else white."""
    for candidate in (element.background_color, canvas_background):
        if not is_transparent(candidate):
            hex_value = get_color_hex(candidate)
            if hex_value:
                return hex_value
    return WHITE_HEX


def contrast_issue(element: CanvasElement, canvas_background: Optional[str] = None) -> Optional[ContrastIssue]:
    """The WCAG AA failure of a text element, if any."""
    text_hex = get_color_hex(element.color)
    if not element.is_text or text_hex is None:
        return None
    background = effective_background(element, canvas_background)
    ratio = contrast_ratio(text_hex, background)
    required = required_ratio(element.font_size, element.is_bold)
    if ratio >= required:
        return None
    return ContrastIssue(
        element_id=element.id,
        text_color=text_hex,
        background_color=background,
        ratio=ratio,
        required_ratio=required,
        large_text=is_large_text(element.font_size, element.is_bold),
    )


def check_color_contrast(elements: Sequence[CanvasElement],
                         canvas_background: Optional[str] = None) -> ContrastResult:
    """Share of colored text elements meeting WCAG AA contrast."""
    checked = [e for e in elements if e.is_text and get_color_hex(e.color)]
    if not checked:
        return ContrastResult(score=100)

    issues = [i for i in (contrast_issue(e, canvas_background) for e in checked) if i]
    logger.debug(f"[CHECKERS] Contrast: {len(issues)} of {len(checked)} text elements below WCAG AA")
    return ContrastResult(
        score=percent(len(checked) - len(issues), len(checked)),
        checked=len(checked),
        issues=issues,
    )


# ── Spacing ───────────────────────────────────────────────────────────────────

def estimated_height(element: CanvasElement, config: Optional[FeedbackConfig] = None) -> float:
    config = config or FeedbackConfig()
    if element.is_text:
        font_size = element.font_size or config.default_font_size
        lines = max(1, len((element.content or "").split("\n")))
        return font_size * config.line_height_factor * lines
    return element.height or config.default_element_height


def check_spacing(elements: Sequence[CanvasElement], config: Optional[FeedbackConfig] = None) -> SpacingResult:
    """
    Vertical breathing room between adjacent elements.

    Overlaps (negative gaps) are reported in ``issues`` but only short,
    non-negative gaps count as violations in the score.
    """
    config = config or FeedbackConfig()
    placed = sorted((e for e in with_ids(elements) if isinstance(e.y, (int, float))), key=lambda e: e.y)
    if len(placed) <= 1:
        return SpacingResult(score=100)

    issues = []
    violations = 0
    for upper, lower in zip(placed, placed[1:]):
        gap = lower.y - (upper.y + estimated_height(upper, config))
        if gap >= config.min_spacing:
            continue
        overlapping = gap < 0
        if not overlapping:
            violations += 1
        issues.append(SpacingIssue(
            element_id1=upper.id,
            element_id2=lower.id,
            gap=gap,
            min_spacing=config.min_spacing,
            overlapping=overlapping,
        ))

    pairs = len(placed) - 1
    logger.debug(f"[CHECKERS] Spacing: {violations} violations, {len(issues)} issues across {pairs} pairs")
    return SpacingResult(
        score=percent(pairs - violations, pairs),
        pairs=pairs,
        violations=violations,
        issues=issues,
    )


# ── Color scheme ──────────────────────────────────────────────────────────────

def check_color_scheme(elements: Sequence[CanvasElement],
                       scheme_colors: Optional[Iterable[str]] = None) -> ColorSchemeResult:
    """
    Adherence of element colors to the user's chosen scheme.

    Black text and white backgrounds are neutral and never checked, nor are
    colors that cannot be resolved to a hex value.
    """
    scheme = [c for c in (scheme_colors or []) if isinstance(c, str) and c.strip()]
    if not scheme:
        return ColorSchemeResult(score=100)

    checked = 0
    issues = []
    for element in elements:
        for target, color, neutral in (
            ("text", element.color, "black"),
            ("background", element.background_color, "white"),
        ):
            if get_color_hex(color) is None or normalize_color_name(color_label(color)) == neutral:
                continue
            checked += 1
            if not color_in(color, scheme):
                issues.append(SchemeIssue(element_id=element.id, target=target, color=color))

    logger.debug(f"[CHECKERS] Color scheme: {checked - len(issues)}/{checked} colors in scheme")
    return ColorSchemeResult(
        score=percent(checked - len(issues), checked),
        evaluated=True,
        checked=checked,
        matched=checked - len(issues),
        issues=issues,
    )
