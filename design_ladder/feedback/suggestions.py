"""
Suggestion Generator
====================

Walks the canvas and emits actionable suggestion cards: template slots that
are missing, fonts and colors off the template, WCAG contrast failures,
colors outside the user's scheme and elements crowding each other.
"""

import logging
from collections import defaultdict
from typing import Iterable, List, Optional, Sequence

from ..models.canvas_models import CanvasElement, Template
from ..models.config_models import FeedbackConfig
from ..models.suggestion_models import (
    BackgroundColorGroupSuggestion,
    ColorOption,
    ColorSchemeBgGroupSuggestion,
    ColorSchemeGroupSuggestion,
    ContrastGroupSuggestion,
    FontGroupSuggestion,
    MissingElementSuggestion,
    Priority,
    SpacingGroupSuggestion,
    Suggestion,
    TextColorGroupSuggestion,
)
from .accessibility import required_ratio, round_ratio
from .checkers import (
    check_spacing,
    contrast_issue,
    effective_background,
    id_key,
    round_half_up,
    with_ids,
)
from .color_model import BLACK_HEX, WHITE_HEX, contrast_ratio, get_color_hex, is_transparent
from .normalizer import color_in, color_label, normalize_color_name, normalize_font

logger = logging.getLogger(__name__)


def color_options(colors: Iterable[str]) -> List[ColorOption]:
    """Resolvable colors as ``{name, hex}`` options, one per hex."""
    options = []
    seen = set()
    for color in colors:
        hex_value = get_color_hex(color)
        if hex_value and hex_value not in seen:
            seen.add(hex_value)
            options.append(ColorOption(name=color_label(color) or color, hex=hex_value))
    return options


def contrast_options(background: str, required: float, scheme_colors: Sequence[str],
                     template_colors: Sequence[str], limit: int = 5) -> List[ColorOption]:
    """
    Replacement text colors that reach ``required`` against ``background``.

    Scheme colors come first, then template colors, then black or white as a
    last resort.
    """
    options = []
    seen = set()
    fallbacks = [("Black", BLACK_HEX), ("White", WHITE_HEX)]
    candidates = [(c, get_color_hex(c)) for c in list(scheme_colors) + list(template_colors)]
    for name, hex_value in candidates + fallbacks:
        if hex_value is None or hex_value in seen:
            continue
        ratio = contrast_ratio(hex_value, background)
        if ratio >= required:
            seen.add(hex_value)
            options.append(ColorOption(name=color_label(name) or name, hex=hex_value, ratio=round_ratio(ratio)))
    return options[:limit]


def _describe(element: CanvasElement) -> str:
    if element.is_text:
        content = (element.content or "").strip().splitlines()
        if content:
            text = content[0]
            return f'"{text[:24]}..."' if len(text) > 24 else f'"{text}"'
        return f"{element.style or 'text'} element"
    return f"{element.element_type or 'decorative'} element"


def _is_neutral(color, neutral: str) -> bool:
    return normalize_color_name(color_label(color)) == neutral


def missing_element_suggestions(template: Optional[Template],
                                elements: Sequence[CanvasElement]) -> List[Suggestion]:
    if template is None:
        return []
    canvas_ids = {id_key(e.id) for e in elements}
    suggestions = []
    for spec in template.layout.elements:
        if spec.id is None or id_key(spec.id) in canvas_ids:
            continue
        style_name = spec.style_name or (spec.style if isinstance(spec.style, str) else None)
        suggestions.append(MissingElementSuggestion(
            element_id=spec.id,
            element_type=spec.type,
            style_name=style_name,
            message=f"The template's {spec.label} is missing from your poster",
            priority=Priority.HIGH,
            design_principle="Completeness: every section of the template carries part of the message.",
            next_step=f"Add a {spec.label} from the toolbar to restore the template layout.",
        ))
    return suggestions


def font_suggestion(element: CanvasElement, fonts: Sequence[str], limit: int) -> Optional[Suggestion]:
    key = normalize_font(element.font)
    allowed = {normalize_font(f) for f in fonts} - {""}
    if not element.is_text or not key or not allowed or key in allowed:
        return None
    options = [f for f in fonts if normalize_font(f) != key][:limit]
    return FontGroupSuggestion(
        element_id=element.id,
        current_value=element.font,
        message=f"{_describe(element)} uses {element.font.split(',')[0].strip()}, which is not a template font",
        priority=Priority.MEDIUM,
        design_principle="Consistency: a limited set of typefaces keeps the poster cohesive.",
        next_step="Switch to one of the suggested fonts.",
        options=options,
    )


def text_color_suggestion(element: CanvasElement, colors: Sequence[str]) -> Optional[Suggestion]:
    color = element.color
    if is_transparent(color) or not colors or _is_neutral(color, "black") or color_in(color, colors):
        return None
    name = color_label(color)
    return TextColorGroupSuggestion(
        element_id=element.id,
        current_value=color,
        current_name=name,
        message=f"Text color {name or color} of {_describe(element)} is not in the template palette",
        priority=Priority.MEDIUM,
        design_principle="Harmony: colors drawn from one palette read as a single design.",
        next_step="Pick a text color from the template palette.",
        options=color_options(colors),
    )


def background_color_suggestion(element: CanvasElement, colors: Sequence[str]) -> Optional[Suggestion]:
    color = element.background_color
    if is_transparent(color) or not colors or _is_neutral(color, "white") or color_in(color, colors):
        return None
    name = color_label(color)
    return BackgroundColorGroupSuggestion(
        element_id=element.id,
        current_value=color,
        current_name=name,
        message=f"Background {name or color} of {_describe(element)} is not in the template palette",
        priority=Priority.MEDIUM,
        design_principle="Harmony: colors drawn from one palette read as a single design.",
        next_step="Pick a background color from the template palette.",
        options=color_options(colors),
    )


def contrast_suggestion(element: CanvasElement, canvas_background: Optional[str],
                        scheme_colors: Sequence[str], colors: Sequence[str],
                        limit: int) -> Optional[Suggestion]:
    issue = contrast_issue(element, canvas_background)
    if issue is None:
        return None
    options = contrast_options(issue.background_color, issue.required_ratio, scheme_colors, colors, limit)
    if not options:
        logger.debug(f"[SUGGESTIONS] No passing contrast fix for element {element.id}")
        return None
    ratio = round_ratio(issue.ratio)
    return ContrastGroupSuggestion(
        element_id=element.id,
        current_value=issue.text_color,
        background_color=issue.background_color,
        contrast_ratio=ratio,
        min_required=issue.required_ratio,
        message=(
            f"{_describe(element)} has a contrast ratio of {ratio}:1, "
            f"below the {issue.required_ratio}:1 WCAG AA minimum"
        ),
        priority=Priority.HIGH,
        design_principle="Legibility: WCAG 1.4.3 requires enough contrast for text to be read by everyone.",
        next_step="Apply one of the text colors that meets the contrast minimum.",
        options=options,
    )


def scheme_suggestions(element: CanvasElement, canvas_background: Optional[str],
                       scheme_colors: Sequence[str]) -> List[Suggestion]:
    """Scheme cards for an element whose contrast is already adequate."""
    suggestions = []
    required = required_ratio(element.font_size, element.is_bold)
    background = effective_background(element, canvas_background)
    text_hex = get_color_hex(element.color)

    color = element.color
    if element.is_text and text_hex and not _is_neutral(color, "black") and not color_in(color, scheme_colors):
        options = [o for o in color_options(scheme_colors) if contrast_ratio(o.hex, background) >= required]
        if options:
            suggestions.append(ColorSchemeGroupSuggestion(
                element_id=element.id,
                current_value=color,
                message=f"Text color of {_describe(element)} is outside your chosen color scheme",
                priority=Priority.LOW,
                design_principle="Intent: the scheme you picked sets the poster's mood.",
                next_step="Use one of your scheme colors for this text.",
                options=options,
            ))

    bg = element.background_color
    if get_color_hex(bg) and not _is_neutral(bg, "white") and not color_in(bg, scheme_colors):
        options = [
            o for o in color_options(scheme_colors)
            if text_hex is None or contrast_ratio(text_hex, o.hex) >= required
        ]
        if options:
            suggestions.append(ColorSchemeBgGroupSuggestion(
                element_id=element.id,
                current_value=bg,
                message=f"Background of {_describe(element)} is outside your chosen color scheme",
                priority=Priority.LOW,
                design_principle="Intent: the scheme you picked sets the poster's mood.",
                next_step="Use one of your scheme colors for this background.",
                options=options,
            ))
    return suggestions


def spacing_suggestions(elements: Sequence[CanvasElement], config: FeedbackConfig):
    """Spacing cards keyed by the id of the upper element of each pair."""
    by_element = defaultdict(list)
    for issue in check_spacing(elements, config).issues:
        gap = round_half_up(issue.gap)
        if issue.overlapping:
            message = f"Overlapping the element below by {abs(gap)}px"
            next_step = "Move the elements apart so they no longer overlap."
        else:
            message = f"Too close to the element below ({gap}px apart, {round_half_up(issue.min_spacing)}px minimum)"
            next_step = "Add more vertical space between these elements."
        by_element[id_key(issue.element_id1)].append(SpacingGroupSuggestion(
            element_id=issue.element_id1,
            other_element_id=issue.element_id2,
            spacing=issue.gap,
            min_spacing=issue.min_spacing,
            overlapping=issue.overlapping,
            message=message,
            priority=Priority.HIGH if issue.overlapping else Priority.MEDIUM,
            design_principle="Whitespace: room between elements lets each one be seen.",
            next_step=next_step,
        ))
    return by_element


def generate_suggestions(template: Optional[Template], elements: Sequence[CanvasElement],
                         fonts: Sequence[str], colors: Sequence[str],
                         canvas_background: Optional[str] = None,
                         scheme_colors: Optional[Sequence[str]] = None,
                         config: Optional[FeedbackConfig] = None) -> List[Suggestion]:
    """
    Build the suggestion list for one canvas snapshot.

    Missing template slots come first, then the cards for each canvas
    element in canvas order. Elements without an id are keyed as
    ``element-<index>``.
    """
    config = config or FeedbackConfig()
    elements = with_ids(elements)
    scheme = [c for c in (scheme_colors or []) if isinstance(c, str) and c.strip()]
    spacing = spacing_suggestions(elements, config)

    suggestions = missing_element_suggestions(template, elements)
    for element in elements:
        font = font_suggestion(element, fonts, config.max_font_options)
        if font:
            suggestions.append(font)

        for build in (text_color_suggestion, background_color_suggestion):
            suggestion = build(element, colors)
            if suggestion:
                suggestions.append(suggestion)

        contrast = contrast_suggestion(
            element, canvas_background, scheme, colors, config.max_contrast_options
        )
        if contrast:
            suggestions.append(contrast)
        elif scheme and contrast_issue(element, canvas_background) is None:
            suggestions.extend(scheme_suggestions(element, canvas_background, scheme))

        suggestions.extend(spacing.get(id_key(element.id), []))

    logger.debug(f"[SUGGESTIONS] Generated {len(suggestions)} suggestions for {len(elements)} elements")
    return suggestions
