"""
Design Feedback Engine
======================

Entry point tying the checkers, aggregator, suggestion generator and tip
synthesizer together. Pure and synchronous: the same inputs always produce
the same feedback, and malformed input degrades instead of raising.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..models.canvas_models import CanvasElement, Template
from ..models.config_models import FeedbackConfig
from ..models.feedback_models import DesignFeedback, ScoreBreakdown
from .checkers import (
    check_color_contrast,
    check_color_matching,
    check_color_scheme,
    check_font_matching,
    check_required_sections,
    check_spacing,
    check_template_completeness,
)
from .presets import baseline_suggestions
from .scoring import aggregate_score
from .suggestions import generate_suggestions
from .template_features import display_fonts, suggested_colors, suggested_fonts
from .tips import synthesize_tips

logger = logging.getLogger(__name__)

NO_TEMPLATE_TIP = "Select a template to get started"

TemplateInput = Union[Template, Mapping[str, Any], None]
ElementInput = Union[CanvasElement, Mapping[str, Any]]


def coerce_template(template: TemplateInput) -> Optional[Template]:
    if template is None or isinstance(template, Template):
        return template
    try:
        return Template.model_validate(template)
    except ValidationError as e:
        logger.warning(f"[FEEDBACK-ENGINE] Ignoring malformed template: {e.error_count()} errors")
        return None


def coerce_elements(elements: Optional[Iterable[ElementInput]]) -> List[CanvasElement]:
    """Validate canvas elements, dropping malformed ones and filling missing ids."""
    result = []
    for index, element in enumerate(elements or []):
        if not isinstance(element, CanvasElement):
            try:
                element = CanvasElement.model_validate(element)
            except ValidationError as e:
                logger.warning(f"[FEEDBACK-ENGINE] Skipping malformed element #{index}: {e.error_count()} errors")
                continue
        if element.id is None:
            element = element.model_copy(update={"id": f"element-{index}"})
        result.append(element)
    return result


def default_feedback(poster_type: Optional[str] = None,
                     topics: Optional[Sequence[str]] = None,
                     scheme_colors: Optional[Sequence[str]] = None) -> DesignFeedback:
    """Payload shown before a template has been chosen."""
    baseline = baseline_suggestions(poster_type, topics, scheme_colors)
    return DesignFeedback(
        score=0,
        fonts=baseline["fonts"],
        colors=baseline["colors"],
        tips=[NO_TEMPLATE_TIP],
    )


def compute_design_feedback(template: TemplateInput,
                            canvas_elements: Optional[Iterable[ElementInput]],
                            canvas_background: Optional[str] = None,
                            selected_scheme_colors: Optional[Sequence[str]] = None,
                            *,
                            suggested_font_list: Optional[Sequence[str]] = None,
                            suggested_color_list: Optional[Sequence[str]] = None,
                            poster_type: Optional[str] = None,
                            topics: Optional[Sequence[str]] = None,
                            config: Optional[FeedbackConfig] = None) -> DesignFeedback:
    """
    Score a canvas against its template and produce suggestions and tips.

    Args:
        template: Selected template (model or dict). ``None`` yields the
            default "select a template" payload.
        canvas_elements: Elements currently on the canvas.
        canvas_background: Canvas background hex, if set.
        selected_scheme_colors: The user's 0-3 scheme colors.
        suggested_font_list: Extra fonts accepted alongside the template's.
        suggested_color_list: Extra colors accepted alongside the template's.
        poster_type: Wizard poster type, used only without a template.
        topics: Wizard topics, used only without a template.
        config: Engine tunables.

    Returns:
        DesignFeedback for this canvas snapshot.
    """
    config = config or FeedbackConfig()
    scheme = [c for c in (selected_scheme_colors or []) if isinstance(c, str) and c.strip()]

    template = coerce_template(template)
    if template is None:
        return default_feedback(poster_type, topics, scheme)

    elements = coerce_elements(canvas_elements)
    fonts = suggested_fonts(template, suggested_font_list)
    colors = suggested_colors(template, suggested_color_list)

    required = check_required_sections(elements)
    completeness = check_template_completeness(template, elements)
    font_match = check_font_matching(template, elements, suggested_font_list)
    color_match = check_color_matching(template, elements, suggested_color_list)
    contrast = check_color_contrast(elements, canvas_background)
    spacing = check_spacing(elements, config)
    scheme_match = check_color_scheme(elements, scheme)

    breakdown = ScoreBreakdown(
        required_sections=required.score,
        completeness=completeness.score,
        font=font_match.score,
        color=color_match.score,
        contrast=contrast.score,
        spacing=spacing.score,
        color_scheme=scheme_match.score,
    )
    score = aggregate_score(breakdown, config.weights)

    suggestions = generate_suggestions(
        template, elements, fonts, colors,
        canvas_background=canvas_background,
        scheme_colors=scheme,
        config=config,
    )
    tips = synthesize_tips(
        template, required, completeness, font_match, color_match, contrast, spacing,
        scheme=scheme_match if scheme_match.evaluated else None,
        max_tips=config.max_tips,
    )

    logger.info(
        f"[FEEDBACK-ENGINE] template={template.name!r} elements={len(elements)} "
        f"score={score} suggestions={len(suggestions)}"
    )

    return DesignFeedback(
        score=score,
        fonts=display_fonts(fonts),
        colors=colors,
        tips=tips,
        element_suggestions=suggestions,
        used_fonts=font_match.used_fonts,
        used_colors=color_match.used_colors,
        breakdown=breakdown,
    )
