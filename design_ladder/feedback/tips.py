"""
Tip Synthesizer
===============

Turns checker results and template metadata into a short list of tips.
Tips are produced in a fixed priority order and truncated, so the order
below is what the sidebar shows.
"""

from typing import List, Optional

from ..models.canvas_models import Template
from ..models.feedback_models import (
    ColorMatchResult,
    ColorSchemeResult,
    CompletenessResult,
    ContrastResult,
    FontMatchResult,
    RequiredSectionsResult,
    SpacingResult,
)
from .presets import poster_type_tips

STYLE_TAG_TIPS = {
    "modern": "Keep it modern: generous whitespace and one strong accent color.",
    "minimal": "Less is more: trim any element that does not support the message.",
    "minimalist": "Less is more: trim any element that does not support the message.",
    "bold": "Go bold: make the title large enough to read from across the room.",
    "elegant": "Stay elegant: pair a serif heading with a restrained palette.",
    "academic": "Lead with findings: a clear title and readable body text matter most.",
    "professional": "Stay professional: align elements to a shared edge.",
    "corporate": "Stay professional: align elements to a shared edge.",
    "playful": "Have fun with it: playful icons work best in small numbers.",
    "fun": "Have fun with it: playful icons work best in small numbers.",
    "creative": "Get creative, but keep the key details easy to find.",
    "vibrant": "Balance vibrant colors with enough neutral space to rest the eye.",
    "colorful": "Balance vibrant colors with enough neutral space to rest the eye.",
}


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def synthesize_tips(template: Optional[Template],
                    required: RequiredSectionsResult,
                    completeness: CompletenessResult,
                    fonts: FontMatchResult,
                    colors: ColorMatchResult,
                    contrast: ContrastResult,
                    spacing: SpacingResult,
                    scheme: Optional[ColorSchemeResult] = None,
                    max_tips: int = 5) -> List[str]:
    tips = []

    if required.missing:
        tips.append(f"Add the missing sections: {', '.join(required.missing)}.")

    if completeness.score < 100:
        missing = completeness.total - completeness.present
        tips.append(
            f"Restore {_plural(missing, 'template element')} to complete the layout "
            f"({completeness.present}/{completeness.total} in place)."
        )

    if fonts.score < 100:
        tips.append(f"Switch {', '.join(fonts.unmatched_fonts)} to a template font for consistency.")
    elif fonts.total:
        tips.append("Your fonts match the template.")

    if colors.score < 100:
        tips.append(f"{colors.total - colors.matched} of {colors.total} colors are outside the template palette.")
    elif colors.total:
        tips.append("Your colors match the template palette.")

    if contrast.issues:
        tips.append(f"Improve contrast on {_plural(len(contrast.issues), 'text element')} to meet WCAG AA.")

    if spacing.issues:
        tips.append(f"Give {_plural(len(spacing.issues), 'pair')} of elements more breathing room.")

    if scheme and scheme.issues:
        tips.append(f"Bring {_plural(len(scheme.issues), 'color')} back to your chosen color scheme.")

    scores = [required.score, completeness.score, fonts.score, colors.score, contrast.score, spacing.score]
    if scheme is not None:
        scores.append(scheme.score)
    if all(score == 100 for score in scores):
        tips.append("Perfect match! Your poster follows the template's design.")

    if template is not None:
        for tag in template.style_tags:
            tip = STYLE_TAG_TIPS.get(str(tag).strip().lower())
            if tip:
                tips.append(tip)
                break

        for poster_type in template.poster_types:
            advice = poster_type_tips(poster_type)
            if advice:
                tips.append(advice[0])
                break

        if template.description and completeness.score == 100:
            tips.append(template.description)

    return tips[:max_tips]
