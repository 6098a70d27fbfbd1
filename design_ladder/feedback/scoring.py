"""
Score Aggregator
================

Combines checker sub-scores into the overall 0-100 design score.
"""

from typing import Optional

from ..models.config_models import ScoreWeights
from ..models.feedback_models import ScoreBreakdown
from .checkers import round_half_up


def aggregate_score(breakdown: ScoreBreakdown, weights: Optional[ScoreWeights] = None) -> int:
    """
    Weighted average of the sub-scores.

    The color-scheme term only contributes when its weight is non-zero, and
    the sum is normalized by the total weight so custom weights stay in range.
    """
    weights = weights or ScoreWeights()
    total = weights.total
    if total <= 0:
        return 0

    weighted = (
        weights.required_sections * breakdown.required_sections
        + weights.completeness * breakdown.completeness
        + weights.font * breakdown.font
        + weights.color * breakdown.color
        + weights.contrast * breakdown.contrast
        + weights.spacing * breakdown.spacing
        + weights.color_scheme * breakdown.color_scheme
    )
    # weights sum to 1.0 only up to float error
    return max(0, min(100, round_half_up(round(weighted / total, 6))))
