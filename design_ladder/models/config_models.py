"""
Feedback Configuration Models
=============================

Tunable constants for scoring and suggestion generation.
"""

import os
from pydantic import BaseModel, Field


class ScoreWeights(BaseModel):
    """Weight of each checker in the overall design score."""
    required_sections: float = 0.25
    completeness: float = 0.25
    font: float = 0.20
    color: float = 0.15
    contrast: float = 0.10
    spacing: float = 0.05
    color_scheme: float = 0.0  # opt-in

    @property
    def total(self) -> float:
        return (
            self.required_sections + self.completeness + self.font
            + self.color + self.contrast + self.spacing + self.color_scheme
        )


class FeedbackConfig(BaseModel):
    """Configuration for the design feedback engine."""
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    min_spacing: float = Field(default=20.0, ge=0)
    default_element_height: float = Field(default=40.0, gt=0)
    default_font_size: float = Field(default=24.0, gt=0)
    line_height_factor: float = Field(default=1.5, gt=0)
    max_tips: int = Field(default=5, ge=1)
    max_font_options: int = Field(default=5, ge=1)
    max_contrast_options: int = Field(default=5, ge=1)

    @classmethod
    def from_env(cls) -> "FeedbackConfig":
        """Build a config, overriding defaults from DESIGN_LADDER_* variables."""
        config = cls()
        min_spacing = os.getenv("DESIGN_LADDER_MIN_SPACING")
        if min_spacing:
            config.min_spacing = float(min_spacing)
        max_tips = os.getenv("DESIGN_LADDER_MAX_TIPS")
        if max_tips:
            config.max_tips = int(max_tips)
        scheme_weight = os.getenv("DESIGN_LADDER_INCLUDE_SCHEME_SCORE")
        if scheme_weight and scheme_weight.lower() in ("1", "true", "yes"):
            config.weights.color_scheme = 0.10
        return config
