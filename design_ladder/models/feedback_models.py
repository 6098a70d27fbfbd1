"""
Feedback Models for Design Ladder
==================================

Checker results, the score breakdown and the feedback payload returned to
the editor.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .canvas_models import ElementId
from .suggestion_models import Suggestion


class CheckerResult(BaseModel):
    """Base result of a metric checker. Scores are integers in 0-100."""
    score: int = Field(default=100, ge=0, le=100)


class RequiredSectionsResult(CheckerResult):
    met: int = 0
    total: int = 4
    missing: List[str] = Field(default_factory=list)


class CompletenessResult(CheckerResult):
    present: int = 0
    total: int = 0
    missing_ids: List[ElementId] = Field(default_factory=list)


class FontMatchResult(CheckerResult):
    matched: int = 0
    total: int = 0
    used_fonts: List[str] = Field(default_factory=list)
    unmatched_fonts: List[str] = Field(default_factory=list)


class ColorMatchResult(CheckerResult):
    matched: int = 0
    total: int = 0
    used_colors: List[str] = Field(default_factory=list)
    unmatched_colors: List[str] = Field(default_factory=list)


class ContrastIssue(BaseModel):
    """A text element failing WCAG AA contrast."""
    element_id: Optional[ElementId] = None
    text_color: str
    background_color: str
    ratio: float
    required_ratio: float
    large_text: bool = False


class ContrastResult(CheckerResult):
    checked: int = 0
    issues: List[ContrastIssue] = Field(default_factory=list)


class SpacingIssue(BaseModel):
    """Two vertically adjacent elements sitting too close together."""
    element_id1: Optional[ElementId] = None
    element_id2: Optional[ElementId] = None
    gap: float
    min_spacing: float
    overlapping: bool = False


class SpacingResult(CheckerResult):
    pairs: int = 0
    violations: int = 0
    issues: List[SpacingIssue] = Field(default_factory=list)


class SchemeIssue(BaseModel):
    """An element color outside the user's chosen color scheme."""
    element_id: Optional[ElementId] = None
    target: str  # "text" or "background"
    color: str


class ColorSchemeResult(CheckerResult):
    evaluated: bool = False
    checked: int = 0
    matched: int = 0
    issues: List[SchemeIssue] = Field(default_factory=list)


class ScoreBreakdown(BaseModel):
    """Sub-scores feeding the overall design score."""
    required_sections: int = Field(default=100, alias="requiredSections")
    completeness: int = 100
    font: int = 100
    color: int = 100
    contrast: int = 100
    spacing: int = 100
    color_scheme: int = Field(default=100, alias="colorScheme")

    class Config:
        populate_by_name = True


class DesignFeedback(BaseModel):
    """Everything the suggestions sidebar renders for one canvas snapshot."""
    score: int = Field(default=0, ge=0, le=100)
    fonts: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    element_suggestions: List[Suggestion] = Field(default_factory=list, alias="elementSuggestions")
    used_fonts: List[str] = Field(default_factory=list, alias="usedFonts")
    used_colors: List[str] = Field(default_factory=list, alias="usedColors")
    breakdown: Optional[ScoreBreakdown] = None

    class Config:
        populate_by_name = True
