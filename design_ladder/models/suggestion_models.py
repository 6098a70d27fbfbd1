"""
Suggestion Models for Design Ladder
====================================

Typed suggestion cards produced by the feedback engine.

Every card shares the generic fields rendered by the sidebar (element id,
message, priority, design principle, next step). The ``type`` field selects
the variant and decides which remediation options travel with it.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from .canvas_models import ElementId


class Priority(str, Enum):
    """How urgently a suggestion should be addressed."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ColorOption(BaseModel):
    """A candidate color fix."""
    name: str
    hex: str
    ratio: Optional[float] = None


class BaseSuggestion(BaseModel):
    """Fields shared by every suggestion card."""
    element_id: ElementId = Field(alias="elementId")
    message: str
    priority: Priority
    design_principle: str = Field(alias="designPrinciple")
    next_step: str = Field(alias="nextStep")

    class Config:
        populate_by_name = True
        use_enum_values = True


class MissingElementSuggestion(BaseSuggestion):
    type: Literal["missing-element"] = "missing-element"
    element_type: str = Field(default="text", alias="elementType")
    style_name: Optional[str] = Field(default=None, alias="styleName")
    options: List[str] = Field(default_factory=list)


class FontGroupSuggestion(BaseSuggestion):
    type: Literal["font-group"] = "font-group"
    current_value: str = Field(alias="currentValue")
    options: List[str] = Field(default_factory=list)


class TextColorGroupSuggestion(BaseSuggestion):
    type: Literal["text-color-group"] = "text-color-group"
    current_value: str = Field(alias="currentValue")
    current_name: Optional[str] = Field(default=None, alias="currentName")
    options: List[ColorOption] = Field(default_factory=list)


class BackgroundColorGroupSuggestion(BaseSuggestion):
    type: Literal["background-color-group"] = "background-color-group"
    current_value: str = Field(alias="currentValue")
    current_name: Optional[str] = Field(default=None, alias="currentName")
    options: List[ColorOption] = Field(default_factory=list)


class ContrastGroupSuggestion(BaseSuggestion):
    type: Literal["contrast-group"] = "contrast-group"
    current_value: str = Field(alias="currentValue")
    background_color: str = Field(alias="backgroundColor")
    contrast_ratio: float = Field(alias="contrastRatio")
    min_required: float = Field(alias="minRequired")
    options: List[ColorOption] = Field(default_factory=list)


class ColorSchemeGroupSuggestion(BaseSuggestion):
    type: Literal["color-scheme-group"] = "color-scheme-group"
    current_value: str = Field(alias="currentValue")
    options: List[ColorOption] = Field(default_factory=list)


class ColorSchemeBgGroupSuggestion(BaseSuggestion):
    type: Literal["color-scheme-bg-group"] = "color-scheme-bg-group"
    current_value: str = Field(alias="currentValue")
    options: List[ColorOption] = Field(default_factory=list)


class SpacingGroupSuggestion(BaseSuggestion):
    type: Literal["spacing-group"] = "spacing-group"
    other_element_id: ElementId = Field(alias="otherElementId")
    spacing: float
    min_spacing: float = Field(alias="minSpacing")
    overlapping: bool = False
    options: List[str] = Field(default_factory=list)


Suggestion = Annotated[
    Union[
        MissingElementSuggestion,
        FontGroupSuggestion,
        TextColorGroupSuggestion,
        BackgroundColorGroupSuggestion,
        ContrastGroupSuggestion,
        ColorSchemeGroupSuggestion,
        ColorSchemeBgGroupSuggestion,
        SpacingGroupSuggestion,
    ],
    Field(discriminator="type"),
]

SUGGESTION_TYPES = [
    "missing-element",
    "font-group",
    "text-color-group",
    "background-color-group",
    "contrast-group",
    "color-scheme-group",
    "color-scheme-bg-group",
    "spacing-group",
]
