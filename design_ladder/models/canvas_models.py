"""
Canvas Models for Design Ladder
================================

Models for poster templates and the elements placed on the canvas.

Both are read-only inputs to the feedback engine. Every field is optional
and malformed values fall back to their defaults field by field, so that
partially built canvases and hand-written templates still validate.
"""

import logging
from typing import List, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


ElementId = Union[str, int]


def _str_or_none(value):
    return value if isinstance(value, str) else None


def _text_or_none(value):
    """Strings as-is, plain numbers as their string form."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _number_or_none(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _weight_or_none(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value)
    return value if isinstance(value, (int, str)) else None


def _element_id(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else str(value)
    return None


def _string_list(value) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


class Position(BaseModel):
    """Top-left anchored position on the canvas."""
    x: Optional[float] = None
    y: Optional[float] = None

    @field_validator("x", "y", mode="before")
    @classmethod
    def coerce_coordinate(cls, value):
        return _number_or_none(value)


class TemplateStyle(BaseModel):
    """Inline style object of a template element."""
    font_family: Optional[str] = Field(default=None, alias="fontFamily")
    font_size: Optional[float] = Field(default=None, alias="fontSize")
    font_weight: Optional[Union[int, str]] = Field(default=None, alias="fontWeight")
    fill: Optional[str] = None
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    text_align: Optional[str] = Field(default=None, alias="textAlign")
    max_width: Optional[float] = Field(default=None, alias="maxWidth")

    class Config:
        populate_by_name = True

    @field_validator("font_family", "fill", "background_color", "text_align", mode="before")
    @classmethod
    def coerce_string(cls, value):
        return _str_or_none(value)

    @field_validator("font_size", "max_width", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return _number_or_none(value)

    @field_validator("font_weight", mode="before")
    @classmethod
    def coerce_weight(cls, value):
        return _weight_or_none(value)


class TemplateElementSpec(BaseModel):
    """A slot defined by a template layout."""
    id: Optional[ElementId] = None
    type: str = "text"
    style: Optional[Union[TemplateStyle, str]] = None
    style_name: Optional[str] = Field(default=None, alias="styleName")
    content: Optional[str] = None
    position: Optional[Position] = None
    x: Optional[float] = None
    y: Optional[float] = None
    element_type: Optional[str] = Field(default=None, alias="elementType")
    icon: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return _element_id(value)

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value):
        return value if isinstance(value, str) else "text"

    @field_validator("style", mode="before")
    @classmethod
    def coerce_style(cls, value):
        return value if isinstance(value, (dict, str, TemplateStyle)) else None

    @field_validator("position", mode="before")
    @classmethod
    def coerce_position(cls, value):
        return value if isinstance(value, (dict, Position)) else None

    @field_validator("style_name", "element_type", "icon", mode="before")
    @classmethod
    def coerce_string(cls, value):
        return _str_or_none(value)

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, value):
        return _text_or_none(value)

    @field_validator("x", "y", mode="before")
    @classmethod
    def coerce_coordinate(cls, value):
        return _number_or_none(value)

    @property
    def style_object(self) -> Optional[TemplateStyle]:
        """Inline style, when the template gives one."""
        return self.style if isinstance(self.style, TemplateStyle) else None

    @property
    def label(self) -> str:
        """Human readable name for the slot."""
        if self.type == "text":
            name = self.style_name or (self.style if isinstance(self.style, str) else None)
            return f"{name} text" if name else "text"
        return self.element_type or (self.style if isinstance(self.style, str) else None) or "element"


class TemplateLayout(BaseModel):
    """Background and element slots of a template."""
    background: Optional[str] = None
    elements: List[TemplateElementSpec] = Field(default_factory=list)

    @field_validator("background", mode="before")
    @classmethod
    def coerce_background(cls, value):
        return _str_or_none(value)

    @field_validator("elements", mode="before")
    @classmethod
    def coerce_elements(cls, value):
        """Validate slots one by one, skipping the malformed ones."""
        if not isinstance(value, (list, tuple)):
            return []
        specs = []
        for index, item in enumerate(value):
            if isinstance(item, TemplateElementSpec):
                specs.append(item)
                continue
            try:
                specs.append(TemplateElementSpec.model_validate(item))
            except ValidationError as e:
                logger.warning(f"[CANVAS-MODELS] Skipping malformed template slot #{index}: {e.error_count()} errors")
        return specs


class Template(BaseModel):
    """A poster template selected by the user."""
    id: Optional[ElementId] = None
    name: Optional[str] = None
    color_palette: List[str] = Field(default_factory=list, alias="colorPalette")
    layout: TemplateLayout = Field(default_factory=TemplateLayout)
    style_tags: List[str] = Field(default_factory=list, alias="styleTags")
    poster_types: List[str] = Field(default_factory=list, alias="posterTypes")
    description: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return _element_id(value)

    @field_validator("name", "description", mode="before")
    @classmethod
    def coerce_string(cls, value):
        return _str_or_none(value)

    @field_validator("color_palette", "style_tags", "poster_types", mode="before")
    @classmethod
    def coerce_strings(cls, value):
        return _string_list(value)

    @field_validator("layout", mode="before")
    @classmethod
    def coerce_layout(cls, value):
        return value if isinstance(value, (dict, TemplateLayout)) else {}


class CanvasElement(BaseModel):
    """An element placed on the canvas."""
    id: Optional[ElementId] = None
    type: str = "text"
    x: Optional[float] = None
    y: Optional[float] = None

    # Text elements
    content: Optional[str] = None
    style: Optional[str] = None
    font: Optional[str] = None
    font_size: Optional[float] = Field(default=None, alias="fontSize")
    font_weight: Optional[Union[int, str]] = Field(default=None, alias="fontWeight")
    color: Optional[str] = None
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    text_align: Optional[str] = Field(default=None, alias="textAlign")
    line_height: Optional[Union[float, str]] = Field(default=None, alias="lineHeight")

    # Decorative elements
    element_type: Optional[str] = Field(default=None, alias="elementType")
    icon: Optional[str] = None
    height: Optional[float] = None

    class Config:
        populate_by_name = True

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return _element_id(value)

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value):
        return value if isinstance(value, str) else "text"

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, value):
        return _text_or_none(value)

    @field_validator("style", "font", "color", "background_color", "text_align",
                     "element_type", "icon", mode="before")
    @classmethod
    def coerce_string(cls, value):
        return _str_or_none(value)

    @field_validator("x", "y", "font_size", "height", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return _number_or_none(value)

    @field_validator("font_weight", mode="before")
    @classmethod
    def coerce_weight(cls, value):
        return _weight_or_none(value)

    @field_validator("line_height", mode="before")
    @classmethod
    def coerce_line_height(cls, value):
        if isinstance(value, bool):
            return None
        return value if isinstance(value, (int, float, str)) else None

    @property
    def is_text(self) -> bool:
        return self.type == "text"

    @property
    def is_bold(self) -> bool:
        """Font weight of 700 or more, or a bold keyword."""
        weight = self.font_weight
        if isinstance(weight, str):
            if weight.strip().lower() in ("bold", "bolder"):
                return True
            try:
                weight = float(weight)
            except ValueError:
                return False
        return weight is not None and weight >= 700
