"""
Feedback Routes
===============

API routes exposing the design feedback engine to the editor.

Templates and elements are accepted as raw objects and validated by the
engine itself, so a malformed element degrades the feedback instead of
rejecting the whole request.
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, Field

from ..feedback.accessibility import check_font_size, check_line_height
from ..feedback.engine import coerce_elements, compute_design_feedback
from ..feedback.suggestion_key import suggestion_key
from ..models.config_models import FeedbackConfig
from ..models.feedback_models import DesignFeedback

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/feedback", tags=["feedback"])

# Injected by server
feedback_config: Optional[FeedbackConfig] = None


def get_feedback_config() -> FeedbackConfig:
    """Dependency to get the engine config."""
    if feedback_config is None:
        raise HTTPException(500, "Feedback config not initialized")
    return feedback_config


class FeedbackRequest(BaseModel):
    """Current editor state to score."""
    template: Optional[Dict[str, Any]] = None
    elements: List[Dict[str, Any]] = Field(default_factory=list)
    canvas_background: Optional[str] = Field(default=None, alias="canvasBackground")
    selected_scheme_colors: List[str] = Field(default_factory=list, alias="selectedSchemeColors")
    suggested_fonts: List[str] = Field(default_factory=list, alias="suggestedFonts")
    suggested_colors: List[str] = Field(default_factory=list, alias="suggestedColors")
    poster_type: Optional[str] = Field(default=None, alias="posterType")
    topics: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class ReadabilityRequest(BaseModel):
    elements: List[Dict[str, Any]] = Field(default_factory=list)


class ElementReadability(BaseModel):
    """Font size and line height checks for one text element."""
    element_id: Any = Field(alias="elementId")
    font_size: Dict[str, Any] = Field(alias="fontSize")
    line_height: Dict[str, Any] = Field(alias="lineHeight")

    class Config:
        populate_by_name = True


@router.post("", response_model=DesignFeedback)
async def get_feedback(
    request: FeedbackRequest,
    config: FeedbackConfig = Depends(get_feedback_config)
) -> DesignFeedback:
    """Score the canvas and return suggestions and tips."""
    logger.info(f"[FEEDBACK-API] Feedback requested for {len(request.elements)} elements")
    return compute_design_feedback(
        request.template,
        request.elements,
        request.canvas_background,
        request.selected_scheme_colors,
        suggested_font_list=request.suggested_fonts,
        suggested_color_list=request.suggested_colors,
        poster_type=request.poster_type,
        topics=request.topics,
        config=config,
    )


@router.post("/suggestion-key")
async def get_suggestion_key(suggestion: Dict[str, Any]):
    """Stable key used by the editor to remember ignored suggestions."""
    return {"key": suggestion_key(suggestion)}


@router.post("/readability", response_model=List[ElementReadability])
async def get_readability(request: ReadabilityRequest) -> List[ElementReadability]:
    """WCAG font size and line height checks for each text element."""
    results = []
    for element in coerce_elements(request.elements):
        if not element.is_text:
            continue
        results.append(ElementReadability(
            element_id=element.id,
            font_size=check_font_size(element.font_size, element.style),
            line_height=check_line_height(element.font_size, element.line_height),
        ))
    return results
