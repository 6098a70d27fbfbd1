"""
WCAG 2.1 text accessibility checks.

Contrast (1.4.3), minimum font size (1.4.4) and line height (1.4.12) for
individual text elements.
"""

from typing import Any, Dict, Optional, Union

from .color_model import contrast_ratio

AA_NORMAL_RATIO = 4.5
AA_LARGE_RATIO = 3.0

MIN_FONT_SIZES = {
    "body": 16,
    "heading": 18,
    "subtitle": 18,
    "title": 24,
}

RECOMMENDED_LINE_HEIGHT = 1.5


def is_large_text(font_size: Optional[float], bold: bool = False) -> bool:
    """18px and up, or 14px and up when bold."""
    size = font_size or 0
    return size >= 18 or (size >= 14 and bold)


def required_ratio(font_size: Optional[float], bold: bool = False) -> float:
    return AA_LARGE_RATIO if is_large_text(font_size, bold) else AA_NORMAL_RATIO


def round_ratio(ratio: float) -> float:
    return int(ratio * 10 + 0.5) / 10


def check_contrast_wcag(text_color: str, background_color: str,
                        font_size: Optional[float], bold: bool = False) -> Dict[str, Any]:
    """Check a text/background pair against WCAG AA."""
    ratio = contrast_ratio(text_color, background_color)
    large = is_large_text(font_size, bold)
    required = AA_LARGE_RATIO if large else AA_NORMAL_RATIO
    return {
        "passes": ratio >= required,
        "ratio": round_ratio(ratio),
        "required_ratio": required,
        "level": "AA (Large Text)" if large else "AA (Standard)",
        "rationale": (
            f"WCAG 1.4.3 requires {required}:1 contrast for "
            f"{'large text' if large else 'standard text'}. Low contrast makes content "
            "hard to read, especially for users with visual impairments."
        ),
    }


def check_font_size(font_size: Optional[float], style: Optional[str] = "body") -> Dict[str, Any]:
    """Check a font size in px against the minimum for its text style."""
    min_size = MIN_FONT_SIZES.get(style or "body", MIN_FONT_SIZES["body"])
    size = font_size or 16
    return {
        "passes": size >= min_size,
        "current_size": size,
        "min_size": min_size,
        "rationale": (
            f"WCAG 1.4.4 requires text to be readable when zoomed. Font sizes below "
            f"{min_size}px reduce readability, especially when viewed from a distance."
        ),
    }


def check_line_height(font_size: Optional[float], line_height: Union[float, str, None]) -> Dict[str, Any]:
    """
    Check line height against the recommended 1.5x.

    ``line_height`` may be a ratio (``1.5`` or ``"1.5"``) or a pixel
    value (``"24px"``). Missing values are assumed to be the recommended ratio.
    """
    if not font_size:
        return {"passes": True, "current_ratio": None, "recommended": RECOMMENDED_LINE_HEIGHT}

    ratio = _line_height_ratio(font_size, line_height)
    return {
        "passes": ratio >= RECOMMENDED_LINE_HEIGHT,
        "current_ratio": ratio,
        "recommended": RECOMMENDED_LINE_HEIGHT,
        "rationale": (
            "WCAG 1.4.12 recommends line height of 1.5x font size. Adequate spacing "
            "improves readability and makes text easier to scan, reducing eye strain."
        ),
    }


def _line_height_ratio(font_size: float, line_height: Union[float, str, None]) -> float:
    if line_height is None:
        return RECOMMENDED_LINE_HEIGHT
    if isinstance(line_height, str):
        text = line_height.strip().lower()
        try:
            if text.endswith("px"):
                return float(text[:-2]) / font_size
            return float(text)
        except ValueError:
            return RECOMMENDED_LINE_HEIGHT
    return float(line_height)
