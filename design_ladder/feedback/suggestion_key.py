"""
Stable Suggestion Key
=====================

Deterministic identity for a suggestion card, built only from the card's
content so that ignore/restore state in the editor survives recomputation
and reordering. Two cards whose discriminating fields are all equal share
a key.
"""

import math
import re
from typing import Any, Mapping, Union

from pydantic import BaseModel

_WS_RE = re.compile(r"\s+")


def _number(value: float) -> str:
    """Format like a JavaScript number: no trailing ``.0``."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def _round(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _get(data: Mapping[str, Any], name: str, alias: str):
    value = data.get(name)
    return data.get(alias) if value is None else value


def suggestion_key(suggestion: Union[BaseModel, Mapping[str, Any], None]) -> str:
    """
    Key built from, in order: element id, type, current value, background,
    contrast ratio, other element id, spacing and a message fragment.
    """
    if suggestion is None:
        return "unknown"
    data = suggestion.model_dump() if isinstance(suggestion, BaseModel) else dict(suggestion)

    element_id = _get(data, "element_id", "elementId")
    parts = [
        str(element_id) if element_id not in (None, "") else "unknown",
        str(data.get("type") or "unknown"),
    ]

    current = _get(data, "current_value", "currentValue")
    if current:
        value = str(current).lower().strip()
        parts.append(value[:7] if value.startswith("#") else _WS_RE.sub("-", value[:20]))

    background = _get(data, "background_color", "backgroundColor")
    if background:
        value = str(background).lower().strip()
        parts.append(value[:7] if value.startswith("#") else value[:10])

    ratio = _get(data, "contrast_ratio", "contrastRatio")
    if isinstance(ratio, (int, float)):
        parts.append(f"cr{_number(_round(ratio, 1))}")

    other = _get(data, "other_element_id", "otherElementId")
    if other not in (None, ""):
        parts.append(str(other))

    spacing = data.get("spacing")
    if isinstance(spacing, (int, float)):
        parts.append(f"sp{_number(_round(spacing))}")

    message = data.get("message")
    if message and len(parts) < 4:
        parts.append(_WS_RE.sub("-", str(message).lower())[:30])

    return "-".join(parts)
