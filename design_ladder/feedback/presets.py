"""
Wizard presets: fonts, colors and advice driven by the poster type and
topics the user picked before choosing a template.
"""

from typing import Dict, List, Optional, Sequence

BASE_FONTS = ["Cambria", "Ubuntu", "TimesNewRoman", "Arial", "Helvetica", "Georgia"]
BASE_COLORS = ["Pink", "Purple", "Blue", "Yellow", "Green", "Orange"]

POSTER_TYPE_PRESETS: Dict[str, Dict[str, List[str]]] = {
    "RESEARCH/ACADEMIC POSTER": {
        "fonts": ["Cambria", "TimesNewRoman", "Georgia", "Palatino", "Garamond"],
        "colors": ["Blue", "Navy", "Dark Gray", "Burgundy", "Forest Green"],
        "tips": ["Focus on readability and clear hierarchy", "Use serif fonts for academic content"],
    },
    "SOCIAL EVENT POSTER": {
        "fonts": ["Ubuntu", "Arial", "Helvetica", "Roboto", "Open Sans"],
        "colors": ["Pink", "Purple", "Blue", "Yellow", "Orange", "Red"],
        "tips": ["Use bold colors and clear fonts", "Make event details prominent"],
    },
    "ORGANIZATIONAL": {
        "fonts": ["Arial", "Helvetica", "Roboto", "Lato", "Montserrat"],
        "colors": ["Blue", "Navy", "Gray", "Green"],
        "tips": ["Maintain professional appearance", "Use organizational colors"],
    },
}

TOPIC_PRESETS: Dict[str, Dict[str, List[str]]] = {
    "HACKATHON": {
        "fonts": ["Ubuntu", "Roboto", "Arial", "Open Sans", "Fira Code"],
        "colors": ["Blue", "Purple", "Green", "Orange", "Teal"],
        "tips": ["Tech-focused design with modern fonts"],
    },
    "FUNDRAISER": {
        "colors": ["Red", "Pink", "Purple", "Blue", "Yellow"],
        "tips": ["Use warm, inviting colors"],
    },
}


def _preset_key(value: Optional[str]) -> str:
    return (value or "").strip().upper()


def poster_type_tips(poster_type: Optional[str]) -> List[str]:
    preset = POSTER_TYPE_PRESETS.get(_preset_key(poster_type))
    return list(preset["tips"]) if preset else []


def baseline_suggestions(poster_type: Optional[str] = None,
                         topics: Optional[Sequence[str]] = None,
                         colors: Optional[Sequence[str]] = None) -> Dict[str, List[str]]:
    """
    Fonts, colors and tips from the wizard answers alone.

    Topic presets override the poster type's fonts/colors. The organizational
    preset keeps the user's own scheme colors when they picked any.
    """
    fonts = list(BASE_FONTS)
    palette = list(BASE_COLORS)
    tips: List[str] = []

    key = _preset_key(poster_type)
    preset = POSTER_TYPE_PRESETS.get(key)
    if preset:
        fonts = list(preset["fonts"])
        palette = list(colors) if key == "ORGANIZATIONAL" and colors else list(preset["colors"])
        tips.extend(preset["tips"])

    topic_keys = {_preset_key(t) for t in (topics or [])}
    for topic, topic_preset in TOPIC_PRESETS.items():
        if topic in topic_keys:
            fonts = list(topic_preset.get("fonts", fonts))
            palette = list(topic_preset.get("colors", palette))
            tips.extend(topic_preset["tips"])

    return {"fonts": fonts[:5], "colors": palette[:6], "tips": tips}
