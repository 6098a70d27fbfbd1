from design_ladder.feedback.template_features import (
    display_fonts,
    extract_colors,
    extract_fonts,
    suggested_colors,
    suggested_fonts,
)
from design_ladder.models.canvas_models import Template


def test_extract_fonts_first_seen_order(template):
    assert extract_fonts(template) == ["Georgia", "Cambria, serif"]


def test_extract_fonts_ignores_non_text_and_style_names():
    template = Template.model_validate({
        "layout": {"elements": [
            {"id": "a", "type": "element", "style": {"fontFamily": "Impact"}},
            {"id": "b", "type": "text", "style": "title"},
        ]}
    })
    assert extract_fonts(template) == []
    assert display_fonts(extract_fonts(template)) == ["Arial"]


def test_extract_colors_palette_first_then_element_colors(template):
    # white background and black body fill are left out
    assert extract_colors(template) == ["Navy", "Burgundy", "Dark Gray"]


def test_extract_colors_includes_colored_background_and_element_backgrounds():
    template = Template.model_validate({
        "layout": {
            "background": "#ffa500",
            "elements": [
                {"id": "t", "type": "text", "style": {"fill": "#ffffff", "backgroundColor": "#008080"}},
                {"id": "u", "type": "text", "style": {"fill": "#000000", "backgroundColor": "transparent"}},
            ],
        }
    })
    assert extract_colors(template) == ["Orange", "White", "Teal"]


def test_missing_template_has_no_features():
    assert extract_fonts(None) == []
    assert extract_colors(None) == []


def test_suggested_sets_merge_caller_values(template):
    assert suggested_fonts(template, ["georgia", "Lato"]) == ["Georgia", "Cambria, serif", "Lato"]
    assert suggested_colors(template, ["navy", "Gold"]) == ["Navy", "Burgundy", "Dark Gray", "Gold"]
