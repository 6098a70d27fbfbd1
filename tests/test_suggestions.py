from design_ladder.feedback.suggestions import contrast_options, generate_suggestions
from design_ladder.models.canvas_models import CanvasElement, Template
from design_ladder.models.suggestion_models import (
    ContrastGroupSuggestion,
    MissingElementSuggestion,
    SpacingGroupSuggestion,
)


def text(id, **kwargs):
    return CanvasElement(id=id, type="text", **kwargs)


def by_type(suggestions, kind):
    return [s for s in suggestions if s.type == kind]


def test_complete_canvas_has_no_suggestions(template, complete_canvas):
    assert generate_suggestions(template, complete_canvas, ["Georgia", "Cambria"], ["Navy", "Burgundy"]) == []


def test_missing_template_element(template, complete_canvas):
    canvas = [e for e in complete_canvas if e.id != "title-1"]
    suggestions = generate_suggestions(template, canvas, ["Georgia"], ["Navy", "Burgundy"])
    missing = by_type(suggestions, "missing-element")
    assert len(missing) == 1
    assert isinstance(missing[0], MissingElementSuggestion)
    assert missing[0].element_id == "title-1"
    assert missing[0].priority == "high"
    assert missing[0].style_name == "title"
    assert suggestions[0] is missing[0]


def test_font_group_offers_up_to_five_other_fonts():
    fonts = ["Georgia", "Cambria", "Lato", "Roboto", "Arial", "Garamond", "Palatino"]
    suggestions = generate_suggestions(None, [text("a", font="Comic Sans MS")], fonts, [])
    font = by_type(suggestions, "font-group")[0]
    assert font.current_value == "Comic Sans MS"
    assert font.options == fonts[:5]


def test_font_group_skipped_when_font_matches_or_no_fonts():
    assert by_type(generate_suggestions(None, [text("a", font="georgia")], ["Georgia"], []), "font-group") == []
    assert by_type(generate_suggestions(None, [text("a", font="Impact")], [], []), "font-group") == []


def test_text_color_matching_palette_by_hex_name():
    suggestions = generate_suggestions(None, [text("a", color="#0000ff")], [], ["Blue"])
    assert by_type(suggestions, "text-color-group") == []


def test_text_color_group_lists_all_palette_colors():
    suggestions = generate_suggestions(None, [text("a", color="#ff0000")], [], ["Blue", "Navy", "Sunset"])
    color = by_type(suggestions, "text-color-group")[0]
    assert color.current_name == "Red"
    assert [(o.name, o.hex) for o in color.options] == [("Blue", "#0000ff"), ("Navy", "#000080")]


def test_black_text_and_white_background_are_never_flagged():
    element = text("a", color="#000000", backgroundColor="#ffffff")
    suggestions = generate_suggestions(None, [element], [], ["Blue"])
    assert by_type(suggestions, "text-color-group") == []
    assert by_type(suggestions, "background-color-group") == []


def test_background_color_group():
    element = text("a", color="#000000", backgroundColor="#ffa500")
    suggestions = generate_suggestions(None, [element], [], ["Blue"])
    background = by_type(suggestions, "background-color-group")[0]
    assert background.current_value == "#ffa500"
    assert background.options[0].hex == "#0000ff"


def test_contrast_group_prefers_template_colors():
    element = text("a", color="#777777", backgroundColor="#888888", fontSize=16)
    suggestions = generate_suggestions(None, [element], [], ["Yellow", "Navy"])
    contrast = by_type(suggestions, "contrast-group")[0]
    assert isinstance(contrast, ContrastGroupSuggestion)
    assert contrast.min_required == 4.5
    assert contrast.contrast_ratio < 4.5
    assert contrast.options[0].hex == "#000080"
    assert [o.hex for o in contrast.options] == ["#000080", "#000000"]
    assert all(o.ratio >= 4.5 for o in contrast.options)


def test_contrast_options_order_scheme_template_fallback():
    options = contrast_options("#ffffff", 4.5, ["Navy"], ["Burgundy", "Navy"])
    assert [o.name for o in options] == ["Navy", "Burgundy", "Black"]


def test_contrast_options_truncate():
    options = contrast_options("#ffffff", 3.0, ["Navy", "Blue", "Red"], ["Green", "Purple", "Teal"], limit=5)
    assert len(options) == 5


def test_contrast_options_empty_when_nothing_passes():
    # mid gray: neither black nor white reach 7:1
    assert contrast_options("#777777", 7.0, [], []) == []


def test_scheme_suggestions_need_a_scheme():
    element = text("a", color="#ff0000", backgroundColor="#008000", fontSize=32)
    suggestions = generate_suggestions(None, [element], [], [], scheme_colors=[])
    assert by_type(suggestions, "color-scheme-group") == []
    assert by_type(suggestions, "color-scheme-bg-group") == []


def test_scheme_suggestions_when_contrast_is_adequate():
    element = text("a", color="#ffff00", backgroundColor="#000080", fontSize=16)
    suggestions = generate_suggestions(None, [element], [], [], scheme_colors=["White", "Purple"])
    text_card = by_type(suggestions, "color-scheme-group")[0]
    assert [o.name for o in text_card.options] == ["White"]
    bg_card = by_type(suggestions, "color-scheme-bg-group")[0]
    assert [o.name for o in bg_card.options] == ["Purple"]
    assert text_card.priority == "low"


def test_scheme_suggestions_never_compete_with_contrast_fix():
    element = text("a", color="#777777", backgroundColor="#888888", fontSize=16)
    suggestions = generate_suggestions(None, [element], [], [], scheme_colors=["Navy"])
    assert len(by_type(suggestions, "contrast-group")) == 1
    assert by_type(suggestions, "color-scheme-group") == []
    assert by_type(suggestions, "color-scheme-bg-group") == []


def test_spacing_card_attached_to_upper_element():
    canvas = [text("b", y=110, fontSize=24), text("a", y=100, fontSize=24)]
    spacing = by_type(generate_suggestions(None, canvas, [], []), "spacing-group")
    assert len(spacing) == 1
    card = spacing[0]
    assert isinstance(card, SpacingGroupSuggestion)
    assert card.element_id == "a"
    assert card.other_element_id == "b"
    assert card.overlapping is True
    assert "Overlapping" in card.message


def test_spacing_card_too_close_wording():
    canvas = [text("a", y=100, fontSize=24), text("b", y=146, fontSize=24)]
    card = by_type(generate_suggestions(None, canvas, [], []), "spacing-group")[0]
    assert card.overlapping is False
    assert card.message.startswith("Too close")
    assert card.priority == "medium"


def test_missing_elements_come_before_element_cards():
    template = Template.model_validate({"layout": {"elements": [{"id": "gone", "type": "element"}]}})
    suggestions = generate_suggestions(template, [text("a", font="Impact")], ["Arial"], [])
    assert [s.type for s in suggestions] == ["missing-element", "font-group"]


def test_elements_without_ids_get_positional_ids():
    canvas = [
        CanvasElement(type="text", font="Comic Sans", y=0, fontSize=24),
        CanvasElement(type="text", y=10),
    ]
    suggestions = generate_suggestions(None, canvas, ["Georgia"], [])
    assert by_type(suggestions, "font-group")[0].element_id == "element-0"
    spacing = by_type(suggestions, "spacing-group")[0]
    assert (spacing.element_id, spacing.other_element_id) == ("element-0", "element-1")


def test_unparseable_background_gets_no_scheme_card():
    element = text("a", color="#000000", backgroundColor="rgb(1,2,3)", fontSize=16)
    suggestions = generate_suggestions(None, [element], [], [], scheme_colors=["White"])
    assert by_type(suggestions, "color-scheme-bg-group") == []
