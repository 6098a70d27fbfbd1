import pytest

from design_ladder.feedback.normalizer import (
    color_in,
    colors_match,
    normalize_color_name,
    normalize_font,
    unique_fonts,
)


@pytest.mark.parametrize("font, expected", [
    ("Times New Roman", "timesnewroman"),
    ("'Open Sans', sans-serif", "opensans"),
    ('"Fira-Code"', "firacode"),
    ("  Arial  ", "arial"),
    ("", ""),
    (None, ""),
    (42, ""),
])
def test_normalize_font(font, expected):
    assert normalize_font(font) == expected


def test_normalize_color_name():
    assert normalize_color_name("Red-Orange") == "redorange"
    assert normalize_color_name(" Forest Green ") == "forestgreen"
    assert normalize_color_name(None) == ""


def test_colors_match_by_name_or_hex():
    assert colors_match("#0000ff", "Blue")
    assert colors_match("blue", "BLUE")
    assert colors_match("#00F", "#0000ff")
    assert not colors_match("#ff0000", "Blue")


def test_unnamed_hex_matches_through_its_approximate_name():
    assert colors_match("#0000fe", "Blue")


def test_unknown_names_match_only_themselves():
    assert colors_match("Sunset", "sunset")
    assert not colors_match("Sunset", "Dawn")


def test_color_in():
    assert color_in("#000080", ["Red", "Navy"])
    assert not color_in("#000080", [])


def test_unique_fonts_keeps_first_spelling():
    assert unique_fonts(["Open Sans", "open-sans", "Arial", "Open Sans"]) == ["Open Sans", "Arial"]
