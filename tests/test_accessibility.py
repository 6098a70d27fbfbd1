import pytest

from design_ladder.feedback.accessibility import (
    check_contrast_wcag,
    check_font_size,
    check_line_height,
    is_large_text,
)


def test_large_text_threshold():
    assert is_large_text(18)
    assert is_large_text(14, bold=True)
    assert not is_large_text(14)
    assert not is_large_text(None)


def test_check_contrast_wcag():
    result = check_contrast_wcag("#777777", "#ffffff", 16)
    assert result["passes"] is False
    assert result["ratio"] == 4.5
    assert result["required_ratio"] == 4.5
    assert result["level"] == "AA (Standard)"

    large = check_contrast_wcag("#777777", "#ffffff", 24)
    assert large["passes"] is True
    assert large["level"] == "AA (Large Text)"


@pytest.mark.parametrize("size, style, passes", [
    (16, "body", True),
    (14, "body", False),
    (20, "title", False),
    (18, "heading", True),
    (None, "body", True),
])
def test_check_font_size(size, style, passes):
    assert check_font_size(size, style)["passes"] is passes


@pytest.mark.parametrize("line_height, ratio", [
    (1.5, 1.5),
    ("1.2", 1.2),
    ("30px", 1.5),
    ("24px", 1.2),
    (None, 1.5),
])
def test_check_line_height_formats(line_height, ratio):
    assert check_line_height(20, line_height)["current_ratio"] == pytest.approx(ratio)


def test_check_line_height_without_font_size():
    assert check_line_height(None, 1.0)["passes"] is True
