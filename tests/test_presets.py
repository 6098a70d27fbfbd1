from design_ladder.feedback.presets import baseline_suggestions, poster_type_tips


def test_defaults_without_answers():
    result = baseline_suggestions()
    assert result["fonts"] == ["Cambria", "Ubuntu", "TimesNewRoman", "Arial", "Helvetica"]
    assert result["colors"] == ["Pink", "Purple", "Blue", "Yellow", "Green", "Orange"]
    assert result["tips"] == []


def test_academic_poster():
    result = baseline_suggestions("Research/Academic Poster")
    assert result["fonts"][0] == "Cambria"
    assert "Burgundy" in result["colors"]
    assert result["tips"] == ["Focus on readability and clear hierarchy", "Use serif fonts for academic content"]


def test_organizational_keeps_user_colors():
    assert baseline_suggestions("ORGANIZATIONAL", [], ["Red", "Blue"])["colors"] == ["Red", "Blue"]
    assert baseline_suggestions("ORGANIZATIONAL")["colors"] == ["Blue", "Navy", "Gray", "Green"]


def test_topics_override_poster_type():
    result = baseline_suggestions("SOCIAL EVENT POSTER", ["hackathon", "FUNDRAISER"])
    assert result["fonts"] == ["Ubuntu", "Roboto", "Arial", "Open Sans", "Fira Code"]
    assert result["colors"] == ["Red", "Pink", "Purple", "Blue", "Yellow"]
    assert result["tips"][-2:] == ["Tech-focused design with modern fonts", "Use warm, inviting colors"]


def test_poster_type_tips_unknown():
    assert poster_type_tips("FLYER") == []
    assert poster_type_tips(None) == []
