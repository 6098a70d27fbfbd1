import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from design_ladder.api import feedback_routes
from design_ladder.server import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["config_loaded"] is True


def test_info_lists_weights_and_types(client):
    data = client.get("/api/info").json()
    assert data["weights"]["required_sections"] == 0.25
    assert "contrast-group" in data["suggestion_types"]
    assert {"name": "Blue", "hex": "#0000ff"} in data["colors"]


def test_feedback_uses_camel_case(client, template_dict):
    body = {
        "template": template_dict,
        "elements": [
            {"id": "title-1", "type": "text", "style": "title", "x": 100, "y": 60,
             "font": "Georgia", "fontSize": 48, "color": "#777777", "backgroundColor": "#888888"},
        ],
        "canvasBackground": "#ffffff",
        "selectedSchemeColors": ["White"],
    }
    response = client.post("/api/feedback", json=body)
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["score"] <= 100
    assert set(data) >= {"score", "fonts", "colors", "tips", "elementSuggestions", "usedFonts", "usedColors"}
    kinds = [s["type"] for s in data["elementSuggestions"]]
    assert kinds.count("missing-element") == 3
    contrast = next(s for s in data["elementSuggestions"] if s["type"] == "contrast-group")
    assert contrast["elementId"] == "title-1"
    assert contrast["minRequired"] == 3.0
    assert contrast["options"][0]["name"] == "White"


def test_feedback_without_template(client):
    data = client.post("/api/feedback", json={"elements": []}).json()
    assert data["score"] == 0
    assert data["tips"] == ["Select a template to get started"]


def test_suggestion_key_endpoint(client):
    suggestion = {"elementId": "a", "type": "spacing-group", "otherElementId": "b", "spacing": 12.4}
    response = client.post("/api/feedback/suggestion-key", json=suggestion)
    assert response.json() == {"key": "a-spacing-group-b-sp12"}


def test_readability_endpoint(client):
    body = {"elements": [
        {"id": "t", "type": "text", "style": "title", "fontSize": 20, "lineHeight": "24px"},
        {"id": "e", "type": "element"},
    ]}
    data = client.post("/api/feedback/readability", json=body).json()
    assert len(data) == 1
    assert data[0]["elementId"] == "t"
    assert data[0]["fontSize"]["passes"] is False
    assert data[0]["lineHeight"]["current_ratio"] == pytest.approx(1.2)


def test_config_dependency_requires_injection(monkeypatch):
    monkeypatch.setattr(feedback_routes, "feedback_config", None)
    with pytest.raises(HTTPException):
        feedback_routes.get_feedback_config()
