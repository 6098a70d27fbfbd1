import pytest

from design_ladder.models.canvas_models import CanvasElement, Template


@pytest.fixture
def template_dict():
    return {
        "id": 3,
        "name": "Academic Classic",
        "colorPalette": ["Navy", "Burgundy"],
        "styleTags": ["Elegant", "Academic"],
        "posterTypes": ["RESEARCH/ACADEMIC POSTER"],
        "description": "A calm, serif-led layout for research findings.",
        "layout": {
            "background": "#ffffff",
            "elements": [
                {
                    "id": "title-1",
                    "type": "text",
                    "style": {"fontFamily": "Georgia", "fontSize": 48, "fontWeight": 700, "fill": "#000080"},
                    "styleName": "title",
                    "position": {"x": 100, "y": 60},
                },
                {
                    "id": "subtitle-1",
                    "type": "text",
                    "style": {"fontFamily": "Georgia", "fontSize": 28, "fill": "#333333"},
                    "styleName": "subtitle",
                    "position": {"x": 100, "y": 160},
                },
                {
                    "id": "body-1",
                    "type": "text",
                    "style": {"fontFamily": "Cambria, serif", "fontSize": 18, "fill": "#000000"},
                    "styleName": "body",
                    "position": {"x": 100, "y": 260},
                },
                {
                    "id": "icon-1",
                    "type": "element",
                    "elementType": "chart",
                    "icon": "📊",
                    "x": 400,
                    "y": 500,
                },
            ],
        },
    }


@pytest.fixture
def template(template_dict):
    return Template.model_validate(template_dict)


@pytest.fixture
def complete_canvas():
    """Canvas that fills every slot of ``template`` with on-palette styling."""
    return [
        CanvasElement(id="title-1", type="text", content="Findings", style="title",
                      x=100, y=60, font="Georgia", fontSize=48, fontWeight=700, color="#000080"),
        CanvasElement(id="subtitle-1", type="text", content="A study", style="subtitle",
                      x=100, y=160, font="Georgia", fontSize=28, color="#000080"),
        CanvasElement(id="body-1", type="text", content="Results were good", style="body",
                      x=100, y=260, font="Cambria", fontSize=18, color="#800020"),
        CanvasElement(id="icon-1", type="element", elementType="chart", icon="📊", x=400, y=500),
    ]
