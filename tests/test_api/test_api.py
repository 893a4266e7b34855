"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from intentlens.dependencies import get_intent_lens
from intentlens.main import app
from intentlens.models.annotations import AnnotationError
from tests.conftest import BENCH_CIRCLE, SIDEWALK_RECT, SKY_RECT, V2_NAMES


client = TestClient(app)


def _post(annotations, image_name="v2_with_bench.jpg", **canvas):
    body = {"annotations": annotations, "imageName": image_name}
    body.update(canvas)
    return client.post("/api/intent-lens", json=body)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["imagesRegistered"] == 2


def test_empty_batch():
    response = _post([], canvasWidth=800, canvasHeight=600)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["output"] == {
        "intents": [],
        "overallSummary": "No annotations provided",
        "isMinorOverall": True,
    }
    assert [t["status"] for t in data["traces"]] == ["started", "completed"]
    assert data["traces"][-1]["message"] == "No annotations to analyze"


def test_batch_with_critical_region():
    response = _post([SKY_RECT, SIDEWALK_RECT, BENCH_CIRCLE], canvasWidth=1024, canvasHeight=768)
    assert response.status_code == 200
    data = response.json()
    output = data["output"]
    assert output["isMinorOverall"] is False
    bench = output["intents"][2]
    assert bench["region"] == "bench_people"
    assert bench["importance"] == "critical"
    assert bench["isMinorChange"] is False
    assert bench["action"] == "circled"
    done = data["traces"][-1]
    assert done["status"] == "completed"
    assert done["agent"] == "IntentLens"
    assert done["data"] == {
        "regions": ["sky and clouds", "sidewalk and pavement", "people sitting on bench"],
        "isMinor": False,
    }
    assert data["processingTimeMs"] >= 0


def test_legacy_tags_and_default_canvas():
    annotations = [
        {"type": "rect", "x": 10, "y": 10, "width": 20, "height": 20},
        {"type": "line", "x": 0, "y": 0, "points": [100, 100, 200, 150]},
    ]
    response = _post(annotations)
    assert response.status_code == 200
    intents = response.json()["output"]["intents"]
    assert len(intents) == 2
    assert intents[0]["action"] == "highlighted an area"
    assert intents[1]["action"] == "drew attention to"


def test_annotator_arrow_payload():
    arrow = {"id": "ann-1", "type": "arrow", "x": 10, "y": 10, "points": [10, 10, 200, 150], "color": "#ef4444"}
    response = _post([arrow], canvasWidth=1024, canvasHeight=768)
    assert response.status_code == 200
    intent = response.json()["output"]["intents"][0]
    assert intent["action"] == "drew attention to"
    # Envelope (10, 10, 200, 150) overlaps trees_left and sky only
    assert intent["region"] == "trees_left"


def test_unknown_image_falls_back():
    response = _post([BENCH_CIRCLE], image_name="upload_123.png", canvasWidth=1024, canvasHeight=768)
    assert response.status_code == 200
    data = response.json()
    assert data["imageName"] == "v2_with_bench.jpg"
    assert all(i["region"] in V2_NAMES for i in data["output"]["intents"])


def test_short_polyline_rejected():
    response = _post([{"type": "polyline", "x": 0, "y": 0, "points": [1, 2]}])
    assert response.status_code == 422


def test_unknown_annotation_type_rejected():
    response = _post([{"type": "freehand", "x": 0, "y": 0}])
    assert response.status_code == 422


def test_non_positive_canvas_rejected():
    response = _post([SKY_RECT], canvasWidth=0, canvasHeight=600)
    assert response.status_code == 422


def test_engine_error_reported_with_trace():
    class _FailingLens:
        class catalog:
            @staticmethod
            def resolve_name(name):
                return name

        def analyze_batch(self, *args):
            raise AnnotationError("bad annotation")

    app.dependency_overrides[get_intent_lens] = lambda: _FailingLens()
    try:
        response = _post([SKY_RECT])
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "bad annotation"
    assert data["output"] is None
    assert data["traces"][-1]["status"] == "error"


def test_single_annotation():
    response = client.post(
        "/api/intent-lens/annotation",
        json={"annotation": SKY_RECT, "imageName": "v2_with_bench.jpg", "canvasWidth": 1024, "canvasHeight": 768},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["output"]["region"] == "sky"
    assert data["output"]["isMinorChange"] is True
    assert data["traces"][-1]["data"] == {"regions": ["sky and clouds"], "isMinor": True}


def test_list_images():
    response = client.get("/api/intent-lens/images")
    assert response.status_code == 200
    data = response.json()
    assert data["images"] == ["v2_with_bench.jpg", "v1_no_bench.png"]
    assert data["defaultImage"] == "v2_with_bench.jpg"


def test_image_regions():
    response = client.get("/api/intent-lens/images/v1_no_bench.png")
    assert response.status_code == 200
    data = response.json()
    assert data["isFallback"] is False
    assert len(data["regionSet"]["regions"]) == 8
    assert data["regionSet"]["regions"][0]["importance"] == "high"


def test_image_regions_fallback():
    response = client.get("/api/intent-lens/images/nope.jpg")
    data = response.json()
    assert data["requested"] == "nope.jpg"
    assert data["imageName"] == "v2_with_bench.jpg"
    assert data["isFallback"] is True
    assert [r["name"] for r in data["regionSet"]["regions"]] == V2_NAMES
