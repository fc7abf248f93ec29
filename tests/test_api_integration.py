import pytest
from fastapi.testclient import TestClient

from news_detector.api import create_app
from news_detector.core.orchestrator import AnalysisOrchestrator
from news_detector.core.store import AnalysisStore


@pytest.fixture
def orchestrator():
    return AnalysisOrchestrator(AnalysisStore(), latency_s=0)


@pytest.fixture
def client(orchestrator):
    return TestClient(create_app(orchestrator))


def test_analyze_smoke(client):
    response = client.post("/analyze", json={"text": "Breaking: shocking secret exposed"})

    assert response.status_code == 200
    data = response.json()
    assert data["label"] == "FAKE"
    assert data["is_loading"] is False
    assert 65 <= data["confidence"] <= 95

    history = client.get("/history").json()
    assert history["count"] == 1
    assert history["entries"][0]["text"] == "Breaking: shocking secret exposed"
    assert history["entries"][0]["result"] == data


def test_analyze_blank_text_is_noop(client):
    response = client.post("/analyze", json={"text": "   "})

    assert response.status_code == 200
    assert response.json() == {"label": "UNSET", "confidence": 0, "is_loading": False}
    assert client.get("/history").json()["count"] == 0


def test_analyze_missing_text_is_validation_error(client):
    response = client.post("/analyze", json={})
    assert response.status_code == 422


def test_analyze_text_too_long(client):
    response = client.post("/analyze", json={"text": "a" * 10001})
    assert response.status_code == 422


def test_analyze_rejected_while_loading(client, orchestrator):
    orchestrator.store.set_loading(True)

    response = client.post("/analyze", json={"text": "urgent"})

    assert response.status_code == 409
    assert orchestrator.get_history() == []


def test_analysis_failure_returns_previous_state(client, orchestrator):
    client.post("/analyze", json={"text": "according to the ministry"})
    before = client.get("/state").json()

    def broken(text):
        raise RuntimeError("model unavailable")

    orchestrator.classifier = broken
    response = client.post("/analyze", json={"text": "scandal"})

    assert response.status_code == 200
    assert response.json() == before
    assert client.get("/history").json()["count"] == 1


def test_reset_and_clear_history(client):
    client.post("/analyze", json={"text": "study finds"})

    reset = client.post("/reset")
    assert reset.status_code == 200
    assert reset.json() == {"label": "UNSET", "confidence": 0, "is_loading": False}
    assert client.get("/history").json()["count"] == 1

    client.post("/analyze", json={"text": "exposed"})
    cleared = client.delete("/history")
    assert cleared.json()["status"] == "ok"
    assert client.get("/history").json() == {"entries": [], "count": 0}
    assert client.get("/state").json()["label"] == "FAKE"


def test_index_renders_state(client):
    client.post("/analyze", json={"text": "Unbelievable <b>scandal</b>"})

    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    body = response.text
    assert "LIKELY FAKE" in body
    assert "&lt;b&gt;scandal&lt;/b&gt;" in body


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_apps_do_not_share_state():
    a = TestClient(create_app(AnalysisOrchestrator(AnalysisStore(), latency_s=0)))
    b = TestClient(create_app(AnalysisOrchestrator(AnalysisStore(), latency_s=0)))

    a.post("/analyze", json={"text": "secret"})

    assert a.get("/history").json()["count"] == 1
    assert b.get("/history").json()["count"] == 0


def test_failing_listener_does_not_lock_analyze(client, orchestrator):
    def broken(state):
        raise RuntimeError("listener broke")

    orchestrator.subscribe(broken)

    first = client.post("/analyze", json={"text": "shocking"})
    second = client.post("/analyze", json={"text": "experts say"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["label"] == "REAL"
    assert client.get("/history").json()["count"] == 2


def test_reset_rejected_while_loading(client, orchestrator):
    client.post("/analyze", json={"text": "scandal"})
    orchestrator.store.set_loading(True)

    response = client.post("/reset")

    assert response.status_code == 409
    state = orchestrator.get_current_state()
    assert state.is_loading is True
    assert state.label.value == "FAKE"


def test_index_keeps_analyzed_text(client):
    client.post("/analyze", json={"text": "Study finds coffee is fine"})

    body = client.get("/").text
    assert ">Study finds coffee is fine</textarea>" in body

    client.post("/reset")
    body = client.get("/").text
    assert "></textarea>" in body
    assert "LIKELY REAL" not in body
