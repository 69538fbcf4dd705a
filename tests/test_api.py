import pytest
from fastapi.testclient import TestClient

from medpredict.main import app, get_pipeline
from medpredict.engine.pipeline import AnalysisPipeline
from medpredict.engine.store import MemoryBackend, RecordStore, get_store


class ZeroJitter:
    def uniform(self, low: float, high: float) -> float:
        return low


@pytest.fixture
def store() -> RecordStore:
    return RecordStore(MemoryBackend())


@pytest.fixture
def client(store: RecordStore):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_pipeline] = lambda: AnalysisPipeline(store, rng=ZeroJitter(), delay=0)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_suggestions(client) -> None:
    assert client.get("/symptoms/suggestions", params={"q": "pain"}).json() == [
        "Chest pain",
        "Joint pain",
        "Abdominal pain",
        "Back pain",
    ]
    assert client.get("/symptoms/suggestions", params={"q": "p"}).json() == []


def test_symptoms_table(client) -> None:
    assert len(client.get("/symptoms").json()) == 20


def test_predict_does_not_store(client, store) -> None:
    resp = client.post("/predict", json={"symptoms": ["fever", "cough"]})
    assert resp.status_code == 200
    assert resp.json()["predictions"][0]["disease"] == "Influenza"
    assert store.get_health_checks() == []


def test_predict_rejects_empty(client) -> None:
    assert client.post("/predict", json={"symptoms": []}).status_code == 422


def test_analyze_stores_and_lists_history(client) -> None:
    resp = client.post("/analyze", json={"symptoms": ["fever"]})
    assert resp.status_code == 200
    first = resp.json()
    second = client.post("/analyze", json={"symptoms": ["insomnia"]}).json()
    assert second["predictions"][0]["confidence"] == 65

    history = client.get("/history").json()
    assert [c["id"] for c in history] == [second["id"], first["id"]]

    summary = client.get("/history/summary").json()
    assert summary == {"total": 2, "low": 0, "medium": 2, "high": 0}


def test_analyze_rejects_blank(client) -> None:
    assert client.post("/analyze", json={"symptoms": [" "]}).status_code == 422


def test_trends(client) -> None:
    client.post("/analyze", json={"symptoms": ["headache", "dizziness"]})
    report = client.get("/trends", params={"range": "week"}).json()
    assert report["stats"]["total_checks"] == 1
    assert report["stats"]["high_risk_checks"] == 1
    assert client.get("/trends", params={"range": "decade"}).status_code == 422


def test_doctors(client) -> None:
    names = [d["name"] for d in client.get("/doctors", params={"city": "New York"}).json()]
    assert names == ["Dr. Michael Chen", "Dr. Sarah Johnson"]
    assert client.get("/doctors", params={"sort_by": "price"}).status_code == 422
    relevant = client.get("/doctors/relevant", params={"specialization": "Cardiology"}).json()
    assert [d["name"] for d in relevant] == ["Dr. Emily Davis"]
    assert "Neurology" in client.get("/doctors/specializations").json()
    assert "Boston" in client.get("/cities").json()


def test_profile_lifecycle(client, store) -> None:
    assert client.get("/profile").status_code == 404

    payload = {"name": "Ada", "email": "ada@example.com", "city": "Boston", "age": 36, "gender": "female"}
    created = client.post("/profile", json=payload)
    assert created.status_code == 201
    profile = created.json()
    assert profile["id"]
    assert client.get("/profile").json() == profile

    profile["city"] = "Denver"
    assert client.put("/profile", json=profile).json()["city"] == "Denver"
    assert store.get_profile().city == "Denver"

    client.post("/analyze", json={"symptoms": ["fever"]})
    assert client.delete("/profile").status_code == 204
    assert client.delete("/profile").status_code == 204
    assert client.get("/profile").status_code == 404
    assert client.get("/history").json() == []


def test_profile_validation(client) -> None:
    payload = {"name": "Ada", "email": "ada@example.com", "city": "Boston", "age": 36, "gender": "robot"}
    assert client.post("/profile", json=payload).status_code == 422
