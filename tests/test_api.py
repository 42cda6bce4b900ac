import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_classify(client) -> None:
    response = client.post(
        "/classification/classify",
        json=[{"text": "Define the term requirements engineering.", "question_type": "mcq"}],
    )

    assert response.status_code == 200
    [body] = response.json()
    assert body["cognitive_level"] == "remembering"
    assert body["bloom_level"] == "remembering"
    assert body["knowledge_dimension"] == "factual"
    assert len(body["fingerprint"]) == 50


def test_classify_rejects_unknown_question_type(client) -> None:
    response = client.post("/classification/classify", json=[{"text": "Define it.", "question_type": "poem"}])

    assert response.status_code == 422


def test_similarity(client) -> None:
    corpus = [{"id": str(i), "text": "Explain the TCP three way handshake."} for i in range(12)]

    response = client.post(
        "/classification/similarity",
        json={"question_text": "Explain the TCP three way handshake.", "question_id": "0", "corpus": corpus},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 11
    assert len(body["similarities"]) == 10
    assert all(m["id"] != "0" for m in body["similarities"])
    assert body["threshold"] == 0.7


def test_review_override(client) -> None:
    classification = client.post("/classification/classify", json=[{"text": "Define entropy."}]).json()[0]

    response = client.post(
        "/classification/review/override",
        json={"classification": classification, "cognitive_level": "understanding"},
    )

    assert response.status_code == 200
    assert response.json()["cognitive_level"] == "understanding"
    assert response.json()["needs_review"] is False


def test_analyze(client) -> None:
    response = client.post(
        "/sufficiency/analyze",
        json={
            "matrix": {"topics": [{"topic_name": "Algebra", "remembering_items": 5}]},
            "inventory": [
                {"id": i, "topic": "algebra basics", "bloom_level": "remembering"} for i in range(3)
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["overall_status"] == "fail"
    assert body["results"][0]["gap"] == 2
    assert body["generation_requests"] == [
        {"topic": "algebra", "cognitive_level": "remembering", "count": 2, "status": "fail"}
    ]


def test_analyze_invalid_matrix(client) -> None:
    response = client.post("/sufficiency/analyze", json={"matrix": {"rows": []}, "inventory": []})

    assert response.status_code == 400
    assert "topics" in response.json()["detail"]


def test_briefs(client) -> None:
    response = client.post(
        "/sufficiency/briefs",
        json={"matrix": {"topics": [{"topic_name": "Algebra", "applying_items": 2}]}, "question_type": "essay"},
    )

    assert response.status_code == 200
    [brief] = response.json()
    assert brief["knowledge_dimension"] == "procedural"
    assert brief["question_type"] == "essay"


def test_distribution(client) -> None:
    response = client.post(
        "/sufficiency/distribution",
        json={"inventory": [{"id": "1", "topic": "Algebra", "bloom_level": "applying"}]},
    )

    assert response.status_code == 200
    assert response.json()["distribution"] == [{"level": "applying", "count": 1, "percentage": 100}]


def test_formats(client) -> None:
    assert len(client.get("/sufficiency/formats").json()) == 4

    response = client.get("/sufficiency/formats/format_2", params={"total_items": 30})
    assert response.status_code == 200
    assert [r["count"] for r in response.json()["requirements"]] == [21, 6, 3]

    assert client.get("/sufficiency/formats/format_9").status_code == 404


def test_analyze_tolerates_noisy_inventory_rows(client) -> None:
    response = client.post(
        "/sufficiency/analyze",
        json={
            "matrix": {"topics": [{"topic_name": "Algebra", "remembering_items": 1}]},
            "inventory": [{"id": "q2", "topic": "algebra", "bloom_level": "remembering", "confidence": "high"}],
        },
    )

    assert response.status_code == 200
    assert response.json()["overall_status"] == "pass"
