"""Flask API status codes and payloads."""

import pytest

from app import app


@pytest.fixture
def client(storage_dirs):
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_questions(client):
    resp = client.get("/api/quiz/questions")
    assert resp.status_code == 200
    assert resp.get_json()["count"] == 25

    resp = client.get("/api/quiz/questions?biological_sex=male")
    assert resp.get_json()["count"] == 23


def test_score_is_stateless(client, storage_dirs, maximal_answers):
    resp = client.post("/api/quiz/score", json={"answers": maximal_answers})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["overall_score"] == 100.0
    assert data["risk_level"] == "Severe"
    assert data["top_causes"] == ["dysbiosis", "motility"]
    assert data["unanswered"] == []
    assert not storage_dirs["assessments"].exists()


@pytest.mark.parametrize("body", [{}, {"answers": ["slow"]}, {"answers": {"stool-type": "type-9"}}])
def test_score_rejects_invalid_answers(client, body):
    resp = client.post("/api/quiz/score", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "INVALID_ANSWERS"


def test_submit_requires_user_id(client, minimal_answers):
    resp = client.post("/api/assessments", json={"answers": minimal_answers})
    assert resp.status_code == 400


def test_submit_rejects_invalid_answers(client):
    resp = client.post("/api/assessments", json={"user_id": "user-1", "answers": {"eating-pace": 3}})
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "INVALID_ANSWERS"


def test_assessment_lifecycle(client, minimal_answers, maximal_answers):
    resp = client.get("/api/assessments/user-1/latest")
    assert resp.status_code == 404

    resp = client.post("/api/assessments", json={"user_id": "user-1", "answers": maximal_answers})
    assert resp.status_code == 201
    first = resp.get_json()["assessment"]
    assert first["retake_number"] == 1

    resp = client.get("/api/assessments/user-1/comparison")
    assert resp.status_code == 404
    assert resp.get_json()["code"] == "NOT_ENOUGH_ASSESSMENTS"

    resp = client.post(
        "/api/assessments",
        json={"user_id": "user-1", "answers": minimal_answers, "biological_sex": "female"},
    )
    assert resp.status_code == 201
    second = resp.get_json()
    assert second["assessment"]["retake_number"] == 2
    assert second["comparison"]["previous_assessment_id"] == first["id"]

    resp = client.get("/api/assessments/user-1")
    assert resp.get_json()["count"] == 2

    resp = client.get("/api/assessments/user-1/latest")
    assert resp.get_json()["id"] == second["assessment"]["id"]

    resp = client.get("/api/assessments/user-1/comparison")
    assert resp.status_code == 200
    assert resp.get_json()["overall_change"] == 100.0

    resp = client.delete(f"/api/assessments/user-1/{first['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["deleted"] == first["id"]

    resp = client.delete(f"/api/assessments/user-1/{first['id']}")
    assert resp.status_code == 404


@pytest.mark.parametrize("path", ["/api/quiz/score", "/api/assessments"])
def test_non_object_body_is_rejected(client, path):
    resp = client.post(path, json=[1, 2])
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "INVALID_BODY"


@pytest.mark.parametrize("user_id", [42, ["user-1"], {"id": "user-1"}, "   "])
def test_submit_rejects_bad_user_id(client, storage_dirs, minimal_answers, user_id):
    resp = client.post("/api/assessments", json={"user_id": user_id, "answers": minimal_answers})
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "INVALID_USER_ID"
    assert not storage_dirs["assessments"].exists()


def test_score_accepts_single_string_for_multi_choice(client):
    resp = client.post("/api/quiz/score", json={"answers": {"diagnosed-conditions": "ibs"}})
    assert resp.status_code == 200
    assert resp.get_json()["category_scores"]["structural"]["points"] == 2
