# SPDX-License-Identifier: Apache-2.0
"""Integration tests for studies API. Use TestClient, no running server."""


def test_system_health(client):
    """Health endpoint returns ok."""
    r = client.get("/system/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_get_study_404(client):
    r = client.get("/studies/99999")
    assert r.status_code == 404
    assert r.json() == {"message": "Study 99999 was not found"}


def test_create_and_get_study(client):
    r = client.post("/studies", json={"title": "Test Study", "description": "Integration test"})
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "draft"
    study_id = data["study_id"]

    r = client.post(f"/studies/{study_id}/artifacts", json={"name": "Snippet", "label": "A"})
    assert r.status_code == 200
    r = client.post(f"/studies/{study_id}/participants", json={"participant_name": "Ada"})
    assert r.status_code == 200

    r = client.get(f"/studies/{study_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Test Study"
    assert body["artifact_count"] == 1
    assert body["participant_count"] == 1
    assert body["timeline_start"] is None


def test_create_study_requires_title(client):
    r = client.post("/studies", json={"description": "no title"})
    assert r.status_code == 422


def test_enroll_in_unknown_study_404(client):
    r = client.post("/studies/99999/participants", json={"participant_name": "Ada"})
    assert r.status_code == 404


def test_evaluation_must_reference_same_study(client):
    first = client.post("/studies", json={"title": "First"}).json()["study_id"]
    second = client.post("/studies", json={"title": "Second"}).json()["study_id"]
    comparison_id = client.post(f"/studies/{first}/comparisons", json={"prompt": "?"}).json()["comparison_id"]
    participant_id = client.post(f"/studies/{second}/participants", json={"participant_name": "Ada"}).json()["study_participant_id"]
    r = client.post(
        f"/studies/{second}/evaluations",
        json={"comparison_id": comparison_id, "study_participant_id": participant_id, "status": "submitted", "rating": 4},
    )
    assert r.status_code == 422


def test_submitted_evaluation_without_timestamp_gets_one(client):
    study_id = client.post("/studies", json={"title": "Stamp"}).json()["study_id"]
    comparison_id = client.post(f"/studies/{study_id}/comparisons", json={"prompt": "?"}).json()["comparison_id"]
    participant_id = client.post(f"/studies/{study_id}/participants", json={"participant_name": "Ada"}).json()["study_participant_id"]
    r = client.post(
        f"/studies/{study_id}/evaluations",
        json={"comparison_id": comparison_id, "study_participant_id": participant_id, "status": "submitted", "rating": 4},
    )
    assert r.status_code == 200
    assert r.json()["status"] == "submitted"

    r = client.get(f"/analytics/study/{study_id}")
    assert r.status_code == 200
    assert r.json()["summary"]["submissionsCount"] == 1
    assert r.json()["charts"]["artifactAverages"][0]["name"] == "?"
