"""HTTP-level tests: routing, caller identity and the error envelope."""

import datetime

import pytest
from fastapi.testclient import TestClient

from fitcoach.db.session import get_db
from fitcoach.main import app


@pytest.fixture
def api(session):
    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(make_program):
    return (
        make_program("Strength Focus - 4x/săptămână", 4, ["A", "B", "C", "D"]),
        make_program("Full Body 3x", 3, ["A", "B", "C"], duration_weeks=4),
    )


def _as(user) -> dict:
    return {"X-User-Id": str(user.id)}


def _next_monday() -> datetime.date:
    today = datetime.date.today()
    return today + datetime.timedelta(days=7 - today.weekday())


class TestService:
    def test_health(self, api):
        response = api.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_missing_identity_header(self, api, client):
        assert api.get(f"/api/v1/recommendations/{client.id}").status_code == 422

    def test_unknown_user(self, api, client):
        response = api.get(f"/api/v1/recommendations/{client.id}", headers={"X-User-Id": "999"})
        assert response.status_code == 401


class TestRecommendationsApi:
    def test_ranked_list(self, api, trainer, client, catalog):
        response = api.get(f"/api/v1/recommendations/{client.id}", headers=_as(trainer))

        assert response.status_code == 200
        body = response.json()
        names = {r["program_name"] for r in body["recommendations"]}
        assert names == {"Strength Focus - 4x/săptămână", "Full Body 3x"}
        assert all(r["confidence"] == "LOW" for r in body["recommendations"])
        assert body["log_id"] is not None

    def test_history(self, api, trainer, client, catalog):
        api.get(f"/api/v1/recommendations/{client.id}", headers=_as(trainer))

        response = api.get(f"/api/v1/recommendations/{client.id}/history", headers=_as(trainer))

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_other_trainer_gets_error_envelope(self, api, other_trainer, client):
        response = api.get(f"/api/v1/recommendations/{client.id}", headers=_as(other_trainer))

        assert response.status_code == 403
        body = response.json()
        assert body["data"] is None
        assert body["errors"][0]["code"] == "AUTH_006"
        assert body["meta"]["path"] == f"/api/v1/recommendations/{client.id}"

    def test_unknown_client(self, api, trainer):
        response = api.get("/api/v1/recommendations/999", headers=_as(trainer))

        assert response.status_code == 404
        assert response.json()["errors"][0]["code"] == "NF_CLIENT_001"

    def test_feedback_without_pending_recommendation(self, api, trainer, client, catalog):
        response = api.post(f"/api/v1/recommendations/{client.id}/feedback", headers=_as(trainer),
                            json={"selected_program_id": catalog[0].id})
        assert response.status_code == 404
        assert response.json()["errors"][0]["code"] == "NF_RECOMMENDATION_LOG_001"

    def test_feedback_recorded(self, api, trainer, client, catalog):
        api.get(f"/api/v1/recommendations/{client.id}", headers=_as(trainer))

        response = api.post(f"/api/v1/recommendations/{client.id}/feedback", headers=_as(trainer),
                            json={"selected_program_id": catalog[1].id, "feedback": "Prea mult volum"})

        assert response.status_code == 204
        history = api.get(f"/api/v1/recommendations/{client.id}/history", headers=_as(trainer)).json()
        assert history[0]["trainer_accepted"] is not None
        assert history[0]["trainer_feedback"] == "Prea mult volum"


class TestAssignmentsApi:
    def test_assign(self, api, trainer, client, catalog):
        payload = {"program_id": catalog[1].id, "start_date": _next_monday().isoformat(),
                   "training_days": ["MONDAY", "WEDNESDAY", "FRIDAY"]}

        response = api.post(f"/api/v1/assignments/{client.id}", headers=_as(trainer), json=payload)

        assert response.status_code == 201
        assert response.json()["sessions_generated"] == 12

    def test_wrong_day_count(self, api, trainer, client, catalog):
        payload = {"program_id": catalog[1].id, "start_date": _next_monday().isoformat(),
                   "training_days": ["MONDAY"]}

        response = api.post(f"/api/v1/assignments/{client.id}", headers=_as(trainer), json=payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "VAL_TRAINING_DAYS_001"

    def test_unknown_weekday(self, api, trainer, client, catalog):
        payload = {"program_id": catalog[1].id, "start_date": _next_monday().isoformat(),
                   "training_days": ["MONDAY", "WEDNESDAY", "FUNDAY"]}

        response = api.post(f"/api/v1/assignments/{client.id}", headers=_as(trainer), json=payload)

        assert response.status_code == 422


class TestSessionsApi:
    def test_booking_conflict(self, api, trainer, client):
        start = datetime.datetime.combine(_next_monday(), datetime.time(9, 0))
        payload = {"client_id": client.id, "session_name": "Forță", "start_at": start.isoformat()}

        first = api.post("/api/v1/sessions", headers=_as(trainer), json=payload)
        payload["start_at"] = (start + datetime.timedelta(hours=1)).isoformat()
        second = api.post("/api/v1/sessions", headers=_as(trainer), json=payload)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["errors"][0]["code"] == "CF_MIN_INTERVAL"

    def test_client_upcoming(self, api, trainer, client_user, client):
        start = datetime.datetime.combine(_next_monday(), datetime.time(9, 0))
        api.post("/api/v1/sessions", headers=_as(trainer),
                 json={"client_id": client.id, "session_name": "Forță", "start_at": start.isoformat()})

        response = api.get("/api/v1/sessions/me/upcoming", headers=_as(client_user))

        assert response.status_code == 200
        assert [s["session_name"] for s in response.json()] == ["Forță"]

    def test_reschedule(self, api, trainer, client):
        start = datetime.datetime.combine(_next_monday(), datetime.time(9, 0))
        booking = {"client_id": client.id, "session_name": "Forță", "start_at": start.isoformat()}
        session_id = api.post("/api/v1/sessions", headers=_as(trainer), json=booking).json()["id"]
        booking.update(session_name="Cardio", start_at=start.replace(hour=15).isoformat())
        api.post("/api/v1/sessions", headers=_as(trainer), json=booking)

        moved = api.patch(f"/api/v1/sessions/{session_id}", headers=_as(trainer),
                          json={"start_at": start.replace(hour=10).isoformat()})
        clash = api.patch(f"/api/v1/sessions/{session_id}", headers=_as(trainer),
                          json={"start_at": start.replace(hour=14).isoformat()})

        assert moved.status_code == 200
        assert moved.json()["start_at"] == start.replace(hour=10).isoformat()
        assert clash.status_code == 409
        assert clash.json()["errors"][0]["code"] == "CF_MIN_INTERVAL"

    def test_list_and_history(self, api, trainer, client_user, client):
        start = datetime.datetime.combine(_next_monday(), datetime.time(9, 0))
        for day in range(3):
            api.post("/api/v1/sessions", headers=_as(trainer),
                     json={"client_id": client.id, "session_name": f"S{day}",
                           "start_at": (start + datetime.timedelta(days=day)).isoformat()})
        listed = api.get("/api/v1/sessions", headers=_as(trainer), params={"client_id": client.id, "limit": 2})
        first_id = listed.json()["data"][0]["id"]
        api.post(f"/api/v1/sessions/{first_id}/complete", headers=_as(client_user), json={})

        history = api.get("/api/v1/sessions/history", headers=_as(client_user))
        scheduled = api.get("/api/v1/sessions", headers=_as(client_user), params={"status": "SCHEDULED"})

        assert listed.status_code == 200
        assert [s["session_name"] for s in listed.json()["data"]] == ["S0", "S1"]
        assert (listed.json()["total"], listed.json()["limit"]) == (3, 2)
        assert [s["session_name"] for s in history.json()["data"]] == ["S0"]
        assert scheduled.json()["total"] == 2

    def test_list_foreign_client_forbidden(self, api, other_trainer, client):
        response = api.get("/api/v1/sessions", headers=_as(other_trainer), params={"client_id": client.id})

        assert response.status_code == 403
        assert response.json()["errors"][0]["code"] == "AUTH_006"


class TestCheckinsApi:
    def test_submit_today(self, api, client_user, client):
        response = api.put("/api/v1/checkins/today", headers=_as(client_user),
                           json={"nutrition_score": 9, "pain_at_training": False})

        assert response.status_code == 200
        assert response.json()["client_id"] == client.id

    def test_score_out_of_range(self, api, client_user, client):
        response = api.put("/api/v1/checkins/today", headers=_as(client_user),
                           json={"nutrition_score": 11, "pain_at_training": False})
        assert response.status_code == 422


class TestRequestContext:
    def test_request_id_echoed(self, api):
        response = api.get("/health", headers={"X-Request-Id": "abc123"})
        assert response.headers["X-Request-Id"] == "abc123"

    def test_request_id_generated(self, api):
        assert len(api.get("/health").headers["X-Request-Id"]) == 32

    def test_inactive_user(self, api, session, trainer, client):
        trainer.is_active = False
        session.add(trainer)
        session.commit()

        response = api.get(f"/api/v1/recommendations/{client.id}", headers=_as(trainer))

        assert response.status_code == 401

    def test_error_envelope_carries_request_id(self, api, trainer):
        response = api.get("/api/v1/recommendations/999", headers={**_as(trainer), "X-Request-Id": "req-42"})

        assert response.status_code == 404
        assert response.json()["meta"]["request_id"] == "req-42"
