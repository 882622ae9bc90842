"""Tests for the recommendation feedback recorder."""

import datetime

import pytest

from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.engine.feedback import record_recommendation_feedback
from fitcoach.models.enums import Confidence
from fitcoach.models.recommendation_log import ProgramRecommendationLog

NOW = datetime.datetime(2026, 3, 2, 12, 0)


@pytest.fixture
def programs(make_program):
    return (
        make_program("Strength Focus - 4x/săptămână", 4, ["A", "B", "C", "D"]),
        make_program("Upper/Lower Split - 4x/săptămână", 4, ["U1", "L1", "U2", "L2"]),
    )


@pytest.fixture
def add_log(session, client):
    def _add(program_id: int, created_at: datetime.datetime) -> ProgramRecommendationLog:
        entry = ProgramRecommendationLog(client_id=client.id, recommended_program_id=program_id, score=88.5,
                                         confidence=Confidence.HIGH, reasons=["r"], warnings=[],
                                         client_stats={"total_sessions": 12}, created_at=created_at)
        return RecommendationLogRepository(session).create(entry)

    return _add


class TestRecordRecommendationFeedback:
    def test_accepted(self, session, client, programs, add_log):
        strength, _ = programs
        add_log(strength.id, NOW - datetime.timedelta(days=1))

        entry = record_recommendation_feedback(session, client.id, strength.id, "Perfect", as_of=NOW)

        assert entry.trainer_accepted is True
        assert entry.trainer_selected_program_id is None
        assert entry.trainer_feedback == "Perfect"
        assert entry.action_taken_at == NOW

    def test_rejected_records_selected_program(self, session, client, programs, add_log):
        strength, upper_lower = programs
        add_log(strength.id, NOW - datetime.timedelta(days=1))

        entry = record_recommendation_feedback(session, client.id, upper_lower.id, as_of=NOW)

        assert entry.trainer_accepted is False
        assert entry.trainer_selected_program_id == upper_lower.id
        assert entry.trainer_feedback is None

    def test_most_recent_pending_entry(self, session, client, programs, add_log):
        strength, upper_lower = programs
        older = add_log(upper_lower.id, NOW - datetime.timedelta(days=5))
        newer = add_log(strength.id, NOW - datetime.timedelta(days=1))

        entry = record_recommendation_feedback(session, client.id, strength.id, as_of=NOW)

        assert entry.id == newer.id
        session.refresh(older)
        assert older.trainer_accepted is None

    def test_second_call_does_not_touch_first_entry(self, session, client, programs, add_log):
        strength, upper_lower = programs
        add_log(strength.id, NOW - datetime.timedelta(days=1))

        first = record_recommendation_feedback(session, client.id, upper_lower.id, "Prefer split", as_of=NOW)
        second = record_recommendation_feedback(session, client.id, strength.id, "Changed my mind",
                                                as_of=NOW + datetime.timedelta(hours=1))

        assert second is None
        session.refresh(first)
        assert first.trainer_accepted is False
        assert first.trainer_selected_program_id == upper_lower.id
        assert first.trainer_feedback == "Prefer split"
        assert first.action_taken_at == NOW

    def test_no_log_entries(self, session, client, programs):
        assert record_recommendation_feedback(session, client.id, programs[0].id, as_of=NOW) is None
