"""Tests for AssignmentService: assignment unit of work and calendar regeneration."""

import datetime

import pytest
from sqlmodel import func, select

from fitcoach.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.models.client_program import ClientProgram
from fitcoach.models.enums import Confidence, SessionStatus
from fitcoach.models.program import WorkoutProgram
from fitcoach.models.recommendation_log import ProgramRecommendationLog
from fitcoach.models.scheduled_session import ScheduledSession
from fitcoach.schemas.assignment import AssignProgramRequest, UpdateTrainingDaysRequest
from fitcoach.services.assignment_service import AssignmentService

AS_OF = datetime.datetime(2026, 3, 1, 8, 0)
MONDAY = datetime.date(2026, 3, 9)


@pytest.fixture
def full_body(make_program):
    return make_program("Full Body 3x", 3, ["A", "B", "C"], duration_weeks=4)


@pytest.fixture
def upper_lower(make_program):
    return make_program("Upper/Lower Split - 4x/săptămână", 4, ["U1", "L1", "U2", "L2"], duration_weeks=4)


@pytest.fixture
def pending_log(session, client):
    def _add(program_id: int) -> ProgramRecommendationLog:
        entry = ProgramRecommendationLog(client_id=client.id, recommended_program_id=program_id, score=72.0,
                                         confidence=Confidence.MEDIUM, created_at=AS_OF)
        return RecommendationLogRepository(session).create(entry)

    return _add


def _request(program_id: int, days=("MONDAY", "WEDNESDAY", "FRIDAY"), **kwargs) -> AssignProgramRequest:
    return AssignProgramRequest(program_id=program_id, start_date=MONDAY, training_days=list(days), **kwargs)


def _count(session, model) -> int:
    return session.exec(select(func.count()).select_from(model)).one()


class TestAssignProgram:
    def test_assign_generates_calendar(self, session, trainer, client, full_body):
        response = AssignmentService(session).assign_program(trainer, client.id, _request(full_body.id),
                                                             as_of=AS_OF)

        assert response.program_id == full_body.id
        assert response.sessions_generated == 12
        assert [d.value for d in response.training_days] == ["MONDAY", "WEDNESDAY", "FRIDAY"]
        assert response.is_customized is False
        assert _count(session, ScheduledSession) == 12

    def test_reassign_replaces_assignment_and_future_sessions(self, session, trainer, client, full_body,
                                                              upper_lower):
        service = AssignmentService(session)
        service.assign_program(trainer, client.id, _request(full_body.id), as_of=AS_OF)

        response = service.assign_program(trainer, client.id,
                                          _request(upper_lower.id, days=("MONDAY", "TUESDAY", "THURSDAY", "FRIDAY")),
                                          as_of=AS_OF)

        assert _count(session, ClientProgram) == 1
        assert response.program_id == upper_lower.id
        names = {s.session_name for s in session.exec(select(ScheduledSession)).all()}
        assert names == {"U1", "L1", "U2", "L2"}
        assert _count(session, ScheduledSession) == 16

    def test_customize_clones_program(self, session, trainer, client, full_body):
        response = AssignmentService(session).assign_program(trainer, client.id,
                                                             _request(full_body.id, customize=True), as_of=AS_OF)

        clone = session.get(WorkoutProgram, response.program_id)
        assert clone.id != full_body.id
        assert clone.trainer_id == trainer.id
        assert clone.is_default is False
        assert clone.name == "Full Body 3x (personalizat)"
        assert response.is_customized is True

    def test_feedback_accepted_for_customized_copy(self, session, trainer, client, full_body, pending_log):
        entry = pending_log(full_body.id)

        AssignmentService(session).assign_program(trainer, client.id,
                                                  _request(full_body.id, customize=True, feedback="Ok"), as_of=AS_OF)

        session.refresh(entry)
        assert entry.trainer_accepted is True
        assert entry.trainer_feedback == "Ok"

    def test_feedback_rejected(self, session, trainer, client, full_body, upper_lower, pending_log):
        entry = pending_log(upper_lower.id)

        AssignmentService(session).assign_program(trainer, client.id, _request(full_body.id), as_of=AS_OF)

        session.refresh(entry)
        assert entry.trainer_accepted is False
        assert entry.trainer_selected_program_id == full_body.id

    def test_wrong_day_count(self, session, trainer, client, full_body):
        with pytest.raises(ValidationError):
            AssignmentService(session).assign_program(trainer, client.id,
                                                      _request(full_body.id, days=("MONDAY", "FRIDAY")), as_of=AS_OF)

        assert _count(session, ClientProgram) == 0
        assert _count(session, ScheduledSession) == 0

    def test_other_trainers_client(self, session, other_trainer, client, full_body):
        with pytest.raises(ForbiddenError):
            AssignmentService(session).assign_program(other_trainer, client.id, _request(full_body.id), as_of=AS_OF)

    def test_client_role_rejected(self, session, client_user, client, full_body):
        with pytest.raises(ForbiddenError) as exc_info:
            AssignmentService(session).assign_program(client_user, client.id, _request(full_body.id), as_of=AS_OF)
        assert exc_info.value.code == "AUTH_005"

    def test_unknown_client(self, session, trainer, full_body):
        with pytest.raises(NotFoundError):
            AssignmentService(session).assign_program(trainer, 999, _request(full_body.id), as_of=AS_OF)

    def test_other_trainers_program(self, session, trainer, other_trainer, client, make_program):
        private = make_program("Private", 3, ["A", "B", "C"], trainer_id=other_trainer.id, is_default=False)

        with pytest.raises(ForbiddenError):
            AssignmentService(session).assign_program(trainer, client.id, _request(private.id), as_of=AS_OF)

    def test_conflict_rolls_back_whole_unit(self, session, trainer, client, full_body, pending_log, add_session):
        entry = pending_log(full_body.id)
        add_session(client, datetime.datetime(2026, 3, 11, 8, 0))
        programs_before = _count(session, WorkoutProgram)

        with pytest.raises(ConflictError):
            AssignmentService(session).assign_program(trainer, client.id, _request(full_body.id, customize=True),
                                                      as_of=datetime.datetime(2026, 3, 11, 8, 30))

        assert _count(session, WorkoutProgram) == programs_before
        assert _count(session, ClientProgram) == 0
        assert _count(session, ScheduledSession) == 1
        session.refresh(entry)
        assert entry.trainer_accepted is None


class TestUpdateTrainingDays:
    def test_regenerates_from_current_week(self, session, trainer, client, full_body):
        service = AssignmentService(session)
        service.assign_program(trainer, client.id, _request(full_body.id), as_of=AS_OF)

        now = datetime.datetime(2026, 3, 17, 12, 0)  # Tuesday of week 2
        response = service.update_training_days(trainer, client.id,
                                                UpdateTrainingDaysRequest(training_days=["TUESDAY", "THURSDAY",
                                                                                         "SATURDAY"]),
                                                as_of=now)

        rows = session.exec(select(ScheduledSession).order_by(ScheduledSession.start_at)).all()
        past = [r for r in rows if r.start_at < now]
        future = [r for r in rows if r.start_at > now]
        # the new calendar starts with this week, 09:00 today included
        assert [r.start_at for r in past][-2:] == [datetime.datetime(2026, 3, 16, 9, 0),
                                                   datetime.datetime(2026, 3, 17, 9, 0)]
        assert {r.start_at.strftime("%A") for r in future} == {"Tuesday", "Thursday", "Saturday"}
        assert response.sessions_generated == 12
        assert len(future) == 11
        assert all(r.status == SessionStatus.SCHEDULED for r in rows)

    def test_wrong_count(self, session, trainer, client, full_body, assign):
        assign(client.id, full_body.id, MONDAY, ["MONDAY", "WEDNESDAY", "FRIDAY"])

        with pytest.raises(ValidationError):
            AssignmentService(session).update_training_days(trainer, client.id,
                                                            UpdateTrainingDaysRequest(training_days=["MONDAY"]))

    def test_no_assignment(self, session, trainer, client):
        with pytest.raises(NotFoundError):
            AssignmentService(session).update_training_days(trainer, client.id,
                                                            UpdateTrainingDaysRequest(training_days=["MONDAY"]))


class TestGetAssignment:
    def test_client_reads_own(self, session, client_user, client, full_body, assign):
        assign(client.id, full_body.id, MONDAY, ["MONDAY", "WEDNESDAY", "FRIDAY"])

        response = AssignmentService(session).get_assignment(client_user, client.id)

        assert response.program_id == full_body.id
        assert response.sessions_generated == 0

    def test_missing(self, session, trainer, client):
        with pytest.raises(NotFoundError) as exc_info:
            AssignmentService(session).get_assignment(trainer, client.id)
        assert exc_info.value.code == "NF_CLIENT_PROGRAM_001"
