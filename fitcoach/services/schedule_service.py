"""
Schedule service.

Booking, rescheduling, lifecycle and listings of scheduled sessions.  Every path that creates a
SCHEDULED session goes through the conflict guard.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from fitcoach.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.client import ClientRepository
from fitcoach.db.repositories.client_program import ClientProgramRepository
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.db.repositories.scheduled_session import ScheduledSessionRepository
from fitcoach.engine.calendar import start_of_week
from fitcoach.engine.conflict_guard import (
    SchedulingLimits,
    enforce_session_limits,
    next_template_in_rotation,
    save_guarded,
)
from fitcoach.models.enums import SessionStatus, UserRole
from fitcoach.models.program import ProgramSession
from fitcoach.models.scheduled_session import ScheduledSession
from fitcoach.models.user import User
from fitcoach.schemas.schedule import (
    ClientSessionCreate,
    RecommendedSessionResponse,
    ScheduledSessionCreate,
    ScheduledSessionResponse,
    ScheduledSessionUpdate,
    SessionComplete,
    SessionPage,
    SessionStatusUpdate,
    WeekCalendarResponse,
)
from fitcoach.services import engine_options
from fitcoach.services.access import get_own_profile, get_trainer_client, require_trainer

logger = get_logger(__name__)


class ScheduleService:
    """Service for scheduled session business logic."""

    def __init__(self, session: Session, limits: Optional[SchedulingLimits] = None):
        self.session = session
        self.repository = ScheduledSessionRepository(session)
        self.limits = limits or engine_options.scheduling_limits()

    # ------------------------------------------------------------------
    # Booking
    # ------------------------------------------------------------------

    def create_session(self, trainer: User, data: ScheduledSessionCreate) -> ScheduledSessionResponse:
        """Trainer books a session for one of their clients."""
        client = get_trainer_client(self.session, trainer, data.client_id)
        entry = ScheduledSession(client_id=client.id, trainer_id=trainer.id, session_name=data.session_name,
                                 session_type=data.session_type, start_at=data.start_at, end_at=data.end_at,
                                 status=SessionStatus.SCHEDULED, auto_recommended=data.auto_recommended, )
        entry = save_guarded(self.session, entry, self.limits)
        logger.info("session_booked", session_id=entry.id, client_id=client.id, by="trainer")
        return ScheduledSessionResponse.model_validate(entry)

    def create_for_client(self, user: User, data: ClientSessionCreate) -> ScheduledSessionResponse:
        """Client books the next session of their program rotation."""
        client = get_own_profile(self.session, user)
        template = self._next_template(client.id)
        entry = ScheduledSession(client_id=client.id, trainer_id=client.trainer_id, session_name=template.name,
                                 session_type=template.focus, start_at=data.start_at, end_at=data.end_at,
                                 status=SessionStatus.SCHEDULED, auto_recommended=True, )
        entry = save_guarded(self.session, entry, self.limits)
        logger.info("session_booked", session_id=entry.id, client_id=client.id, by="client")
        return ScheduledSessionResponse.model_validate(entry)

    def get_client_recommendation(self, user: User) -> RecommendedSessionResponse:
        """Session the client would get if they booked now."""
        client = get_own_profile(self.session, user)
        template = self._next_template(client.id)
        return RecommendedSessionResponse(session_name=template.name, session_type=template.focus)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def update_session(self, trainer: User, session_id: int, data: ScheduledSessionUpdate,
                       now: Optional[datetime.datetime] = None, ) -> ScheduledSessionResponse:
        """Trainer edits a session; moving a SCHEDULED one re-runs the guard without it."""
        require_trainer(trainer)
        entry = self._get_owned_entry(trainer, session_id)
        previous_start = entry.start_at

        for field, value in data.model_dump(exclude_none=True).items():
            setattr(entry, field, value)
        entry.updated_at = now or datetime.datetime.utcnow()
        moved = entry.start_at != previous_start

        try:
            if moved:
                entry = save_guarded(self.session, entry, self.limits)
            else:
                entry = self.repository.update(entry)
        except ConflictError:
            self.session.rollback()
            raise

        logger.info("session_updated", session_id=entry.id, client_id=entry.client_id, moved=moved)
        return ScheduledSessionResponse.model_validate(entry)

    def update_status(self, user: User, session_id: int, data: SessionStatusUpdate,
                      now: Optional[datetime.datetime] = None, ) -> ScheduledSessionResponse:
        entry = self._get_owned_entry(user, session_id)
        now = now or datetime.datetime.utcnow()

        if data.status == SessionStatus.SCHEDULED and entry.status != SessionStatus.SCHEDULED:
            # Re-opening a session makes it count against the day again.
            enforce_session_limits(self.session, entry.client_id, entry.start_at, self.limits)

        entry.status = data.status
        entry.completed_at = now if data.status == SessionStatus.COMPLETED else None
        entry.updated_at = now
        entry = self.repository.update(entry)
        logger.info("session_status_updated", session_id=entry.id, status=entry.status.value)
        return ScheduledSessionResponse.model_validate(entry)

    def complete_session(self, user: User, session_id: int, data: SessionComplete,
                         now: Optional[datetime.datetime] = None, ) -> ScheduledSessionResponse:
        entry = self._get_owned_entry(user, session_id)
        now = now or datetime.datetime.utcnow()
        entry.status = SessionStatus.COMPLETED
        entry.completed_at = now
        if data.notes is not None:
            entry.notes = data.notes
        entry.updated_at = now
        entry = self.repository.update(entry)
        logger.info("session_completed", session_id=entry.id, client_id=entry.client_id)
        return ScheduledSessionResponse.model_validate(entry)

    def delete(self, trainer: User, session_id: int) -> None:
        require_trainer(trainer)
        entry = self._get_owned_entry(trainer, session_id)
        self.repository.delete(entry.id)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def list_sessions(self, user: User, client_id: Optional[int] = None,
                      start: Optional[datetime.datetime] = None, end: Optional[datetime.datetime] = None,
                      status: Optional[SessionStatus] = None, offset: int = 0, limit: int = 50, ) -> SessionPage:
        """Filtered, paginated sessions visible to *user*, oldest first.

        A trainer sees every session they own, or those of one of their
        clients when *client_id* is given.  A client always sees their own.
        """
        if user.role == UserRole.TRAINER:
            if client_id is not None:
                client = ClientRepository(self.session).get_by_id(client_id)
                if client is None or client.trainer_id != user.id:
                    raise ForbiddenError("You can only view sessions of your own clients")
                scope = {"client_id": client_id}
            else:
                scope = {"trainer_id": user.id}
        else:
            scope = {"client_id": get_own_profile(self.session, user).id}

        entries, total = self.repository.find_page(start=start, end=end, status=status, offset=offset,
                                                   limit=limit, **scope)
        return SessionPage(data=[ScheduledSessionResponse.model_validate(e) for e in entries], total=total,
                           offset=offset, limit=limit, )

    def get_history(self, user: User, limit: int = 20, offset: int = 0) -> SessionPage:
        """Completed sessions, most recently completed first."""
        if user.role == UserRole.TRAINER:
            scope = {"trainer_id": user.id}
        else:
            scope = {"client_id": get_own_profile(self.session, user).id}

        entries, total = self.repository.find_page(status=SessionStatus.COMPLETED, offset=offset, limit=limit,
                                                   newest_completed_first=True, **scope)
        return SessionPage(data=[ScheduledSessionResponse.model_validate(e) for e in entries], total=total,
                           offset=offset, limit=limit, )

    def get_week_calendar(self, user: User, week_of: Optional[datetime.date] = None) -> WeekCalendarResponse:
        """Sessions of the Monday-start week containing *week_of* (default: the current UTC week)."""
        monday = start_of_week(week_of or datetime.datetime.utcnow().date())
        week_start = datetime.datetime.combine(monday, datetime.time.min)
        week_end = week_start + datetime.timedelta(days=7)

        if user.role == UserRole.TRAINER:
            entries = self.repository.get_by_trainer_range(user.id, week_start, week_end)
        else:
            client = get_own_profile(self.session, user)
            entries = self.repository.get_by_client_range(client.id, week_start,
                                                          week_end - datetime.timedelta(microseconds=1))

        return WeekCalendarResponse(week_start=week_start, week_end=week_end,
                                    sessions=[ScheduledSessionResponse.model_validate(e) for e in entries], )

    def get_upcoming(self, user: User, limit: int = 5,
                     now: Optional[datetime.datetime] = None, ) -> list[ScheduledSessionResponse]:
        client = get_own_profile(self.session, user)
        entries = self.repository.get_upcoming(client.id, now or datetime.datetime.utcnow(), limit)
        return [ScheduledSessionResponse.model_validate(e) for e in entries]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_template(self, client_id: int) -> ProgramSession:
        assignment = ClientProgramRepository(self.session).get_by_client(client_id)
        if assignment is None:
            raise NotFoundError("client_program", "Client has no program assigned", {"client_id": client_id})
        templates = ProgramRepository(self.session).get_sessions(assignment.program_id)
        return next_template_in_rotation(templates, self.repository.count_scheduled(client_id))

    def _get_owned_entry(self, user: User, session_id: int) -> ScheduledSession:
        entry = self.repository.get_by_id(session_id)
        if entry is None:
            raise NotFoundError("session", "Scheduled session not found", {"session_id": session_id})
        if user.role == UserRole.TRAINER:
            if entry.trainer_id != user.id:
                raise ForbiddenError("Session belongs to another trainer")
            return entry
        client = ClientRepository(self.session).get_by_user(user.id)
        if client is None or entry.client_id != client.id:
            raise ForbiddenError("Session belongs to another client")
        return entry
