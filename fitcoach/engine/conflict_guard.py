"""
Scheduling conflict guard.

Checked before any session insertion (trainer booking, client
self-booking, calendar generation).  Two hard rules, both rejected with
:class:`~fitcoach.core.exceptions.ConflictError`, never adjusted:

1. at most ``max_sessions_per_day`` SCHEDULED sessions per client per
   calendar day;
2. SCHEDULED sessions of the same client on the same day start at least
   ``min_interval_hours`` apart.

The check reads the day window and the insert happens afterwards, so
two concurrent requests can both pass it.  Callers insert inside the
same transaction and rely on the (client_id, start_at) unique constraint
as the final backstop; see :func:`save_guarded`.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from fitcoach.core.exceptions import ConflictError, NotFoundError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.scheduled_session import ScheduledSessionRepository
from fitcoach.models.enums import SessionStatus
from fitcoach.models.scheduled_session import ScheduledSession

logger = get_logger(__name__)

T = TypeVar("T")


class SchedulingLimits(BaseModel):
    """Per-client daily scheduling limits."""

    model_config = ConfigDict(frozen=True)

    max_sessions_per_day: int = Field(2, ge=1, le=10)
    min_interval_hours: float = Field(2.0, ge=0.0, le=24.0)

    @property
    def min_interval(self) -> datetime.timedelta:
        return datetime.timedelta(hours=self.min_interval_hours)


DEFAULT_LIMITS = SchedulingLimits()


def check_session_limits(
    existing_starts: Iterable[datetime.datetime],
    start_at: datetime.datetime,
    limits: SchedulingLimits = DEFAULT_LIMITS,
) -> None:
    """Validate *start_at* against the SCHEDULED starts already booked.

    Only starts on the same calendar day as *start_at* are considered.

    Raises:
        ConflictError: day limit reached or interval too short.
    """
    same_day = [s for s in existing_starts if s.date() == start_at.date()]

    if len(same_day) >= limits.max_sessions_per_day:
        raise ConflictError(
            f"Max {limits.max_sessions_per_day} sesiuni pe zi.",
            code=ConflictError.DAY_LIMIT,
            details={"date": start_at.date().isoformat(), "scheduled": len(same_day)},
        )

    for existing in same_day:
        if abs(existing - start_at) < limits.min_interval:
            raise ConflictError(
                f"Păstrează un interval de minim {limits.min_interval_hours:g} ore între sesiuni.",
                code=ConflictError.MIN_INTERVAL,
                details={"start_at": start_at.isoformat(), "conflicts_with": existing.isoformat()},
            )


def enforce_session_limits(
    session: Session,
    client_id: int,
    start_at: datetime.datetime,
    limits: Optional[SchedulingLimits] = None,
    exclude_id: Optional[int] = None,
) -> None:
    """Apply the guard to a session of *client_id* starting at *start_at*.

    *exclude_id* leaves one row out of the day window, so a session
    being moved is not counted against its own new slot.

    Raises:
        ConflictError: if either rule is violated.
    """
    existing = ScheduledSessionRepository(session).get_scheduled_on_day(client_id, start_at.date(), exclude_id)
    try:
        check_session_limits((s.start_at for s in existing), start_at, limits or DEFAULT_LIMITS)
    except ConflictError as exc:
        logger.warning("session_rejected", client_id=client_id, start_at=start_at.isoformat(), code=exc.code)
        raise


def save_guarded(
    session: Session,
    entry: ScheduledSession,
    limits: Optional[SchedulingLimits] = None,
) -> ScheduledSession:
    """Check the guard and write *entry* (new or rescheduled) in one transaction.

    Only SCHEDULED rows count against a day, so the limits are checked
    for those alone.  A unique-constraint violation on (client_id,
    start_at) means a concurrent request booked the same slot first; it is
    reported as a :class:`ConflictError` like any other guard rejection.
    """
    client_id, start_at = entry.client_id, entry.start_at
    if entry.status == SessionStatus.SCHEDULED:
        # a moved row must not be flushed before its old slot is read back
        with session.no_autoflush:
            enforce_session_limits(session, client_id, start_at, limits, exclude_id=entry.id)
    repo = ScheduledSessionRepository(session)
    try:
        return repo.create(entry) if entry.id is None else repo.update(entry)
    except IntegrityError:
        session.rollback()
        logger.warning("session_slot_taken", client_id=client_id, start_at=start_at.isoformat())
        raise ConflictError(
            "Există deja o sesiune programată la această oră.",
            code=ConflictError.SLOT_TAKEN,
            details={"start_at": start_at.isoformat()},
        )


def next_template_in_rotation(templates: Sequence[T], scheduled_count: int) -> T:
    """Next session template for a self-booked session.

    Round-robin on the client's current number of SCHEDULED sessions,
    independent of the calendar date.
    """
    if not templates:
        raise NotFoundError("program_session", "No active program sessions found")
    return templates[scheduled_count % len(templates)]
