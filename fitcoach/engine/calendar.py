"""
Session calendar generation.

Expands a program assignment into dated training sessions:

    for week in 0 .. duration_weeks-1:
        for day in training_days (in the order given):
            date     = start_of_week(start_date) + week*7 + offset(day)
            template = templates[index % len(templates)]

Weeks start on Monday.  Templates rotate round-robin across the chosen
weekdays rather than being pinned to a weekday: a 2-template program on
3 weekdays yields A, B, A, B, A, B, ...

Regeneration (new assignment, training-day change) is one unit of work:
delete the client's future SCHEDULED sessions, check every planned session
against the conflict guard, insert, commit.  The whole calendar is
written, weeks already under way included, so the first session is
always the first template.  Any failure rolls the whole unit back, so a
retry starts from the same state.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from fitcoach.core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.db.repositories.scheduled_session import ScheduledSessionRepository
from fitcoach.engine.conflict_guard import DEFAULT_LIMITS, SchedulingLimits, check_session_limits
from fitcoach.engine.scoring import DEFAULT_DURATION_WEEKS
from fitcoach.models.client_program import ClientProgram
from fitcoach.models.enums import SessionStatus, Weekday
from fitcoach.models.scheduled_session import ScheduledSession
from fitcoach.schemas.recommendation import SessionTemplate
from fitcoach.schemas.schedule import PlannedSession

logger = get_logger(__name__)

DEFAULT_SESSION_TIME = datetime.time(9, 0)


def start_of_week(day: datetime.date) -> datetime.date:
    """Monday of the week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def validate_training_days(training_days: Iterable[str | Weekday], sessions_per_week: int) -> list[Weekday]:
    """Parse weekday tags and check them against the program frequency.

    Raises:
        ValidationError: unknown tag, duplicates, or count different
            from ``sessions_per_week``.
    """
    try:
        days = [Weekday(d) for d in training_days]
    except ValueError as exc:
        raise ValidationError("training_days", str(exc))

    if len(days) != sessions_per_week:
        raise ValidationError(
            "training_days",
            f"Programul cere {sessions_per_week} zile de antrenament, au fost alese {len(days)}.",
            {"field": "training_days", "expected": sessions_per_week, "received": len(days)},
        )
    if len(set(days)) != len(days):
        raise ValidationError("training_days", "Zilele de antrenament trebuie să fie unice.")
    return days


def plan_sessions(
    templates: Sequence[SessionTemplate],
    training_days: Iterable[str | Weekday],
    sessions_per_week: int,
    start_date: datetime.date,
    duration_weeks: Optional[int] = None,
    session_time: datetime.time = DEFAULT_SESSION_TIME,
    session_length_minutes: Optional[int] = None,
) -> list[PlannedSession]:
    """Compute the full session calendar of an assignment (pure).

    Args:
        templates: Program session templates.
        training_days: Chosen weekdays, in the trainer's order.
        sessions_per_week: Program frequency; must equal the number of
            training days.
        start_date: Assignment start date.
        duration_weeks: Program length (12 if unset).
        session_time: Time of day of every session.
        session_length_minutes: If set, ``end_at`` is filled in.

    Raises:
        ValidationError: no templates or invalid training days.
    """
    if not templates:
        raise ValidationError("sessions", "Program must have at least one session")
    days = validate_training_days(training_days, sessions_per_week)

    ordered = sorted(templates, key=lambda t: t.day_number)
    weeks = duration_weeks or DEFAULT_DURATION_WEEKS
    week_start = start_of_week(start_date)

    planned: list[PlannedSession] = []
    index = 0
    for week in range(weeks):
        for day in days:
            date = week_start + datetime.timedelta(days=week * 7 + day.offset)
            template_index = index % len(ordered)
            template = ordered[template_index]
            start_at = datetime.datetime.combine(date, session_time)
            end_at = (start_at + datetime.timedelta(minutes=session_length_minutes)
                      if session_length_minutes else None)
            planned.append(PlannedSession(
                session_name=template.name,
                session_type=template.focus,
                start_at=start_at,
                end_at=end_at,
                week_index=week,
                template_index=template_index,
            ))
            index += 1
    return planned


def _check_against_existing(
    repo: ScheduledSessionRepository,
    client_id: int,
    planned: list[PlannedSession],
    limits: SchedulingLimits,
) -> None:
    """Run the conflict guard over a batch, including sessions of the batch itself."""
    if not planned:
        return
    first = datetime.datetime.combine(min(p.start_at for p in planned).date(), datetime.time.min)
    last = datetime.datetime.combine(max(p.start_at for p in planned).date(), datetime.time.max)

    booked: dict[datetime.date, list[datetime.datetime]] = defaultdict(list)
    for existing in repo.get_by_client_range(client_id, first, last, SessionStatus.SCHEDULED):
        booked[existing.start_at.date()].append(existing.start_at)

    for session in planned:
        day = session.start_at.date()
        check_session_limits(booked[day], session.start_at, limits)
        booked[day].append(session.start_at)


def generate_scheduled_sessions(
    session: Session,
    client_id: int,
    trainer_id: int,
    assignment: ClientProgram,
    start_date: datetime.date,
    as_of: Optional[datetime.datetime] = None,
    limits: Optional[SchedulingLimits] = None,
    session_time: datetime.time = DEFAULT_SESSION_TIME,
    session_length_minutes: Optional[int] = None,
    default_duration_weeks: int = DEFAULT_DURATION_WEEKS,
    commit: bool = True,
) -> list[ScheduledSession]:
    """(Re)generate the session calendar of a client.

    Future SCHEDULED sessions are replaced; completed, cancelled and
    past sessions are untouched.  Every planned session is inserted,
    including those dated before *as_of*, except where a kept session
    already occupies that exact past slot.

    Args:
        session: Database session.
        client_id: Client profile ID.
        trainer_id: Trainer owning the generated sessions.
        assignment: The client's program assignment.
        start_date: First week of the calendar.
        as_of: Reference datetime (defaults to now, naive UTC).
        limits: Optional conflict guard limits.
        session_time: Time of day of generated sessions.
        session_length_minutes: Optional session length for ``end_at``.
        default_duration_weeks: Length used when the program has none.
        commit: Commit the unit of work; ``False`` only flushes.

    Returns:
        The inserted :class:`ScheduledSession` rows.

    Raises:
        NotFoundError: the assigned program does not exist.
        ValidationError: invalid training days or empty program.
        ConflictError: a generated session violates the guard.
    """
    now = as_of or datetime.datetime.utcnow()
    program_repo = ProgramRepository(session)
    program = program_repo.get_by_id(assignment.program_id)
    if program is None:
        raise NotFoundError("program", "Program not found", {"program_id": assignment.program_id})

    templates = [SessionTemplate(day_number=s.day_number, name=s.name, focus=s.focus)
                 for s in program_repo.get_sessions(program.id)]

    # Validation happens here, before anything is written.
    planned = plan_sessions(
        templates,
        assignment.training_days,
        program.sessions_per_week,
        start_date,
        duration_weeks=program.duration_weeks or default_duration_weeks,
        session_time=session_time,
        session_length_minutes=session_length_minutes,
    )

    repo = ScheduledSessionRepository(session)
    try:
        removed = repo.delete_future_scheduled(client_id, now)
        # Slots up to now that survived the delete are history (or a
        # previous run of this same calendar) and are kept as they are.
        kept = repo.get_start_times(client_id, min(p.start_at for p in planned), now)
        pending = [p for p in planned if not (p.start_at <= now and p.start_at in kept)]
        _check_against_existing(repo, client_id, pending, limits or DEFAULT_LIMITS)
        rows = [
            ScheduledSession(
                client_id=client_id,
                trainer_id=trainer_id,
                session_name=p.session_name,
                session_type=p.session_type,
                start_at=p.start_at,
                end_at=p.end_at,
                status=SessionStatus.SCHEDULED,
                auto_recommended=True,
            )
            for p in pending
        ]
        repo.add_all(rows)
        if commit:
            session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError("Calendarul generat se suprapune cu o sesiune existentă.", code=ConflictError.SLOT_TAKEN,
                            details={"client_id": client_id})
    except (DomainError, SQLAlchemyError):
        session.rollback()
        raise

    logger.info(
        "sessions_generated",
        client_id=client_id,
        program_id=program.id,
        start_date=start_date.isoformat(),
        planned=len(planned),
        inserted=len(rows),
        reused=len(planned) - len(rows),
        replaced=removed,
    )
    return rows
