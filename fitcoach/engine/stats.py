"""
Client stats: rolling behavioral summary.

Summarises the last four weeks of a client's history into the
:class:`~fitcoach.schemas.recommendation.ClientStats` consumed by the
program scorer:

    completion_rate     = completed / total × 100
    consistency         = total / window_weeks   (sessions per week, any status)
    pain_frequency      = check-ins with pain / check-ins × 100
    avg_nutrition_score = mean(nutrition_score) over check-ins
    weeks_since_start   = whole weeks in the current assignment (0 if none)

Every rate is 0 when its denominator is 0.  Stats are computed fresh on
each request and never cached.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Protocol

from pydantic import BaseModel, Field
from sqlmodel import Session

from fitcoach.db.repositories.checkin import CheckinRepository
from fitcoach.db.repositories.client_program import ClientProgramRepository
from fitcoach.db.repositories.scheduled_session import ScheduledSessionRepository
from fitcoach.models.enums import SessionStatus
from fitcoach.schemas.recommendation import ClientStats


class StatsConfig(BaseModel):
    """Configuration for the trailing stats window."""

    window_days: int = Field(28, ge=7, le=84)

    @property
    def window_weeks(self) -> float:
        return self.window_days / 7.0


DEFAULT_STATS_CONFIG = StatsConfig()


class _SessionLike(Protocol):
    status: SessionStatus


class _CheckinLike(Protocol):
    nutrition_score: int
    pain_at_training: bool


def weeks_between(start_date: datetime.date, as_of: datetime.datetime) -> int:
    """Whole weeks elapsed since *start_date*; 0 for future start dates."""
    days = (as_of.date() - start_date).days
    return max(0, days // 7)


def summarize_history(
    sessions: Iterable[_SessionLike],
    checkins: Iterable[_CheckinLike],
    weeks_since_start: int = 0,
    window_weeks: float = 4.0,
) -> ClientStats:
    """Build :class:`ClientStats` from the records of one window."""
    sessions = list(sessions)
    checkins = list(checkins)

    total = len(sessions)
    completed = sum(1 for s in sessions if s.status == SessionStatus.COMPLETED)
    cancelled = sum(1 for s in sessions if s.status == SessionStatus.CANCELLED)
    no_show = sum(1 for s in sessions if s.status == SessionStatus.NO_SHOW)

    completion_rate = completed / total * 100 if total > 0 else 0.0
    consistency = total / window_weeks if window_weeks > 0 else 0.0

    if checkins:
        pain_frequency = sum(1 for c in checkins if c.pain_at_training) / len(checkins) * 100
        avg_nutrition = sum(c.nutrition_score for c in checkins) / len(checkins)
    else:
        pain_frequency = 0.0
        avg_nutrition = 0.0

    return ClientStats(
        completion_rate=completion_rate,
        consistency=consistency,
        pain_frequency=pain_frequency,
        avg_nutrition_score=avg_nutrition,
        weeks_since_start=max(0, weeks_since_start),
        total_sessions=total,
        completed_sessions=completed,
        cancelled_sessions=cancelled,
        no_show_sessions=no_show,
    )


def compute_client_stats(
    session: Session,
    client_id: int,
    as_of: datetime.datetime,
    config: Optional[StatsConfig] = None,
) -> ClientStats:
    """Compute the rolling stats of a client as of *as_of*.

    Sessions are counted over the instant window ``[as_of - window, as_of]``.
    Check-ins are whole days, so they are counted over the last
    ``window_days`` calendar dates ending on ``as_of.date()``; the partial
    day at the start of the instant window is left out.

    Args:
        session: Database session.
        client_id: Client profile ID.
        as_of: Reference datetime (typically now, naive UTC).
        config: Optional :class:`StatsConfig` override.

    Returns:
        :class:`ClientStats` for the window.
    """
    cfg = config or DEFAULT_STATS_CONFIG
    window_start = as_of - datetime.timedelta(days=cfg.window_days)

    assignment = ClientProgramRepository(session).get_by_client(client_id)
    weeks = weeks_between(assignment.start_date, as_of) if assignment else 0

    sessions = ScheduledSessionRepository(session).get_by_client_range(client_id, window_start, as_of)
    first_day = as_of.date() - datetime.timedelta(days=cfg.window_days - 1)
    checkins = CheckinRepository(session).get_by_client_date_range(client_id, first_day, as_of.date())

    return summarize_history(sessions, checkins, weeks_since_start=weeks, window_weeks=cfg.window_weeks)
