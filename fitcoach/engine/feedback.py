"""
Recommendation feedback: closes the loop on the audit log.

Whenever a trainer assigns a program, the most recent recommendation of
that client that has not been acted on (``trainer_accepted IS NULL``) is
marked accepted or not.  An entry is updated at most once; later
assignments only find entries created by later recommendation runs.
"""

from __future__ import annotations

import datetime
from typing import Optional

from sqlmodel import Session

from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.models.recommendation_log import ProgramRecommendationLog

logger = get_logger(__name__)


def apply_feedback(
    entry: ProgramRecommendationLog,
    selected_program_id: int,
    feedback: Optional[str],
    now: datetime.datetime,
) -> ProgramRecommendationLog:
    """Fill the trainer columns of a pending log entry."""
    accepted = entry.recommended_program_id == selected_program_id
    entry.trainer_accepted = accepted
    if not accepted:
        entry.trainer_selected_program_id = selected_program_id
    entry.trainer_feedback = feedback
    entry.action_taken_at = now
    return entry


def record_recommendation_feedback(
    session: Session,
    client_id: int,
    selected_program_id: int,
    feedback: Optional[str] = None,
    as_of: Optional[datetime.datetime] = None,
    commit: bool = True,
) -> Optional[ProgramRecommendationLog]:
    """Record whether the trainer followed the latest recommendation.

    Args:
        session: Database session.
        client_id: Client profile ID.
        selected_program_id: Program the trainer actually assigned.
        feedback: Optional free-text trainer note.
        as_of: Action timestamp (defaults to now, naive UTC).
        commit: Commit immediately; ``False`` only flushes so the caller
            can include the update in a larger unit of work.

    Returns:
        The updated log entry, or ``None`` if no pending entry exists.
    """
    repo = RecommendationLogRepository(session)
    entry = repo.get_latest_pending(client_id)
    if entry is None:
        logger.debug("recommendation_feedback_skipped", client_id=client_id, reason="no_pending_entry")
        return None

    apply_feedback(entry, selected_program_id, feedback, as_of or datetime.datetime.utcnow())
    entry = repo.update(entry, commit=commit)

    logger.info(
        "recommendation_feedback_recorded",
        client_id=client_id,
        log_id=entry.id,
        recommended_program_id=entry.recommended_program_id,
        selected_program_id=selected_program_id,
        accepted=entry.trainer_accepted,
    )
    return entry
