"""
Recommendation ranking.

Scores every program visible to the client's trainer (global defaults
plus the trainer's own), drops the client's current program, sorts by
score and keeps the top N.  Each kept entry gets a confidence tier:

    LOW     total_sessions < 4 or weeks_since_start < 2   (not enough data)
    HIGH    score >= 80 and total_sessions >= 10
    MEDIUM  score >= 60 and total_sessions >= 6
    LOW     otherwise

The top-ranked entry (only) is written to the recommendation audit log
together with a snapshot of the client stats.  The audit write is not
part of the response contract: if it fails the error is logged and the
ranked list is still returned.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitcoach.core.exceptions import NotFoundError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.client import ClientRepository
from fitcoach.db.repositories.client_program import ClientProgramRepository
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.engine.goals import ROMANIAN_VOCABULARY, GoalVocabulary
from fitcoach.engine.scoring import DEFAULT_WEIGHTS, ScoringWeights, score_program
from fitcoach.engine.stats import StatsConfig, compute_client_stats
from fitcoach.models.enums import Confidence
from fitcoach.models.program import WorkoutProgram
from fitcoach.models.recommendation_log import ProgramRecommendationLog
from fitcoach.schemas.recommendation import (
    ClientStats,
    CurrentProgramSummary,
    ProgramCandidate,
    ProgramRecommendation,
    RecommendationResult,
    SessionTemplate,
)

logger = get_logger(__name__)

DEFAULT_LIMIT = 3


# ======================================================================
# Confidence
# ======================================================================


def determine_confidence(score: float, total_sessions: int, weeks_since_start: int) -> Confidence:
    """Confidence tier of a recommendation.

    Insufficient data overrides the score.
    """
    if total_sessions < 4 or weeks_since_start < 2:
        return Confidence.LOW
    if score >= 80 and total_sessions >= 10:
        return Confidence.HIGH
    if score >= 60 and total_sessions >= 6:
        return Confidence.MEDIUM
    return Confidence.LOW


# ======================================================================
# Pure ranking
# ======================================================================


def rank_programs(
    candidates: Iterable[ProgramCandidate],
    goal_text: Optional[str],
    stats: ClientStats,
    current_program_id: Optional[int] = None,
    current_duration_weeks: Optional[int] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY,
    limit: int = DEFAULT_LIMIT,
) -> list[ProgramRecommendation]:
    """Score, sort and truncate candidates.

    The current program is never part of the output.  Ties keep
    catalog order (stable sort).
    """
    recommendations: list[ProgramRecommendation] = []
    for candidate in candidates:
        if current_program_id is not None and candidate.id == current_program_id:
            continue

        scored = score_program(candidate, goal_text, stats, current_duration_weeks=current_duration_weeks,
                               weights=weights, vocabulary=vocabulary)
        recommendations.append(ProgramRecommendation(
            program_id=scored.program_id,
            program_name=scored.program_name,
            score=scored.score,
            confidence=determine_confidence(scored.score, stats.total_sessions, stats.weeks_since_start),
            reasons=scored.reasons,
            warnings=scored.warnings,
            factors=scored.factors,
        ))

    recommendations.sort(key=lambda r: r.score, reverse=True)
    return recommendations[:max(0, limit)]


# ======================================================================
# Database helpers
# ======================================================================


def to_candidate(program: WorkoutProgram, repo: ProgramRepository) -> ProgramCandidate:
    """Build the immutable candidate view of a program row."""
    templates = tuple(SessionTemplate(day_number=s.day_number, name=s.name, focus=s.focus)
                      for s in repo.get_sessions(program.id))
    return ProgramCandidate(
        id=program.id,
        name=program.name,
        description=program.description or "",
        sessions_per_week=program.sessions_per_week,
        duration_weeks=program.duration_weeks,
        sessions=templates,
    )


def _log_recommendation(
    session: Session,
    client_id: int,
    recommendation: ProgramRecommendation,
    stats: ClientStats,
) -> Optional[int]:
    """Persist the audit entry of the top recommendation.

    Returns the new row ID, or ``None`` when the write failed.
    """
    entry = ProgramRecommendationLog(
        client_id=client_id,
        recommended_program_id=recommendation.program_id,
        score=recommendation.score,
        confidence=recommendation.confidence,
        reasons=list(recommendation.reasons),
        warnings=list(recommendation.warnings),
        client_stats=stats.model_dump(),
    )
    try:
        entry = RecommendationLogRepository(session).create(entry)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("recommendation_log_write_failed", client_id=client_id,
                         program_id=recommendation.program_id)
        return None
    return entry.id


# ======================================================================
# Main entry point
# ======================================================================


def generate_recommendations(
    session: Session,
    client_id: int,
    as_of: Optional[datetime.datetime] = None,
    weights: Optional[ScoringWeights] = None,
    vocabulary: Optional[GoalVocabulary] = None,
    stats_config: Optional[StatsConfig] = None,
    limit: int = DEFAULT_LIMIT,
) -> RecommendationResult:
    """Rank programs for a client and log the top choice.

    Args:
        session: Database session.
        client_id: Client profile ID.
        as_of: Reference datetime (defaults to now, naive UTC).
        weights: Optional :class:`ScoringWeights` override.
        vocabulary: Optional goal vocabulary override.
        stats_config: Optional stats window override.
        limit: Number of recommendations to return.

    Returns:
        :class:`RecommendationResult` with the ranked list, the current
        program summary (if any) and the raw client stats.

    Raises:
        NotFoundError: if the client does not exist.
    """
    now = as_of or datetime.datetime.utcnow()

    client = ClientRepository(session).get_by_id(client_id)
    if client is None:
        raise NotFoundError("client", "Client not found", {"client_id": client_id})

    stats = compute_client_stats(session, client_id, now, stats_config)

    program_repo = ProgramRepository(session)
    assignment = ClientProgramRepository(session).get_by_client(client_id)
    current_program = program_repo.get_by_id(assignment.program_id) if assignment else None

    candidates = [to_candidate(p, program_repo) for p in program_repo.get_visible_to_trainer(client.trainer_id)]

    recommendations = rank_programs(
        candidates,
        client.goal_description,
        stats,
        current_program_id=assignment.program_id if assignment else None,
        current_duration_weeks=current_program.duration_weeks if current_program else None,
        weights=weights or DEFAULT_WEIGHTS,
        vocabulary=vocabulary or ROMANIAN_VOCABULARY,
        limit=limit,
    )

    summary = None
    if assignment and current_program:
        summary = CurrentProgramSummary(
            program_id=current_program.id,
            program_name=current_program.name,
            weeks_since_start=stats.weeks_since_start,
            completion_rate=stats.completion_rate,
            total_sessions=stats.total_sessions,
            completed=stats.completed_sessions,
            cancelled=stats.cancelled_sessions,
            no_show=stats.no_show_sessions,
        )

    log_id = None
    if recommendations:
        log_id = _log_recommendation(session, client_id, recommendations[0], stats)

    logger.info(
        "recommendations_generated",
        client_id=client_id,
        candidates=len(candidates),
        returned=len(recommendations),
        top_program_id=recommendations[0].program_id if recommendations else None,
        top_score=recommendations[0].score if recommendations else None,
        log_id=log_id,
    )

    return RecommendationResult(
        recommendations=recommendations,
        current_program=summary,
        client_stats=stats,
        log_id=log_id,
    )
