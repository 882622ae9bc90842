"""Recommendation and scheduling engine: stats, scoring, ranking, calendar, conflict guard."""

from fitcoach.engine.calendar import generate_scheduled_sessions, plan_sessions
from fitcoach.engine.conflict_guard import SchedulingLimits, enforce_session_limits
from fitcoach.engine.feedback import record_recommendation_feedback
from fitcoach.engine.ranking import generate_recommendations
from fitcoach.engine.scoring import ScoringWeights, score_program
from fitcoach.engine.stats import StatsConfig, compute_client_stats

__all__ = [
    "StatsConfig",
    "compute_client_stats",
    "ScoringWeights",
    "score_program",
    "generate_recommendations",
    "record_recommendation_feedback",
    "plan_sessions",
    "generate_scheduled_sessions",
    "SchedulingLimits",
    "enforce_session_limits",
]
