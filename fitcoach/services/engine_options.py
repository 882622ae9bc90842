"""
Engine configuration built from application settings.

Engine functions take explicit config objects with defaults; the
services build them here so the values come from ``.env``.
"""

from fitcoach.core.config import Settings, settings
from fitcoach.engine.conflict_guard import SchedulingLimits
from fitcoach.engine.goals import GoalVocabulary, get_vocabulary
from fitcoach.engine.stats import StatsConfig


def stats_config(cfg: Settings = settings) -> StatsConfig:
    return StatsConfig(window_days=cfg.STATS_WINDOW_DAYS)


def scheduling_limits(cfg: Settings = settings) -> SchedulingLimits:
    return SchedulingLimits(
        max_sessions_per_day=cfg.MAX_SESSIONS_PER_DAY,
        min_interval_hours=cfg.MIN_SESSION_INTERVAL_HOURS,
    )


def goal_vocabulary(cfg: Settings = settings) -> GoalVocabulary:
    return get_vocabulary(cfg.GOAL_VOCABULARY)
