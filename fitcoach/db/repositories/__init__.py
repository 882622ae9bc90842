"""Database repositories."""

from fitcoach.db.repositories.client import ClientRepository
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.db.repositories.client_program import ClientProgramRepository
from fitcoach.db.repositories.scheduled_session import ScheduledSessionRepository
from fitcoach.db.repositories.checkin import CheckinRepository
from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.db.repositories.user import UserRepository

__all__ = [
    "ClientRepository",
    "ProgramRepository",
    "ClientProgramRepository",
    "ScheduledSessionRepository",
    "CheckinRepository",
    "RecommendationLogRepository",
    "UserRepository",
]
