"""SQLModel database models."""

from fitcoach.models.user import User
from fitcoach.models.client import ClientProfile
from fitcoach.models.program import ProgramSession, WorkoutProgram
from fitcoach.models.client_program import ClientProgram
from fitcoach.models.scheduled_session import ScheduledSession
from fitcoach.models.checkin import DailyCheckin
from fitcoach.models.recommendation_log import ProgramRecommendationLog

__all__ = [
    "User",
    "ClientProfile",
    "WorkoutProgram",
    "ProgramSession",
    "ClientProgram",
    "ScheduledSession",
    "DailyCheckin",
    "ProgramRecommendationLog",
]
