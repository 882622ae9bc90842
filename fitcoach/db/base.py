"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from fitcoach.models.user import User  # noqa: F401
from fitcoach.models.client import ClientProfile  # noqa: F401
from fitcoach.models.program import ProgramSession, WorkoutProgram  # noqa: F401
from fitcoach.models.client_program import ClientProgram  # noqa: F401
from fitcoach.models.scheduled_session import ScheduledSession  # noqa: F401
from fitcoach.models.checkin import DailyCheckin  # noqa: F401
from fitcoach.models.recommendation_log import ProgramRecommendationLog  # noqa: F401
