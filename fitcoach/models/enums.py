"""Enumerations shared by the database models and the engine."""

from enum import Enum


class UserRole(str, Enum):
    TRAINER = "TRAINER"
    CLIENT = "CLIENT"


class SessionStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Weekday(str, Enum):
    """Training-day tags, in calendar order starting on Monday."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def offset(self) -> int:
        """Days after Monday."""
        return list(Weekday).index(self)
