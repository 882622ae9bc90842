"""Pydantic schemas for engine value types and request/response validation."""

from fitcoach.schemas.recommendation import (
    ClientStats,
    CurrentProgramSummary,
    ProgramCandidate,
    ProgramRecommendation,
    ProgramScore,
    RecommendationFeedback,
    RecommendationResult,
    SessionTemplate,
)
from fitcoach.schemas.schedule import (
    ClientSessionCreate,
    PlannedSession,
    RecommendedSessionResponse,
    ScheduledSessionCreate,
    ScheduledSessionResponse,
    SessionComplete,
    SessionStatusUpdate,
    WeekCalendarResponse,
)
from fitcoach.schemas.assignment import AssignmentResponse, AssignProgramRequest, UpdateTrainingDaysRequest
from fitcoach.schemas.program import ProgramCreate, ProgramResponse, ProgramSessionCreate, ProgramSessionResponse
from fitcoach.schemas.checkin import CheckinCreate, CheckinResponse

__all__ = [
    "ClientStats",
    "CurrentProgramSummary",
    "ProgramCandidate",
    "ProgramRecommendation",
    "ProgramScore",
    "RecommendationFeedback",
    "RecommendationResult",
    "SessionTemplate",
    "ClientSessionCreate",
    "PlannedSession",
    "RecommendedSessionResponse",
    "ScheduledSessionCreate",
    "ScheduledSessionResponse",
    "SessionComplete",
    "SessionStatusUpdate",
    "WeekCalendarResponse",
    "AssignmentResponse",
    "AssignProgramRequest",
    "UpdateTrainingDaysRequest",
    "ProgramCreate",
    "ProgramResponse",
    "ProgramSessionCreate",
    "ProgramSessionResponse",
    "CheckinCreate",
    "CheckinResponse",
]
