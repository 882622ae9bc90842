"""
Scheduling schemas: calendar generation output and booking requests.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fitcoach.models.enums import SessionStatus


class PlannedSession(BaseModel):
    """A session produced by the calendar generator, before insertion."""

    model_config = ConfigDict(frozen=True)

    session_name: str
    session_type: Optional[str]
    start_at: datetime.datetime
    end_at: Optional[datetime.datetime] = None
    week_index: int = Field(..., ge=0)
    template_index: int = Field(..., ge=0)


class ScheduledSessionCreate(BaseModel):
    """Trainer books a session for one of their clients."""

    client_id: int
    session_name: str = Field(..., min_length=1, max_length=255)
    session_type: Optional[str] = Field(None, max_length=50)
    start_at: datetime.datetime
    end_at: Optional[datetime.datetime] = None
    auto_recommended: bool = False


class ClientSessionCreate(BaseModel):
    """Client self-books the next session in their program rotation."""

    start_at: datetime.datetime
    end_at: Optional[datetime.datetime] = None


class ScheduledSessionUpdate(BaseModel):
    """Trainer edits or moves a session; omitted or null fields are left unchanged."""

    session_name: Optional[str] = Field(None, min_length=1, max_length=255)
    session_type: Optional[str] = Field(None, max_length=50)
    start_at: Optional[datetime.datetime] = None
    end_at: Optional[datetime.datetime] = None
    notes: Optional[str] = Field(None, max_length=1000)


class SessionStatusUpdate(BaseModel):
    status: SessionStatus


class SessionComplete(BaseModel):
    notes: Optional[str] = Field(None, max_length=1000)


class RecommendedSessionResponse(BaseModel):
    session_name: str
    session_type: Optional[str]


class ScheduledSessionResponse(BaseModel):
    """Schema for a scheduled session in API responses."""

    id: int
    client_id: int
    trainer_id: int
    session_name: str
    session_type: Optional[str]
    start_at: datetime.datetime
    end_at: Optional[datetime.datetime]
    status: SessionStatus
    auto_recommended: bool
    completed_at: Optional[datetime.datetime]
    notes: Optional[str]

    class Config:
        from_attributes = True


class WeekCalendarResponse(BaseModel):
    week_start: datetime.datetime
    week_end: datetime.datetime
    sessions: list[ScheduledSessionResponse]


class SessionPage(BaseModel):
    """One page of a filtered session listing."""

    data: list[ScheduledSessionResponse]
    total: int
    offset: int
    limit: int
