"""
Scheduled training session model.

Rows are created ``SCHEDULED`` by the calendar generator or a booking
path, then moved to ``COMPLETED`` / ``CANCELLED`` / ``NO_SHOW``.

The (client_id, start_at) unique constraint is the database backstop for
the scheduling conflict guard: two concurrent bookings of the same slot
cannot both commit.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from fitcoach.models.enums import SessionStatus


class ScheduledSession(SQLModel, table=True):
    """A dated training session for a client."""

    __tablename__ = "scheduled_sessions"
    __table_args__ = (UniqueConstraint("client_id", "start_at", name="uq_scheduled_client_start"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    client_id: int = Field(foreign_key="client_profiles.id", nullable=False, index=True)
    trainer_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    session_name: str = Field(nullable=False, max_length=255)
    session_type: Optional[str] = Field(default=None, max_length=50)

    start_at: datetime.datetime = Field(nullable=False, index=True)
    end_at: Optional[datetime.datetime] = Field(default=None)

    status: SessionStatus = Field(default=SessionStatus.SCHEDULED, nullable=False, index=True)
    auto_recommended: bool = Field(default=False)
    completed_at: Optional[datetime.datetime] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
