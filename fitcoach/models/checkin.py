"""
Daily check-in model.

One entry per client per day (enforced by unique constraint) with the
nutrition adherence score and whether the client felt pain training.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class DailyCheckin(SQLModel, table=True):
    """Client-submitted daily record."""

    __tablename__ = "daily_checkins"
    __table_args__ = (UniqueConstraint("client_id", "date", name="uq_checkin_client_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    client_id: int = Field(foreign_key="client_profiles.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    nutrition_score: int = Field(default=0, ge=0, le=10)
    pain_at_training: bool = Field(default=False)
    note: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
