"""
Workout program database models.

A :class:`WorkoutProgram` is either a global default (``is_default``,
no trainer) or owned by a trainer.  Its :class:`ProgramSession` rows
are the ordered session templates the calendar rotates through.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class WorkoutProgram(SQLModel, table=True):
    """A named workout template with N sessions per week."""

    __tablename__ = "workout_programs"

    id: Optional[int] = Field(default=None, primary_key=True)
    trainer_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)

    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    sessions_per_week: int = Field(nullable=False, ge=1, le=7)

    # None means the default duration (12 weeks)
    duration_weeks: Optional[int] = Field(default=None, ge=1, le=52)

    is_default: bool = Field(default=False, index=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class ProgramSession(SQLModel, table=True):
    """One session template of a program (e.g. "Push A - Strength")."""

    __tablename__ = "program_sessions"
    __table_args__ = (UniqueConstraint("program_id", "day_number", name="uq_program_session_day"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    program_id: int = Field(foreign_key="workout_programs.id", nullable=False, index=True)
    day_number: int = Field(nullable=False, ge=1)
    name: str = Field(nullable=False, max_length=255)
    focus: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = Field(default=None, max_length=1000)
