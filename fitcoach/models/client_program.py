"""
Client program assignment model.

At most one active assignment per client (unique ``client_id``).
``training_days`` holds the chosen weekday tags in the order the trainer
picked them; its length equals the program's ``sessions_per_week``.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ClientProgram(SQLModel, table=True):
    """Binding of one program to one client."""

    __tablename__ = "client_programs"

    id: Optional[int] = Field(default=None, primary_key=True)
    client_id: int = Field(foreign_key="client_profiles.id", nullable=False, unique=True, index=True)
    program_id: int = Field(foreign_key="workout_programs.id", nullable=False, index=True)
    start_date: datetime.date = Field(nullable=False)
    training_days: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    is_customized: bool = Field(default=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
