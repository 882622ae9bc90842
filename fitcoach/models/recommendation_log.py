"""
Program recommendation audit log.

One row per recommendation run (top-ranked program only), with a frozen
snapshot of the client stats at decision time.  The trainer_* columns
are filled exactly once, when the trainer next assigns a program to the
client.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from fitcoach.models.enums import Confidence


class ProgramRecommendationLog(SQLModel, table=True):
    """Audit record of a recommendation and the trainer's response."""

    __tablename__ = "program_recommendation_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    client_id: int = Field(foreign_key="client_profiles.id", nullable=False, index=True)
    recommended_program_id: int = Field(foreign_key="workout_programs.id", nullable=False)

    score: float = Field(nullable=False)
    confidence: Confidence = Field(nullable=False)
    reasons: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    warnings: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    client_stats: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )

    # Trainer feedback (set once)
    trainer_accepted: Optional[bool] = Field(default=None, index=True)
    trainer_selected_program_id: Optional[int] = Field(default=None, foreign_key="workout_programs.id")
    trainer_feedback: Optional[str] = Field(default=None, max_length=2000)
    action_taken_at: Optional[datetime.datetime] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
