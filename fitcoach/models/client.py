"""
Client profile database model.

A client belongs to exactly one trainer.  ``goal_description`` is the
free-text goal the client states at onboarding; the recommendation
engine classifies it into a goal category.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class ClientProfile(SQLModel, table=True):
    """Client profile bound to a trainer."""

    __tablename__ = "client_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)
    trainer_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    first_name: str = Field(nullable=False, max_length=100)
    last_name: str = Field(nullable=False, max_length=100)
    goal_description: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
