"""
Program assignment API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fitcoach.models.enums import Weekday


class AssignProgramRequest(BaseModel):
    """Schema for assigning a program to a client."""

    program_id: int
    start_date: datetime.date
    training_days: list[Weekday] = Field(..., min_length=1, max_length=7)
    customize: bool = Field(False, description="Clone the program for this client before assigning")
    feedback: Optional[str] = Field(None, max_length=2000, description="Trainer note on the recommendation")


class UpdateTrainingDaysRequest(BaseModel):
    training_days: list[Weekday] = Field(..., min_length=1, max_length=7)


class AssignmentResponse(BaseModel):
    """Schema for a client's program assignment in API responses."""

    id: int
    client_id: int
    program_id: int
    start_date: datetime.date
    training_days: list[Weekday]
    is_customized: bool
    sessions_generated: int = 0

    class Config:
        from_attributes = True
