"""
Workout program API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProgramSessionCreate(BaseModel):
    day_number: int = Field(..., ge=1, le=7)
    name: str = Field(..., min_length=1, max_length=255)
    focus: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = Field(None, max_length=1000)


class ProgramCreate(BaseModel):
    """Schema for creating a trainer-owned program."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    sessions_per_week: int = Field(..., ge=1, le=7)
    duration_weeks: Optional[int] = Field(None, ge=1, le=52)
    sessions: list[ProgramSessionCreate]


class ProgramSessionResponse(BaseModel):
    id: int
    day_number: int
    name: str
    focus: Optional[str]
    notes: Optional[str]

    class Config:
        from_attributes = True


class ProgramResponse(BaseModel):
    id: int
    trainer_id: Optional[int]
    name: str
    description: Optional[str]
    sessions_per_week: int
    duration_weeks: Optional[int]
    is_default: bool
    sessions: list[ProgramSessionResponse]
    created_at: datetime.datetime
