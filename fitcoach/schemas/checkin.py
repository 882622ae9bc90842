"""
Daily check-in API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CheckinCreate(BaseModel):
    nutrition_score: int = Field(..., ge=0, le=10)
    pain_at_training: bool
    note: Optional[str] = Field(None, max_length=1000)


class CheckinResponse(BaseModel):
    id: int
    client_id: int
    date: datetime.date
    nutrition_score: int
    pain_at_training: bool
    note: Optional[str]

    class Config:
        from_attributes = True
