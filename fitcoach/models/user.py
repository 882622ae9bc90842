"""
User database model.

Identity record for trainers and clients.  Credentials live with the
external identity provider; this table only anchors ownership.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from fitcoach.models.enums import UserRole


class User(SQLModel, table=True):
    """A trainer or client account."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: UserRole = Field(default=UserRole.CLIENT, nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
