"""
User repository.

Identity lookups for the caller resolved from the gateway header.
"""

from typing import Optional

from sqlmodel import Session

from fitcoach.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_active(self, user_id: int) -> Optional[User]:
        """User *user_id*, or ``None`` if unknown or deactivated."""
        user = self.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user
