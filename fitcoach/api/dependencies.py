"""
Shared API dependencies.

Authentication happens upstream; the gateway forwards the authenticated
user ID in the ``X-User-Id`` header.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlmodel import Session

from fitcoach.core.logging import add_log_context
from fitcoach.db.repositories.user import UserRepository
from fitcoach.db.session import get_db
from fitcoach.models.user import User


def get_current_user(x_user_id: int = Header(..., alias="X-User-Id"), db: Session = Depends(get_db), ) -> User:
    """Resolve the calling user from the gateway header."""
    user = UserRepository(db).get_active(x_user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown or inactive user", )
    add_log_context(user_id=user.id, role=user.role.value)
    return user
