"""
Ownership checks shared by the services.

Identity comes from the upstream gateway; these helpers only decide
whether the calling user may act on a given client.
"""

from sqlmodel import Session

from fitcoach.core.exceptions import ForbiddenError, NotFoundError
from fitcoach.db.repositories.client import ClientRepository
from fitcoach.models.client import ClientProfile
from fitcoach.models.enums import UserRole
from fitcoach.models.user import User


def require_trainer(user: User) -> None:
    if user.role != UserRole.TRAINER:
        raise ForbiddenError("Trainer role required", code=ForbiddenError.TRAINER_REQUIRED)


def get_trainer_client(session: Session, trainer: User, client_id: int) -> ClientProfile:
    """Client *client_id*, provided it belongs to *trainer*."""
    require_trainer(trainer)
    client = ClientRepository(session).get_by_id(client_id)
    if client is None:
        raise NotFoundError("client", "Client not found", {"client_id": client_id})
    if client.trainer_id != trainer.id:
        raise ForbiddenError("Client does not belong to this trainer")
    return client


def get_own_profile(session: Session, user: User) -> ClientProfile:
    """Client profile of the calling user."""
    client = ClientRepository(session).get_by_user(user.id)
    if client is None:
        raise NotFoundError("client", "Client profile not found", {"user_id": user.id})
    return client


def get_accessible_client(session: Session, user: User, client_id: int) -> ClientProfile:
    """Client visible to *user*: their own profile, or one of their clients."""
    if user.role == UserRole.TRAINER:
        return get_trainer_client(session, user, client_id)
    client = get_own_profile(session, user)
    if client.id != client_id:
        raise ForbiddenError("Access to another client's data is not allowed")
    return client
