"""
Client profile repository.
"""

from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.client import ClientProfile


class ClientRepository:
    """Repository for ClientProfile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, client: ClientProfile) -> ClientProfile:
        self.session.add(client)
        self.session.commit()
        self.session.refresh(client)
        return client

    def get_by_id(self, client_id: int) -> Optional[ClientProfile]:
        return self.session.get(ClientProfile, client_id)

    def get_by_user(self, user_id: int) -> Optional[ClientProfile]:
        statement = select(ClientProfile).where(ClientProfile.user_id == user_id)
        return self.session.exec(statement).first()

    def get_all_by_trainer(self, trainer_id: int) -> list[ClientProfile]:
        statement = (select(ClientProfile).where(ClientProfile.trainer_id == trainer_id)
                     .order_by(ClientProfile.last_name, ClientProfile.first_name))
        return list(self.session.exec(statement).all())
