"""
Client program assignment repository.
"""

from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.client_program import ClientProgram


class ClientProgramRepository:
    """Repository for ClientProgram database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_client(self, client_id: int) -> Optional[ClientProgram]:
        statement = select(ClientProgram).where(ClientProgram.client_id == client_id)
        return self.session.exec(statement).first()

    def save(self, assignment: ClientProgram, commit: bool = True) -> ClientProgram:
        self.session.add(assignment)
        if commit:
            self.session.commit()
            self.session.refresh(assignment)
        else:
            self.session.flush()
        return assignment
