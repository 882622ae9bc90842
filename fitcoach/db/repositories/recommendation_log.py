"""
Recommendation log repository.
"""

from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.recommendation_log import ProgramRecommendationLog


class RecommendationLogRepository:
    """Repository for ProgramRecommendationLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: ProgramRecommendationLog) -> ProgramRecommendationLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_latest_pending(self, client_id: int) -> Optional[ProgramRecommendationLog]:
        """Most recent entry the trainer has not acted on yet."""
        statement = (select(ProgramRecommendationLog)
                     .where(ProgramRecommendationLog.client_id == client_id,
                            ProgramRecommendationLog.trainer_accepted == None,  # noqa: E711
                            )
                     .order_by(ProgramRecommendationLog.created_at.desc(), ProgramRecommendationLog.id.desc()))
        return self.session.exec(statement).first()

    def get_all_by_client(self, client_id: int) -> list[ProgramRecommendationLog]:
        statement = (select(ProgramRecommendationLog).where(ProgramRecommendationLog.client_id == client_id)
                     .order_by(ProgramRecommendationLog.created_at.desc(), ProgramRecommendationLog.id.desc()))
        return list(self.session.exec(statement).all())

    def update(self, entry: ProgramRecommendationLog, commit: bool = True) -> ProgramRecommendationLog:
        self.session.add(entry)
        if commit:
            self.session.commit()
            self.session.refresh(entry)
        else:
            self.session.flush()
        return entry
