"""
Daily check-in repository.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.checkin import DailyCheckin


class CheckinRepository:
    """Repository for DailyCheckin database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: DailyCheckin) -> DailyCheckin:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def update(self, entry: DailyCheckin) -> DailyCheckin:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_client_and_date(self, client_id: int, date: datetime.date) -> Optional[DailyCheckin]:
        statement = select(DailyCheckin).where(DailyCheckin.client_id == client_id, DailyCheckin.date == date, )
        return self.session.exec(statement).first()

    def get_by_client_date_range(self, client_id: int, start: datetime.date,
                                 end: datetime.date, ) -> list[DailyCheckin]:
        """Check-ins for a client within a date range (inclusive)."""
        statement = (select(DailyCheckin).where(DailyCheckin.client_id == client_id, DailyCheckin.date >= start,
                                                DailyCheckin.date <= end, ).order_by(DailyCheckin.date))
        return list(self.session.exec(statement).all())
