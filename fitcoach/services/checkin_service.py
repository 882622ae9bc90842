"""
Daily check-in service.

One check-in per client per day; submitting again the same day
overwrites the earlier values.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from fitcoach.db.repositories.checkin import CheckinRepository
from fitcoach.models.checkin import DailyCheckin
from fitcoach.models.user import User
from fitcoach.schemas.checkin import CheckinCreate, CheckinResponse
from fitcoach.services.access import get_accessible_client, get_own_profile


class CheckinService:
    """Service for daily check-in business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = CheckinRepository(session)

    def upsert_today(self, user: User, data: CheckinCreate,
                     today: Optional[datetime.date] = None, ) -> CheckinResponse:
        client = get_own_profile(self.session, user)
        day = today or datetime.datetime.utcnow().date()

        entry = self.repository.get_by_client_and_date(client.id, day)
        if entry is None:
            entry = DailyCheckin(client_id=client.id, date=day, nutrition_score=data.nutrition_score,
                                 pain_at_training=data.pain_at_training, note=data.note, )
            entry = self.repository.create(entry)
        else:
            entry.nutrition_score = data.nutrition_score
            entry.pain_at_training = data.pain_at_training
            entry.note = data.note
            entry.updated_at = datetime.datetime.utcnow()
            entry = self.repository.update(entry)
        return CheckinResponse.model_validate(entry)

    def list_range(self, user: User, client_id: int, start: datetime.date,
                   end: datetime.date, ) -> list[CheckinResponse]:
        client = get_accessible_client(self.session, user, client_id)
        entries = self.repository.get_by_client_date_range(client.id, start, end)
        return [CheckinResponse.model_validate(e) for e in entries]
