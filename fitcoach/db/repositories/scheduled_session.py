"""
Scheduled session repository.

Handles database operations for :class:`ScheduledSession`, including the
day-window reads used by the scheduling conflict guard and the
delete/insert pair used when a calendar is regenerated.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from fitcoach.models.enums import SessionStatus
from fitcoach.models.scheduled_session import ScheduledSession


class ScheduledSessionRepository:
    """Repository for ScheduledSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: ScheduledSession) -> ScheduledSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[ScheduledSession]:
        return self.session.get(ScheduledSession, entry_id)

    def get_by_client_range(self, client_id: int, start: datetime.datetime, end: datetime.datetime,
                            status: Optional[SessionStatus] = None, ) -> list[ScheduledSession]:
        """Sessions with ``start <= start_at <= end``, oldest first."""
        statement = select(ScheduledSession).where(ScheduledSession.client_id == client_id,
                                                   ScheduledSession.start_at >= start,
                                                   ScheduledSession.start_at <= end, )
        if status is not None:
            statement = statement.where(ScheduledSession.status == status)
        return list(self.session.exec(statement.order_by(ScheduledSession.start_at)).all())

    def get_by_trainer_range(self, trainer_id: int, start: datetime.datetime,
                             end: datetime.datetime, ) -> list[ScheduledSession]:
        statement = (select(ScheduledSession).where(ScheduledSession.trainer_id == trainer_id,
                                                    ScheduledSession.start_at >= start,
                                                    ScheduledSession.start_at < end, )
                     .order_by(ScheduledSession.start_at))
        return list(self.session.exec(statement).all())

    def find_page(self, client_id: Optional[int] = None, trainer_id: Optional[int] = None,
                  start: Optional[datetime.datetime] = None, end: Optional[datetime.datetime] = None,
                  status: Optional[SessionStatus] = None, offset: int = 0, limit: int = 50,
                  newest_completed_first: bool = False, ) -> tuple[list[ScheduledSession], int]:
        """Filtered page of sessions plus the total number of matches.

        Ordered by ``start_at`` ascending, or by ``completed_at`` descending
        for history views.
        """
        conditions = []
        if client_id is not None:
            conditions.append(ScheduledSession.client_id == client_id)
        if trainer_id is not None:
            conditions.append(ScheduledSession.trainer_id == trainer_id)
        if start is not None:
            conditions.append(ScheduledSession.start_at >= start)
        if end is not None:
            conditions.append(ScheduledSession.start_at <= end)
        if status is not None:
            conditions.append(ScheduledSession.status == status)

        order = ((ScheduledSession.completed_at.desc(), ScheduledSession.id.desc()) if newest_completed_first
                 else (ScheduledSession.start_at, ScheduledSession.id))
        statement = select(ScheduledSession).where(*conditions).order_by(*order).offset(offset).limit(limit)
        total = self.session.exec(select(func.count()).select_from(ScheduledSession).where(*conditions)).one()
        return list(self.session.exec(statement).all()), total

    # ------------------------------------------------------------------
    # Conflict guard queries
    # ------------------------------------------------------------------

    def get_scheduled_on_day(self, client_id: int, day: datetime.date,
                             exclude_id: Optional[int] = None, ) -> list[ScheduledSession]:
        """SCHEDULED sessions of a client on one (UTC) calendar day, optionally minus one row."""
        day_start = datetime.datetime.combine(day, datetime.time.min)
        day_end = datetime.datetime.combine(day, datetime.time.max)
        entries = self.get_by_client_range(client_id, day_start, day_end, SessionStatus.SCHEDULED)
        return [e for e in entries if exclude_id is None or e.id != exclude_id]

    def get_start_times(self, client_id: int, start: datetime.datetime,
                        end: datetime.datetime, ) -> set[datetime.datetime]:
        """Occupied slots of a client in ``[start, end]``, any status."""
        return {e.start_at for e in self.get_by_client_range(client_id, start, end)}

    def count_scheduled(self, client_id: int) -> int:
        statement = (select(func.count()).select_from(ScheduledSession)
                     .where(ScheduledSession.client_id == client_id,
                            ScheduledSession.status == SessionStatus.SCHEDULED, ))
        return self.session.exec(statement).first() or 0

    def get_upcoming(self, client_id: int, now: datetime.datetime, limit: int = 5) -> list[ScheduledSession]:
        statement = (select(ScheduledSession).where(ScheduledSession.client_id == client_id,
                                                    ScheduledSession.status == SessionStatus.SCHEDULED,
                                                    ScheduledSession.start_at >= now, )
                     .order_by(ScheduledSession.start_at).limit(limit))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Calendar regeneration (flush only, the caller commits)
    # ------------------------------------------------------------------

    def delete_future_scheduled(self, client_id: int, after: datetime.datetime) -> int:
        """Delete SCHEDULED sessions starting after *after*.  Returns the count."""
        statement = select(ScheduledSession).where(ScheduledSession.client_id == client_id,
                                                   ScheduledSession.status == SessionStatus.SCHEDULED,
                                                   ScheduledSession.start_at > after, )
        entries = list(self.session.exec(statement).all())
        for entry in entries:
            self.session.delete(entry)
        self.session.flush()
        return len(entries)

    def add_all(self, entries: list[ScheduledSession]) -> list[ScheduledSession]:
        self.session.add_all(entries)
        self.session.flush()
        return entries

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: ScheduledSession) -> ScheduledSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
