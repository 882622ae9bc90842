"""
Daily check-in endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from fitcoach.api.dependencies import get_current_user
from fitcoach.db.session import get_db
from fitcoach.models.user import User
from fitcoach.schemas.checkin import CheckinCreate, CheckinResponse
from fitcoach.services.checkin_service import CheckinService

router = APIRouter()


@router.put("/today", summary="Submit or update today's check-in.", response_model=CheckinResponse, )
def upsert_today(data: CheckinCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return CheckinService(db).upsert_today(user, data)


@router.get("/{client_id}", summary="List check-ins of a client.", response_model=list[CheckinResponse], )
def list_checkins(client_id: int, start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    # Default: last 28 days
    end_date = end or datetime.datetime.utcnow().date()
    start_date = start or end_date - datetime.timedelta(days=28)
    return CheckinService(db).list_range(user, client_id, start_date, end_date)
