"""
Scheduled session endpoints.

Trainer bookings and rescheduling, client self-booking, status changes,
listings and calendars.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from fitcoach.api.dependencies import get_current_user
from fitcoach.db.session import get_db
from fitcoach.models.enums import SessionStatus
from fitcoach.models.user import User
from fitcoach.schemas.schedule import (ClientSessionCreate, RecommendedSessionResponse, ScheduledSessionCreate,
                                       ScheduledSessionResponse, ScheduledSessionUpdate, SessionComplete, SessionPage,
                                       SessionStatusUpdate, WeekCalendarResponse, )
from fitcoach.services.schedule_service import ScheduleService

router = APIRouter()


@router.post("", summary="Book a session for a client (trainer).", response_model=ScheduledSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: ScheduledSessionCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return ScheduleService(db).create_session(user, data)


@router.post("/me", summary="Book the next session of my program (client).",
             response_model=ScheduledSessionResponse, status_code=status.HTTP_201_CREATED, )
def create_my_session(data: ClientSessionCreate, db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    return ScheduleService(db).create_for_client(user, data)


@router.get("/me/next", summary="Session template the next booking would use.",
            response_model=RecommendedSessionResponse, )
def get_next_session(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ScheduleService(db).get_client_recommendation(user)


@router.get("/me/upcoming", summary="My upcoming scheduled sessions.", response_model=list[ScheduledSessionResponse], )
def get_upcoming(limit: int = Query(5, ge=1, le=50), db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    return ScheduleService(db).get_upcoming(user, limit)


@router.get("", summary="List sessions with filters and pagination.", response_model=SessionPage, )
def list_sessions(client_id: Optional[int] = Query(None, description="Only this client (trainer)"),
                  start: Optional[datetime.datetime] = Query(None, description="Earliest start_at, inclusive"),
                  end: Optional[datetime.datetime] = Query(None, description="Latest start_at, inclusive"),
                  status_filter: Optional[SessionStatus] = Query(None, alias="status"),
                  offset: int = Query(0, ge=0), limit: int = Query(50, ge=1, le=100),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ScheduleService(db).list_sessions(user, client_id, start, end, status_filter, offset, limit)


@router.get("/history", summary="Completed sessions, most recent first.", response_model=SessionPage, )
def get_history(limit: int = Query(20, ge=1, le=100), offset: int = Query(0, ge=0), db: Session = Depends(get_db),
                user: User = Depends(get_current_user), ):
    return ScheduleService(db).get_history(user, limit, offset)


@router.get("/week", summary="Sessions of one week (Monday start).", response_model=WeekCalendarResponse, )
def get_week(week_of: Optional[datetime.date] = Query(None, description="Any date in the week (defaults to today)"),
             db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ScheduleService(db).get_week_calendar(user, week_of)


@router.patch("/{session_id}", summary="Edit or reschedule a session (trainer).",
              response_model=ScheduledSessionResponse, )
def update_session(session_id: int, data: ScheduledSessionUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return ScheduleService(db).update_session(user, session_id, data)


@router.patch("/{session_id}/status", summary="Change the status of a session.",
              response_model=ScheduledSessionResponse, )
def update_status(session_id: int, data: SessionStatusUpdate, db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), ):
    return ScheduleService(db).update_status(user, session_id, data)


@router.post("/{session_id}/complete", summary="Mark a session completed.", response_model=ScheduledSessionResponse, )
def complete_session(session_id: int, data: SessionComplete, db: Session = Depends(get_db),
                     user: User = Depends(get_current_user), ):
    return ScheduleService(db).complete_session(user, session_id, data)


@router.delete("/{session_id}", summary="Delete a session (trainer).", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    ScheduleService(db).delete(user, session_id)
