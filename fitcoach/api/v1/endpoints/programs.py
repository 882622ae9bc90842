"""
Program catalog endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from fitcoach.api.dependencies import get_current_user
from fitcoach.db.session import get_db
from fitcoach.models.user import User
from fitcoach.schemas.program import ProgramCreate, ProgramResponse
from fitcoach.services.program_service import ProgramService

router = APIRouter()


@router.get("", summary="List programs visible to the caller.", response_model=list[ProgramResponse], )
def list_programs(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProgramService(db).list_visible(user)


@router.post("", summary="Create a trainer-owned program.", response_model=ProgramResponse,
             status_code=status.HTTP_201_CREATED, )
def create_program(data: ProgramCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProgramService(db).create(user, data)


@router.get("/{program_id}", summary="Get a program with its sessions.", response_model=ProgramResponse, )
def get_program(program_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ProgramService(db).get(user, program_id)


@router.post("/{program_id}/clone", summary="Copy a program into the trainer's catalog.",
             response_model=ProgramResponse, status_code=status.HTTP_201_CREATED, )
def clone_program(program_id: int, name: Optional[str] = Query(None, max_length=255), db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), ):
    return ProgramService(db).clone(user, program_id, name)
