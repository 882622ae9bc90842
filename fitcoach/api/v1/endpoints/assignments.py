"""
Program assignment endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from fitcoach.api.dependencies import get_current_user
from fitcoach.db.session import get_db
from fitcoach.models.user import User
from fitcoach.schemas.assignment import AssignmentResponse, AssignProgramRequest, UpdateTrainingDaysRequest
from fitcoach.services.assignment_service import AssignmentService

router = APIRouter()


@router.post("/{client_id}", summary="Assign a program and generate the session calendar.",
             response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED, )
def assign_program(client_id: int, data: AssignProgramRequest, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    return AssignmentService(db).assign_program(user, client_id, data)


@router.get("/{client_id}", summary="Get the current assignment of a client.", response_model=AssignmentResponse, )
def get_assignment(client_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return AssignmentService(db).get_assignment(user, client_id)


@router.put("/{client_id}/training-days", summary="Change training days and regenerate future sessions.",
            response_model=AssignmentResponse, )
def update_training_days(client_id: int, data: UpdateTrainingDaysRequest, db: Session = Depends(get_db),
                         user: User = Depends(get_current_user), ):
    return AssignmentService(db).update_training_days(user, client_id, data)
