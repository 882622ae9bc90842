"""
Program assignment service.

Assigning a program is one unit of work: optional customized copy of
the program, upsert of the client's single assignment, feedback on the
pending recommendation, and regeneration of the session calendar.  The
calendar step commits; any failure before that rolls everything back.
"""

import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitcoach.core.config import settings
from fitcoach.core.exceptions import DomainError, NotFoundError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.client_program import ClientProgramRepository
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.engine.calendar import generate_scheduled_sessions, validate_training_days
from fitcoach.engine.feedback import record_recommendation_feedback
from fitcoach.models.client_program import ClientProgram
from fitcoach.models.user import User
from fitcoach.schemas.assignment import AssignmentResponse, AssignProgramRequest, UpdateTrainingDaysRequest
from fitcoach.services import engine_options
from fitcoach.services.access import get_accessible_client, get_trainer_client
from fitcoach.services.program_service import ProgramService

logger = get_logger(__name__)


class AssignmentService:
    """Service for client program assignments."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ClientProgramRepository(session)
        self.programs = ProgramService(session)

    def assign_program(self, trainer: User, client_id: int, data: AssignProgramRequest,
                       as_of: Optional[datetime.datetime] = None, ) -> AssignmentResponse:
        """Assign (or replace) the program of a client and rebuild the calendar."""
        now = as_of or datetime.datetime.utcnow()
        client = get_trainer_client(self.session, trainer, client_id)
        program = self.programs.get_visible(trainer.id, data.program_id)
        days = validate_training_days(data.training_days, program.sessions_per_week)

        try:
            if data.customize:
                program = self.programs.clone_program(program, trainer.id, commit=False)

            assignment = self.repository.get_by_client(client.id)
            if assignment is None:
                assignment = ClientProgram(client_id=client.id, program_id=program.id, start_date=data.start_date)
            assignment.program_id = program.id
            assignment.start_date = data.start_date
            assignment.training_days = [d.value for d in days]
            assignment.is_customized = data.customize
            assignment.updated_at = now
            assignment = self.repository.save(assignment, commit=False)

            # Feedback refers to the catalog program the trainer picked, not the copy.
            record_recommendation_feedback(self.session, client.id, data.program_id, data.feedback, as_of=now,
                                           commit=False)

            sessions = self._generate(assignment, client.id, trainer.id, data.start_date, now)
        except (DomainError, SQLAlchemyError):
            self.session.rollback()
            raise

        logger.info("program_assigned", client_id=client.id, program_id=assignment.program_id,
                    customized=data.customize, sessions_generated=len(sessions))
        return self._to_response(assignment, len(sessions))

    def update_training_days(self, trainer: User, client_id: int, data: UpdateTrainingDaysRequest,
                             as_of: Optional[datetime.datetime] = None, ) -> AssignmentResponse:
        """Change the weekdays of the current assignment; the calendar is rebuilt from the current week."""
        now = as_of or datetime.datetime.utcnow()
        client = get_trainer_client(self.session, trainer, client_id)
        assignment = self.repository.get_by_client(client.id)
        if assignment is None:
            raise NotFoundError("client_program", "Client has no program assigned", {"client_id": client.id})
        program = ProgramRepository(self.session).get_by_id(assignment.program_id)
        if program is None:
            raise NotFoundError("program", "Program not found", {"program_id": assignment.program_id})
        days = validate_training_days(data.training_days, program.sessions_per_week)

        try:
            assignment.training_days = [d.value for d in days]
            assignment.updated_at = now
            assignment = self.repository.save(assignment, commit=False)
            sessions = self._generate(assignment, client.id, trainer.id, now.date(), now)
        except (DomainError, SQLAlchemyError):
            self.session.rollback()
            raise

        logger.info("training_days_updated", client_id=client.id, training_days=assignment.training_days,
                    sessions_generated=len(sessions))
        return self._to_response(assignment, len(sessions))

    def get_assignment(self, user: User, client_id: int) -> AssignmentResponse:
        client = get_accessible_client(self.session, user, client_id)
        assignment = self.repository.get_by_client(client.id)
        if assignment is None:
            raise NotFoundError("client_program", "Client has no program assigned", {"client_id": client.id})
        return self._to_response(assignment)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _generate(self, assignment: ClientProgram, client_id: int, trainer_id: int, start_date: datetime.date,
                  now: datetime.datetime, ) -> list:
        return generate_scheduled_sessions(
            self.session,
            client_id,
            trainer_id,
            assignment,
            start_date,
            as_of=now,
            limits=engine_options.scheduling_limits(),
            session_time=settings.DEFAULT_SESSION_TIME,
            default_duration_weeks=settings.DEFAULT_PROGRAM_DURATION_WEEKS,
        )

    @staticmethod
    def _to_response(assignment: ClientProgram, sessions_generated: int = 0) -> AssignmentResponse:
        return AssignmentResponse(id=assignment.id, client_id=assignment.client_id,
                                  program_id=assignment.program_id, start_date=assignment.start_date,
                                  training_days=assignment.training_days, is_customized=assignment.is_customized,
                                  sessions_generated=sessions_generated, )
