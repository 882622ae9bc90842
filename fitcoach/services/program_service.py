"""
Program service.

Program catalog management: trainer-owned programs next to the global
defaults, and per-client copies used when an assignment is customized.
"""

from typing import Optional

from sqlmodel import Session

from fitcoach.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.models.enums import UserRole
from fitcoach.models.program import ProgramSession, WorkoutProgram
from fitcoach.models.user import User
from fitcoach.schemas.program import ProgramCreate, ProgramResponse, ProgramSessionResponse
from fitcoach.services.access import get_own_profile, require_trainer

logger = get_logger(__name__)


class ProgramService:
    """Service for workout program business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ProgramRepository(session)

    def create(self, trainer: User, data: ProgramCreate) -> ProgramResponse:
        require_trainer(trainer)
        if not data.sessions:
            raise ValidationError("sessions", "Programul trebuie să aibă cel puțin o sesiune.")
        day_numbers = [s.day_number for s in data.sessions]
        if len(set(day_numbers)) != len(day_numbers):
            raise ValidationError("sessions", "Numerele zilelor trebuie să fie unice.")

        program = WorkoutProgram(trainer_id=trainer.id, name=data.name, description=data.description,
                                 sessions_per_week=data.sessions_per_week, duration_weeks=data.duration_weeks,
                                 is_default=False, )
        templates = [ProgramSession(day_number=s.day_number, name=s.name, focus=s.focus, notes=s.notes)
                     for s in data.sessions]
        program = self.repository.create(program, templates)
        logger.info("program_created", program_id=program.id, trainer_id=trainer.id, sessions=len(templates))
        return self.to_response(program)

    def list_visible(self, user: User) -> list[ProgramResponse]:
        """Global defaults plus the programs of the user's trainer."""
        trainer_id = user.id if user.role == UserRole.TRAINER else get_own_profile(self.session, user).trainer_id
        return [self.to_response(p) for p in self.repository.get_visible_to_trainer(trainer_id)]

    def get(self, user: User, program_id: int) -> ProgramResponse:
        trainer_id = user.id if user.role == UserRole.TRAINER else get_own_profile(self.session, user).trainer_id
        return self.to_response(self.get_visible(trainer_id, program_id))

    def clone(self, trainer: User, program_id: int, name: Optional[str] = None) -> ProgramResponse:
        require_trainer(trainer)
        program = self.get_visible(trainer.id, program_id)
        return self.to_response(self.clone_program(program, trainer.id, name))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_visible(self, trainer_id: int, program_id: int) -> WorkoutProgram:
        program = self.repository.get_by_id(program_id)
        if program is None:
            raise NotFoundError("program", "Program not found", {"program_id": program_id})
        if not self.repository.is_visible_to_trainer(program, trainer_id):
            raise ForbiddenError("Program is not available to this trainer", details={"program_id": program_id})
        return program

    def clone_program(self, program: WorkoutProgram, trainer_id: int, name: Optional[str] = None,
                      commit: bool = True, ) -> WorkoutProgram:
        """Copy *program* and its session templates as a trainer-owned program."""
        copy = WorkoutProgram(trainer_id=trainer_id, name=name or f"{program.name} (personalizat)",
                              description=program.description, sessions_per_week=program.sessions_per_week,
                              duration_weeks=program.duration_weeks, is_default=False, )
        templates = [ProgramSession(day_number=s.day_number, name=s.name, focus=s.focus, notes=s.notes)
                     for s in self.repository.get_sessions(program.id)]
        copy = self.repository.create(copy, templates, commit=commit)
        logger.info("program_cloned", source_program_id=program.id, program_id=copy.id, trainer_id=trainer_id)
        return copy

    def to_response(self, program: WorkoutProgram) -> ProgramResponse:
        sessions = [ProgramSessionResponse.model_validate(s) for s in self.repository.get_sessions(program.id)]
        return ProgramResponse(id=program.id, trainer_id=program.trainer_id, name=program.name,
                               description=program.description, sessions_per_week=program.sessions_per_week,
                               duration_weeks=program.duration_weeks, is_default=program.is_default,
                               sessions=sessions, created_at=program.created_at, )
