"""
Workout program repository.

Handles programs and their ordered session templates.
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, select

from fitcoach.models.program import ProgramSession, WorkoutProgram


class ProgramRepository:
    """Repository for WorkoutProgram / ProgramSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, program: WorkoutProgram, sessions: list[ProgramSession], commit: bool = True) -> WorkoutProgram:
        """Insert a program together with its session templates."""
        self.session.add(program)
        self.session.flush()
        for template in sessions:
            template.program_id = program.id
            self.session.add(template)
        if commit:
            self.session.commit()
            self.session.refresh(program)
        else:
            self.session.flush()
        return program

    def get_by_id(self, program_id: int) -> Optional[WorkoutProgram]:
        return self.session.get(WorkoutProgram, program_id)

    def get_sessions(self, program_id: int) -> list[ProgramSession]:
        """Session templates in program order (``day_number`` ascending)."""
        statement = (select(ProgramSession).where(ProgramSession.program_id == program_id)
                     .order_by(ProgramSession.day_number))
        return list(self.session.exec(statement).all())

    def get_visible_to_trainer(self, trainer_id: int) -> list[WorkoutProgram]:
        """Global defaults plus the trainer's own programs."""
        statement = (select(WorkoutProgram)
                     .where(or_(WorkoutProgram.is_default == True,  # noqa: E712
                                WorkoutProgram.trainer_id == trainer_id, ))
                     .order_by(WorkoutProgram.is_default.desc(), WorkoutProgram.id))
        return list(self.session.exec(statement).all())

    def get_defaults(self) -> list[WorkoutProgram]:
        statement = select(WorkoutProgram).where(WorkoutProgram.is_default == True)  # noqa: E712
        return list(self.session.exec(statement).all())

    def is_visible_to_trainer(self, program: WorkoutProgram, trainer_id: int) -> bool:
        return program.is_default or program.trainer_id == trainer_id
