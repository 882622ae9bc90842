"""Shared fixtures: in-memory SQLite database and record factories."""

import datetime
import os

# Point the application at SQLite before any fitcoach module reads settings.
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import fitcoach.db.base  # noqa: F401
from fitcoach.models.checkin import DailyCheckin
from fitcoach.models.client import ClientProfile
from fitcoach.models.client_program import ClientProgram
from fitcoach.models.enums import SessionStatus, UserRole
from fitcoach.models.program import ProgramSession, WorkoutProgram
from fitcoach.models.scheduled_session import ScheduledSession
from fitcoach.models.user import User


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


# ======================================================================
# Factories
# ======================================================================


@pytest.fixture
def trainer(session) -> User:
    user = User(email="trainer@example.com", full_name="Ana Trainer", role=UserRole.TRAINER)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def other_trainer(session) -> User:
    user = User(email="other.trainer@example.com", full_name="Dan Trainer", role=UserRole.TRAINER)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def client_user(session) -> User:
    user = User(email="client@example.com", full_name="Ioana Client", role=UserRole.CLIENT)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def client(session, trainer, client_user) -> ClientProfile:
    profile = ClientProfile(user_id=client_user.id, trainer_id=trainer.id, first_name="Ioana", last_name="Pop",
                            goal_description="Vreau mai multă forță")
    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile


@pytest.fixture
def make_program(session):
    """Create a program with the given template names (day numbers 1..N)."""

    def _make(name: str, sessions_per_week: int, templates: list[str], duration_weeks=12,
              trainer_id=None, is_default=True) -> WorkoutProgram:
        program = WorkoutProgram(name=name, description=f"{name} description", sessions_per_week=sessions_per_week,
                                 duration_weeks=duration_weeks, trainer_id=trainer_id, is_default=is_default)
        session.add(program)
        session.flush()
        for index, template in enumerate(templates, start=1):
            session.add(ProgramSession(program_id=program.id, day_number=index, name=template, focus="FULL_BODY"))
        session.commit()
        session.refresh(program)
        return program

    return _make


@pytest.fixture
def assign(session):
    """Create a ClientProgram row directly."""

    def _assign(client_id: int, program_id: int, start_date: datetime.date, training_days: list[str]) -> ClientProgram:
        assignment = ClientProgram(client_id=client_id, program_id=program_id, start_date=start_date,
                                   training_days=training_days)
        session.add(assignment)
        session.commit()
        session.refresh(assignment)
        return assignment

    return _assign


@pytest.fixture
def add_session(session):
    """Insert a ScheduledSession with the given status."""

    def _add(client: ClientProfile, start_at: datetime.datetime,
             status: SessionStatus = SessionStatus.SCHEDULED, name: str = "Session") -> ScheduledSession:
        entry = ScheduledSession(client_id=client.id, trainer_id=client.trainer_id, session_name=name,
                                 start_at=start_at, status=status)
        session.add(entry)
        session.commit()
        session.refresh(entry)
        return entry

    return _add


@pytest.fixture
def add_checkin(session):
    def _add(client: ClientProfile, date: datetime.date, nutrition_score: int = 7,
             pain: bool = False) -> DailyCheckin:
        entry = DailyCheckin(client_id=client.id, date=date, nutrition_score=nutrition_score, pain_at_training=pain)
        session.add(entry)
        session.commit()
        session.refresh(entry)
        return entry

    return _add
