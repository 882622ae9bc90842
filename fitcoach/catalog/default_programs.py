"""
Built-in workout program catalog.

Global default programs (``is_default``, no trainer) offered to every
trainer next to their own programs.  Each entry is a
:class:`DefaultProgram` with its ordered session templates; names carry
the markers the goal classifier looks for (``Strength``, ``Fat Loss``,
``Push/Pull/Legs``, ``Upper/Lower``, ...).

:func:`seed_default_programs` inserts the catalog once; it is a no-op
when default programs already exist.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from sqlmodel import Session

from fitcoach.core.logging import get_logger
from fitcoach.db.repositories.program import ProgramRepository
from fitcoach.models.program import ProgramSession, WorkoutProgram

logger = get_logger(__name__)


class DefaultSession(NamedTuple):
    day_number: int
    name: str
    focus: str
    notes: Optional[str] = None


class DefaultProgram(NamedTuple):
    name: str
    description: str
    sessions_per_week: int
    duration_weeks: int
    sessions: tuple[DefaultSession, ...]


# ======================================================================
# Catalog
# ======================================================================

# Focus tags, for brevity in the table below
FB = "FULL_BODY"
UP = "UPPER"
LO = "LOWER"
PU = "PUSH"
PL = "PULL"
LG = "LEGS"

DEFAULT_PROGRAMS: tuple[DefaultProgram, ...] = (
    DefaultProgram(
        "Beginner Full Body - 2x/săptămână",
        "Perfect pentru începători absoluți. Învață pattern-urile de bază cu frecvență minimă.",
        2, 8,
        (
            DefaultSession(1, "Full Body A", FB, "Squat pattern, push vertical, pull orizontal. Ex: Goblet Squat, DB Press, Cable Row"),
            DefaultSession(2, "Full Body A", FB, "Aceleași exerciții ca prima sesiune - consolidare tehnică"),
        ),
    ),
    DefaultProgram(
        "Beginner Full Body - 3x/săptămână",
        "Pentru începători după primele 8 săptămâni. Progresie naturală de la 2x la 3x pe săptămână.",
        3, 12,
        (
            DefaultSession(1, "Full Body A", FB, "Squat dominant, push vertical, pull orizontal"),
            DefaultSession(2, "Full Body B", FB, "Hinge dominant, push orizontal, pull vertical"),
            DefaultSession(3, "Full Body A", FB, "Repetare sesiunea A - consolidare"),
        ),
    ),
    DefaultProgram(
        "Upper/Lower Split - 4x/săptămână",
        "Split-ul clasic pentru intermediari. Echilibru între volum, frecvență și recovery.",
        4, 12,
        (
            DefaultSession(1, "Upper Body A - Strength", UP, "Bench Press 4x6, Barbell Row 4x6, DB Shoulder Press 3x8"),
            DefaultSession(2, "Lower Body A - Squat Focus", LO, "Back Squat 4x6, Romanian Deadlift 3x8, Leg Press 3x12"),
            DefaultSession(3, "Upper Body B - Hypertrophy", UP, "Incline DB Press 4x10, Cable Row 4x12, Lateral Raises 3x15"),
            DefaultSession(4, "Lower Body B - Deadlift Focus", LO, "Deadlift 4x5, Bulgarian Split Squat 3x10, Leg Curl 3x12"),
        ),
    ),
    DefaultProgram(
        "Push/Pull/Legs - 6x/săptămână",
        "Pentru avansați cu commitment ridicat. Fiecare grup muscular antrenat de 2x pe săptămână.",
        6, 8,
        (
            DefaultSession(1, "Push A - Strength", PU, "Bench Press 4x6, Incline DB Press 3x8, Dips 3x8"),
            DefaultSession(2, "Pull A - Strength", PL, "Deadlift 4x5, Pull-ups 4x6, Barbell Row 3x8"),
            DefaultSession(3, "Legs A - Quad Focus", LG, "Back Squat 4x6, Front Squat 3x8, Leg Press 3x12"),
            DefaultSession(4, "Push B - Hypertrophy", PU, "DB Shoulder Press 4x10, Cable Flies 3x12"),
            DefaultSession(5, "Pull B - Hypertrophy", PL, "Lat Pulldown 4x12, Cable Row 4x12, Face Pulls 3x15"),
            DefaultSession(6, "Legs B - Hamstring Focus", LG, "Romanian Deadlift 4x8, Leg Curl 4x10, Calf Raises 4x15"),
        ),
    ),
    DefaultProgram(
        "Fat Loss Circuit - 3x/săptămână",
        "Densitate mare, compound movements, cardio metabolic. Combinat cu deficit caloric.",
        3, 8,
        (
            DefaultSession(1, "Full Body Circuit A", FB, "Squat variations, Push-ups, Rows, Burpees. 3-4 runde, pauze 30-45 sec"),
            DefaultSession(2, "Full Body Circuit B", FB, "Deadlift variations, DB Press, Pull movements, Mountain Climbers"),
            DefaultSession(3, "Full Body Circuit C", FB, "Lunges, Dips, Face Pulls, KB Swings"),
        ),
    ),
    DefaultProgram(
        "Strength Focus - 4x/săptămână",
        "Pentru cei care vor să crească greutățile pe bare. Compound lifts cu progressive overload.",
        4, 12,
        (
            DefaultSession(1, "Squat Day", LG, "Back Squat 5x5, Front Squat 3x6, Leg Press 3x10"),
            DefaultSession(2, "Bench Press Day", PU, "Bench Press 5x5, Incline Press 3x8, DB Flies 3x10"),
            DefaultSession(3, "Deadlift Day", PL, "Deadlift 5x3, Romanian DL 3x8, Barbell Row 4x6"),
            DefaultSession(4, "Overhead Press Day", UP, "OHP 5x5, Pull-ups 4x6, Lateral Raises 3x12"),
        ),
    ),
)


def seed_default_programs(session: Session) -> list[WorkoutProgram]:
    """Insert the default catalog unless default programs already exist."""
    repo = ProgramRepository(session)
    existing = repo.get_defaults()
    if existing:
        logger.info("default_programs_present", count=len(existing))
        return []

    created = []
    for entry in DEFAULT_PROGRAMS:
        program = WorkoutProgram(trainer_id=None, name=entry.name, description=entry.description,
                                 sessions_per_week=entry.sessions_per_week, duration_weeks=entry.duration_weeks,
                                 is_default=True, )
        templates = [ProgramSession(day_number=s.day_number, name=s.name, focus=s.focus, notes=s.notes)
                     for s in entry.sessions]
        created.append(repo.create(program, templates))
        logger.info("default_program_created", program_id=program.id, name=entry.name, sessions=len(templates))
    return created
