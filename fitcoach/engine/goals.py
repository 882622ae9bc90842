"""
Goal classification: free-text goals to tagged categories.

A client's stated goal ("vreau să slăbesc", "more strength", ...) is
classified into one :class:`GoalCategory`.  Program names are matched
against per-category markers to decide how well a candidate serves the
goal.  All keyword lists live in a :class:`GoalVocabulary` so a locale
can be swapped without touching the scoring code.

Matching is substring-based and case-insensitive.  Romanian text is
normalised so the legacy cedilla letters (ş, ţ) match the comma-below
letters (ș, ț) used in the vocabulary.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class GoalCategory(str, Enum):
    FAT_LOSS = "FAT_LOSS"
    STRENGTH = "STRENGTH"
    HYPERTROPHY = "HYPERTROPHY"
    UNSPECIFIED = "UNSPECIFIED"


# Classification priority when a goal mentions several categories.
_CATEGORY_ORDER = (GoalCategory.FAT_LOSS, GoalCategory.STRENGTH, GoalCategory.HYPERTROPHY)

_CHAR_FOLD = str.maketrans({"ş": "ș", "ţ": "ț", "Ş": "ș", "Ţ": "ț"})


def normalize_text(text: str | None) -> str:
    """Lower-case *text* and fold Romanian cedilla letters."""
    return (text or "").translate(_CHAR_FOLD).lower()


class ProgramMarkers(BaseModel):
    """Program-name markers for one goal category.

    ``perfect`` names fully serve the goal, ``near`` names partially.
    Scores are the goal-alignment sub-scores for each outcome.
    """

    model_config = ConfigDict(frozen=True)

    perfect: tuple[str, ...]
    near: tuple[str, ...] = ()
    perfect_score: float = 1.0
    near_score: float = 0.8
    fallback_score: float = 0.5


class GoalVocabulary(BaseModel):
    """Locale data for goal classification and program matching."""

    model_config = ConfigDict(frozen=True)

    locale: str
    goal_keywords: dict[GoalCategory, tuple[str, ...]]
    program_markers: dict[GoalCategory, ProgramMarkers]

    # Program-name markers that make nutrition adherence matter more.
    fat_loss_program_markers: tuple[str, ...] = ("fat loss",)
    high_volume_program_markers: tuple[str, ...] = ("ppl", "6x")

    unspecified_score: float = 0.5


_PROGRAM_MARKERS: dict[GoalCategory, ProgramMarkers] = {
    GoalCategory.FAT_LOSS: ProgramMarkers(
        perfect=("fat loss", "circuit"),
        near=("beginner", "full body"),
        near_score=0.7,
        fallback_score=0.4,
    ),
    GoalCategory.STRENGTH: ProgramMarkers(
        perfect=("strength",),
        near=("upper/lower",),
        near_score=0.8,
        fallback_score=0.5,
    ),
    GoalCategory.HYPERTROPHY: ProgramMarkers(
        perfect=("ppl", "push/pull/legs"),
        near=("upper/lower",),
        near_score=0.9,
        fallback_score=0.6,
    ),
}

ROMANIAN_VOCABULARY = GoalVocabulary(
    locale="ro",
    goal_keywords={
        GoalCategory.FAT_LOSS: ("pierdere", "slăbit", "slăbesc", "fat loss", "grăsime"),
        GoalCategory.STRENGTH: ("putere", "forță", "strength"),
        GoalCategory.HYPERTROPHY: ("masă", "volum", "mușchi", "hipertrofie"),
    },
    program_markers=_PROGRAM_MARKERS,
)

ENGLISH_VOCABULARY = GoalVocabulary(
    locale="en",
    goal_keywords={
        GoalCategory.FAT_LOSS: ("fat loss", "lose weight", "weight loss", "slim"),
        GoalCategory.STRENGTH: ("strength", "stronger", "powerlifting", "1rm"),
        GoalCategory.HYPERTROPHY: ("hypertrophy", "muscle", "bulk"),
    },
    program_markers=_PROGRAM_MARKERS,
)

VOCABULARIES: dict[str, GoalVocabulary] = {
    ROMANIAN_VOCABULARY.locale: ROMANIAN_VOCABULARY,
    ENGLISH_VOCABULARY.locale: ENGLISH_VOCABULARY,
}


def get_vocabulary(locale: str) -> GoalVocabulary:
    """Vocabulary for *locale*; falls back to Romanian."""
    return VOCABULARIES.get(locale.lower(), ROMANIAN_VOCABULARY)


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    return any(normalize_text(m) in text for m in markers)


def classify_goal(goal_text: str | None, vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY) -> GoalCategory:
    """Map a free-text goal to a :class:`GoalCategory`."""
    text = normalize_text(goal_text)
    if not text:
        return GoalCategory.UNSPECIFIED
    for category in _CATEGORY_ORDER:
        if _contains_any(text, vocabulary.goal_keywords.get(category, ())):
            return category
    return GoalCategory.UNSPECIFIED


def match_program(
    category: GoalCategory,
    program_name: str,
    vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY,
) -> tuple[float, str]:
    """Goal-alignment sub-score of a program name for *category*.

    Returns:
        ``(score, outcome)`` where outcome is one of ``perfect``,
        ``near``, ``fallback`` or ``unspecified``.
    """
    if category == GoalCategory.UNSPECIFIED:
        return vocabulary.unspecified_score, "unspecified"

    markers = vocabulary.program_markers[category]
    name = normalize_text(program_name)
    if _contains_any(name, markers.perfect):
        return markers.perfect_score, "perfect"
    if _contains_any(name, markers.near):
        return markers.near_score, "near"
    return markers.fallback_score, "fallback"


def is_fat_loss_program(program_name: str, vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY) -> bool:
    return _contains_any(normalize_text(program_name), vocabulary.fat_loss_program_markers)


def is_high_volume_program(program_name: str, vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY) -> bool:
    return _contains_any(normalize_text(program_name), vocabulary.high_volume_program_markers)
