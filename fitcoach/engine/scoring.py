"""
Program scoring: six weighted heuristics.

Scores one candidate program against a client's rolling stats and
stated goal.  Each factor produces a sub-score in [0, 1]; the weighted
sum × 100 is the program score (0-100, one decimal):

    factor            weight   signal
    completion_rate   0.35     % of sessions completed (tiered)
    consistency       0.20     actual sessions/week vs program requirement
    pain_frequency    0.15     % of check-ins with pain (inverse)
    goal_alignment    0.15     goal category vs program name
    time_in_program   0.10     weeks in current program vs its duration
    nutrition         0.05     mean nutrition adherence (0-10)

Every tier decision appends exactly one reason or warning (plus the
documented extra warnings for high-frequency programs).  The strings
are what the trainer sees next to the score, and what the audit log
stores, so they are part of the output contract.

Weights are an immutable :class:`ScoringWeights` injected by the
caller; alternate weight sets can be passed for testing or tuning.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fitcoach.engine.goals import (
    ROMANIAN_VOCABULARY,
    GoalCategory,
    GoalVocabulary,
    classify_goal,
    is_fat_loss_program,
    is_high_volume_program,
    match_program,
)
from fitcoach.schemas.recommendation import ClientStats, ProgramCandidate, ProgramScore

DEFAULT_DURATION_WEEKS = 12

FACTOR_NAMES = [
    "completion_rate",
    "consistency",
    "pain_frequency",
    "goal_alignment",
    "time_in_program",
    "nutrition",
]


# ======================================================================
# Weights
# ======================================================================


class ScoringWeights(BaseModel):
    """Factor weights.  Frozen; must sum to 1.0."""

    model_config = ConfigDict(frozen=True)

    completion_rate: float = Field(0.35, ge=0.0, le=1.0)
    consistency: float = Field(0.20, ge=0.0, le=1.0)
    pain_frequency: float = Field(0.15, ge=0.0, le=1.0)
    goal_alignment: float = Field(0.15, ge=0.0, le=1.0)
    time_in_program: float = Field(0.10, ge=0.0, le=1.0)
    nutrition: float = Field(0.05, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_sum(self) -> ScoringWeights:
        total = sum(getattr(self, name) for name in FACTOR_NAMES)
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"Scoring weights must sum to 1.0 (got {total:.4f})")
        return self


DEFAULT_WEIGHTS = ScoringWeights()

# Reason/warning tuple returned by every factor.
FactorResult = tuple[float, list[str], list[str]]


def _pct(value: float) -> int:
    """Round half-up to an integer percentage."""
    return int(math.floor(value + 0.5))


def round_score(value: float) -> float:
    """Round to one decimal, half-up."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


# ======================================================================
# Factors
# ======================================================================


def _score_completion_rate(completion_rate: float, sessions_per_week: int) -> FactorResult:
    rate = _pct(completion_rate)
    if completion_rate >= 85:
        return 1.0, [f"Completion rate excelent: {rate}%"], []
    if completion_rate >= 75:
        return 0.85, [f"Completion rate foarte bun: {rate}%"], []
    if completion_rate >= 60:
        warnings = []
        if sessions_per_week >= 5:
            warnings.append("Completion rate ar putea fi insuficient pentru un program cu frecvență mare")
        return 0.6, [f"Completion rate decent: {rate}%"], warnings

    warnings = [f"Completion rate scăzut: {rate}% - risc ridicat de abandon"]
    if sessions_per_week >= 4:
        warnings.append("Program cu prea multe sesiuni pentru consistency actuală")
    return 0.3, [], warnings


def _score_consistency(consistency: float, sessions_per_week: int) -> FactorResult:
    ratio = consistency / sessions_per_week if sessions_per_week > 0 else 0.0
    per_week = f"{consistency:.1f} sesiuni/săptămână"

    if ratio >= 0.9:
        return 1.0, [f"Consistency excelentă: {per_week}"], []
    if ratio >= 0.75:
        return 0.85, [f"Consistency bună: {per_week}"], []
    if ratio >= 0.6:
        return 0.5, [], [f"Consistency moderată: {per_week} - program ar putea fi prea intens"]
    return 0.2, [], [f"Consistency scăzută: {per_week} - consideră un program mai puțin intens"]


def _score_pain_frequency(pain_frequency: float, sessions_per_week: int) -> FactorResult:
    if pain_frequency == 0:
        return 1.0, ["Nicio durere raportată - recovery excelent"], []
    if pain_frequency < 15:
        return 0.85, ["Durere minimă - recovery bun"], []
    if pain_frequency < 30:
        warnings = [f"Durere raportată în {_pct(pain_frequency)}% din antrenamente"]
        if sessions_per_week >= 5:
            warnings.append("Program cu volum mare nu e recomandat cu durere frecventă")
        return 0.5, [], warnings

    warnings = [f"Durere frecventă: {_pct(pain_frequency)}% - prioritizează recovery"]
    if sessions_per_week >= 3:
        warnings.append("Recomandare: program cu frecvență redusă până la îmbunătățirea recovery-ului")
    return 0.2, [], warnings


_GOAL_MESSAGES: dict[GoalCategory, dict[str, str]] = {
    GoalCategory.FAT_LOSS: {
        "perfect": "Aliniere perfectă cu obiectivul de pierdere în greutate",
        "near": "Program compatibil cu obiectivul de pierdere în greutate",
        "fallback": "Program puțin specific pentru obiectivul de pierdere în greutate",
    },
    GoalCategory.STRENGTH: {
        "perfect": "Aliniere perfectă cu obiectivul de creștere a forței",
        "near": "Program compatibil cu obiectivul de strength",
        "fallback": "Program puțin specific pentru obiectivul de creștere a forței",
    },
    GoalCategory.HYPERTROPHY: {
        "perfect": "Volum maxim pentru hipertrofie",
        "near": "Echilibru bun între volum și recovery pentru hipertrofie",
        "fallback": "Program puțin specific pentru obiectivul de hipertrofie",
    },
}


def _score_goal_alignment(goal_text: str, program_name: str, vocabulary: GoalVocabulary) -> FactorResult:
    category = classify_goal(goal_text, vocabulary)
    score, outcome = match_program(category, program_name, vocabulary)

    if outcome == "unspecified":
        return score, ["Niciun obiectiv specific declarat - aliniere neutră"], []
    message = _GOAL_MESSAGES[category][outcome]
    if outcome == "fallback":
        return score, [], [message]
    return score, [message], []


def _score_time_in_program(weeks_since_start: int, current_duration_weeks: Optional[int]) -> FactorResult:
    if weeks_since_start == 0:
        return 1.0, ["Moment ideal pentru a începe un nou program"], []

    duration = current_duration_weeks or DEFAULT_DURATION_WEEKS

    if weeks_since_start < 4:
        return 0.2, [], [f"Doar {weeks_since_start} săptămâni în programul curent - prea devreme pentru schimbare"]
    if duration - 2 <= weeks_since_start <= duration + 2:
        return 1.0, ["Programul curent se apropie de final - moment ideal pentru tranziție"], []
    if weeks_since_start > duration + 4:
        return 0.9, [f"Programul curent depășit ({weeks_since_start}/{duration} săptămâni)"], []
    if weeks_since_start >= 6:
        return 0.8, ["Suficient timp în programul curent pentru evaluare"], []
    return 0.5, [f"Program curent în desfășurare ({weeks_since_start}/{duration} săptămâni)"], []


def _score_nutrition(avg_nutrition_score: float, program_name: str, vocabulary: GoalVocabulary) -> FactorResult:
    label = f"{avg_nutrition_score:.1f}/10"
    if avg_nutrition_score >= 7:
        return 1.0, [f"Nutriție foarte bună: {label}"], []
    if avg_nutrition_score >= 6:
        return 0.7, [f"Nutriție decentă: {label}"], []
    if avg_nutrition_score > 0:
        warnings = [f"Nutriție sub-optimă: {label}"]
        if is_fat_loss_program(program_name, vocabulary):
            warnings.append("Programul de fat loss necesită nutriție mai bună pentru rezultate")
        elif is_high_volume_program(program_name, vocabulary):
            warnings.append("Volumul mare de antrenament necesită nutriție mai bună")
        return 0.4, [], warnings
    return 0.5, ["Fără date de nutriție - scor neutru"], []


# ======================================================================
# Main entry point
# ======================================================================


def score_program(
    candidate: ProgramCandidate,
    goal_text: Optional[str],
    stats: ClientStats,
    current_duration_weeks: Optional[int] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    vocabulary: GoalVocabulary = ROMANIAN_VOCABULARY,
) -> ProgramScore:
    """Score one candidate program for a client.

    Args:
        candidate: The program being considered.
        goal_text: Client's free-text goal (may be empty).
        stats: Rolling client stats.
        current_duration_weeks: Duration of the client's *current*
            program, used by the time-in-program factor (12 if unset).
        weights: Factor weights.
        vocabulary: Goal locale data.

    Returns:
        :class:`ProgramScore` with the rounded score, the per-factor
        sub-scores and the reasons/warnings in factor order.
    """
    spw = candidate.sessions_per_week
    results: dict[str, FactorResult] = {
        "completion_rate": _score_completion_rate(stats.completion_rate, spw),
        "consistency": _score_consistency(stats.consistency, spw),
        "pain_frequency": _score_pain_frequency(stats.pain_frequency, spw),
        "goal_alignment": _score_goal_alignment(goal_text or "", candidate.name, vocabulary),
        "time_in_program": _score_time_in_program(stats.weeks_since_start, current_duration_weeks),
        "nutrition": _score_nutrition(stats.avg_nutrition_score, candidate.name, vocabulary),
    }

    reasons: list[str] = []
    warnings: list[str] = []
    factors: dict[str, float] = {}
    total = 0.0
    for name in FACTOR_NAMES:
        sub_score, factor_reasons, factor_warnings = results[name]
        factors[name] = sub_score
        reasons.extend(factor_reasons)
        warnings.extend(factor_warnings)
        total += sub_score * getattr(weights, name) * 100

    total = min(max(total, 0.0), 100.0)

    return ProgramScore(
        program_id=candidate.id,
        program_name=candidate.name,
        score=round_score(total),
        raw_score=total,
        factors=factors,
        reasons=reasons,
        warnings=warnings,
    )
