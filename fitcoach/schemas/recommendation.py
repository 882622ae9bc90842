"""
Recommendation engine schemas.

Value types produced by the stats aggregator, the program scorer and
the recommendation ranker.  None of these carry a persisted identity;
the only persisted artefact of a recommendation run is the
:class:`~fitcoach.models.recommendation_log.ProgramRecommendationLog`
row written for the top-ranked program.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fitcoach.models.enums import Confidence


class ClientStats(BaseModel):
    """Rolling behavioral summary of a client (trailing 4 weeks).

    Every rate is ``0`` when its denominator is ``0``.
    """

    completion_rate: float = Field(0.0, ge=0.0, le=100.0, description="Completed / total sessions, in %")
    consistency: float = Field(0.0, ge=0.0, description="Average sessions per week over the window")
    pain_frequency: float = Field(0.0, ge=0.0, le=100.0, description="Check-ins reporting pain, in %")
    avg_nutrition_score: float = Field(0.0, ge=0.0, le=10.0, description="Mean nutrition score (0-10)")
    weeks_since_start: int = Field(0, ge=0, description="Whole weeks in the current program")
    total_sessions: int = Field(0, ge=0)
    completed_sessions: int = Field(0, ge=0)
    cancelled_sessions: int = Field(0, ge=0)
    no_show_sessions: int = Field(0, ge=0)


class SessionTemplate(BaseModel):
    """One program session slot, in program order."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    day_number: int = Field(..., ge=1)
    name: str
    focus: Optional[str] = None


class ProgramCandidate(BaseModel):
    """Immutable view of a program considered for recommendation."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""
    sessions_per_week: int = Field(..., ge=1, le=7)
    duration_weeks: Optional[int] = Field(None, ge=1)
    sessions: tuple[SessionTemplate, ...] = ()


class ProgramRecommendation(BaseModel):
    """A scored, explained program choice."""

    program_id: int
    program_name: str
    score: float = Field(..., ge=0.0, le=100.0, description="0-100, one decimal")
    confidence: Confidence
    reasons: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    factors: dict[str, float] = Field(default_factory=dict, description="Per-factor sub-scores in [0, 1]")


class CurrentProgramSummary(BaseModel):
    """The client's current assignment, as shown next to the recommendations."""

    program_id: int
    program_name: str
    weeks_since_start: int
    completion_rate: float
    total_sessions: int
    completed: int
    cancelled: int
    no_show: int


class RecommendationResult(BaseModel):
    """Output of one recommendation run."""

    recommendations: list[ProgramRecommendation]
    current_program: Optional[CurrentProgramSummary] = None
    client_stats: ClientStats
    log_id: Optional[int] = Field(None, description="Audit log row of the top entry, if it was written")


class RecommendationFeedback(BaseModel):
    """Trainer feedback on the latest pending recommendation."""

    selected_program_id: int
    feedback: Optional[str] = Field(None, max_length=2000)


class ProgramScore(BaseModel):
    """Scorer output for one candidate, before confidence is assigned."""

    program_id: int
    program_name: str
    score: float = Field(..., ge=0.0, le=100.0, description="Rounded to one decimal")
    raw_score: float = Field(..., description="Unrounded weighted sum")
    factors: dict[str, float] = Field(default_factory=dict)
    reasons: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
