"""Tests for the six-factor program scorer.

Pure unit tests: candidates and stats are built in memory.
"""

import pydantic
import pytest

from fitcoach.engine.goals import ENGLISH_VOCABULARY
from fitcoach.engine.scoring import (
    DEFAULT_WEIGHTS,
    FACTOR_NAMES,
    ScoringWeights,
    _score_completion_rate,
    _score_consistency,
    _score_nutrition,
    _score_pain_frequency,
    _score_time_in_program,
    round_score,
    score_program,
)
from fitcoach.schemas.recommendation import ClientStats, ProgramCandidate


# ======================================================================
# Helpers
# ======================================================================


def _candidate(name: str = "Strength Focus - 3x/săptămână", sessions_per_week: int = 3,
               program_id: int = 1) -> ProgramCandidate:
    return ProgramCandidate(id=program_id, name=name, sessions_per_week=sessions_per_week, duration_weeks=12)


def _stats(**overrides) -> ClientStats:
    defaults = {
        "completion_rate": 90.0,
        "consistency": 3.0,
        "pain_frequency": 0.0,
        "avg_nutrition_score": 8.0,
        "weeks_since_start": 0,
        "total_sessions": 12,
        "completed_sessions": 11,
    }
    defaults.update(overrides)
    return ClientStats(**defaults)


# ======================================================================
# Weights
# ======================================================================


class TestScoringWeights:
    def test_defaults_sum_to_one(self):
        assert sum(getattr(DEFAULT_WEIGHTS, n) for n in FACTOR_NAMES) == pytest.approx(1.0)
        assert DEFAULT_WEIGHTS.completion_rate == 0.35
        assert DEFAULT_WEIGHTS.nutrition == 0.05

    def test_rejects_weights_not_summing_to_one(self):
        with pytest.raises(ValueError):
            ScoringWeights(completion_rate=0.5)

    def test_alternate_weight_set(self):
        weights = ScoringWeights(completion_rate=0.5, consistency=0.2, pain_frequency=0.1, goal_alignment=0.1,
                                 time_in_program=0.05, nutrition=0.05)
        assert weights.completion_rate == 0.5

    def test_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_WEIGHTS.completion_rate = 0.9


# ======================================================================
# Factors
# ======================================================================


class TestCompletionRate:
    @pytest.mark.parametrize(
        "rate, expected",
        [(100, 1.0), (85, 1.0), (84.9, 0.85), (75, 0.85), (60, 0.6), (59.9, 0.3), (0, 0.3)],
    )
    def test_tiers(self, rate, expected):
        assert _score_completion_rate(rate, 3)[0] == expected

    def test_excellent_reason(self):
        _, reasons, warnings = _score_completion_rate(90, 3)
        assert reasons == ["Completion rate excelent: 90%"]
        assert warnings == []

    def test_decent_with_high_frequency_program(self):
        _, reasons, warnings = _score_completion_rate(65, 5)
        assert reasons == ["Completion rate decent: 65%"]
        assert warnings == ["Completion rate ar putea fi insuficient pentru un program cu frecvență mare"]

    def test_low_with_four_sessions_program(self):
        _, reasons, warnings = _score_completion_rate(50, 4)
        assert reasons == []
        assert warnings == [
            "Completion rate scăzut: 50% - risc ridicat de abandon",
            "Program cu prea multe sesiuni pentru consistency actuală",
        ]


class TestConsistency:
    @pytest.mark.parametrize(
        "consistency, spw, expected",
        [(3.0, 3, 1.0), (2.8, 3, 1.0), (2.4, 3, 0.85), (2.0, 3, 0.5), (1.0, 3, 0.2), (0.0, 3, 0.2)],
    )
    def test_tiers(self, consistency, spw, expected):
        assert _score_consistency(consistency, spw)[0] == expected

    def test_reason_format(self):
        _, reasons, _ = _score_consistency(3.0, 3)
        assert reasons == ["Consistency excelentă: 3.0 sesiuni/săptămână"]

    def test_low_is_warning(self):
        _, reasons, warnings = _score_consistency(1.0, 4)
        assert reasons == []
        assert warnings == ["Consistency scăzută: 1.0 sesiuni/săptămână - consideră un program mai puțin intens"]


class TestPainFrequency:
    def test_no_pain(self):
        assert _score_pain_frequency(0, 3) == (1.0, ["Nicio durere raportată - recovery excelent"], [])

    def test_minimal_pain(self):
        assert _score_pain_frequency(10, 3)[0] == 0.85

    def test_moderate_pain_high_volume(self):
        score, _, warnings = _score_pain_frequency(25, 6)
        assert score == 0.5
        assert len(warnings) == 2

    def test_frequent_pain(self):
        score, reasons, warnings = _score_pain_frequency(40, 3)
        assert score == 0.2
        assert reasons == []
        assert warnings[0] == "Durere frecventă: 40% - prioritizează recovery"
        assert warnings[1].startswith("Recomandare: program cu frecvență redusă")


class TestTimeInProgram:
    @pytest.mark.parametrize(
        "weeks, duration, expected",
        [
            (0, 12, 1.0),
            (2, 12, 0.2),
            (3, None, 0.2),
            (10, 12, 1.0),
            (14, 12, 1.0),
            (15, 12, 0.8),
            (17, 12, 0.9),
            (6, 12, 0.8),
            (5, 12, 0.5),
            (4, 6, 1.0),
        ],
    )
    def test_tiers(self, weeks, duration, expected):
        assert _score_time_in_program(weeks, duration)[0] == expected

    def test_too_early_warning(self):
        _, reasons, warnings = _score_time_in_program(2, 12)
        assert reasons == []
        assert warnings == ["Doar 2 săptămâni în programul curent - prea devreme pentru schimbare"]

    def test_unset_duration_defaults_to_twelve(self):
        assert _score_time_in_program(5, None)[1] == ["Program curent în desfășurare (5/12 săptămâni)"]


class TestNutrition:
    def test_tiers(self):
        assert _score_nutrition(8, "X", ENGLISH_VOCABULARY)[0] == 1.0
        assert _score_nutrition(6.5, "X", ENGLISH_VOCABULARY)[0] == 0.7
        assert _score_nutrition(4, "X", ENGLISH_VOCABULARY)[0] == 0.4
        assert _score_nutrition(0, "X", ENGLISH_VOCABULARY)[0] == 0.5

    def test_fat_loss_program_warning(self):
        _, _, warnings = _score_nutrition(5, "Fat Loss Circuit - 3x/săptămână", ENGLISH_VOCABULARY)
        assert warnings == ["Nutriție sub-optimă: 5.0/10",
                            "Programul de fat loss necesită nutriție mai bună pentru rezultate"]

    def test_high_volume_program_warning(self):
        _, _, warnings = _score_nutrition(5, "Push/Pull/Legs - 6x/săptămână", ENGLISH_VOCABULARY)
        assert warnings[-1] == "Volumul mare de antrenament necesită nutriție mai bună"

    def test_no_data_is_neutral(self):
        assert _score_nutrition(0, "X", ENGLISH_VOCABULARY)[1] == ["Fără date de nutriție - scor neutru"]


# ======================================================================
# score_program
# ======================================================================


class TestScoreProgram:
    def test_strength_goal_on_strength_program(self):
        """Goal text with "forță" matched against "Strength Focus"."""
        result = score_program(_candidate(), "Vreau mai multă forță", _stats())

        assert result.factors["goal_alignment"] == 1.0
        assert "Aliniere perfectă cu obiectivul de creștere a forței" in result.reasons
        assert result.score == 100.0

    def test_factor_keys(self):
        result = score_program(_candidate(), "forță", _stats())
        assert list(result.factors) == FACTOR_NAMES

    def test_weighted_sum_rounded_to_one_decimal(self):
        stats = _stats(completion_rate=70, consistency=2.0, pain_frequency=20, avg_nutrition_score=0)
        result = score_program(_candidate(name="Mobility Basics"), "", stats)
        # 0.6*35 + 0.5*20 + 0.5*15 + 0.5*15 + 1.0*10 + 0.5*5
        assert result.score == 58.5
        assert round(result.score, 1) == result.score

    def test_never_exceeds_hundred(self):
        result = score_program(_candidate(), "strength", _stats())
        assert 0 <= result.score <= 100

    def test_current_program_duration_drives_time_factor(self):
        stats = _stats(weeks_since_start=7)
        short = score_program(_candidate(), "forță", stats, current_duration_weeks=8)
        long = score_program(_candidate(), "forță", stats, current_duration_weeks=24)
        assert short.factors["time_in_program"] == 1.0
        assert long.factors["time_in_program"] == 0.8

    def test_custom_weights(self):
        weights = ScoringWeights(completion_rate=1.0, consistency=0, pain_frequency=0, goal_alignment=0,
                                 time_in_program=0, nutrition=0)
        result = score_program(_candidate(), "", _stats(completion_rate=50), weights=weights)
        assert result.score == 30.0

    def test_every_factor_explained(self):
        result = score_program(_candidate(), "", _stats(avg_nutrition_score=0))
        assert len(result.reasons) + len(result.warnings) >= len(FACTOR_NAMES)


class TestRoundScore:
    @pytest.mark.parametrize("value, expected", [(58.45, 58.5), (58.44, 58.4), (99.95, 100.0), (0.04, 0.0)])
    def test_half_up(self, value, expected):
        assert round_score(value) == expected
