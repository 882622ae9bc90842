"""Tests for goal classification and program matching."""

import pytest

from fitcoach.engine.goals import (
    ENGLISH_VOCABULARY,
    ROMANIAN_VOCABULARY,
    GoalCategory,
    classify_goal,
    get_vocabulary,
    is_fat_loss_program,
    is_high_volume_program,
    match_program,
    normalize_text,
)


class TestClassifyGoal:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Vreau să slăbesc 5 kg", GoalCategory.FAT_LOSS),
            ("pierdere în greutate", GoalCategory.FAT_LOSS),
            ("Mai multă FORȚĂ la genuflexiuni", GoalCategory.STRENGTH),
            ("forţă", GoalCategory.STRENGTH),  # cedilla spelling
            ("putere și masă musculară", GoalCategory.STRENGTH),
            ("vreau masă musculară", GoalCategory.HYPERTROPHY),
            ("hipertrofie", GoalCategory.HYPERTROPHY),
            ("să mă simt bine", GoalCategory.UNSPECIFIED),
            ("", GoalCategory.UNSPECIFIED),
            (None, GoalCategory.UNSPECIFIED),
        ],
    )
    def test_romanian(self, text, expected):
        assert classify_goal(text) == expected

    def test_fat_loss_has_priority(self):
        assert classify_goal("slăbit și forță") == GoalCategory.FAT_LOSS

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I want to lose weight", GoalCategory.FAT_LOSS),
            ("get stronger", GoalCategory.STRENGTH),
            ("build muscle", GoalCategory.HYPERTROPHY),
            ("feel good", GoalCategory.UNSPECIFIED),
        ],
    )
    def test_english(self, text, expected):
        assert classify_goal(text, ENGLISH_VOCABULARY) == expected


class TestMatchProgram:
    @pytest.mark.parametrize(
        "category, name, expected",
        [
            (GoalCategory.STRENGTH, "Strength Focus - 4x/săptămână", (1.0, "perfect")),
            (GoalCategory.STRENGTH, "Upper/Lower Split - 4x/săptămână", (0.8, "near")),
            (GoalCategory.STRENGTH, "Fat Loss Circuit", (0.5, "fallback")),
            (GoalCategory.FAT_LOSS, "Fat Loss Circuit - 3x/săptămână", (1.0, "perfect")),
            (GoalCategory.FAT_LOSS, "Beginner Full Body", (0.7, "near")),
            (GoalCategory.FAT_LOSS, "Strength Focus", (0.4, "fallback")),
            (GoalCategory.HYPERTROPHY, "Push/Pull/Legs - 6x/săptămână", (1.0, "perfect")),
            (GoalCategory.HYPERTROPHY, "Upper/Lower Split", (0.9, "near")),
            (GoalCategory.HYPERTROPHY, "Beginner Full Body", (0.6, "fallback")),
            (GoalCategory.UNSPECIFIED, "Anything", (0.5, "unspecified")),
        ],
    )
    def test_outcomes(self, category, name, expected):
        assert match_program(category, name) == expected


class TestProgramMarkers:
    def test_fat_loss_program(self):
        assert is_fat_loss_program("Fat Loss Circuit")
        assert not is_fat_loss_program("Strength Focus")

    def test_high_volume_program(self):
        assert is_high_volume_program("Push/Pull/Legs - 6x/săptămână")
        assert is_high_volume_program("PPL Advanced")
        assert not is_high_volume_program("Upper/Lower Split - 4x/săptămână")


class TestVocabulary:
    def test_lookup(self):
        assert get_vocabulary("en") is ENGLISH_VOCABULARY
        assert get_vocabulary("RO") is ROMANIAN_VOCABULARY

    def test_unknown_locale_falls_back(self):
        assert get_vocabulary("de") is ROMANIAN_VOCABULARY

    def test_normalize_folds_cedilla(self):
        assert normalize_text("ŞŢ forţă") == "șț forță"
