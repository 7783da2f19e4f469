"""
Unit tests for assessment scoring and band categorisation (pure functions).
"""
import pytest

from app.services.catalog import SYMPTOM_IDS, SYMPTOMS
from app.services.scoring import (
    BANDS,
    IN_TRANSITION,
    SMART_LAZY,
    UNINTELLIGENTLY_LAZY,
    band_for,
    percentage,
    score_answers,
)


def _answers(present: int) -> dict[int, bool]:
    """First `present` symptoms answered yes, the rest no."""
    return {sid: i < present for i, sid in enumerate(SYMPTOM_IDS)}


class TestQuestionnaire:
    def test_ten_symptoms_in_order(self):
        assert len(SYMPTOMS) == 10
        assert list(SYMPTOM_IDS) == list(range(1, 11))

    def test_every_symptom_has_examples(self):
        assert all(s.examples for s in SYMPTOMS)


class TestScoreAnswers:
    def test_three_present_scores_seventy(self):
        result = score_answers(_answers(3))
        assert result.symptoms_count == 3
        assert result.healthy_count == 7
        assert result.score == 70
        assert band_for(result.score).label == "In Transition"

    def test_all_healthy_scores_hundred(self):
        assert score_answers(_answers(0)).score == 100

    def test_all_present_scores_zero(self):
        result = score_answers(_answers(10))
        assert result.score == 0
        assert result.symptoms_count == 10

    @pytest.mark.parametrize("present", range(0, 11))
    def test_score_is_integer_percentage_of_healthy(self, present):
        result = score_answers(_answers(present))
        assert isinstance(result.score, int)
        assert 0 <= result.score <= 100
        assert result.score == round(100 * (10 - present) / 10)

    def test_incomplete_answers_score_zero_and_list_missing(self):
        answers = _answers(0)
        del answers[4]
        del answers[9]
        result = score_answers(answers)
        assert not result.is_complete
        assert result.missing == [4, 9]
        assert result.score == 0

    def test_empty_questionnaire_does_not_divide_by_zero(self):
        result = score_answers({}, symptom_ids=())
        assert result.score == 0
        assert result.total == 0
        assert result.is_complete

    def test_unknown_keys_are_ignored(self):
        answers = _answers(2)
        answers[99] = True
        assert score_answers(answers).symptoms_count == 2

    def test_rounds_half_up_for_uneven_questionnaires(self):
        # 1 healthy of 8 = 12.5%  → 13
        answers = {i: i != 1 for i in range(1, 9)}
        assert score_answers(answers, symptom_ids=tuple(range(1, 9))).score == 13

    def test_two_of_three_rounds_to_67(self):
        answers = {1: False, 2: False, 3: True}
        assert score_answers(answers, symptom_ids=(1, 2, 3)).score == 67


class TestPercentage:
    def test_zero_total(self):
        assert percentage(5, 0) == 0

    def test_exact(self):
        assert percentage(7, 10) == 70


class TestBands:
    def test_boundaries(self):
        assert band_for(59) is UNINTELLIGENTLY_LAZY
        assert band_for(60) is IN_TRANSITION
        assert band_for(79) is IN_TRANSITION
        assert band_for(80) is SMART_LAZY
        assert band_for(100) is SMART_LAZY
        assert band_for(0) is UNINTELLIGENTLY_LAZY

    def test_none_is_treated_as_zero(self):
        assert band_for(None) is UNINTELLIGENTLY_LAZY

    def test_every_score_maps_to_exactly_one_band(self):
        for score in range(0, 101):
            containing = [b for b in BANDS if b.contains(score)]
            assert len(containing) == 1
            assert containing[0] is band_for(score)

    def test_each_band_has_its_own_recommendations(self):
        sets = {b.recommendations for b in BANDS}
        assert len(sets) == 3
        assert all(b.recommendations for b in BANDS)

    def test_labels(self):
        assert [b.label for b in BANDS] == [
            "Unintelligently Lazy", "In Transition", "Smart-Lazy",
        ]
