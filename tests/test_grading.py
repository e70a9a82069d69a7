"""
Tests for answer grading.
"""

import pytest

from app.modules.flashcards.grading import classify_boolean, evaluate_answer, grade_answer
from app.modules.flashcards.main import AnswerGrader
from app.modules.flashcards.models.flashcards import AnswerVerdict, FlashcardType


class TestTextAnswers:
    @pytest.mark.parametrize("card_type", ["fill_in_blank", "multiple_choice"])
    def test_case_insensitive(self, card_type):
        assert grade_answer(card_type, "Paris", "PARIS") is True

    def test_trims_whitespace(self):
        assert grade_answer("fill_in_blank", "Paris", "paris ") is True
        assert grade_answer("fill_in_blank", "  Paris", "Paris") is True

    def test_wrong_answer(self):
        assert grade_answer("fill_in_blank", "Paris", "Lyon") is False

    def test_no_numeric_tolerance(self):
        assert grade_answer("multiple_choice", "10", "10.0") is False

    def test_inner_whitespace_matters(self):
        assert grade_answer("fill_in_blank", "New York", "NewYork") is False


class TestTrueFalseAnswers:
    @pytest.mark.parametrize("answer", ["true", "T", "yes", "Y", "1", " True "])
    def test_true_variations(self, answer):
        assert grade_answer(FlashcardType.TRUE_FALSE, "true", answer) is True

    @pytest.mark.parametrize("answer", ["false", "F", "no", "N", "0"])
    def test_false_variations(self, answer):
        assert grade_answer(FlashcardType.TRUE_FALSE, "false", answer) is True

    def test_mismatch(self):
        assert grade_answer("true_false", "true", "false") is False
        assert grade_answer("true_false", "false", "yes") is False

    def test_non_true_correct_answer_counts_as_false(self):
        assert grade_answer("true_false", "nope", "no") is True

    def test_ambiguous_answer_is_ungradeable(self):
        assert evaluate_answer("true_false", "false", "maybe") == AnswerVerdict.UNGRADEABLE
        assert grade_answer("true_false", "false", "maybe") is False
        assert grade_answer("true_false", "true", "") is False


def test_classify_boolean():
    assert classify_boolean(" YES ") is True
    assert classify_boolean("n") is False
    assert classify_boolean("perhaps") is None


def test_grading_is_repeatable():
    args = ("true_false", "true", "Y")
    assert grade_answer(*args) == grade_answer(*args)


def test_grader_keeps_original_answer_text():
    graded = AnswerGrader().grade("fill_in_blank", "Paris", "  PARIS ", flashcard_id=4)
    assert graded.user_answer == "  PARIS "
    assert graded.is_correct is True
    assert graded.verdict == AnswerVerdict.CORRECT
    assert graded.flashcard_id == 4


def test_unknown_card_type_rejected():
    with pytest.raises(ValueError):
        grade_answer("essay", "a", "a")
