"""Answer grading for generated flashcards.

Grading is heuristic string comparison: both sides are trimmed, text answers
are compared case-insensitively, and true/false answers accept the usual
yes/no spellings. The caller keeps the user's original text for storage.
"""

from __future__ import annotations

from typing import Optional

from app.modules.flashcards.models.flashcards import AnswerVerdict, FlashcardType

TRUE_TOKENS: frozenset[str] = frozenset({"true", "t", "yes", "y", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"false", "f", "no", "n", "0"})


def _normalize(text: str) -> str:
    return (text or "").strip().lower()


def classify_boolean(text: str) -> Optional[bool]:
    """Map an answer onto True/False, or None when it is neither."""
    token = _normalize(text)
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def evaluate_answer(
    flashcard_type: FlashcardType | str, correct_answer: str, user_answer: str
) -> AnswerVerdict:
    """Grade ``user_answer`` and return the full verdict.

    For true/false cards the correct side counts as true only when it is in
    the true vocabulary; anything else on that side is false. A user answer
    in neither vocabulary is ``UNGRADEABLE`` rather than silently false.
    """
    flashcard_type = FlashcardType(flashcard_type)

    if flashcard_type == FlashcardType.TRUE_FALSE:
        user_value = classify_boolean(user_answer)
        if user_value is None:
            return AnswerVerdict.UNGRADEABLE
        correct_value = classify_boolean(correct_answer) is True
        if user_value == correct_value:
            return AnswerVerdict.CORRECT
        return AnswerVerdict.INCORRECT

    if _normalize(user_answer) == _normalize(correct_answer):
        return AnswerVerdict.CORRECT
    return AnswerVerdict.INCORRECT


def grade_answer(
    flashcard_type: FlashcardType | str, correct_answer: str, user_answer: str
) -> bool:
    """True iff the answer is graded correct; ungradeable input is never correct."""
    return evaluate_answer(flashcard_type, correct_answer, user_answer) == (
        AnswerVerdict.CORRECT
    )
