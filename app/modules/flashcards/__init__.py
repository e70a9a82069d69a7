"""Flashcards module exports."""

from .models.flashcards import (
    AnswerVerdict,
    FlashcardType,
    GeneratedFlashcard,
    GradedAnswer,
    PropertyType,
    ResolvedPropertyValue,
)
from .errors import FlashcardsError, NoPropertyValuesError, NotFoundError
from .options import synthesize_fake_options
from .generator import generate_flashcards
from .grading import evaluate_answer, grade_answer
from .main import AnswerGrader, FlashcardsGenerator

__all__ = [
    "AnswerVerdict",
    "FlashcardType",
    "GeneratedFlashcard",
    "GradedAnswer",
    "PropertyType",
    "ResolvedPropertyValue",
    "FlashcardsError",
    "NoPropertyValuesError",
    "NotFoundError",
    "synthesize_fake_options",
    "generate_flashcards",
    "evaluate_answer",
    "grade_answer",
    "AnswerGrader",
    "FlashcardsGenerator",
]
