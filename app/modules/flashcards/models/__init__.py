from .flashcards import (
    AnswerVerdict,
    FlashcardType,
    GeneratedFlashcard,
    GradedAnswer,
    InstanceValues,
    PropertyType,
    ResolvedPropertyValue,
)

__all__ = [
    "AnswerVerdict",
    "FlashcardType",
    "GeneratedFlashcard",
    "GradedAnswer",
    "InstanceValues",
    "PropertyType",
    "ResolvedPropertyValue",
]
