"""Pydantic models for typed-property flashcards.

Property values travel as raw text tagged with their declared type; numeric
and boolean meaning is applied only by the option synthesizer and grader.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PropertyType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class FlashcardType(str, Enum):
    TRUE_FALSE = "true_false"
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_BLANK = "fill_in_blank"


class AnswerVerdict(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    # true/false answer outside both boolean vocabularies
    UNGRADEABLE = "ungradeable"


class ResolvedPropertyValue(BaseModel):
    """A property value joined with its property definition.

    Input documents name the type under ``type``; ``property_type`` is also
    accepted. Unknown keys are rejected rather than ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str
    property_type: PropertyType = Field(alias="type")
    value: str
    property_id: Optional[int] = None


class GeneratedFlashcard(BaseModel):
    """A flashcard produced for one (instance, property) pair."""

    flashcard_type: FlashcardType
    question: str
    correct_answer: str
    options: Optional[list[str]] = None
    instance_id: Optional[int] = None
    property_id: Optional[int] = None


class GradedAnswer(BaseModel):
    user_answer: str
    is_correct: bool
    verdict: AnswerVerdict
    flashcard_id: Optional[int] = None


class InstanceValues(BaseModel):
    """Input document for offline generation (CLI)."""

    model_config = ConfigDict(extra="forbid")

    name: str
    values: list[ResolvedPropertyValue] = Field(default_factory=list)
