from __future__ import annotations

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import AnswerVerdict, FlashcardType


class GenerateFlashcardsRequest(BaseModel):
    instance_id: int = Field(..., description="Instance to generate flashcards for")


class SubmitAnswerRequest(BaseModel):
    flashcard_id: int
    user_answer: str


class FlashcardRead(BaseModel):
    id: int
    instance_id: int
    property_id: int
    flashcard_type: FlashcardType
    question: str
    correct_answer: str
    options: list[str] | None = None
    created_at: str


class AnswerRead(BaseModel):
    id: int
    flashcard_id: int
    user_answer: str
    is_correct: bool
    verdict: AnswerVerdict
    answered_at: str
