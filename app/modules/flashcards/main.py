"""Flashcards service classes.

Provides high-level classes for generating flashcards from stored instances
and for grading submitted answers, used by the API handlers and the CLI.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import bind, get_logger
from app.modules.flashcards.errors import NoPropertyValuesError
from app.modules.flashcards.generator import generate_flashcards
from app.modules.flashcards.grading import evaluate_answer
from app.modules.flashcards.models.flashcards import (
    AnswerVerdict,
    FlashcardType,
    GeneratedFlashcard,
    GradedAnswer,
    ResolvedPropertyValue,
)

logger = get_logger(__name__)


class FlashcardsGenerator:
    """Builds flashcards for one instance at a time."""

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self.rng = rng

    def generate(
        self,
        instance_name: str,
        property_values: Sequence[ResolvedPropertyValue],
        *,
        instance_id: Optional[int] = None,
    ) -> list[GeneratedFlashcard]:
        return generate_flashcards(
            instance_name, property_values, instance_id=instance_id, rng=self.rng
        )

    async def generate_with_db(self, session: AsyncSession, instance_id: int):
        """Resolve the instance, generate its cards and persist them as one batch."""
        from app.core.db_services import CatalogService, FlashcardService

        catalog = CatalogService(session)
        instance = await catalog.get_instance_with_values(instance_id)
        values = catalog.resolve_values(instance)
        if not values:
            raise NoPropertyValuesError(instance_id)

        cards = self.generate(instance.name, values, instance_id=instance.id)
        rows = await FlashcardService(session).save_flashcards(cards)
        bind(logger, instance_id=instance_id).info(
            f"Generated {len(rows)} flashcards from {len(values)} property values"
        )
        return rows

    @staticmethod
    def to_jsonable(cards: Sequence[GeneratedFlashcard]) -> list[dict]:
        return [c.model_dump(mode="json", exclude_none=True) for c in cards]


class AnswerGrader:
    """Grades submissions; every submission is stored as a new answer."""

    def grade(
        self,
        flashcard_type: FlashcardType | str,
        correct_answer: str,
        user_answer: str,
        *,
        flashcard_id: Optional[int] = None,
    ) -> GradedAnswer:
        verdict = evaluate_answer(flashcard_type, correct_answer, user_answer)
        return GradedAnswer(
            flashcard_id=flashcard_id,
            user_answer=user_answer,
            is_correct=verdict == AnswerVerdict.CORRECT,
            verdict=verdict,
        )

    async def submit_with_db(
        self, session: AsyncSession, flashcard_id: int, user_answer: str
    ):
        from app.core.db_services import FlashcardService

        service = FlashcardService(session)
        flashcard = await service.get_flashcard(flashcard_id)
        graded = self.grade(
            flashcard.flashcard_type,
            flashcard.correct_answer,
            user_answer,
            flashcard_id=flashcard.id,
        )
        if graded.verdict == AnswerVerdict.UNGRADEABLE:
            bind(logger, flashcard_id=flashcard_id).info(
                f"Ungradeable answer {user_answer!r}"
            )
        return await service.save_answer(graded)
