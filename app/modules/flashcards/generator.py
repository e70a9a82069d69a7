"""Flashcard assembly from resolved property values.

Each (property, value) pair yields a contiguous run of three cards: a
true/false statement about the actual value, a four-option multiple-choice
question and a fill-in-the-blank question. Assembly is pure; persistence is
the service layer's job.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from app.modules.flashcards.errors import NoPropertyValuesError
from app.modules.flashcards.models.flashcards import (
    FlashcardType,
    GeneratedFlashcard,
    ResolvedPropertyValue,
)
from app.modules.flashcards.options import synthesize_fake_options


def true_false_question(property_name: str, instance_name: str, value: str) -> str:
    return f"Is the {property_name} of '{instance_name}' equal to '{value}'?"


def open_question(property_name: str, instance_name: str) -> str:
    return f"What is the {property_name} of '{instance_name}'?"


def build_options(
    value: str, fake_options: Sequence[str], rng: Optional[random.Random] = None
) -> list[str]:
    options = [value, *fake_options]
    (rng or random).shuffle(options)
    return options


def generate_flashcards(
    instance_name: str,
    property_values: Sequence[ResolvedPropertyValue],
    *,
    instance_id: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[GeneratedFlashcard]:
    """Build three flashcards per property value, in input order.

    ``rng`` only affects the order of multiple-choice options.
    """
    if not property_values:
        raise NoPropertyValuesError(instance_id)

    cards: list[GeneratedFlashcard] = []
    for pv in property_values:
        common = {"instance_id": instance_id, "property_id": pv.property_id}
        question = open_question(pv.name, instance_name)
        fakes = synthesize_fake_options(pv.value, pv.property_type)

        cards.append(
            GeneratedFlashcard(
                flashcard_type=FlashcardType.TRUE_FALSE,
                question=true_false_question(pv.name, instance_name, pv.value),
                correct_answer="true",
                **common,
            )
        )
        cards.append(
            GeneratedFlashcard(
                flashcard_type=FlashcardType.MULTIPLE_CHOICE,
                question=question,
                correct_answer=pv.value,
                options=build_options(pv.value, fakes, rng),
                **common,
            )
        )
        cards.append(
            GeneratedFlashcard(
                flashcard_type=FlashcardType.FILL_IN_BLANK,
                question=question,
                correct_answer=pv.value,
                **common,
            )
        )

    return cards
