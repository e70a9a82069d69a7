"""
Tests for flashcard assembly.

Option order is shuffled, so multiple-choice checks compare sets.
"""

import random
from collections import Counter

import pytest

from app.modules.flashcards.errors import NoPropertyValuesError
from app.modules.flashcards.generator import generate_flashcards
from app.modules.flashcards.models.flashcards import (
    FlashcardType,
    PropertyType,
    ResolvedPropertyValue,
)


@pytest.fixture
def france_values():
    return [
        ResolvedPropertyValue(
            name="Capital", property_type=PropertyType.STRING, value="Paris", property_id=1
        ),
        ResolvedPropertyValue(
            name="Population",
            property_type=PropertyType.NUMBER,
            value="67000000",
            property_id=2,
        ),
    ]


class TestFranceScenario:
    def test_six_cards(self, france_values):
        cards = generate_flashcards("France", france_values, instance_id=7)
        assert len(cards) == 6
        assert all(c.instance_id == 7 for c in cards)

    def test_capital_true_false(self, france_values):
        card = generate_flashcards("France", france_values)[0]
        assert card.flashcard_type == FlashcardType.TRUE_FALSE
        assert card.question == "Is the Capital of 'France' equal to 'Paris'?"
        assert card.correct_answer == "true"
        assert card.options is None
        assert card.property_id == 1

    def test_population_multiple_choice(self, france_values):
        cards = generate_flashcards("France", france_values)
        mc = [
            c
            for c in cards
            if c.flashcard_type == FlashcardType.MULTIPLE_CHOICE and c.property_id == 2
        ][0]
        assert mc.question == "What is the Population of 'France'?"
        assert mc.correct_answer == "67000000"
        assert set(mc.options) == {"67000001", "66999999", "134000000", "67000000"}

    def test_fill_in_blank(self, france_values):
        card = generate_flashcards("France", france_values)[2]
        assert card.flashcard_type == FlashcardType.FILL_IN_BLANK
        assert card.question == "What is the Capital of 'France'?"
        assert card.correct_answer == "Paris"
        assert card.options is None


def test_cards_are_grouped_per_property_in_input_order(france_values):
    cards = generate_flashcards("France", france_values)
    assert [c.property_id for c in cards] == [1, 1, 1, 2, 2, 2]
    assert [c.flashcard_type for c in cards[:3]] == [
        FlashcardType.TRUE_FALSE,
        FlashcardType.MULTIPLE_CHOICE,
        FlashcardType.FILL_IN_BLANK,
    ]


def test_three_cards_per_value_with_one_of_each_type():
    values = [
        ResolvedPropertyValue(name=f"P{i}", property_type=t, value=v)
        for i, (t, v) in enumerate(
            [
                (PropertyType.STRING, "Blue"),
                (PropertyType.NUMBER, "0"),
                (PropertyType.BOOLEAN, "true"),
                (PropertyType.NUMBER, "n/a"),
            ]
        )
    ]
    cards = generate_flashcards("Thing", values)
    assert len(cards) == 12
    counts = Counter(c.flashcard_type for c in cards)
    assert counts == {t: 4 for t in FlashcardType}


def test_multiple_choice_options_are_well_formed():
    values = [
        ResolvedPropertyValue(name="A", property_type=PropertyType.NUMBER, value="0"),
        ResolvedPropertyValue(name="B", property_type=PropertyType.BOOLEAN, value="maybe"),
        ResolvedPropertyValue(name="C", property_type=PropertyType.STRING, value="Unknown"),
    ]
    for card in generate_flashcards("X", values):
        if card.flashcard_type != FlashcardType.MULTIPLE_CHOICE:
            assert card.options is None
            continue
        assert len(card.options) == 4
        assert card.options.count(card.correct_answer) == 1
        assert len(set(card.options)) == 4


def test_true_false_answer_is_always_true(france_values):
    cards = generate_flashcards("France", france_values)
    tf = [c for c in cards if c.flashcard_type == FlashcardType.TRUE_FALSE]
    assert tf and all(c.correct_answer == "true" for c in tf)


def test_seeded_rng_pins_option_order(france_values):
    first = generate_flashcards("France", france_values, rng=random.Random(3))
    second = generate_flashcards("France", france_values, rng=random.Random(3))
    assert [c.options for c in first] == [c.options for c in second]


def test_empty_values_rejected():
    with pytest.raises(NoPropertyValuesError):
        generate_flashcards("Empty", [], instance_id=5)
