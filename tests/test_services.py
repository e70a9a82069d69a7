"""
Tests for the database-backed services and orchestration classes.
"""

import pytest
from sqlalchemy import func, select

from app.core.db.schemas.flashcards import Answer, Flashcard
from app.core.db_services import CatalogService, FlashcardService
from app.modules.flashcards.errors import NoPropertyValuesError, NotFoundError
from app.modules.flashcards.main import AnswerGrader, FlashcardsGenerator
from app.modules.flashcards.models.flashcards import (
    AnswerVerdict,
    FlashcardType,
    PropertyType,
)


@pytest.fixture
async def seeded(session):
    catalog = CatalogService(session)
    dt = await catalog.create_data_type(name="Element")
    symbol = await catalog.create_property(
        type_id=dt.id, name="Symbol", property_type=PropertyType.STRING
    )
    noble = await catalog.create_property(
        type_id=dt.id, name="Noble gas", property_type=PropertyType.BOOLEAN
    )
    helium = await catalog.create_instance(type_id=dt.id, name="Helium")
    await catalog.create_property_value(
        instance_id=helium.id, property_id=symbol.id, value="He"
    )
    await catalog.create_property_value(
        instance_id=helium.id, property_id=noble.id, value="true"
    )
    return helium


async def test_resolve_values(session, seeded):
    catalog = CatalogService(session)
    instance = await catalog.get_instance_with_values(seeded.id)
    values = catalog.resolve_values(instance)
    assert [(v.name, v.property_type, v.value) for v in values] == [
        ("Symbol", PropertyType.STRING, "He"),
        ("Noble gas", PropertyType.BOOLEAN, "true"),
    ]


async def test_generate_with_db_persists_batch(session, seeded):
    rows = await FlashcardsGenerator().generate_with_db(session, seeded.id)
    assert len(rows) == 6
    assert all(r.id is not None for r in rows)

    stored = await FlashcardService(session).list_flashcards_by_instance(seeded.id)
    assert len(stored) == 6
    mc = [r for r in stored if r.flashcard_type == FlashcardType.MULTIPLE_CHOICE]
    boolean_card = [r for r in mc if r.correct_answer == "true"][0]
    assert set(boolean_card.options) == {"true", "false", "maybe", "unknown"}


async def test_generate_twice_creates_new_batch(session, seeded):
    generator = FlashcardsGenerator()
    await generator.generate_with_db(session, seeded.id)
    await generator.generate_with_db(session, seeded.id)
    count = (await session.execute(select(func.count(Flashcard.id)))).scalar()
    assert count == 12


async def test_generate_unknown_instance(session):
    with pytest.raises(NotFoundError) as exc:
        await FlashcardsGenerator().generate_with_db(session, 123)
    assert exc.value.entity == "Instance"
    assert exc.value.identifier == 123


async def test_generate_without_values(session):
    catalog = CatalogService(session)
    dt = await catalog.create_data_type(name="Element")
    empty = await catalog.create_instance(type_id=dt.id, name="Unobtainium")
    with pytest.raises(NoPropertyValuesError) as exc:
        await FlashcardsGenerator().generate_with_db(session, empty.id)
    assert exc.value.instance_id == empty.id


async def test_submit_with_db_stores_each_attempt(session, seeded):
    rows = await FlashcardsGenerator().generate_with_db(session, seeded.id)
    fill = [r for r in rows if r.flashcard_type == FlashcardType.FILL_IN_BLANK][0]

    grader = AnswerGrader()
    wrong = await grader.submit_with_db(session, fill.id, "H")
    right = await grader.submit_with_db(session, fill.id, " he ")

    assert wrong.is_correct is False
    assert wrong.verdict == AnswerVerdict.INCORRECT
    assert right.is_correct is True
    assert right.user_answer == " he "

    count = (await session.execute(select(func.count(Answer.id)))).scalar()
    assert count == 2


async def test_submit_unknown_flashcard(session):
    with pytest.raises(NotFoundError):
        await AnswerGrader().submit_with_db(session, 55, "x")


async def test_create_property_value_unknown_property(session, seeded):
    with pytest.raises(NotFoundError) as exc:
        await CatalogService(session).create_property_value(
            instance_id=seeded.id, property_id=999, value="x"
        )
    assert exc.value.entity == "Property"
