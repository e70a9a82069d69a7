"""Database service classes for the data catalog, flashcards and answers."""

from __future__ import annotations

from typing import Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.core.db.schemas.catalog import (
    DataType,
    Instance,
    Property,
    PropertyValue,
)
from app.core.db.schemas.flashcards import Answer, Flashcard
from app.core.logging import bind, get_logger
from app.modules.flashcards.errors import NotFoundError
from app.modules.flashcards.models.flashcards import (
    GeneratedFlashcard,
    GradedAnswer,
    PropertyType,
    ResolvedPropertyValue,
)

logger = get_logger(__name__)


class CatalogService:
    """Service for user-defined data types, their properties, instances and values."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_data_type(
        self, *, name: str, description: Optional[str] = None
    ) -> DataType:
        data_type = DataType(name=name, description=description)
        self.session.add(data_type)
        await self.session.commit()
        return await self.get_data_type(data_type.id)

    async def get_data_type(self, type_id: int) -> DataType:
        result = await self.session.execute(
            select(DataType)
            .options(selectinload(DataType.properties))
            .where(DataType.id == type_id)
            .execution_options(populate_existing=True)
        )
        data_type = result.scalar_one_or_none()
        if data_type is None:
            raise NotFoundError("Data type", type_id)
        return data_type

    async def list_data_types(self) -> Sequence[DataType]:
        """All data types with their properties, oldest first."""
        result = await self.session.execute(
            select(DataType)
            .options(selectinload(DataType.properties))
            .order_by(DataType.created_at, DataType.id)
        )
        return result.scalars().all()

    async def create_property(
        self, *, type_id: int, name: str, property_type: PropertyType
    ) -> Property:
        await self.get_data_type(type_id)
        prop = Property(type_id=type_id, name=name, property_type=property_type)
        self.session.add(prop)
        await self.session.commit()
        await self.session.refresh(prop)
        return prop

    async def create_instance(self, *, type_id: int, name: str) -> Instance:
        await self.get_data_type(type_id)
        instance = Instance(type_id=type_id, name=name)
        self.session.add(instance)
        await self.session.commit()
        return await self.get_instance_with_values(instance.id)

    async def create_property_value(
        self, *, instance_id: int, property_id: int, value: str
    ) -> PropertyValue:
        if await self.session.get(Instance, instance_id) is None:
            raise NotFoundError("Instance", instance_id)
        if await self.session.get(Property, property_id) is None:
            raise NotFoundError("Property", property_id)

        pv = PropertyValue(instance_id=instance_id, property_id=property_id, value=value)
        self.session.add(pv)
        await self.session.commit()
        await self.session.refresh(pv)
        return pv

    def _instances_query(self):
        return select(Instance).options(
            selectinload(Instance.property_values).selectinload(PropertyValue.property)
        )

    async def list_instances(self) -> Sequence[Instance]:
        result = await self.session.execute(self._instances_query().order_by(Instance.id))
        return result.scalars().all()

    async def list_instances_by_type(self, type_id: int) -> Sequence[Instance]:
        result = await self.session.execute(
            self._instances_query()
            .where(Instance.type_id == type_id)
            .order_by(Instance.id)
        )
        return result.scalars().all()

    async def get_instance_with_values(self, instance_id: int) -> Instance:
        result = await self.session.execute(
            self._instances_query()
            .where(Instance.id == instance_id)
            .execution_options(populate_existing=True)
        )
        instance = result.scalar_one_or_none()
        if instance is None:
            raise NotFoundError("Instance", instance_id)
        return instance

    @staticmethod
    def resolve_values(instance: Instance) -> list[ResolvedPropertyValue]:
        """Flatten an instance's values into (name, type, value) tuples."""
        return [
            ResolvedPropertyValue(
                name=pv.property.name,
                property_type=pv.property.property_type,
                value=pv.value,
                property_id=pv.property_id,
            )
            for pv in instance.property_values
        ]


class FlashcardService:
    """Service for persisting generated flashcards and graded answers."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_flashcards(
        self, cards: Sequence[GeneratedFlashcard]
    ) -> list[Flashcard]:
        """Insert a generated batch in a single commit."""
        rows = [
            Flashcard(
                instance_id=card.instance_id,
                property_id=card.property_id,
                flashcard_type=card.flashcard_type,
                question=card.question,
                correct_answer=card.correct_answer,
                options=card.options,
            )
            for card in cards
        ]
        self.session.add_all(rows)
        await self.session.commit()
        for row in rows:
            await self.session.refresh(row)
        return rows

    async def list_flashcards(self) -> Sequence[Flashcard]:
        result = await self.session.execute(select(Flashcard).order_by(Flashcard.id))
        return result.scalars().all()

    async def list_flashcards_by_instance(self, instance_id: int) -> Sequence[Flashcard]:
        result = await self.session.execute(
            select(Flashcard)
            .where(Flashcard.instance_id == instance_id)
            .order_by(Flashcard.id)
        )
        return result.scalars().all()

    async def get_flashcard(self, flashcard_id: int) -> Flashcard:
        flashcard = await self.session.get(Flashcard, flashcard_id)
        if flashcard is None:
            raise NotFoundError("Flashcard", flashcard_id)
        return flashcard

    async def save_answer(self, graded: GradedAnswer) -> Answer:
        answer = Answer(
            flashcard_id=graded.flashcard_id,
            user_answer=graded.user_answer,
            is_correct=graded.is_correct,
            verdict=graded.verdict,
        )
        self.session.add(answer)
        await self.session.commit()
        await self.session.refresh(answer)
        bind(logger, flashcard_id=graded.flashcard_id).info(
            f"Stored answer {answer.id}: {graded.verdict.value}"
        )
        return answer
