from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Text,
    func,
    JSON,
    Enum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.db.base import Base
from app.modules.flashcards.models.flashcards import AnswerVerdict, FlashcardType

if TYPE_CHECKING:
    from .catalog import Instance, Property


def _enum_values(enum_cls) -> list[str]:
    return [m.value for m in enum_cls]


class Flashcard(Base):
    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    instance_id: Mapped[int] = mapped_column(
        ForeignKey("instances.id"), nullable=False, index=True
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id"), nullable=False, index=True
    )
    flashcard_type: Mapped[FlashcardType] = mapped_column(
        Enum(FlashcardType, name="flashcard_type", values_callable=_enum_values),
        nullable=False,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    # Multiple choice only
    options: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    instance: Mapped["Instance"] = relationship(
        "Instance", back_populates="flashcards"
    )
    property: Mapped["Property"] = relationship("Property")
    answers: Mapped[list["Answer"]] = relationship(
        "Answer", back_populates="flashcard", cascade="all, delete-orphan"
    )


class Answer(Base):
    __tablename__ = "answers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    flashcard_id: Mapped[int] = mapped_column(
        ForeignKey("flashcards.id"), nullable=False, index=True
    )
    user_answer: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    verdict: Mapped[AnswerVerdict] = mapped_column(
        Enum(AnswerVerdict, name="answer_verdict", values_callable=_enum_values),
        nullable=False,
    )
    answered_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    flashcard: Mapped["Flashcard"] = relationship(
        "Flashcard", back_populates="answers"
    )


__all__ = [
    "Flashcard",
    "Answer",
]
