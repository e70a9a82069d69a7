from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
    Enum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.db.base import Base
from app.modules.flashcards.models.flashcards import PropertyType

if TYPE_CHECKING:
    from .flashcards import Flashcard


def _enum_values(enum_cls) -> list[str]:
    return [m.value for m in enum_cls]


class DataType(Base):
    __tablename__ = "data_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    properties: Mapped[list["Property"]] = relationship(
        "Property",
        back_populates="data_type",
        cascade="all, delete-orphan",
        order_by="Property.id",
    )
    instances: Mapped[list["Instance"]] = relationship(
        "Instance",
        back_populates="data_type",
        cascade="all, delete-orphan",
        order_by="Instance.id",
    )


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    type_id: Mapped[int] = mapped_column(
        ForeignKey("data_types.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, name="property_type", values_callable=_enum_values),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    data_type: Mapped["DataType"] = relationship(
        "DataType", back_populates="properties"
    )
    property_values: Mapped[list["PropertyValue"]] = relationship(
        "PropertyValue", back_populates="property"
    )


class Instance(Base):
    __tablename__ = "instances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    type_id: Mapped[int] = mapped_column(
        ForeignKey("data_types.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    data_type: Mapped["DataType"] = relationship(
        "DataType", back_populates="instances"
    )
    property_values: Mapped[list["PropertyValue"]] = relationship(
        "PropertyValue",
        back_populates="instance",
        cascade="all, delete-orphan",
        order_by="PropertyValue.id",
    )
    flashcards: Mapped[list["Flashcard"]] = relationship(
        "Flashcard", back_populates="instance", cascade="all, delete-orphan"
    )


class PropertyValue(Base):
    __tablename__ = "property_values"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    instance_id: Mapped[int] = mapped_column(
        ForeignKey("instances.id"), nullable=False, index=True
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id"), nullable=False, index=True
    )
    # All values are stored as text and interpreted on demand
    value: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        index=True,
    )

    instance: Mapped["Instance"] = relationship(
        "Instance", back_populates="property_values"
    )
    property: Mapped["Property"] = relationship(
        "Property", back_populates="property_values"
    )


__all__ = [
    "DataType",
    "Property",
    "Instance",
    "PropertyValue",
]
