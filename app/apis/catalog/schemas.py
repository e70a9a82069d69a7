from __future__ import annotations

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import PropertyType


class CreateDataTypeRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the data type, e.g. Country")
    description: str | None = None


class CreatePropertyRequest(BaseModel):
    type_id: int
    name: str = Field(..., min_length=1)
    property_type: PropertyType


class CreateInstanceRequest(BaseModel):
    type_id: int
    name: str = Field(..., min_length=1)


class CreatePropertyValueRequest(BaseModel):
    instance_id: int
    property_id: int
    value: str = Field(..., description="Stored as text regardless of property type")


class PropertyRead(BaseModel):
    id: int
    type_id: int
    name: str
    property_type: PropertyType
    created_at: str


class DataTypeRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    created_at: str
    properties: list[PropertyRead] = Field(default_factory=list)


class PropertyValueRead(BaseModel):
    id: int
    instance_id: int
    property_id: int
    value: str
    created_at: str


class PropertyValueWithProperty(PropertyValueRead):
    property: PropertyRead


class InstanceRead(BaseModel):
    id: int
    type_id: int
    name: str
    created_at: str
    property_values: list[PropertyValueWithProperty] = Field(default_factory=list)
