from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db.base import get_session
from app.core.db.schemas.catalog import (
    DataType as DBDataType,
    Instance as DBInstance,
    Property as DBProperty,
    PropertyValue as DBPropertyValue,
)
from app.core.db_services import CatalogService
from app.modules.flashcards.errors import NotFoundError
from .schemas import (
    CreateDataTypeRequest,
    CreateInstanceRequest,
    CreatePropertyRequest,
    CreatePropertyValueRequest,
    DataTypeRead,
    InstanceRead,
    PropertyRead,
    PropertyValueRead,
    PropertyValueWithProperty,
)


router = APIRouter()


def _iso(dt: datetime | None) -> str:
    return dt.isoformat() if dt else ""


def property_read(p: DBProperty) -> PropertyRead:
    return PropertyRead(
        id=p.id,
        type_id=p.type_id,
        name=p.name,
        property_type=p.property_type,
        created_at=_iso(p.created_at),
    )


def data_type_read(dt: DBDataType) -> DataTypeRead:
    return DataTypeRead(
        id=dt.id,
        name=dt.name,
        description=dt.description,
        created_at=_iso(dt.created_at),
        properties=[property_read(p) for p in (dt.properties or [])],
    )


def property_value_read(pv: DBPropertyValue) -> PropertyValueRead:
    return PropertyValueRead(
        id=pv.id,
        instance_id=pv.instance_id,
        property_id=pv.property_id,
        value=pv.value,
        created_at=_iso(pv.created_at),
    )


def instance_read(i: DBInstance) -> InstanceRead:
    return InstanceRead(
        id=i.id,
        type_id=i.type_id,
        name=i.name,
        created_at=_iso(i.created_at),
        property_values=[
            PropertyValueWithProperty(
                **property_value_read(pv).model_dump(),
                property=property_read(pv.property),
            )
            for pv in (i.property_values or [])
        ],
    )


@router.post(
    f"/{settings.app.version}/data-types",
    response_model=DataTypeRead,
    status_code=status.HTTP_201_CREATED,
    tags=["catalog"],
)
async def create_data_type(
    req: CreateDataTypeRequest,
    session: AsyncSession = Depends(get_session),
) -> DataTypeRead:
    dt = await CatalogService(session).create_data_type(
        name=req.name, description=req.description
    )
    return data_type_read(dt)


@router.get(
    f"/{settings.app.version}/data-types",
    response_model=list[DataTypeRead],
    tags=["catalog"],
)
async def list_data_types(
    session: AsyncSession = Depends(get_session),
) -> list[DataTypeRead]:
    rows = await CatalogService(session).list_data_types()
    return [data_type_read(dt) for dt in rows]


@router.post(
    f"/{settings.app.version}/properties",
    response_model=PropertyRead,
    status_code=status.HTTP_201_CREATED,
    tags=["catalog"],
)
async def create_property(
    req: CreatePropertyRequest,
    session: AsyncSession = Depends(get_session),
) -> PropertyRead:
    try:
        prop = await CatalogService(session).create_property(
            type_id=req.type_id, name=req.name, property_type=req.property_type
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return property_read(prop)


@router.post(
    f"/{settings.app.version}/instances",
    response_model=InstanceRead,
    status_code=status.HTTP_201_CREATED,
    tags=["catalog"],
)
async def create_instance(
    req: CreateInstanceRequest,
    session: AsyncSession = Depends(get_session),
) -> InstanceRead:
    try:
        instance = await CatalogService(session).create_instance(
            type_id=req.type_id, name=req.name
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return instance_read(instance)


@router.get(
    f"/{settings.app.version}/instances",
    response_model=list[InstanceRead],
    tags=["catalog"],
)
async def list_instances(
    session: AsyncSession = Depends(get_session),
) -> list[InstanceRead]:
    rows = await CatalogService(session).list_instances()
    return [instance_read(i) for i in rows]


@router.get(
    f"/{settings.app.version}/data-types/{{type_id:int}}/instances",
    response_model=list[InstanceRead],
    tags=["catalog"],
)
async def list_instances_by_type(
    type_id: int,
    session: AsyncSession = Depends(get_session),
) -> list[InstanceRead]:
    rows = await CatalogService(session).list_instances_by_type(type_id)
    return [instance_read(i) for i in rows]


@router.post(
    f"/{settings.app.version}/property-values",
    response_model=PropertyValueRead,
    status_code=status.HTTP_201_CREATED,
    tags=["catalog"],
)
async def create_property_value(
    req: CreatePropertyValueRequest,
    session: AsyncSession = Depends(get_session),
) -> PropertyValueRead:
    try:
        pv = await CatalogService(session).create_property_value(
            instance_id=req.instance_id, property_id=req.property_id, value=req.value
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return property_value_read(pv)
