from fastapi import HTTPException
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

from app.core.config import settings
from app.core.logging import get_logger

from typing import AsyncIterator


Base = declarative_base()


connection_string = settings.resolved_database_url

engine = create_async_engine(
    connection_string,
    echo=settings.app.is_testing is True,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    engine,
    expire_on_commit=False,
)


logger = get_logger(__name__)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except HTTPException as e:
            # mapped client errors (404, 422) are not faults
            await session.rollback()
            logger.debug(f"Session rolled back for HTTP {e.status_code}")
            raise
        except Exception as e:
            await session.rollback()
            logger.error(f"Session rolled back due to error: {e}")
            raise


async def create_tables() -> None:
    """Create all tables directly from metadata (local sqlite use, tests)."""
    from app.core.db import schemas  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
