"""
Moteur et sessions SQLAlchemy 2.0 async pour clinic-api.

PostgreSQL (asyncpg) en production; SQLite (aiosqlite) en test. Le schéma
est géré par Alembic, ``create_db_and_tables`` ne sert qu'en développement
et en test.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base déclarative des modèles doctors, patients et users."""


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.DEBUG,
    **_engine_options(settings.SQLALCHEMY_DATABASE_URI),
)

# expire_on_commit=False: les projections sont construites après le commit
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Une session par requête, fermée à la fin de la requête."""
    async with async_session_maker() as session:
        yield session


async def create_db_and_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.debug(f"Tables created: {sorted(Base.metadata.tables)}")
