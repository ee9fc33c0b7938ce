"""Entity Store: collection durable d'enregistrements par type d'entité.

Le contrat ``EntityStore`` est consommé par les services de cycle de vie;
``SqlAlchemyEntityStore`` l'implémente sur une ``AsyncSession``.

Règles:
- L'unicité des identifiants métier (CRM, CPF, login) est garantie par les
  contraintes UNIQUE de la base; une violation devient ``ConflictError``.
- Toute autre erreur SQLAlchemy devient ``StoreUnavailableError``.
- ``transaction()`` valide en fin de bloc et annule sur toute exception.
- Les lectures sont rejouées avec backoff sur ``StoreUnavailableError``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator, Mapping
from contextlib import asynccontextmanager, contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import Base
from app.core.exceptions import ConflictError, NotFoundError, StoreUnavailableError
from app.core.retry import async_retry_with_backoff
from app.schemas.common import PageRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_read_retry = async_retry_with_backoff(
    max_attempts=settings.STORE_RETRY_ATTEMPTS,
    min_wait_seconds=settings.STORE_RETRY_MIN_WAIT,
    max_wait_seconds=settings.STORE_RETRY_MAX_WAIT,
    exceptions=(StoreUnavailableError,),
)


class EntityStore(ABC, Generic[ModelT]):
    """Contrat du store consommé par les services."""

    model: type[ModelT]

    @abstractmethod
    def transaction(self) -> Any:
        """Context manager async délimitant une unité atomique."""

    @abstractmethod
    async def create(self, record: ModelT) -> int:
        """Persiste un nouvel enregistrement et retourne l'id généré."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> ModelT:
        """Lecture complète par id, actif ou non. Lève ``NotFoundError``."""

    @abstractmethod
    async def save(self, record: ModelT) -> None:
        """Écrit les modifications d'un enregistrement existant."""

    @abstractmethod
    async def query_active(
        self, page_request: PageRequest, filters: Mapping[str, Any] | None = None
    ) -> tuple[list[ModelT], int]:
        """Page d'enregistrements actifs et nombre total d'actifs filtrés."""

    @abstractmethod
    async def find_one_by(self, field: str, value: Any) -> ModelT | None:
        """Recherche par égalité sur un champ unique."""


class SqlAlchemyEntityStore(EntityStore[ModelT]):
    """Implémentation SQLAlchemy 2.0 async du store."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    @property
    def _resource_type(self) -> str:
        return self.model.__name__.lower()

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        """Traduit les erreurs SQLAlchemy vers la taxonomie RFC 9457."""
        try:
            yield
        except IntegrityError as e:
            logger.info(f"Unique constraint violated on {self.model.__tablename__}")
            raise ConflictError(
                detail=f"A {self._resource_type} with the same unique identifier already exists",
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Store failure on {self.model.__tablename__}: {e}")
            raise StoreUnavailableError(
                detail=f"Entity store failed while accessing {self.model.__tablename__}",
            ) from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
            with self._store_errors():
                await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def create(self, record: ModelT) -> int:
        self.session.add(record)
        with self._store_errors():
            await self.session.flush()
        return record.id

    @_read_retry
    async def get_by_id(self, entity_id: int) -> ModelT:
        with self._store_errors():
            record = await self.session.get(self.model, entity_id)
        if record is None:
            raise NotFoundError(
                detail=f"{self.model.__name__} {entity_id} not found",
                resource_type=self._resource_type,
                resource_id=str(entity_id),
            )
        return record

    async def save(self, record: ModelT) -> None:
        self.session.add(record)
        with self._store_errors():
            await self.session.flush()

    @_read_retry
    async def query_active(
        self, page_request: PageRequest, filters: Mapping[str, Any] | None = None
    ) -> tuple[list[ModelT], int]:
        conditions = [self.model.is_active.is_(True)]
        for field, value in (filters or {}).items():
            conditions.append(getattr(self.model, field) == value)

        sort_column = getattr(self.model, page_request.sort)
        order = sort_column.desc() if page_request.direction == "desc" else sort_column.asc()

        stmt = (
            select(self.model)
            .where(*conditions)
            .order_by(order, self.model.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        count_stmt = select(func.count()).select_from(self.model).where(*conditions)

        with self._store_errors():
            result = await self.session.execute(stmt)
            records = list(result.scalars().all())
            total = await self.session.scalar(count_stmt)
        return records, total or 0

    @_read_retry
    async def find_one_by(self, field: str, value: Any) -> ModelT | None:
        stmt = select(self.model).where(getattr(self.model, field) == value)
        with self._store_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
