"""Cycle de vie commun des dossiers médecin et patient.

Enregistrement, détail, mise à jour partielle, suppression logique et
liste paginée des enregistrements actifs. Chaque opération d'écriture
s'exécute dans une seule transaction du store: un échec ne laisse aucun
enregistrement partiel.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from opentelemetry import trace
from pydantic import BaseModel

from app.core.database import Base
from app.core.exceptions import ValidationError
from app.repositories.entity_store import EntityStore
from app.schemas.address import AddressData
from app.schemas.common import Page, PageRequest, Registration
from app.schemas.validation import validate_input

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

ModelT = TypeVar("ModelT", bound=Base)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)
DetailT = TypeVar("DetailT", bound=BaseModel)
ListItemT = TypeVar("ListItemT", bound=BaseModel)


class LifecycleService(ABC, Generic[ModelT, CreateT, UpdateT, DetailT, ListItemT]):
    """
    Service de cycle de vie générique, paramétré par les schémas de l'entité.

    Les sous-classes déclarent leurs schémas, le nom de la ressource et
    construisent le modèle à partir de l'entrée validée.

    Attributes:
        entity_name: Nom de l'entité pour logs et spans ("doctor")
        resource: Segment de chemin pour la référence de localisation ("doctors")
        sortable_fields: Attributs acceptés comme clé de tri
    """

    entity_name: ClassVar[str]
    resource: ClassVar[str]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    detail_schema: ClassVar[type[BaseModel]]
    list_item_schema: ClassVar[type[BaseModel]]
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"id", "name", "email"})

    def __init__(self, store: EntityStore[ModelT]):
        self.store = store

    @abstractmethod
    def build_record(self, data: CreateT) -> ModelT:
        """Construit un nouvel enregistrement actif à partir de l'entrée validée."""

    async def register(self, payload: CreateT | Mapping[str, Any]) -> Registration[DetailT]:
        """
        Enregistre un nouvel enregistrement actif.

        Args:
            payload: Entrée d'enregistrement (schéma ou dict brut)

        Returns:
            Registration avec la projection détaillée et le chemin de la ressource

        Raises:
            ValidationError: Si une contrainte de champ est violée
            ConflictError: Si l'identifiant métier existe déjà (actif ou non)
            StoreUnavailableError: Si la transaction échoue
        """
        data = validate_input(self.create_schema, payload)

        with tracer.start_as_current_span(f"register_{self.entity_name}") as span:
            record = self.build_record(data)
            async with self.store.transaction():
                entity_id = await self.store.create(record)

            span.set_attribute(f"{self.entity_name}.id", entity_id)
            span.add_event(f"{self.entity_name} enregistré")
            logger.info(f"{self.entity_name} registered: id={entity_id}")

            return Registration(
                detail=self.detail_schema.model_validate(record),
                location=f"/{self.resource}/{entity_id}",
            )

    async def get_detail(self, entity_id: int) -> DetailT:
        """
        Retourne la projection détaillée, y compris pour un enregistrement inactif.

        Raises:
            NotFoundError: Si aucun enregistrement ne porte cet id
        """
        with tracer.start_as_current_span(f"get_{self.entity_name}") as span:
            span.set_attribute(f"{self.entity_name}.id", entity_id)
            record = await self.store.get_by_id(entity_id)
            return self.detail_schema.model_validate(record)

    async def update(self, payload: UpdateT | Mapping[str, Any]) -> DetailT:
        """
        Applique une mise à jour partielle.

        Seuls les champs fournis (non nuls) remplacent les valeurs existantes.
        Une adresse fournie remplace l'ancienne en bloc. Les enregistrements
        inactifs restent modifiables; ``is_active`` n'est jamais touché.

        Raises:
            ValidationError: Si un champ fourni est invalide
            NotFoundError: Si l'id ne correspond à aucun enregistrement
        """
        data = validate_input(self.update_schema, payload)
        changes = {
            field: getattr(data, field)
            for field in data.model_fields_set - {"id"}
            if getattr(data, field) is not None
        }

        with tracer.start_as_current_span(f"update_{self.entity_name}") as span:
            span.set_attribute(f"{self.entity_name}.id", data.id)
            async with self.store.transaction():
                record = await self.store.get_by_id(data.id)
                self._apply_changes(record, changes)
                await self.store.save(record)

            span.add_event(f"{self.entity_name} mis à jour")
            logger.info(
                f"{self.entity_name} updated: id={data.id}, fields={sorted(changes)}"
            )
            return self.detail_schema.model_validate(record)

    async def soft_delete(self, entity_id: int) -> None:
        """
        Désactive l'enregistrement sans le supprimer physiquement.

        Idempotent: un enregistrement déjà inactif reste inactif sans erreur.

        Raises:
            NotFoundError: Si l'id ne correspond à aucun enregistrement
        """
        with tracer.start_as_current_span(f"delete_{self.entity_name}") as span:
            span.set_attribute(f"{self.entity_name}.id", entity_id)
            async with self.store.transaction():
                record = await self.store.get_by_id(entity_id)
                was_active = record.is_active
                record.deactivate()
                await self.store.save(record)

            if was_active:
                span.add_event(f"{self.entity_name} désactivé")
                logger.info(f"{self.entity_name} deactivated: id={entity_id}")
            else:
                logger.debug(f"{self.entity_name} {entity_id} already inactive")

    async def list_active(
        self, page_request: PageRequest | Mapping[str, Any] | None = None
    ) -> Page[ListItemT]:
        """
        Liste paginée des enregistrements actifs, triée par nom par défaut.

        Args:
            page_request: Page, taille et tri déjà structurés

        Returns:
            Page de projections réduites avec total et has_next

        Raises:
            ValidationError: Si la clé de tri n'est pas autorisée
        """
        page_request = validate_input(PageRequest, page_request or {})
        if page_request.sort not in self.sortable_fields:
            raise ValidationError(
                detail=f"Cannot sort {self.resource} by '{page_request.sort}'",
                errors=[
                    {
                        "loc": ["sort"],
                        "msg": f"Sort key must be one of {sorted(self.sortable_fields)}",
                        "type": "value_error",
                    }
                ],
            )

        with tracer.start_as_current_span(f"list_{self.resource}") as span:
            records, total = await self.store.query_active(page_request)
            span.set_attribute(f"{self.resource}.total", total)

            return Page[self.list_item_schema](
                items=[self.list_item_schema.model_validate(record) for record in records],
                total=total,
                page=page_request.page,
                size=page_request.size,
            )

    @staticmethod
    def _apply_changes(record: ModelT, changes: Mapping[str, Any]) -> None:
        for field, value in changes.items():
            if isinstance(value, AddressData):
                value = value.to_value()
            setattr(record, field, value)
