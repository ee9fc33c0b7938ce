"""Schémas génériques partagés: pagination et résultat d'enregistrement."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field, computed_field

from app.core.config import settings

ItemT = TypeVar("ItemT")
DetailT = TypeVar("DetailT")

SortDirection = Literal["asc", "desc"]


class PageRequest(BaseModel):
    """Spécification de page déjà structurée (le parsing HTTP est externe)."""

    page: int = Field(default=0, ge=0, description="Index de page (commence à 0)")
    size: int = Field(
        default=settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Nombre d'éléments par page",
    )
    sort: str = Field(default="name", description="Attribut de tri")
    direction: SortDirection = Field(default="asc", description="Sens du tri")

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[ItemT]):
    """Page de résultats avec métadonnées de navigation."""

    items: list[ItemT] = Field(..., description="Éléments de la page")
    total: int = Field(..., ge=0, description="Nombre total de résultats")
    page: int = Field(..., ge=0, description="Index de la page courante")
    size: int = Field(..., ge=1, description="Taille de page demandée")

    @computed_field
    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total

    @computed_field
    @property
    def total_pages(self) -> int:
        return -(-self.total // self.size)


class Registration(BaseModel, Generic[DetailT]):
    """Résultat d'un enregistrement: détail créé + référence de localisation."""

    detail: DetailT
    location: str = Field(..., description="Chemin relatif de la ressource créée")
