"""Accès aux données: contrat Entity Store et implémentation SQLAlchemy."""

from app.repositories.entity_store import EntityStore, SqlAlchemyEntityStore

__all__ = [
    "EntityStore",
    "SqlAlchemyEntityStore",
]
