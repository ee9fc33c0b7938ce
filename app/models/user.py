"""Modèle des identifiants de connexion.

Le cycle de vie des utilisateurs appartient au composant externe de gestion
des comptes; ce service ne fait que lire la table.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """Principal authentifiable: login unique, secret haché, rôle."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    login: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True, comment="Identifiant de connexion"
    )
    password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="Secret haché (opaque pour ce service)"
    )
    role: Mapped[str] = mapped_column(
        String(30), nullable=False, default="ROLE_USER", comment="Rôle / permission"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login='{self.login}')>"
