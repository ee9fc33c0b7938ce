"""Modèle de données Patient pour le service clinique.

Ce module définit le modèle SQLAlchemy pour les patients de la clinique.
L'identifiant national (CPF) est l'identifiant métier du patient.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.address import Address, address_composite


class Patient(Base):
    """
    Modèle Patient.

    Champs clés :
    - national_id (CPF) unique et immuable, y compris après désactivation
    - Adresse embarquée (composite), remplacée en bloc lors d'une mise à jour
    - Soft delete via is_active
    """

    __tablename__ = "patients"

    # Identifiants
    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    national_id: Mapped[str] = mapped_column(
        String(11),
        unique=True,
        nullable=False,
        index=True,
        comment="Numéro CPF sur 11 chiffres, sans ponctuation (immuable)",
    )

    # Informations de contact
    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Nom complet")
    email: Mapped[str] = mapped_column(String(255), nullable=False, comment="Adresse email")
    phone: Mapped[str] = mapped_column(String(20), nullable=False, comment="Téléphone")

    # Adresse physique
    address: Mapped[Address] = address_composite()

    # Statut
    is_active: Mapped[bool] = mapped_column(
        nullable=False, default=True, index=True, comment="Patient actif dans le système"
    )

    # Métadonnées
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Date de création du dossier",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
        comment="Date de dernière modification",
    )

    def deactivate(self) -> None:
        """Marque le patient comme inactif (idempotent)."""
        self.is_active = False

    def __repr__(self) -> str:
        """Représentation string du patient."""
        return f"<Patient(id={self.id}, name='{self.name}')>"
