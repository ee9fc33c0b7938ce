"""Modèle de données Doctor pour le service clinique."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.address import Address, address_composite


class Specialty(str, enum.Enum):
    """Spécialités médicales proposées par la clinique."""

    ORTOPEDIA = "ORTOPEDIA"
    CARDIOLOGIA = "CARDIOLOGIA"
    GINECOLOGIA = "GINECOLOGIA"
    DERMATOLOGIA = "DERMATOLOGIA"


class Doctor(Base):
    """
    Modèle Doctor.

    Le numéro d'inscription professionnelle (CRM) est unique sur toute la
    table, y compris parmi les médecins désactivés: un CRM déjà utilisé ne
    peut jamais être réenregistré. La suppression est uniquement logique
    (``is_active=False``).
    """

    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    registration_number: Mapped[str] = mapped_column(
        String(6),
        unique=True,
        nullable=False,
        index=True,
        comment="Numéro CRM (immuable)",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Nom complet")
    email: Mapped[str] = mapped_column(String(255), nullable=False, comment="Adresse email")
    phone: Mapped[str] = mapped_column(String(20), nullable=False, comment="Téléphone")
    specialty: Mapped[Specialty] = mapped_column(
        Enum(Specialty, native_enum=False, length=20),
        nullable=False,
        comment="Spécialité médicale",
    )

    address: Mapped[Address] = address_composite()

    # Statut
    is_active: Mapped[bool] = mapped_column(
        nullable=False, default=True, index=True, comment="Médecin actif (soft delete)"
    )

    # Métadonnées
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def deactivate(self) -> None:
        """Marque le médecin comme inactif (idempotent)."""
        self.is_active = False

    def __repr__(self) -> str:
        """Représentation string du médecin."""
        return f"<Doctor(id={self.id}, crm='{self.registration_number}')>"
