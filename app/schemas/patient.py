"""Schémas Pydantic pour Patient.

Ce module définit les schémas de validation pour les opérations du cycle
de vie des patients. Le CPF (national_id) est obligatoire à
l'enregistrement et immuable ensuite.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.address import AddressData
from app.schemas.utils import Email, EntityId, NationalId, NonEmptyStr


class PatientCreate(BaseModel):
    """Schéma pour enregistrer un nouveau patient."""

    name: NonEmptyStr = Field(..., description="Nom complet", examples=["João Lima"])
    email: Email
    phone: NonEmptyStr = Field(..., description="Téléphone", examples=["1188887777"])
    national_id: NationalId
    address: AddressData


class PatientUpdate(BaseModel):
    """Schéma pour mettre à jour un patient existant.

    Tous les champs hors ``id`` sont optionnels pour permettre des mises à
    jour partielles.
    """

    id: EntityId
    name: NonEmptyStr | None = None
    email: Email | None = None
    phone: NonEmptyStr | None = None
    address: AddressData | None = None


class PatientDetail(BaseModel):
    """Schéma de réponse complet pour un patient."""

    id: EntityId
    name: str
    email: str
    phone: str
    national_id: str
    address: AddressData
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class PatientListItem(BaseModel):
    """Schéma optimisé pour liste de patients (champs essentiels uniquement)."""

    id: EntityId
    name: str
    email: str
    national_id: str

    model_config = ConfigDict(from_attributes=True)
