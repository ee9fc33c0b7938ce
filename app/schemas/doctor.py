"""Schémas Pydantic pour Doctor.

Ce module définit les schémas de validation pour les opérations du cycle
de vie des médecins: enregistrement, mise à jour partielle, détail et
liste paginée.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.models.doctor import Specialty
from app.schemas.address import AddressData
from app.schemas.utils import Email, EntityId, NonEmptyStr, RegistrationNumber


class DoctorCreate(BaseModel):
    """Schéma pour enregistrer un nouveau médecin."""

    name: NonEmptyStr = Field(..., description="Nom complet", examples=["Ana Souza"])
    email: Email
    phone: NonEmptyStr = Field(..., description="Téléphone", examples=["1199999999"])
    registration_number: RegistrationNumber
    specialty: Specialty = Field(..., description="Spécialité médicale")
    address: AddressData


class DoctorUpdate(BaseModel):
    """Schéma pour mettre à jour un médecin existant.

    Seuls les champs fournis sont appliqués. Le CRM ne fait pas partie du
    schéma et ne peut donc pas être modifié. L'adresse, si elle est fournie,
    doit être complète et remplace l'ancienne en bloc.
    """

    id: EntityId
    name: NonEmptyStr | None = None
    email: Email | None = None
    phone: NonEmptyStr | None = None
    specialty: Specialty | None = None
    address: AddressData | None = None


class DoctorDetail(BaseModel):
    """Projection complète d'un médecin, actif ou non."""

    id: EntityId
    name: str
    email: str
    phone: str
    registration_number: str
    specialty: Specialty
    address: AddressData
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class DoctorListItem(BaseModel):
    """Projection réduite pour les listes (sans adresse ni statut)."""

    id: EntityId
    name: str
    email: str
    registration_number: str
    specialty: Specialty

    model_config = ConfigDict(from_attributes=True)
