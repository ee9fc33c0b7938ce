"""Service metier pour la gestion des patients.

Ce module implemente le cycle de vie des dossiers patients. Le CPF
(national_id) identifie le patient cote metier: unique parmi tous les
patients, y compris desactives, et immuable apres l'enregistrement.
"""

from app.models.patient import Patient
from app.schemas.patient import PatientCreate, PatientDetail, PatientListItem, PatientUpdate
from app.services.lifecycle import LifecycleService


class PatientService(
    LifecycleService[Patient, PatientCreate, PatientUpdate, PatientDetail, PatientListItem]
):
    """Cycle de vie des patients."""

    entity_name = "patient"
    resource = "patients"
    create_schema = PatientCreate
    update_schema = PatientUpdate
    detail_schema = PatientDetail
    list_item_schema = PatientListItem
    sortable_fields = frozenset({"id", "name", "email", "national_id"})

    def build_record(self, data: PatientCreate) -> Patient:
        """
        Construit un patient actif.

        Args:
            data: Entree d'enregistrement validee

        Returns:
            Patient non encore persiste
        """
        return Patient(
            name=data.name,
            email=data.email,
            phone=data.phone,
            national_id=data.national_id,
            address=data.address.to_value(),
            is_active=True,
        )
