"""Service metier pour le cycle de vie des medecins."""

from app.models.doctor import Doctor
from app.schemas.doctor import DoctorCreate, DoctorDetail, DoctorListItem, DoctorUpdate
from app.services.lifecycle import LifecycleService


class DoctorService(
    LifecycleService[Doctor, DoctorCreate, DoctorUpdate, DoctorDetail, DoctorListItem]
):
    """
    Enregistrement, detail, mise a jour, suppression logique et liste
    des medecins actifs.

    Le CRM est unique parmi tous les medecins, actifs ou non, et n'est
    jamais modifie apres l'enregistrement.
    """

    entity_name = "doctor"
    resource = "doctors"
    create_schema = DoctorCreate
    update_schema = DoctorUpdate
    detail_schema = DoctorDetail
    list_item_schema = DoctorListItem
    sortable_fields = frozenset({"id", "name", "email", "registration_number", "specialty"})

    def build_record(self, data: DoctorCreate) -> Doctor:
        return Doctor(
            name=data.name,
            email=data.email,
            phone=data.phone,
            registration_number=data.registration_number,
            specialty=data.specialty,
            address=data.address.to_value(),
            is_active=True,
        )
