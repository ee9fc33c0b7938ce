"""Dependances FastAPI pour l'injection de services.

Chaque service recoit explicitement son Entity Store; ces fonctions ne
font qu'assembler session -> store -> service pour la couche HTTP.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.models.doctor import Doctor
from app.models.patient import Patient
from app.repositories.entity_store import SqlAlchemyEntityStore
from app.services.doctor_service import DoctorService
from app.services.patient_service import PatientService


def get_doctor_service(db: AsyncSession = Depends(get_session)) -> DoctorService:
    """Construit le service medecins sur la session de la requete."""
    return DoctorService(SqlAlchemyEntityStore(db, Doctor))


def get_patient_service(db: AsyncSession = Depends(get_session)) -> PatientService:
    """Construit le service patients sur la session de la requete."""
    return PatientService(SqlAlchemyEntityStore(db, Patient))

