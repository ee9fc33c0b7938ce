"""Endpoints API pour la gestion des patients.

Ce module définit les endpoints REST du cycle de vie des patients:
enregistrement, détail, mise à jour partielle, soft delete et liste
paginée des patients actifs.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.config import settings
from app.core.dependencies import get_patient_service
from app.schemas import create_responses
from app.schemas.common import Page, PageRequest, SortDirection
from app.schemas.patient import PatientCreate, PatientDetail, PatientListItem, PatientUpdate
from app.services.patient_service import PatientService

router = APIRouter()


@router.post(
    "/",
    response_model=PatientDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Enregistrer un patient",
    description="Crée un nouveau dossier patient actif",
    responses=create_responses(),
)
async def register_patient(
    patient: PatientCreate,
    response: Response,
    service: PatientService = Depends(get_patient_service),
) -> PatientDetail:
    """
    Enregistre un patient.

    Un CPF déjà utilisé, même par un patient désactivé, donne un 409.
    """
    registration = await service.register(patient)
    response.headers["Location"] = f"{settings.get_api_prefix()}{registration.location}"
    return registration.detail


@router.get(
    "/{patient_id}",
    response_model=PatientDetail,
    summary="Récupérer un patient par ID",
    description="Récupère les détails complets d'un patient, actif ou non",
)
async def get_patient(
    patient_id: int,
    service: PatientService = Depends(get_patient_service),
) -> PatientDetail:
    return await service.get_detail(patient_id)


@router.put(
    "/",
    response_model=PatientDetail,
    summary="Mettre à jour un patient",
)
async def update_patient(
    patient_update: PatientUpdate,
    service: PatientService = Depends(get_patient_service),
) -> PatientDetail:
    """Applique uniquement les champs fournis; le CPF n'est jamais modifié."""
    return await service.update(patient_update)


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Supprimer un patient (soft delete)",
    description="Marque un patient comme inactif; l'opération est idempotente",
)
async def delete_patient(
    patient_id: int,
    service: PatientService = Depends(get_patient_service),
) -> None:
    await service.soft_delete(patient_id)


@router.get(
    "/",
    response_model=Page[PatientListItem],
    summary="Lister les patients actifs",
    description="Liste paginée des patients actifs, triée par nom par défaut",
)
async def list_patients(
    page: int = Query(0, ge=0, description="Index de page"),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Nombre d'éléments à retourner",
    ),
    sort: str = Query("name", description="Attribut de tri"),
    direction: SortDirection = Query("asc", description="Sens du tri"),
    service: PatientService = Depends(get_patient_service),
) -> Page[PatientListItem]:
    return await service.list_active(
        PageRequest(page=page, size=size, sort=sort, direction=direction)
    )
