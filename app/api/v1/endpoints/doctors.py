"""Endpoints API pour le cycle de vie des médecins.

Couche de transport uniquement: les règles métier vivent dans
``DoctorService``; les erreurs RFC 9457 levées par le service sont
rendues par les handlers globaux.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.config import settings
from app.core.dependencies import get_doctor_service
from app.schemas import create_responses
from app.schemas.common import Page, PageRequest, SortDirection
from app.schemas.doctor import DoctorCreate, DoctorDetail, DoctorListItem, DoctorUpdate
from app.services.doctor_service import DoctorService

router = APIRouter()


@router.post(
    "/",
    response_model=DoctorDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Enregistrer un médecin",
    responses=create_responses(),
)
async def register_doctor(
    doctor: DoctorCreate,
    response: Response,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorDetail:
    """Enregistre un médecin actif et renvoie son URI dans l'en-tête Location."""
    registration = await service.register(doctor)
    response.headers["Location"] = f"{settings.get_api_prefix()}{registration.location}"
    return registration.detail


@router.get(
    "/",
    response_model=Page[DoctorListItem],
    summary="Lister les médecins actifs",
)
async def list_doctors(
    page: int = Query(0, ge=0, description="Index de page"),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Taille de page"
    ),
    sort: str = Query("name", description="Attribut de tri"),
    direction: SortDirection = Query("asc", description="Sens du tri"),
    service: DoctorService = Depends(get_doctor_service),
) -> Page[DoctorListItem]:
    return await service.list_active(
        PageRequest(page=page, size=size, sort=sort, direction=direction)
    )


@router.get(
    "/{doctor_id}",
    response_model=DoctorDetail,
    summary="Détail d'un médecin",
    description="Retourne le médecin même s'il a été désactivé",
)
async def get_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorDetail:
    return await service.get_detail(doctor_id)


@router.put(
    "/",
    response_model=DoctorDetail,
    summary="Mettre à jour un médecin",
    description="Mise à jour partielle; l'id est porté par le corps de la requête",
)
async def update_doctor(
    doctor: DoctorUpdate,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorDetail:
    return await service.update(doctor)


@router.delete(
    "/{doctor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Désactiver un médecin (soft delete)",
)
async def delete_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service),
) -> None:
    await service.soft_delete(doctor_id)
