"""Schemas Pydantic pour validation des donnees."""

from app.schemas.address import AddressData
from app.schemas.common import Page, PageRequest, Registration
from app.schemas.credential import Principal
from app.schemas.doctor import DoctorCreate, DoctorDetail, DoctorListItem, DoctorUpdate
from app.schemas.patient import PatientCreate, PatientDetail, PatientListItem, PatientUpdate
from app.schemas.responses import (
    COMMON_RESPONSES,
    ConflictErrorResponse,
    ProblemDetailResponse,
    ValidationErrorResponse,
    create_responses,
)

__all__ = [
    "COMMON_RESPONSES",
    "AddressData",
    "ConflictErrorResponse",
    "DoctorCreate",
    "DoctorDetail",
    "DoctorListItem",
    "DoctorUpdate",
    "Page",
    "PageRequest",
    "PatientCreate",
    "PatientDetail",
    "PatientListItem",
    "PatientUpdate",
    "Principal",
    "ProblemDetailResponse",
    "Registration",
    "ValidationErrorResponse",
    "create_responses",
]
