"""Sonde de disponibilité: vérifie que le store répond."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["ok"] = Field(..., description="État de la sonde")
    store: Literal["up"] = Field(..., description="État du store")


@router.get("/health", response_model=HealthResponse)
async def health(db: AsyncSession = Depends(get_session)) -> HealthResponse:
    try:
        await db.scalar(select(text("1")))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        raise StoreUnavailableError(detail="Entity store did not answer the health probe") from e

    return HealthResponse(status="ok", store="up")
