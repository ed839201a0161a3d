import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.api.deps import get_db
from jobtracker.core.config import get_settings
from jobtracker.schemas.health import HealthResponse, LivenessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_db),
) -> HealthResponse:
    settings = get_settings()
    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.debug("Database probe failed: %s", e)
        db_status = "disconnected"

    healthy = db_status == "connected"
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        database=db_status,
        version=settings.app_version,
    )


@router.get("/status", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse(status="ok")
