"""Health check endpoint for API monitoring."""

from datetime import datetime

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db
from app.api.schemas.common import APIResponse
from app.config.settings import settings
from app.core.exceptions import DatabaseConnectionError, DatabaseHealthCheckError
from app.core.utils.time_utils import utcnow

router = APIRouter(tags=["Health"])


class HealthStatus(BaseModel):
    """Health check response data."""

    status: str
    database: str
    version: str
    timestamp: datetime


@router.get("/health", response_model=APIResponse[HealthStatus])
async def health_check(db: AsyncSession = Depends(get_db)) -> APIResponse[HealthStatus]:
    """
    Health check endpoint.

    Verifies API is running and database is accessible.
    """
    try:
        await db.execute(text("SELECT 1"))
    except (OperationalError, InterfaceError) as e:
        logger.error(f"Database unreachable: {e.orig}")
        raise DatabaseConnectionError(str(e.orig)) from e
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        raise DatabaseHealthCheckError(f"Database health query failed: {str(e)}") from e

    return APIResponse.ok(
        HealthStatus(
            status="healthy",
            database="connected",
            version=settings.APP_VERSION,
            timestamp=utcnow(),
        )
    )
