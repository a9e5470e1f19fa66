# =============================================================================
# Health Check Router
# =============================================================================
# Endpoints for container health checks and readiness probes.
# =============================================================================

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from app.dependencies import get_mongodb_service
from app.services.mongodb_service import MongoDBService

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response model."""

    status: str
    services: dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the service is running.
    """
    from app import __version__

    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=ReadyResponse)
def readiness_check(
    response: Response,
    mongodb: MongoDBService = Depends(get_mongodb_service),
) -> ReadyResponse:
    """
    Readiness check endpoint.

    Pings MongoDB; responds 503 while the database is unreachable.
    """
    if mongodb.ping():
        return ReadyResponse(status="ready", services={"mongodb": "connected"})

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadyResponse(status="degraded", services={"mongodb": "disconnected"})
