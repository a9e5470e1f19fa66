# =============================================================================
# Service Dependencies
# =============================================================================
# FastAPI dependencies resolving services from application state.
# =============================================================================

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.services.mongodb_service import MongoDBService
from app.services.status_service import StatusService


def get_mongodb_service(request: Request) -> MongoDBService:
    """Return the MongoDB service created during application startup."""
    return request.app.state.mongodb


def get_status_service(
    mongodb: MongoDBService = Depends(get_mongodb_service),
    settings: Settings = Depends(get_settings),
) -> StatusService:
    """Build the status service around the shared MongoDB handle."""
    return StatusService(mongodb, settings)
