# =============================================================================
# Services Module
# =============================================================================
# Service wrappers for MongoDB and the status aggregations.
# =============================================================================

from app.services.mongodb_service import MongoDBService
from app.services.status_service import (
    StatusSeries,
    StatusService,
    build_final_status_pipeline,
)

__all__ = [
    # MongoDB
    "MongoDBService",
    # Status aggregation
    "StatusSeries",
    "StatusService",
    "build_final_status_pipeline",
]
