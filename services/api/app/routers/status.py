# =============================================================================
# Status Router
# =============================================================================
# Final status of every proposal per year, for the eip/erc/rip series.
# =============================================================================

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from libs.models import FinalStatusByYearResponse

from app.dependencies import get_status_service
from app.services.status_service import StatusService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/new", tags=["status"])

GENERIC_ERROR = {"error": "Something went wrong"}


@router.api_route(
    "/final-status-by-year",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=FinalStatusByYearResponse,
)
def final_status_by_year(
    service: StatusService = Depends(get_status_service),
):
    """
    Last status of each proposal per calendar year.

    Ignores query parameters and body. Any failure while querying or
    building the response yields a 500 with a generic error body.
    """
    try:
        return service.final_status_by_year()
    except Exception:
        logger.exception("Failed to build final status by year")
        return JSONResponse(status_code=500, content=GENERIC_ERROR)
