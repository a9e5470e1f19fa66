# =============================================================================
# FastAPI Main Application
# =============================================================================
# Entry point for the EIP status API.
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from app import __version__
from app.config import get_mongo_settings, get_settings
from app.routers import health, status
from app.services.mongodb_service import MongoDBService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup opens the shared MongoDB client and stores it on ``app.state``;
    shutdown closes it. A missing MONGODB_URI aborts startup.
    """
    try:
        mongo_settings = get_mongo_settings()
    except ValidationError:
        logger.error("MONGODB_URI environment variable is not defined")
        raise

    mongodb = MongoDBService(
        mongo_settings.uri,
        database=mongo_settings.database,
        server_selection_timeout_ms=mongo_settings.server_selection_timeout_ms,
    )
    db_info = mongodb.info()
    if mongodb.ping():
        logger.info(
            f"Connected to the database {db_info['database']} at {db_info['url']}"
        )

    app.state.mongodb = mongodb

    yield

    logger.info("Closing database connection")
    mongodb.close()


# Application instance
app = FastAPI(
    title="EIP Status API",
    description="Yearly final status of EIPs, ERCs and RIPs.",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(status.router)


def run() -> None:
    """Validate configuration, then serve the API with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        get_mongo_settings()
    except ValidationError:
        logger.error("MONGODB_URI environment variable is not defined")
        sys.exit(1)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
