# =============================================================================
# Configuration Models Module
# =============================================================================
# Provides Pydantic Settings models for service configurations:
# - MongoSettings: MongoDB status change store configuration
# =============================================================================

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "MongoSettings",
]


# =============================================================================
# MongoDB Settings (Status Change Store)
# =============================================================================

class MongoSettings(BaseSettings):
    """
    Configuration for MongoDB (status change store).

    Maps environment variables with prefix "MONGODB_":
    - MONGODB_URI → uri
    - MONGODB_DATABASE → database
    - MONGODB_SERVER_SELECTION_TIMEOUT_MS → server_selection_timeout_ms

    Attributes:
        uri: MongoDB connection string (required, the process refuses to start without it)
        database: Database name (default: taken from the URI path)
        server_selection_timeout_ms: Driver server selection timeout (default: 30000)
    """

    uri: str = Field(..., min_length=1, validation_alias="MONGODB_URI", description="MongoDB connection string")
    database: Optional[str] = Field(None, validation_alias="MONGODB_DATABASE", description="Database name override")
    server_selection_timeout_ms: int = Field(
        30000,
        gt=0,
        validation_alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS",
        description="Server selection timeout in milliseconds",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )
