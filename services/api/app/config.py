# =============================================================================
# API Configuration
# =============================================================================
# Settings loaded from environment variables.
# =============================================================================

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from libs.models import MongoSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Status change collections
    eip_collection: str = "eipstatuschanges"
    erc_collection: str = "ercstatuschanges"
    rip_collection: str = "ripstatuschanges"

    # Server
    api_host: str = Field("0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(8000, validation_alias="API_PORT")

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_mongo_settings() -> MongoSettings:
    """
    Get cached MongoDB settings.

    Raises:
        pydantic.ValidationError: If MONGODB_URI is not defined.
    """
    return MongoSettings()
