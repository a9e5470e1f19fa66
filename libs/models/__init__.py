# =============================================================================
# Data Models Library
# =============================================================================
# Pydantic models and schemas for the EIP status API.
# =============================================================================

"""
Data models for the status API.

This library provides:
- StatusChangeRecord: Status change document schema
- Yearly aggregation output units
- Configuration models
"""

__version__ = "0.1.0"

# Status change models
from .status_change import (
    FinalStatusByYearResponse,
    Repo,
    StatusChangeRecord,
    StatusSummary,
    YearlyStatus,
)

# Configuration models
from .config import (
    MongoSettings,
)

__all__ = [
    # Status change models
    "FinalStatusByYearResponse",
    "Repo",
    "StatusChangeRecord",
    "StatusSummary",
    "YearlyStatus",
    # Configuration models
    "MongoSettings",
]
