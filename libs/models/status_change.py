# =============================================================================
# Status Change Models
# =============================================================================
# Defines the StatusChangeRecord document stored in the eip/erc/rip status
# change collections, plus the per-year aggregation output units.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


__all__ = [
    "Repo",
    "StatusChangeRecord",
    "StatusSummary",
    "YearlyStatus",
    "FinalStatusByYearResponse",
]


class Repo(str, Enum):
    """Document series a status change belongs to."""

    EIP = "eip"
    ERC = "erc"
    RIP = "rip"


class StatusChangeRecord(BaseModel):
    """
    Status change document model.

    One schema shared by the ``eipstatuschanges``, ``ercstatuschanges`` and
    ``ripstatuschanges`` collections. Records are written by an external
    ingestion process; this service only reads them.

    ``title`` and ``category`` are not part of the declared collection schema
    but are read by the yearly aggregation, so they are modelled as optional.

    Attributes:
        eip: Proposal number as a string (e.g. "1559")
        from_status: Status before the transition
        to_status: Status after the transition
        change_date: Timestamp of the transition
        changed_day: Day component of change_date
        changed_month: Month component of change_date
        changed_year: Year component of change_date
        title: Proposal title, if recorded
        category: Proposal category (e.g. "Core", "ERC"), if recorded
    """

    model_config = ConfigDict(populate_by_name=True)

    eip: str = Field(..., description="Proposal number")
    from_status: str = Field(..., alias="fromStatus")
    to_status: str = Field(..., alias="toStatus")
    change_date: datetime = Field(..., alias="changeDate")
    changed_day: int = Field(..., alias="changedDay", ge=1, le=31)
    changed_month: int = Field(..., alias="changedMonth", ge=1, le=12)
    changed_year: int = Field(..., alias="changedYear")
    title: Optional[str] = Field(None, description="Proposal title")
    category: Optional[str] = Field(None, description="Proposal category")

    @classmethod
    def from_change(
        cls,
        eip: str,
        from_status: str,
        to_status: str,
        change_date: datetime,
        *,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> "StatusChangeRecord":
        """Build a record, deriving the day/month/year fields from change_date."""
        return cls(
            eip=eip,
            from_status=from_status,
            to_status=to_status,
            change_date=change_date,
            changed_day=change_date.day,
            changed_month=change_date.month,
            changed_year=change_date.year,
            title=title,
            category=category,
        )

    def to_document(self) -> dict:
        """Return the MongoDB document representation (camelCase keys)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class StatusSummary(BaseModel):
    """Last known status of one proposal within a calendar year."""

    model_config = ConfigDict(populate_by_name=True)

    eip: str
    last_status: Optional[str] = Field(None, alias="lastStatus")
    eip_title: Optional[str] = Field(None, alias="eipTitle")
    eip_category: Optional[str] = Field(None, alias="eipCategory")
    repo: Repo


class YearlyStatus(BaseModel):
    """All per-proposal summaries for one year of one series."""

    model_config = ConfigDict(populate_by_name=True)

    year: Optional[int] = None
    status_changes: list[StatusSummary] = Field(
        default_factory=list, alias="statusChanges"
    )
    repo: Repo


class FinalStatusByYearResponse(BaseModel):
    """Yearly final statuses grouped by series."""

    eip: list[YearlyStatus] = Field(default_factory=list)
    erc: list[YearlyStatus] = Field(default_factory=list)
    rip: list[YearlyStatus] = Field(default_factory=list)
