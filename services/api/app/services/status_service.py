# =============================================================================
# Status Service - Final Status By Year Aggregation
# =============================================================================
# Runs the yearly "last status per proposal" aggregation against the eip,
# erc and rip status change collections and tags results by series.
# =============================================================================

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from libs.models import FinalStatusByYearResponse, Repo, YearlyStatus

from app.config import Settings
from app.services.mongodb_service import MongoDBService

logger = logging.getLogger(__name__)

# Categories used for ERCs while they still lived in the EIP repository.
ERC_CATEGORIES = ["ERC", "ERCs", "Standards Track - ERC"]

EXCLUDED_EIPS = ["7212"]

# The ERC and RIP collections are only trusted from the repository split on.
# Naive datetimes are interpreted as UTC by pymongo.
ERC_CUTOFF = datetime(2023, 11, 1)


@dataclass(frozen=True)
class StatusSeries:
    """One aggregation run: which collection, which filter, which tag."""

    name: str
    collection: str
    repo: Repo
    match: dict[str, Any]


def build_final_status_pipeline(match: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Build the yearly final status aggregation pipeline.

    Records are sorted by proposal then change date (``_id`` breaks ties so
    equal timestamps resolve in insertion order), grouped per (year, proposal)
    keeping the last status seen, then regrouped per year.

    Args:
        match: ``$match`` filter selecting the records of one series

    Returns:
        List of aggregation stages
    """
    return [
        {"$match": match},
        {"$sort": {"eip": 1, "changeDate": 1, "_id": 1}},
        {
            "$group": {
                "_id": {"year": {"$year": "$changeDate"}, "eip": "$eip"},
                "lastStatus": {"$last": "$toStatus"},
                "eipTitle": {"$last": "$title"},
                "eipCategory": {"$last": "$category"},
            }
        },
        {
            "$group": {
                "_id": "$_id.year",
                "statusChanges": {
                    "$push": {
                        "eip": "$_id.eip",
                        "lastStatus": "$lastStatus",
                        "eipTitle": "$eipTitle",
                        "eipCategory": "$eipCategory",
                    }
                },
            }
        },
        {"$project": {"_id": 0, "year": "$_id", "statusChanges": 1}},
        {"$sort": {"year": 1}},
    ]


def build_series(settings: Settings) -> dict[str, StatusSeries]:
    """Series definitions keyed by name, in execution order."""
    return {
        "eip": StatusSeries(
            name="eip",
            collection=settings.eip_collection,
            repo=Repo.EIP,
            match={
                "eip": {"$nin": EXCLUDED_EIPS},
                "category": {"$nin": ERC_CATEGORIES},
            },
        ),
        "frozen_erc": StatusSeries(
            name="frozen_erc",
            collection=settings.eip_collection,
            repo=Repo.ERC,
            match={"category": {"$in": ERC_CATEGORIES}},
        ),
        "erc": StatusSeries(
            name="erc",
            collection=settings.erc_collection,
            repo=Repo.ERC,
            match={"changeDate": {"$gte": ERC_CUTOFF}},
        ),
        "rip": StatusSeries(
            name="rip",
            collection=settings.rip_collection,
            repo=Repo.RIP,
            match={"changeDate": {"$gte": ERC_CUTOFF}},
        ),
    }


def tag_yearly_results(docs: list[dict], repo: Repo) -> list[YearlyStatus]:
    """Attach the series tag to each year group and each summary inside it."""
    results: list[YearlyStatus] = []
    for doc in docs:
        summaries = [
            {**summary, "repo": repo} for summary in doc.get("statusChanges", [])
        ]
        results.append(
            YearlyStatus.model_validate(
                {**doc, "statusChanges": summaries, "repo": repo}
            )
        )
    return results


class StatusService:
    """Service for the final-status-by-year query."""

    def __init__(self, mongodb: MongoDBService, settings: Settings) -> None:
        self._mongodb = mongodb
        self._series = build_series(settings)

    def aggregate_series(self, series: StatusSeries) -> list[YearlyStatus]:
        """
        Run the yearly pipeline for one series.

        Args:
            series: Series definition

        Returns:
            Year groups tagged with the series repo, years ascending
        """
        collection = self._mongodb.get_collection(series.collection)
        docs = list(collection.aggregate(build_final_status_pipeline(series.match)))
        logger.debug(f"Aggregated {len(docs)} year groups for series {series.name}")
        return tag_yearly_results(docs, series.repo)

    def final_status_by_year(self) -> FinalStatusByYearResponse:
        """
        Final status of every proposal per year, for all three series.

        The four aggregations run sequentially; any failure propagates and
        no partial result is returned.

        Returns:
            FinalStatusByYearResponse with ``erc`` holding the dedicated ERC
            collection results followed by the frozen ERCs from the EIP
            collection
        """
        eip = self.aggregate_series(self._series["eip"])
        frozen_erc = self.aggregate_series(self._series["frozen_erc"])
        erc = self.aggregate_series(self._series["erc"])
        rip = self.aggregate_series(self._series["rip"])

        return FinalStatusByYearResponse(eip=eip, erc=[*erc, *frozen_erc], rip=rip)
