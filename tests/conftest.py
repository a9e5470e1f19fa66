"""
Shared pytest fixtures.

Provides status change records, an in-memory MongoDB and a MongoDBService
bound to it so tests never need a live server.
"""

from datetime import datetime

import mongomock
import pytest

from libs.models import StatusChangeRecord

from app.config import Settings, get_mongo_settings, get_settings
from app.services.mongodb_service import MongoDBService


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached per process; reset them around every test."""
    get_settings.cache_clear()
    get_mongo_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_mongo_settings.cache_clear()


@pytest.fixture
def settings():
    """Default application settings."""
    return Settings()


# =============================================================================
# MongoDB Fixtures
# =============================================================================

@pytest.fixture
def mongomock_client():
    """In-memory MongoDB client for tests."""
    return mongomock.MongoClient()


@pytest.fixture
def mongodb_service(monkeypatch, mongomock_client):
    """MongoDBService configured to use the mongomock client."""
    monkeypatch.setattr(
        "app.services.mongodb_service.MongoClient",
        lambda *args, **kwargs: mongomock_client,
    )
    return MongoDBService("mongodb://localhost:27017/eips")


def change(eip, from_status, to_status, when, category="Core", title=None):
    """Status change document as stored by the ingestion process."""
    return StatusChangeRecord.from_change(
        eip,
        from_status,
        to_status,
        when,
        title=title or f"Proposal {eip}",
        category=category,
    ).to_document()


# =============================================================================
# Status Change Record Fixtures
# =============================================================================

@pytest.fixture
def eip_records():
    """EIP collection: core EIPs, an excluded EIP and frozen ERCs."""
    return [
        change("1", "Draft", "Draft", datetime(2021, 3, 1), category="Meta"),
        change("1", "Draft", "Final", datetime(2021, 9, 1), category="Meta"),
        change("1559", "Draft", "Draft", datetime(2021, 1, 10)),
        change("1559", "Draft", "Review", datetime(2021, 5, 1)),
        change("1559", "Review", "Final", datetime(2022, 2, 2)),
        change("7212", "Draft", "Draft", datetime(2023, 6, 1)),
        change("20", "Draft", "Final", datetime(2015, 11, 19), category="ERC"),
        change("721", "Draft", "Draft", datetime(2018, 1, 24), category="Standards Track - ERC"),
        change("721", "Draft", "Final", datetime(2018, 6, 21), category="Standards Track - ERC"),
    ]


@pytest.fixture
def erc_records():
    """ERC collection: only changes from 2023-11-01 on are reported."""
    return [
        change("20", "Last Call", "Final", datetime(2023, 10, 1), category="ERC"),
        change("4337", "Draft", "Draft", datetime(2023, 11, 15), category="ERC"),
        change("7683", "Draft", "Draft", datetime(2024, 4, 11), category="ERC"),
        change("7683", "Draft", "Review", datetime(2024, 10, 1), category="ERC"),
    ]


@pytest.fixture
def rip_records():
    """RIP collection: only changes from 2023-11-01 on are reported."""
    return [
        change("7212", "Idea", "Draft", datetime(2023, 10, 1), category="Core"),
        change("7212", "Draft", "Review", datetime(2023, 12, 1), category="Core"),
        change("7212", "Review", "Final", datetime(2024, 1, 5), category="Core"),
    ]


@pytest.fixture
def seeded_mongodb(mongodb_service, eip_records, erc_records, rip_records):
    """MongoDBService whose three collections hold the sample records."""
    mongodb_service.get_collection("eipstatuschanges").insert_many(eip_records)
    mongodb_service.get_collection("ercstatuschanges").insert_many(erc_records)
    mongodb_service.get_collection("ripstatuschanges").insert_many(rip_records)
    return mongodb_service
