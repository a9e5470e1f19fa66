# =============================================================================
# MongoDB Service - Status Change Store Connection
# =============================================================================
# Owns the process-wide MongoClient. Created at application startup and
# closed on shutdown; request handlers receive it through dependencies.
# =============================================================================

import logging
import re
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "test"


class MongoDBService:
    """Service wrapping a single MongoClient and its database."""

    def __init__(
        self,
        connection_string: str,
        database: Optional[str] = None,
        server_selection_timeout_ms: int = 30000,
    ) -> None:
        self._connection_string = connection_string
        self._client: MongoClient = MongoClient(
            connection_string,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self._db_name = database or self._extract_db_name(connection_string)
        self._db: Database = self._client[self._db_name]

    @staticmethod
    def _extract_db_name(connection_string: str) -> str:
        """Extract database name from MongoDB connection string."""
        # Pattern: mongodb://[credentials@]hosts/<database>?...
        hosts_and_path = connection_string.split("://", 1)[-1].split("@")[-1]
        match = re.match(r"[^/]*/([^/?]+)", hosts_and_path)
        if match:
            return match.group(1)
        return DEFAULT_DATABASE

    @staticmethod
    def _sanitize_url(connection_string: str) -> str:
        """Hide the password in a MongoDB URL for safe logging."""
        if "://" not in connection_string:
            return connection_string
        protocol, rest = connection_string.split("://", 1)
        if "@" not in rest:
            return connection_string
        credentials, host = rest.rsplit("@", 1)
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"

    @property
    def database_name(self) -> str:
        return self._db_name

    def get_collection(self, name: str) -> Collection:
        return self._db[name]

    def ping(self) -> bool:
        """
        Check that the server is reachable.

        Returns:
            True if the admin ping succeeded, False otherwise
        """
        try:
            self._client.admin.command("ping")
        except PyMongoError as exc:
            logger.error(f"Error connecting to the database: {exc}")
            return False
        return True

    def info(self) -> dict[str, str]:
        """Connection details with credentials masked."""
        return {
            "url": self._sanitize_url(self._connection_string),
            "database": self._db_name,
        }

    def close(self) -> None:
        self._client.close()
