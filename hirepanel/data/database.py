"""
Database connection manager for HirePanel.

Provides MongoDB connection management with both synchronous (PyMongo)
and asynchronous (Motor) client support. The synchronous client is used for
health checks from the CLI; screens go through the asynchronous client.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from hirepanel.utils.config import get_settings
from hirepanel.utils.constants import Table
from hirepanel.utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Manages MongoDB database connections.

    Implements singleton pattern for connection reuse.
    """

    _instance: Optional["DatabaseManager"] = None
    _sync_client: Optional[MongoClient] = None
    _async_client: Optional[AsyncIOMotorClient] = None

    def __new__(cls) -> "DatabaseManager":
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize database manager with settings."""
        if hasattr(self, "_initialized") and self._initialized:
            return

        self._settings = get_settings()
        self._db_name = self._settings.database.name
        self._uri = self._build_uri()
        self._timeout_ms = self._settings.database.server_selection_timeout_ms
        self._initialized = True

    def _build_uri(self) -> str:
        """Build MongoDB connection URI with URL-encoded credentials."""
        db_settings = self._settings.database

        host = db_settings.host.strip()
        if not host or any(c in host for c in [";", "&", "|", "$", "`"]):
            raise ValueError(f"Invalid database host: {host}")

        auth = ""
        if db_settings.username and db_settings.password:
            encoded_user = quote_plus(db_settings.username)
            encoded_pass = quote_plus(db_settings.password)
            auth = f"{encoded_user}:{encoded_pass}@"

        return f"mongodb://{auth}{host}:{db_settings.port}"

    # -------------------------------------------------------------------------
    # Synchronous Client
    # -------------------------------------------------------------------------

    def get_sync_client(self) -> MongoClient:
        """Get or create synchronous MongoDB client."""
        if self._sync_client is None:
            logger.info("Creating synchronous MongoDB client")
            self._sync_client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=self._timeout_ms,
                connectTimeoutMS=self._timeout_ms,
                tz_aware=True,
            )
        return self._sync_client

    def get_sync_database(self) -> Database:
        """Get synchronous database instance."""
        return self.get_sync_client()[self._db_name]

    def check_sync_connection(self) -> bool:
        """Check if synchronous connection is healthy."""
        try:
            self.get_sync_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Sync connection check failed: {e}")
            self._sync_client = None
            return False

    # -------------------------------------------------------------------------
    # Asynchronous Client
    # -------------------------------------------------------------------------

    def get_async_client(self) -> AsyncIOMotorClient:
        """
        Get or create asynchronous MongoDB client.

        Motor clients are bound to the event loop they were first used on, and
        every screen operation runs in its own loop, so callers that outlive a
        loop should use ``new_async_client`` instead.
        """
        if self._async_client is None:
            logger.info("Creating asynchronous MongoDB client")
            self._async_client = self.new_async_client()
        return self._async_client

    def new_async_client(self) -> AsyncIOMotorClient:
        """Create a fresh asynchronous client owned by the caller."""
        return AsyncIOMotorClient(
            self._uri,
            serverSelectionTimeoutMS=self._timeout_ms,
            connectTimeoutMS=self._timeout_ms,
            tz_aware=True,
        )

    def get_async_database(self, client: Optional[AsyncIOMotorClient] = None) -> AsyncIOMotorDatabase:
        """Get asynchronous database instance."""
        return (client or self.get_async_client())[self._db_name]

    async def check_async_connection(self) -> bool:
        """Check if asynchronous connection is healthy."""
        try:
            await self.get_async_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Async connection check failed: {e}")
            return False

    # -------------------------------------------------------------------------
    # Lifecycle Management
    # -------------------------------------------------------------------------

    def close_all(self) -> None:
        """Close all database connections."""
        if self._sync_client:
            logger.info("Closing synchronous MongoDB client")
            self._sync_client.close()
            self._sync_client = None
        if self._async_client:
            logger.info("Closing asynchronous MongoDB client")
            self._async_client.close()
            self._async_client = None

    # -------------------------------------------------------------------------
    # Index Management
    # -------------------------------------------------------------------------

    def ensure_indexes(self) -> None:
        """Create the indexes every screen query relies on."""
        logger.info("Ensuring database indexes")
        db = self.get_sync_database()

        db[Table.JOBS.value].create_index("status")

        db[Table.CANDIDATES.value].create_index("current_stage")
        db[Table.CANDIDATES.value].create_index("email")

        applications = db[Table.JOB_APPLICATIONS.value]
        applications.create_index([("job_id", 1), ("applied_at", -1)])
        applications.create_index("candidate_id")

        db[Table.INTERVIEWS.value].create_index("scheduled_at")
        db[Table.INTERVIEWS.value].create_index("application_id")

        db[Table.INTERVIEW_ROUNDS.value].create_index(
            [("application_id", 1), ("round_number", 1)]
        )
        db[Table.INTERVIEW_ROUND_PANELISTS.value].create_index("interview_round_id")

        db[Table.OFFERS.value].create_index("status")

        activity = db[Table.ACTIVITY_LOGS.value]
        activity.create_index([("entity_type", 1), ("entity_id", 1)])
        activity.create_index("created_at")

        logger.info("Database indexes created successfully")

    def collection_counts(self) -> dict[str, Any]:
        """Row counts per table, for the CLI health check."""
        db = self.get_sync_database()
        return {table.value: db[table.value].estimated_document_count() for table in Table}


_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
