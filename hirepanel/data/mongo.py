"""
MongoDB backend for the row client.

Each table is a collection. Rows expose their primary key as a string
``id``; documents store it as an ObjectId ``_id``. Foreign keys are stored as
the string form of the referenced id.
"""

import asyncio
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from hirepanel.utils.logger import get_logger

from .client import BackendError, RowClient
from .database import DatabaseManager, get_database_manager
from .query import Filter, Order

logger = get_logger(__name__)


class MongoRowClient(RowClient):
    """
    Row client backed by MongoDB through Motor.

    A Motor client belongs to the event loop it first runs on. GUI tasks each
    run their own loop on a worker thread, so every loop gets its own client.
    A client is closed only once its loop has closed.
    """

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        self._db_manager = db_manager or get_database_manager()
        self._clients: dict[asyncio.AbstractEventLoop, AsyncIOMotorClient] = {}
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _client_for(self, loop: asyncio.AbstractEventLoop) -> AsyncIOMotorClient:
        with self._lock:
            for finished in [other for other in self._clients if other.is_closed()]:
                self._clients.pop(finished).close()
            client = self._clients.get(loop)
            if client is None:
                client = self._db_manager.new_async_client()
                self._clients[loop] = client
                logger.debug(f"Opened MongoDB client ({len(self._clients)} active)")
            return client

    def _collection(self, table: str) -> AsyncIOMotorCollection:
        """Collection for ``table`` on the client owned by the running loop."""
        client = self._client_for(asyncio.get_running_loop())
        return self._db_manager.get_async_database(client)[table]

    def close(self) -> None:
        """Close every client."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_object_id(value: Any) -> Any:
        """Convert a string id to ObjectId when it is one."""
        if isinstance(value, str) and ObjectId.is_valid(value):
            return ObjectId(value)
        return value

    @classmethod
    def _build_filter(cls, filters: tuple[Filter, ...]) -> dict[str, Any]:
        """Translate row filters to a MongoDB query document."""
        query: dict[str, Any] = {}
        for item in filters:
            field = "_id" if item.column == "id" else item.column
            if item.op == "eq":
                value = cls._to_object_id(item.value) if field == "_id" else item.value
                query[field] = value
            else:
                values = list(item.value)
                if field == "_id":
                    values = [cls._to_object_id(v) for v in values]
                query[field] = {"$in": values}
        return query

    @staticmethod
    def _build_sort(ordering: tuple[Order, ...]) -> list[tuple[str, int]]:
        return [
            ("_id" if order.column == "id" else order.column, 1 if order.ascending else -1)
            for order in ordering
        ]

    @staticmethod
    def _build_projection(columns: tuple[str, ...]) -> Optional[dict[str, int]]:
        if not columns:
            return None
        return {column: 1 for column in columns if column != "id"}

    @staticmethod
    def _to_row(document: dict[str, Any]) -> dict[str, Any]:
        """Convert a MongoDB document to a row dictionary."""
        row = {}
        for key, value in document.items():
            if key == "_id":
                row["id"] = str(value)
            elif isinstance(value, ObjectId):
                row[key] = str(value)
            else:
                row[key] = value
        return row

    @staticmethod
    def _to_document(values: dict[str, Any]) -> dict[str, Any]:
        """Convert row values to a MongoDB document (ids never written)."""
        return {key: value for key, value in values.items() if key not in ("id", "_id")}

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    async def fetch_rows(
        self,
        table: str,
        filters: tuple[Filter, ...] = (),
        ordering: tuple[Order, ...] = (),
        columns: tuple[str, ...] = (),
    ) -> list[dict[str, Any]]:
        try:
            cursor = self._collection(table).find(
                self._build_filter(filters),
                self._build_projection(columns),
            )
            if ordering:
                cursor = cursor.sort(self._build_sort(ordering))
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise BackendError(str(e), table=table) from e
        return [self._to_row(document) for document in documents]

    async def insert(self, table: str, values: dict[str, Any]) -> dict[str, Any]:
        document = self._to_document(values)
        now = datetime.now(timezone.utc)
        document.setdefault("created_at", now)
        document.setdefault("updated_at", now)
        try:
            result = await self._collection(table).insert_one(document)
        except PyMongoError as e:
            raise BackendError(str(e), table=table) from e

        document["_id"] = result.inserted_id
        logger.debug(f"Inserted {table} row: {result.inserted_id}")
        return self._to_row(document)

    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        changes = self._to_document(values)
        changes["updated_at"] = datetime.now(timezone.utc)
        try:
            document = await self._collection(table).find_one_and_update(
                {"_id": self._to_object_id(row_id)},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise BackendError(str(e), table=table) from e

        if document is None:
            raise BackendError(f"No {table} row with id {row_id}", table=table)
        logger.debug(f"Updated {table} row: {row_id}")
        return self._to_row(document)


# Global row client instance
_row_client: Optional[MongoRowClient] = None


def get_row_client() -> MongoRowClient:
    """Get the global MongoDB row client."""
    global _row_client
    if _row_client is None:
        _row_client = MongoRowClient()
    return _row_client
