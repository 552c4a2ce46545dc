"""
MongoDB document store client and shared repository plumbing.

Provides:
- DocumentStore: explicit connect/ping/close lifecycle around an
  AsyncMongoClient, owned by the application lifespan
- store_operation: translates driver errors into StoreError
- MongoRepository: base class binding a repository to one collection
"""

import structlog
from contextlib import asynccontextmanager
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from api.src.config import Settings
from api.src.errors import StoreError
from shared.metrics import setup_metrics

logger = structlog.get_logger(__name__)


class DocumentStore:
    """Owns the MongoDB client and hands out the application database."""

    def __init__(
        self,
        url: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
        client: Optional[Any] = None
    ):
        """
        Initialize the document store.

        Args:
            url: MongoDB connection URL
            database_name: Database holding every collection
            server_selection_timeout_ms: Driver server selection timeout
            client: Pre-built client (tests inject a double here)
        """
        self.url = url
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        return cls(
            settings.mongodb_url,
            settings.mongodb_database,
            server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms
        )

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def database(self):
        """
        Get the application database.

        Raises:
            RuntimeError: If connect() has not been called
        """
        if self._client is None:
            logger.error("document_store_not_connected")
            raise RuntimeError(
                "Document store not connected. Call connect() during startup."
            )
        return self._client[self.database_name]

    async def connect(self) -> None:
        """
        Create the client (unless one was injected) and verify connectivity.

        Raises:
            StoreError: If the server cannot be reached
        """
        if self._client is None:
            self._client = AsyncMongoClient(
                self.url,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms
            )

        async with store_operation("admin", "ping"):
            await self._client.admin.command("ping")

        logger.info(
            "document_store_connected",
            database=self.database_name,
            host=self.url.split("@")[-1]
        )

    async def ping(self) -> bool:
        """Return True when the server answers a ping."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("document_store_ping_failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close the client and its connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("document_store_closed")


@asynccontextmanager
async def store_operation(collection: str, operation: str):
    """
    Wrap a driver call so failures surface as StoreError.

    Args:
        collection: Collection name, for logs and metrics
        operation: Operation name, for logs and metrics

    Raises:
        StoreError: If the driver raises PyMongoError
    """
    try:
        yield
    except PyMongoError as e:
        logger.error(
            "store_operation_failed",
            collection=collection,
            operation=operation,
            error=str(e)
        )
        setup_metrics().store_operations_failed.labels(
            collection=collection,
            operation=operation
        ).inc()
        raise StoreError(e, collection=collection, operation=operation) from e


def parse_object_id(value: str) -> Optional[ObjectId]:
    """
    Parse a path identifier.

    Returns:
        The ObjectId, or None when the value is not a valid identifier
        (such a value cannot match any document)
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoRepository:
    """Base class for repositories backed by a single collection."""

    collection_name: str = ""

    def __init__(self, database):
        """
        Initialize repository.

        Args:
            database: MongoDB database handle
        """
        self.collection = database[self.collection_name]

    def operation(self, name: str):
        return store_operation(self.collection_name, name)
