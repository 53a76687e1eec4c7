"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Collection handle from an injected client
- Document mapping (domain ↔ MongoDB)
- Index bootstrap
- Error logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional, Dict, Any, List, Tuple
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

from infrastructure.config import get_mongodb_database


TEntity = TypeVar("TEntity")

# (keys, options) passed to create_index
IndexSpec = Tuple[List[Tuple[str, int]], Dict[str, Any]]

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    The motor client is a required dependency: the application owns one
    client (created in the lifespan) and hands it to every repository.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Subclasses may override:
    - indexes: Index specs created by ensure_indexes()

    Example:
        class MongoUserRepository(MongoBaseRepository[User]):
            @property
            def collection_name(self) -> str:
                return "users"
            ...
    """

    def __init__(
        self,
        client: AsyncIOMotorClient[Dict[str, Any]],
        database_name: Optional[str] = None,
    ):
        """
        Initialize repository.

        Args:
            client: Shared motor client
            database_name: Database name (defaults to MONGODB_DATABASE)
        """
        self._client = client
        self._db = self._client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.debug(
            "repository.initialized",
            extra={
                "repository": self.__class__.__name__,
                "collection": self.collection_name,
            },
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def indexes(self) -> List[IndexSpec]:
        return []

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def ensure_utc(dt: datetime) -> datetime:
        """
        Make a datetime read back from MongoDB timezone-aware.

        BSON dates carry no offset; motor returns naive UTC datetimes
        unless the client was built with tz_aware=True.
        """
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    async def ensure_indexes(self) -> List[str]:
        """Create the indexes declared by `indexes` (idempotent)."""
        names: List[str] = []
        for keys, options in self.indexes:
            try:
                name = await self._collection.create_index(keys, **options)
            except Exception as e:
                logger.error(
                    "mongo.create_index_failed",
                    extra={
                        "collection": self.collection_name,
                        "index": options.get("name"),
                        "error": str(e),
                    },
                )
                raise
            names.append(name)

        logger.info(
            "mongo.indexes_ready",
            extra={"collection": self.collection_name, "indexes": names},
        )
        return names

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one(filter_dict, projection)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document.

        DuplicateKeyError is re-raised untouched so subclasses can map it
        to a domain error; other failures are logged first.
        """
        try:
            await self._collection.insert_one(document)
        except DuplicateKeyError:
            raise
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """
        Update single document with error handling.

        Returns:
            Number of documents matched (0 or 1)
        """
        try:
            result = await self._collection.update_one(filter_dict, update_dict, upsert=upsert)
            return result.matched_count
        except DuplicateKeyError:
            raise
        except Exception as e:
            logger.error(
                f"Error in update_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any], limit: Optional[int] = None) -> int:
        """
        Count documents with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            if limit:
                return await self._collection.count_documents(filter_dict, limit=limit)
            return await self._collection.count_documents(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
