"""MongoDB persistence helpers."""

from infrastructure.persistence.mongodb.base import IndexSpec, MongoBaseRepository

__all__ = ["IndexSpec", "MongoBaseRepository"]
