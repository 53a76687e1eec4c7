"""User repository factory for environment-based selection.

This factory creates the repository implementations based on the
USER_REPOSITORY environment variable:
- "inmemory": InMemoryUserRepository + InMemoryAccountDetailsRepository (for testing)
- "mongodb": MongoUserRepository + MongoAccountDetailsRepository (for production)

Default: inmemory

The MongoDB client is never created here as a module global: the caller
(the app lifespan or a script) owns it and passes it in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_mongodb_uri, get_user_repository_backend
from infrastructure.user.in_memory_account_details_repository import (
    InMemoryAccountDetailsRepository,
)
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.mongo_account_details_repository import (
    MongoAccountDetailsRepository,
)
from infrastructure.user.mongo_user_repository import MongoUserRepository


@dataclass
class UserRepositories:
    """The two repositories the user commands need."""

    users: IUserRepository
    account_details: IAccountDetailsRepository

    async def ensure_indexes(self) -> List[str]:
        """Create MongoDB indexes; no-op for in-memory repositories."""
        names: List[str] = []
        for repository in (self.users, self.account_details):
            ensure = getattr(repository, "ensure_indexes", None)
            if ensure is not None:
                names.extend(await ensure())
        return names


def create_mongo_client(uri: Optional[str] = None) -> AsyncIOMotorClient[Dict[str, Any]]:
    """Create a motor client from MONGODB_URI.

    Raises:
        ValueError: If no URI is configured
    """
    mongo_uri = uri or get_mongodb_uri()
    if not mongo_uri:
        raise ValueError(
            "MONGODB_URI environment variable is required "
            "when USER_REPOSITORY=mongodb"
        )
    return AsyncIOMotorClient(mongo_uri, tz_aware=True)


def create_user_repositories(
    client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
    backend: Optional[str] = None,
    database_name: Optional[str] = None,
) -> UserRepositories:
    """Create user repositories based on environment configuration.

    Args:
        client: Motor client, required for the mongodb backend
        backend: Override for USER_REPOSITORY
        database_name: Override for MONGODB_DATABASE

    Returns:
        UserRepositories bundle

    Raises:
        ValueError: Unknown backend, or mongodb without a client
    """
    repo_type = (backend or get_user_repository_backend()).strip().lower()

    if repo_type == "mongodb":
        if client is None:
            raise ValueError(
                "USER_REPOSITORY=mongodb requires a MongoDB client; "
                "create one with create_mongo_client()"
            )
        return UserRepositories(
            users=MongoUserRepository(client, database_name),
            account_details=MongoAccountDetailsRepository(client, database_name),
        )

    elif repo_type == "inmemory":
        return UserRepositories(
            users=InMemoryUserRepository(),
            account_details=InMemoryAccountDetailsRepository(),
        )

    else:
        raise ValueError(
            f"Invalid USER_REPOSITORY value: {repo_type}. "
            "Expected 'inmemory' or 'mongodb'"
        )
