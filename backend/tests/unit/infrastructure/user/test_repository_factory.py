"""Tests for user repository factory."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.user.in_memory_account_details_repository import (
    InMemoryAccountDetailsRepository,
)
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.mongo_account_details_repository import (
    MongoAccountDetailsRepository,
)
from infrastructure.user.mongo_user_repository import MongoUserRepository
from infrastructure.user.repository_factory import (
    create_mongo_client,
    create_user_repositories,
)


def test_default_is_inmemory(monkeypatch):
    monkeypatch.delenv("USER_REPOSITORY", raising=False)

    repositories = create_user_repositories()

    assert isinstance(repositories.users, InMemoryUserRepository)
    assert isinstance(repositories.account_details, InMemoryAccountDetailsRepository)


def test_mongodb_backend_uses_given_client():
    client = MagicMock()

    repositories = create_user_repositories(client=client, backend="mongodb")

    assert isinstance(repositories.users, MongoUserRepository)
    assert isinstance(repositories.account_details, MongoAccountDetailsRepository)


def test_mongodb_backend_requires_client():
    with pytest.raises(ValueError, match="requires a MongoDB client"):
        create_user_repositories(backend="mongodb")


def test_invalid_backend():
    with pytest.raises(ValueError, match="Invalid USER_REPOSITORY"):
        create_user_repositories(backend="postgres")


@pytest.mark.asyncio
async def test_ensure_indexes_noop_for_inmemory():
    repositories = create_user_repositories(backend="inmemory")

    assert await repositories.ensure_indexes() == []


def test_create_mongo_client_requires_uri(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)

    with pytest.raises(ValueError, match="MONGODB_URI"):
        create_mongo_client()


def test_create_mongo_client_is_tz_aware():
    with patch("infrastructure.user.repository_factory.AsyncIOMotorClient") as motor:
        create_mongo_client("mongodb://localhost:27017")

    motor.assert_called_once_with("mongodb://localhost:27017", tz_aware=True)
