"""Unit tests for MongoUserRepository with a mocked motor collection."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.password_hash import PasswordHash
from domain.user.core.value_objects.user_profile import UserProfile
from infrastructure.user.mongo_user_repository import EMAIL_INDEX_NAME, MongoUserRepository


@pytest.fixture
def collection() -> MagicMock:
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))
    collection.count_documents = AsyncMock(return_value=0)
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.create_index = AsyncMock(side_effect=lambda keys, **options: options["name"])
    return collection


@pytest.fixture
def client(collection) -> MagicMock:
    database = MagicMock()
    database.__getitem__.return_value = collection
    client = MagicMock()
    client.__getitem__.return_value = database
    return client


@pytest.fixture
def repository(client) -> MongoUserRepository:
    return MongoUserRepository(client, "accounts_test")


@pytest.fixture
def user() -> User:
    return User.register(
        Email("ada@example.com"),
        PasswordHash("$2b$04$hash"),
        UserProfile(data={"first_name": "Ada"}),
    )


def test_uses_users_collection(client, repository):
    client.__getitem__.assert_called_with("accounts_test")
    client["accounts_test"].__getitem__.assert_called_with("users")
    assert repository.collection_name == "users"


def test_document_layout(repository, user):
    document = repository.to_document(user)

    assert document == {
        "_id": str(user.user_id),
        "email": "ada@example.com",
        "password": "$2b$04$hash",
        "profile": {"first_name": "Ada"},
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def test_from_document_roundtrip_with_naive_dates(repository, user):
    document = repository.to_document(user)
    document["created_at"] = user.created_at.replace(tzinfo=None)
    document["updated_at"] = user.updated_at.replace(tzinfo=None)

    restored = repository.from_document(document)

    assert restored == user
    assert restored.email == user.email
    assert restored.created_at.tzinfo is not None


def test_from_document_missing_field(repository):
    with pytest.raises(ValueError, match="missing field: password"):
        repository.from_document(
            {
                "_id": "e4b8c9d0-1234-5678-9abc-def012345678",
                "email": "ada@example.com",
                "created_at": datetime.now(timezone.utc),
                "updated_at": datetime.now(timezone.utc),
            }
        )


@pytest.mark.asyncio
async def test_save_upserts_by_id(repository, collection, user):
    await repository.save(user)

    collection.update_one.assert_awaited_once()
    filter_dict, update = collection.update_one.call_args.args
    assert filter_dict == {"_id": str(user.user_id)}
    assert "_id" not in update["$set"]
    assert update["$set"]["email"] == "ada@example.com"
    assert collection.update_one.call_args.kwargs == {"upsert": True}


@pytest.mark.asyncio
async def test_save_duplicate_email_raises_domain_error(repository, collection, user):
    collection.update_one.side_effect = DuplicateKeyError("E11000 duplicate key error")

    with pytest.raises(UserAlreadyExistsError):
        await repository.save(user)


@pytest.mark.asyncio
async def test_save_other_errors_propagate(repository, collection, user):
    collection.update_one.side_effect = ConnectionError("network")

    with pytest.raises(ConnectionError):
        await repository.save(user)


@pytest.mark.asyncio
async def test_find_by_email(repository, collection, user):
    collection.find_one.return_value = repository.to_document(user)

    found = await repository.find_by_email(Email("ADA@example.com"))

    assert found == user
    assert collection.find_one.call_args.args[0] == {"email": "ada@example.com"}


@pytest.mark.asyncio
async def test_find_by_id_missing(repository, user):
    assert await repository.find_by_id(user.user_id) is None


@pytest.mark.asyncio
async def test_exists_by_email(repository, collection):
    collection.count_documents.return_value = 1

    assert await repository.exists_by_email(Email("ada@example.com")) is True
    collection.count_documents.assert_awaited_with({"email": "ada@example.com"}, limit=1)


@pytest.mark.asyncio
async def test_ensure_indexes_creates_unique_email(repository, collection):
    names = await repository.ensure_indexes()

    assert EMAIL_INDEX_NAME in names
    unique_calls = [
        call for call in collection.create_index.call_args_list if call.kwargs.get("unique")
    ]
    assert len(unique_calls) == 1
    assert unique_calls[0].args[0] == [("email", 1)]


@pytest.mark.asyncio
async def test_delete_by_id(repository, collection, user):
    assert await repository.delete(user.user_id) is True
    collection.delete_one.assert_awaited_once_with({"_id": str(user.user_id)})

    collection.delete_one.return_value = MagicMock(deleted_count=0)
    assert await repository.delete(user.user_id) is False
