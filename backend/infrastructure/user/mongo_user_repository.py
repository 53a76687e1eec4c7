"""MongoDB User Repository implementation."""

from __future__ import annotations

import logging
from typing import Optional, Any, Dict, List

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.password_hash import PasswordHash
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_profile import UserProfile
from infrastructure.persistence.mongodb.base import IndexSpec, MongoBaseRepository

logger = logging.getLogger(__name__)

EMAIL_INDEX_NAME = "idx_email_unique"


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document layout (collection "users"):
    - _id: user_id (UUID string, shared with account_details)
    - email: normalized email, unique index
    - password: bcrypt hash
    - profile: opaque profile fields
    - created_at / updated_at: UTC datetimes

    Email uniqueness is enforced by the unique index, which is what
    makes concurrent registrations of one address safe.

    Examples:
        >>> repo = MongoUserRepository(client)
        >>> await repo.ensure_indexes()
        >>> await repo.save(user)
        >>> found = await repo.find_by_email(Email("ada@example.com"))
    """

    @property
    def collection_name(self) -> str:
        return "users"

    @property
    def indexes(self) -> List[IndexSpec]:
        return [
            ([("email", ASCENDING)], {"unique": True, "name": EMAIL_INDEX_NAME}),
            ([("created_at", ASCENDING)], {"name": "idx_created_at"}),
        ]

    async def save(self, user: User) -> None:
        """Save or update user.

        Upsert by _id; a duplicate email on another _id trips the unique
        index.

        Raises:
            UserAlreadyExistsError: If the email belongs to another user
        """
        document = self.to_document(user)
        user_id = document.pop("_id")

        try:
            await self._update_one({"_id": user_id}, {"$set": document}, upsert=True)
        except DuplicateKeyError as e:
            logger.info(
                "mongo.duplicate_email",
                extra={"collection": self.collection_name, "user_id": user_id},
            )
            raise UserAlreadyExistsError(user.email.value) from e

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        document = await self._find_one({"_id": str(user_id)})
        if not document:
            return None
        return self.from_document(document)

    async def find_by_email(self, email: Email) -> Optional[User]:
        document = await self._find_one({"email": email.value})
        if not document:
            return None
        return self.from_document(document)

    async def delete(self, user_id: UserId) -> bool:
        deleted_count = await self._delete_one({"_id": str(user_id)})
        return deleted_count > 0

    async def exists_by_email(self, email: Email) -> bool:
        count = await self._count({"email": email.value}, limit=1)
        return bool(count > 0)

    def to_document(self, user: User) -> Dict[str, Any]:
        return {
            "_id": str(user.user_id),
            "email": user.email.value,
            "password": str(user.password_hash),
            "profile": dict(user.profile.data),
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }

    def from_document(self, document: Dict[str, Any]) -> User:
        try:
            return User(
                user_id=UserId(str(document["_id"])),
                email=Email(document["email"]),
                password_hash=PasswordHash(document["password"]),
                profile=UserProfile(data=dict(document.get("profile") or {})),
                created_at=self.ensure_utc(document["created_at"]),
                updated_at=self.ensure_utc(document["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"User document missing field: {e.args[0]}") from e
