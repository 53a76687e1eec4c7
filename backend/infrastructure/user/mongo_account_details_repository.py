"""MongoDB AccountDetails Repository implementation."""

from __future__ import annotations

from typing import Optional, Any, Dict

from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.exceptions.user_errors import AccountDetailsAlreadyExistsError
from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoAccountDetailsRepository(
    MongoBaseRepository[AccountDetails], IAccountDetailsRepository
):
    """MongoDB implementation of the account details repository.

    Collection "account_details", one document per user with
    _id = user_id, so the primary key alone guarantees at most one
    companion record per user.
    """

    @property
    def collection_name(self) -> str:
        return "account_details"

    async def create(self, details: AccountDetails) -> AccountDetails:
        try:
            await self._insert_one(self.to_document(details))
        except DuplicateKeyError as e:
            raise AccountDetailsAlreadyExistsError(str(details.user_id)) from e
        return details

    async def find_by_user_id(self, user_id: UserId) -> Optional[AccountDetails]:
        document = await self._find_one({"_id": str(user_id)})
        if not document:
            return None
        return self.from_document(document)

    def to_document(self, details: AccountDetails) -> Dict[str, Any]:
        return {
            "_id": str(details.user_id),
            "data": dict(details.data),
            "created_at": details.created_at,
            "updated_at": details.updated_at,
        }

    def from_document(self, document: Dict[str, Any]) -> AccountDetails:
        try:
            return AccountDetails(
                user_id=UserId(str(document["_id"])),
                data=dict(document.get("data") or {}),
                created_at=self.ensure_utc(document["created_at"]),
                updated_at=self.ensure_utc(document["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"AccountDetails document missing field: {e.args[0]}") from e
