"""In-memory AccountDetails Repository for testing."""

import asyncio
from typing import Dict, Optional

from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.exceptions.user_errors import AccountDetailsAlreadyExistsError
from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.value_objects.user_id import UserId


class InMemoryAccountDetailsRepository(IAccountDetailsRepository):
    """In-memory implementation of the account details repository.

    Keyed by user_id; a second create for the same user is rejected.
    """

    def __init__(self) -> None:
        self._details: Dict[str, AccountDetails] = {}
        self._lock = asyncio.Lock()

    async def create(self, details: AccountDetails) -> AccountDetails:
        key = str(details.user_id)
        async with self._lock:
            if key in self._details:
                raise AccountDetailsAlreadyExistsError(key)
            self._details[key] = details
        return details

    async def find_by_user_id(self, user_id: UserId) -> Optional[AccountDetails]:
        return self._details.get(str(user_id))

    def clear(self) -> None:
        self._details.clear()

    def count(self) -> int:
        return len(self._details)
