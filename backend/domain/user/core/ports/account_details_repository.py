"""Account details repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.value_objects.user_id import UserId


class IAccountDetailsRepository(ABC):
    """Repository interface for the AccountDetails companion record.

    Records are addressed by the owning user's id; at most one per user.
    """

    @abstractmethod
    async def create(self, details: AccountDetails) -> AccountDetails:
        """Insert the companion record.

        Args:
            details: Record to insert

        Returns:
            The stored record

        Raises:
            AccountDetailsAlreadyExistsError: If a record already exists for
                details.user_id
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[AccountDetails]:
        """Find the companion record of a user.

        Returns:
            AccountDetails if found, None otherwise
        """
        pass
