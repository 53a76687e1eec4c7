"""Find user by email query."""

from dataclasses import dataclass
from typing import Optional, Union

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class FindUserByEmailQuery:
    """Query to look a user up by email.

    Read-only operation shared by registration (uniqueness pre-check)
    and login (credential lookup).

    Examples:
        >>> query = FindUserByEmailQuery(repository)
        >>> user = await query.execute("ada@example.com")
    """

    repository: IUserRepository

    async def execute(self, email: Union[Email, str]) -> Optional[User]:
        """Get user by email.

        Args:
            email: Email value object or raw string (normalized here)

        Returns:
            User entity or None if not found

        Raises:
            InvalidEmailError: If a raw string is not a valid address
        """
        if not isinstance(email, Email):
            email = Email(email)
        return await self.repository.find_by_email(email)

    async def exists(self, email: Union[Email, str]) -> bool:
        """Check if an email is registered."""
        if not isinstance(email, Email):
            email = Email(email)
        return await self.repository.exists_by_email(email)
