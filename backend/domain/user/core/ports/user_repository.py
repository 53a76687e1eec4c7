"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations must handle User entity serialization/deserialization
    and enforce email uniqueness.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def save(self, user: User) -> None:
        ...         # Save to MongoDB
        ...         pass
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update).

        Args:
            user: User entity to persist

        Raises:
            UserAlreadyExistsError: If another user already owns user.email

        Note:
            Updating an existing user_id is idempotent. Inserting a new user_id
            with a taken email must fail, this is the only guard against
            concurrent registrations of the same address.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by internal ID.

        Args:
            user_id: Internal user identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by email.

        Args:
            email: Normalized email address

        Returns:
            User entity if found, None otherwise

        Examples:
            >>> user = await repository.find_by_email(Email("ada@example.com"))
            >>> if user:
            ...     print(f"User ID: {user.user_id}")

        Note:
            This is the login lookup method (email is unique).
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete user by ID.

        Returns:
            True if a user was deleted, False if not found
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check if a user with this email exists.

        Note:
            More efficient than find_by_email when only checking existence.
        """
        pass
