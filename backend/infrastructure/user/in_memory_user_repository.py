"""In-memory User Repository for testing."""

import asyncio
from typing import Dict, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users keyed by user_id with a secondary email index.
    Useful for unit tests and integration tests without MongoDB dependency.

    The email index is checked and written under a lock, so concurrent
    registrations of one address leave exactly one user, like the unique
    index does in MongoDB.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(user)
        >>> found = await repo.find_by_email(Email("ada@example.com"))
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def save(self, user: User) -> None:
        """Save or update user in memory.

        Raises:
            UserAlreadyExistsError: If the email belongs to another user_id
        """
        key = str(user.user_id)
        async with self._lock:
            owner = self._ids_by_email.get(user.email.value)
            if owner is not None and owner != key:
                raise UserAlreadyExistsError(user.email.value)

            previous = self._users.get(key)
            if previous is not None and previous.email != user.email:
                self._ids_by_email.pop(previous.email.value, None)

            self._users[key] = user
            self._ids_by_email[user.email.value] = key

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(str(user_id))

    async def find_by_email(self, email: Email) -> Optional[User]:
        key = self._ids_by_email.get(email.value)
        if key is None:
            return None
        return self._users.get(key)

    async def delete(self, user_id: UserId) -> bool:
        key = str(user_id)
        async with self._lock:
            user = self._users.pop(key, None)
            if user is None:
                return False
            if self._ids_by_email.get(user.email.value) == key:
                del self._ids_by_email[user.email.value]
        return True

    async def exists_by_email(self, email: Email) -> bool:
        return email.value in self._ids_by_email

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()
        self._ids_by_email.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
