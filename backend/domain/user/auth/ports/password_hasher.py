"""Password hasher port (interface)."""

from abc import ABC, abstractmethod

from domain.user.core.value_objects.password_hash import PasswordHash


class IPasswordHasher(ABC):
    """Password hashing interface.

    Abstracts the hashing algorithm so commands stay testable and the
    algorithm can change without touching the application layer.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class BcryptPasswordHasher(IPasswordHasher):
        ...     async def hash(self, password: str) -> PasswordHash:
        ...         ...
    """

    @abstractmethod
    async def hash(self, password: str) -> PasswordHash:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Salted hash, never equal to the plaintext
        """
        pass

    @abstractmethod
    async def verify(self, password: str, password_hash: PasswordHash) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            True on match. False on mismatch or on a malformed stored hash.
        """
        pass

    def needs_rehash(self, password_hash: PasswordHash) -> bool:
        """True when the stored hash is weaker than what hash() produces now."""
        return False
