"""bcrypt implementation of the password hasher port."""

import asyncio
import logging

import bcrypt

from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.value_objects.password_hash import PasswordHash
from infrastructure.config import DEFAULT_BCRYPT_ROUNDS

logger = logging.getLogger(__name__)

# bcrypt ignores everything past 72 bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Password hashing with bcrypt.

    Hashing and checking are CPU bound, so both run in a worker thread
    to keep the event loop responsive.

    Examples:
        >>> hasher = BcryptPasswordHasher(rounds=4)
        >>> hashed = await hasher.hash("my_secure_password")
        >>> await hasher.verify("my_secure_password", hashed)
        True
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def _verify_sync(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), hashed.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            logger.warning("password_hash.malformed")
            return False

    async def hash(self, password: str) -> PasswordHash:
        hashed = await asyncio.to_thread(self._hash_sync, password)
        return PasswordHash(hashed)

    async def verify(self, password: str, password_hash: PasswordHash) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, str(password_hash))

    def needs_rehash(self, password_hash: PasswordHash) -> bool:
        """True when the stored cost factor is below the configured one.

        bcrypt hash format: $2b$12$... where 12 is the cost factor.
        """
        parts = str(password_hash).split("$")
        if len(parts) < 4:
            return True
        try:
            return int(parts[2]) < self.rounds
        except ValueError:
            return True
