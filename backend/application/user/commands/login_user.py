"""Login user command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.errors import ApiError
from application.user.queries.find_user_by_email import FindUserByEmailQuery
from application.user.results import AuthResult
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    InvalidCredentialsError,
    InvalidEmailError,
    UserNotFoundError,
)
from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not exist, register first!"
INCORRECT_PASSWORD_MESSAGE = "Incorrect password"
LOGIN_FAILED_PREFIX = "Failed to login user, "


@dataclass
class LoginUserCommand:
    """Command to check credentials and load the user's account details.

    Unknown email -> NOT_FOUND, wrong password -> UNAUTHORIZED, any other
    failure -> INTERNAL. The kinds stay distinct even though all three are
    raised from the same guarded block. A missing companion record is not
    an error: account_details is None in the result.

    Examples:
        >>> command = LoginUserCommand(users, details, hasher)
        >>> result = await command.execute("ada@example.com", "s3cret")
        >>> result.user.email.value
        'ada@example.com'
    """

    user_repository: IUserRepository
    account_details_repository: IAccountDetailsRepository
    password_hasher: IPasswordHasher
    event_bus: Optional[IEventBus] = None

    async def execute(self, email: str, password: str) -> AuthResult:
        """Execute login.

        Args:
            email: Email provided by the user
            password: Plaintext password provided by the user

        Returns:
            AuthResult with the user and its account details (or None)

        Raises:
            ApiError: NOT_FOUND, UNAUTHORIZED or INTERNAL
        """
        try:
            user = await self._find_user(email)

            if not await self.password_hasher.verify(password or "", user.password_hash):
                raise InvalidCredentialsError(user.email.value)

            account_details = await self.account_details_repository.find_by_user_id(
                user.user_id
            )
        except UserNotFoundError as e:
            logger.info("user.login_failed", extra={"reason": "not_found"})
            raise ApiError.not_found(USER_NOT_FOUND_MESSAGE) from e
        except InvalidCredentialsError as e:
            logger.info(
                "user.login_failed",
                extra={"reason": "bad_password", "email": e.email},
            )
            raise ApiError.unauthorized(INCORRECT_PASSWORD_MESSAGE) from e
        except Exception as e:
            logger.error(
                "user.login_error",
                extra={"error": str(e)},
                exc_info=True,
            )
            raise ApiError.internal(LOGIN_FAILED_PREFIX + str(e)) from e

        if self.password_hasher.needs_rehash(user.password_hash):
            logger.info(
                "password_hash.needs_rehash",
                extra={"user_id": str(user.user_id)},
            )

        if account_details is None:
            logger.warning(
                "user.account_details_missing",
                extra={"user_id": str(user.user_id)},
            )

        user.record_login()
        await self._publish_events(user)

        logger.info("user.logged_in", extra={"user_id": str(user.user_id)})

        return AuthResult(user=user, account_details=account_details)

    async def _find_user(self, email: str) -> User:
        try:
            address = Email(email)
        except InvalidEmailError as e:
            # no user can be registered under a malformed address
            raise UserNotFoundError(str(email)) from e

        user = await FindUserByEmailQuery(self.user_repository).execute(address)
        if user is None:
            raise UserNotFoundError(address.value)
        return user

    async def _publish_events(self, user: User) -> None:
        events = user.collect_events()
        if self.event_bus is None:
            return
        for event in events:
            await self.event_bus.publish(event)
