"""Register user command."""

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, Optional

from application.errors import ApiError
from application.user.queries.find_user_by_email import FindUserByEmailQuery
from application.user.results import AuthResult
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    AccountDetailsAlreadyExistsError,
    InvalidEmailError,
    UserAlreadyExistsError,
)
from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.user_profile import UserProfile

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Email already taken"
REGISTER_FAILED_PREFIX = "Failed to register user, "


@dataclass
class RegisterUserInput:
    """Candidate user data: credentials plus opaque profile fields."""

    email: str
    password: str
    profile: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"RegisterUserInput(email={self.email!r}, password='***', profile={self.profile!r})"


@dataclass
class RegisterUserCommand:
    """Command to register a new user and its account details record.

    Steps: email uniqueness pre-check, hash the password, persist the
    user, create the companion AccountDetails with the same id.

    A duplicate email is always reported as a CONFLICT, whether it is
    caught by the pre-check or by the repository's unique constraint
    when two registrations race. Anything else that fails after the
    pre-check is reported as INTERNAL with the underlying message, and a
    user already saved by then is deleted so the email stays free.

    Examples:
        >>> command = RegisterUserCommand(users, details, hasher)
        >>> result = await command.execute(RegisterUserInput("ada@example.com", "s3cret"))
        >>> result.account_details.user_id == result.user.user_id
        True
    """

    user_repository: IUserRepository
    account_details_repository: IAccountDetailsRepository
    password_hasher: IPasswordHasher
    event_bus: Optional[IEventBus] = None

    async def execute(self, data: RegisterUserInput) -> AuthResult:
        """Execute registration.

        Args:
            data: Email, plaintext password and profile fields

        Returns:
            AuthResult with the new user and its account details

        Raises:
            ApiError: BAD_REQUEST for invalid input, CONFLICT for a taken
                email, INTERNAL for any other failure
        """
        email, profile = self._validate(data)

        try:
            existing = await FindUserByEmailQuery(self.user_repository).execute(email)
        except Exception as e:
            logger.error(
                "user.register_lookup_failed",
                extra={"email": email.value, "error": str(e)},
                exc_info=True,
            )
            raise ApiError.internal(REGISTER_FAILED_PREFIX + str(e)) from e

        if existing is not None:
            logger.info("user.register_conflict", extra={"email": email.value})
            raise ApiError.conflict(EMAIL_TAKEN_MESSAGE)

        saved_user: Optional[User] = None
        try:
            password_hash = await self.password_hasher.hash(data.password)
            user = User.register(email, password_hash, profile)
            saved_user = await self._save_user(user)
            account_details = await self.account_details_repository.create(
                AccountDetails.for_user(user)
            )
        except UserAlreadyExistsError as e:
            # lost the race against a concurrent registration
            logger.info("user.register_conflict", extra={"email": email.value, "race": True})
            raise ApiError.conflict(EMAIL_TAKEN_MESSAGE) from e
        except AccountDetailsAlreadyExistsError as e:
            logger.error(
                "user.register_failed",
                extra={"email": email.value, "error": str(e)},
            )
            await self._rollback(saved_user)
            raise ApiError.internal(REGISTER_FAILED_PREFIX + str(e)) from e
        except Exception as e:
            logger.error(
                "user.register_failed",
                extra={"email": email.value, "error": str(e)},
                exc_info=True,
            )
            await self._rollback(saved_user)
            raise ApiError.internal(REGISTER_FAILED_PREFIX + str(e)) from e

        logger.info(
            "user.registered",
            extra={"user_id": str(user.user_id), "email": email.value},
        )

        await self._publish_events(user)

        return AuthResult(user=user, account_details=account_details)

    def _validate(self, data: RegisterUserInput) -> tuple[Email, UserProfile]:
        try:
            email = Email(data.email)
        except InvalidEmailError as e:
            raise ApiError.bad_request(str(e)) from e

        if not isinstance(data.password, str) or not data.password:
            raise ApiError.bad_request("Password cannot be empty")

        try:
            profile = UserProfile(data=dict(data.profile or {}))
        except (TypeError, ValueError) as e:
            raise ApiError.bad_request(f"Invalid profile: {e}") from e

        return email, profile

    async def _save_user(self, user: User) -> User:
        """Persist the user document."""
        await self.user_repository.save(user)
        return user

    async def _rollback(self, user: Optional[User]) -> None:
        """Remove a user saved before its account details could be created."""
        if user is None:
            return
        try:
            await self.user_repository.delete(user.user_id)
        except Exception as e:
            logger.error(
                "user.register_rollback_failed",
                extra={"user_id": str(user.user_id), "error": str(e)},
                exc_info=True,
            )

    async def _publish_events(self, user: User) -> None:
        events = user.collect_events()
        if self.event_bus is None:
            return
        for event in events:
            await self.event_bus.publish(event)
