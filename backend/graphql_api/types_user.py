"""GraphQL types for User domain."""

from typing import Any, Dict, Optional, cast
from datetime import datetime
import strawberry
from strawberry.scalars import JSON

from application.user.commands.register_user import RegisterUserInput
from application.user.results import AuthResult
from domain.user.core.entities.account_details import AccountDetails
from domain.user.core.entities.user import User


@strawberry.type
class UserType:
    """User GraphQL type.

    Never exposes the password hash.

    Examples:
        mutation {
          user {
            login(email: "ada@example.com", password: "...") {
              user { userId email profile createdAt }
            }
          }
        }
    """

    @strawberry.field
    def user_id(self, root: User) -> str:
        return str(root.user_id)

    @strawberry.field
    def email(self, root: User) -> str:
        return root.email.value

    @strawberry.field
    def profile(self, root: User) -> JSON:
        """Opaque profile fields sent at registration."""
        return root.profile.data

    @strawberry.field
    def created_at(self, root: User) -> datetime:
        return root.created_at

    @strawberry.field
    def updated_at(self, root: User) -> datetime:
        return root.updated_at


@strawberry.type
class AccountDetailsType:
    """Account details companion record (same id as the user)."""

    @strawberry.field
    def user_id(self, root: AccountDetails) -> str:
        return str(root.user_id)

    @strawberry.field
    def data(self, root: AccountDetails) -> JSON:
        return root.data

    @strawberry.field
    def created_at(self, root: AccountDetails) -> datetime:
        return root.created_at


@strawberry.type
class AuthPayload:
    """Result of register and login: the user and its account details.

    accountDetails is null on login when the companion record is missing.
    """

    @strawberry.field
    def user(self, root: AuthResult) -> UserType:
        return cast(UserType, root.user)

    @strawberry.field
    def account_details(self, root: AuthResult) -> Optional[AccountDetailsType]:
        return cast(Optional[AccountDetailsType], root.account_details)


@strawberry.input
class RegisterInput:
    """Registration payload.

    Examples:
        {
          "email": "ada@example.com",
          "password": "s3cret",
          "profile": {"firstName": "Ada", "lastName": "Lovelace"}
        }
    """

    email: str
    password: str
    profile: Optional[JSON] = None

    def to_command(self) -> RegisterUserInput:
        profile: Dict[str, Any] = self.profile if isinstance(self.profile, dict) else {}
        return RegisterUserInput(email=self.email, password=self.password, profile=profile)
