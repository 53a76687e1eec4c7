"""User domain GraphQL mutations."""

from typing import Any, cast
import strawberry
from strawberry.types import Info

from graphql_api.errors import to_graphql_error
from graphql_api.types_user import AuthPayload, RegisterInput
from application.errors import ApiError
from application.user.commands.login_user import LoginUserCommand
from application.user.commands.register_user import RegisterUserCommand


def _require(info: Info, key: str) -> Any:
    dependency = info.context.get(key)
    if dependency is None:
        raise RuntimeError(f"{key} not found in context")
    return dependency


@strawberry.type
class UserMutations:
    """User domain mutations.

    Examples:
        mutation {
          user {
            register(input: {email: "ada@example.com", password: "s3cret"}) {
              user { userId email }
              accountDetails { userId }
            }
          }
        }
    """

    @strawberry.mutation
    async def register(self, info: Info, input: RegisterInput) -> AuthPayload:
        """Register a new user and create its account details.

        Raises:
            RuntimeError: If a dependency is missing from context
            GraphQLError: BAD_REQUEST, CONFLICT or INTERNAL (see extensions)
        """
        command = RegisterUserCommand(
            user_repository=_require(info, "user_repository"),
            account_details_repository=_require(info, "account_details_repository"),
            password_hasher=_require(info, "password_hasher"),
            event_bus=info.context.get("event_bus"),
        )
        try:
            result = await command.execute(input.to_command())
        except ApiError as e:
            raise to_graphql_error(e) from e

        return cast(AuthPayload, result)

    @strawberry.mutation
    async def login(self, info: Info, email: str, password: str) -> AuthPayload:
        """Check credentials and return the user with its account details.

        Raises:
            RuntimeError: If a dependency is missing from context
            GraphQLError: NOT_FOUND, UNAUTHORIZED or INTERNAL (see extensions)

        Examples:
            mutation {
              user {
                login(email: "ada@example.com", password: "s3cret") {
                  user { userId email profile }
                  accountDetails { userId createdAt }
                }
              }
            }
        """
        command = LoginUserCommand(
            user_repository=_require(info, "user_repository"),
            account_details_repository=_require(info, "account_details_repository"),
            password_hasher=_require(info, "password_hasher"),
            event_bus=info.context.get("event_bus"),
        )
        try:
            result = await command.execute(email, password)
        except ApiError as e:
            raise to_graphql_error(e) from e

        return cast(AuthPayload, result)
