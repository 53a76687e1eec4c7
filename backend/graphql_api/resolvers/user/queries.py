"""User domain GraphQL queries."""

import strawberry
from strawberry.types import Info

from application.user.queries.find_user_by_email import FindUserByEmailQuery
from domain.user.core.exceptions.user_errors import InvalidEmailError


@strawberry.type
class UserQueries:
    """User domain queries.

    Examples:
        query {
          user {
            exists(email: "ada@example.com")
          }
        }
    """

    @strawberry.field
    async def exists(self, info: Info, email: str) -> bool:
        """Check if an email is already registered.

        A malformed address is never registered, so it returns false.

        Raises:
            RuntimeError: If user_repository not in context
        """
        user_repository = info.context.get("user_repository")
        if user_repository is None:
            raise RuntimeError("user_repository not found in context")

        try:
            return await FindUserByEmailQuery(user_repository).exists(email)
        except InvalidEmailError:
            return False
