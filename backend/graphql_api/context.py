"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repositories (users, account details)
- Password hasher
- Event bus (domain events)
"""

from typing import Any, Optional
from strawberry.fastapi import BaseContext
from fastapi import Request

from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.ports.account_details_repository import IAccountDetailsRepository
from domain.user.core.ports.user_repository import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("dependency_name")`.

    Attributes:
        user_repository: Repository for user documents
        account_details_repository: Repository for account details documents
        password_hasher: Password hashing adapter
        event_bus: Event bus for domain events
        request: FastAPI request object
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        account_details_repository: IAccountDetailsRepository,
        password_hasher: IPasswordHasher,
        event_bus: Optional[IEventBus] = None,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.user_repository = user_repository
        self.account_details_repository = account_details_repository
        self.password_hasher = password_hasher
        self.event_bus = event_bus
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> repository = info.context.get("user_repository")
        """
        return getattr(self, key, None)


def create_context(
    user_repository: IUserRepository,
    account_details_repository: IAccountDetailsRepository,
    password_hasher: IPasswordHasher,
    event_bus: Optional[IEventBus] = None,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(
        user_repository=user_repository,
        account_details_repository=account_details_repository,
        password_hasher=password_hasher,
        event_bus=event_bus,
        request=request,
    )
