"""User domain GraphQL resolvers."""

from graphql_api.resolvers.user.mutations import UserMutations
from graphql_api.resolvers.user.queries import UserQueries

__all__ = ["UserMutations", "UserQueries"]
