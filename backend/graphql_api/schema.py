"""GraphQL schema roots."""

import strawberry

from graphql_api.resolvers.user.mutations import UserMutations
from graphql_api.resolvers.user.queries import UserQueries


@strawberry.type
class Query:
    @strawberry.field(description="User domain queries")  # type: ignore[misc]
    def user(self) -> UserQueries:
        return UserQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="User domain mutations")  # type: ignore[misc]
    def user(self) -> UserMutations:
        return UserMutations()


def create_schema() -> strawberry.Schema:
    """Build the schema with user queries and mutations."""
    return strawberry.Schema(query=Query, mutation=Mutation)
