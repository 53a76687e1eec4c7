"""ApiError -> GraphQL error translation."""

from graphql import GraphQLError

from application.errors import ApiError


def to_graphql_error(error: ApiError) -> GraphQLError:
    """Build a GraphQL error carrying kind and status in its extensions.

    Examples:
        {
          "message": "Incorrect password",
          "extensions": {"code": "UNAUTHORIZED", "status": 401}
        }
    """
    return GraphQLError(
        error.message,
        extensions={"code": error.kind.value, "status": error.status_code},
        original_error=error,
    )
