"""GraphQL API layer (Strawberry) for user accounts."""
