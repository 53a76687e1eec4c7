"""GraphQL resolvers organized by domain."""
