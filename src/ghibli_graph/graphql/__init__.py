"""GraphQL schema, types and resolvers for the Ghibli facade."""
