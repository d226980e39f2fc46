"""HTTP application exposing the GraphQL endpoint."""
