"""GraphQL types mirroring the upstream resources."""
