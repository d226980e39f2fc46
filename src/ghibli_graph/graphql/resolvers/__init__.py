"""Resolver package for the GraphQL schema.

Root resolvers live in ``root``, link dereferencing in ``links`` and the
upstream JSON to GraphQL type conversion in ``payloads``.
"""
