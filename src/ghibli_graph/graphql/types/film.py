"""
Film GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .person import Person
    from .species import Species


@strawberry.type
class Film:
    """A Studio Ghibli film."""

    id: strawberry.ID | None
    title: str | None
    description: str | None
    director: str | None
    producer: str | None
    release_date: str | None
    rt_score: str | None
    locations: list[str | None] | None = strawberry.field(
        description="Upstream location URLs, not dereferenced."
    )
    vehicles: list[str | None] | None = strawberry.field(
        description="Upstream vehicle URLs, not dereferenced."
    )
    url: str | None

    people_urls: strawberry.Private[list[str]]
    species_urls: strawberry.Private[list[str]]

    @strawberry.field
    async def people(
        self, info: strawberry.Info
    ) -> list[Annotated["Person", strawberry.lazy(".person")] | None] | None:
        """Characters appearing in this film."""
        from ..resolvers.links import resolve_linked_people

        return await resolve_linked_people(info, self.people_urls)

    @strawberry.field
    async def species(
        self, info: strawberry.Info
    ) -> list[Annotated["Species", strawberry.lazy(".species")] | None] | None:
        """Species appearing in this film."""
        from ..resolvers.links import resolve_linked_species

        return await resolve_linked_species(info, self.species_urls)
