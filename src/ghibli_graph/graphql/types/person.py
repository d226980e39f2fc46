"""
People GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .film import Film
    from .species import Species


@strawberry.type(name="People")
class Person:
    """A character from the films."""

    id: strawberry.ID | None
    name: str | None
    gender: str | None
    age: str | None
    eye_color: str | None
    hair_color: str | None
    url: str | None
    length: str | None

    film_urls: strawberry.Private[list[str]]
    species_url: strawberry.Private[str | None]

    @strawberry.field
    async def films(
        self, info: strawberry.Info
    ) -> list[Annotated["Film", strawberry.lazy(".film")] | None] | None:
        """Films this person appears in."""
        from ..resolvers.links import resolve_linked_films

        return await resolve_linked_films(info, self.film_urls)

    @strawberry.field
    async def species(
        self, info: strawberry.Info
    ) -> Annotated["Species", strawberry.lazy(".species")] | None:
        """The species this person belongs to."""
        from ..resolvers.links import resolve_linked_species_item

        return await resolve_linked_species_item(info, self.species_url)
