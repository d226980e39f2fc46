"""
Locations GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .film import Film
    from .person import Person


@strawberry.type(name="Locations")
class Location:
    """A place featured in the films."""

    id: strawberry.ID | None
    name: str | None
    climate: str | None
    terrain: str | None
    surface_water: str | None
    url: str | None

    resident_urls: strawberry.Private[list[str]]
    film_urls: strawberry.Private[list[str]]

    @strawberry.field
    async def residents(
        self, info: strawberry.Info
    ) -> list[Annotated["Person", strawberry.lazy(".person")] | None] | None:
        """People living at this location."""
        from ..resolvers.links import resolve_linked_people

        return await resolve_linked_people(info, self.resident_urls)

    @strawberry.field
    async def films(
        self, info: strawberry.Info
    ) -> list[Annotated["Film", strawberry.lazy(".film")] | None] | None:
        """Films this location appears in."""
        from ..resolvers.links import resolve_linked_films

        return await resolve_linked_films(info, self.film_urls)
