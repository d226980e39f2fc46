"""
Species GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .film import Film
    from .person import Person


@strawberry.type
class Species:
    """A species of creature, human included."""

    id: strawberry.ID | None
    name: str | None
    classification: str | None
    eye_colors: str | None
    hair_colors: str | None
    url: str | None

    people_urls: strawberry.Private[list[str]]
    film_urls: strawberry.Private[list[str]]

    @strawberry.field
    async def people(
        self, info: strawberry.Info
    ) -> list[Annotated["Person", strawberry.lazy(".person")] | None] | None:
        """Members of this species."""
        from ..resolvers.links import resolve_linked_people

        return await resolve_linked_people(info, self.people_urls)

    @strawberry.field
    async def films(
        self, info: strawberry.Info
    ) -> list[Annotated["Film", strawberry.lazy(".film")] | None] | None:
        """Films this species appears in."""
        from ..resolvers.links import resolve_linked_films

        return await resolve_linked_films(info, self.film_urls)
