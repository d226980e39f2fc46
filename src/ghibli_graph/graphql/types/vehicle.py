"""
Vehicles GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .person import Person


@strawberry.type(name="Vehicles")
class Vehicle:
    """A vehicle from the films."""

    id: strawberry.ID | None
    name: str | None
    description: str | None
    vehicle_class: str | None
    length: str | None
    films: str | None = strawberry.field(
        description="Upstream film URL; several URLs are joined with ', '."
    )
    url: str | None

    pilot_url: strawberry.Private[str | None]

    @strawberry.field
    async def pilot(
        self, info: strawberry.Info
    ) -> Annotated["Person", strawberry.lazy(".person")] | None:
        """The person piloting this vehicle."""
        from ..resolvers.links import resolve_linked_person

        return await resolve_linked_person(info, self.pilot_url)
