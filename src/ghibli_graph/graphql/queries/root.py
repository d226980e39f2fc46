"""
Root GraphQL query definitions
"""

import strawberry

from ..types.film import Film
from ..types.location import Location
from ..types.person import Person
from ..types.species import Species
from ..types.vehicle import Vehicle


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self, name: str | None = None) -> str:
        """Greet someone, or the world."""
        from ..resolvers.root import resolve_hello

        return resolve_hello(name)

    # Collections
    @strawberry.field(name="Film")
    async def films(self, info: strawberry.Info) -> list[Film | None] | None:
        """Get every film."""
        from ..resolvers.root import resolve_films

        return await resolve_films(info)

    @strawberry.field(name="People")
    async def people(self, info: strawberry.Info) -> list[Person | None] | None:
        """Get every person."""
        from ..resolvers.root import resolve_people

        return await resolve_people(info)

    @strawberry.field(name="Locations")
    async def locations(self, info: strawberry.Info) -> list[Location | None] | None:
        """Get every location."""
        from ..resolvers.root import resolve_locations

        return await resolve_locations(info)

    @strawberry.field(name="Species")
    async def species(self, info: strawberry.Info) -> list[Species | None] | None:
        """Get every species."""
        from ..resolvers.root import resolve_species

        return await resolve_species(info)

    @strawberry.field(name="Vehicles")
    async def vehicles(self, info: strawberry.Info) -> list[Vehicle | None] | None:
        """Get every vehicle."""
        from ..resolvers.root import resolve_vehicles

        return await resolve_vehicles(info)

    # Single items. Upstream ids do not fit a bounded Int, so they are passed as String.
    @strawberry.field(name="getFilm")
    async def get_film(self, info: strawberry.Info, id: str) -> Film | None:
        """Get a film by ID."""
        from ..resolvers.root import resolve_film_by_id

        return await resolve_film_by_id(info, id)

    @strawberry.field(name="getPerson")
    async def get_person(self, info: strawberry.Info, id: str) -> Person | None:
        """Get a person by ID."""
        from ..resolvers.root import resolve_person_by_id

        return await resolve_person_by_id(info, id)

    @strawberry.field(name="getLocation")
    async def get_location(self, info: strawberry.Info, id: str) -> Location | None:
        """Get a location by ID."""
        from ..resolvers.root import resolve_location_by_id

        return await resolve_location_by_id(info, id)

    @strawberry.field(name="getSpecies")
    async def get_species(self, info: strawberry.Info, id: str) -> Species | None:
        """Get a species by ID."""
        from ..resolvers.root import resolve_species_by_id

        return await resolve_species_by_id(info, id)

    @strawberry.field(name="getVehicle")
    async def get_vehicle(self, info: strawberry.Info, id: str) -> Vehicle | None:
        """Get a vehicle by ID."""
        from ..resolvers.root import resolve_vehicle_by_id

        return await resolve_vehicle_by_id(info, id)
