"""Root query resolvers: one upstream GET per top-level field."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import strawberry

from ...logging import get_logger
from ...upstream import UpstreamNotFoundError
from .links import get_client
from .payloads import (
    film_from_payload,
    location_from_payload,
    person_from_payload,
    species_from_payload,
    vehicle_from_payload,
)

if TYPE_CHECKING:
    from ..types.film import Film
    from ..types.location import Location
    from ..types.person import Person
    from ..types.species import Species
    from ..types.vehicle import Vehicle

logger = get_logger(__name__)

T = TypeVar("T")


def resolve_hello(name: str | None) -> str:
    return f"Hello, {name if name is not None else 'world'}!"


async def _list(
    info: strawberry.Info, resource: str, convert: Callable[[dict[str, Any]], T]
) -> list[T]:
    payloads = await get_client(info).list_resource(resource)
    return [convert(payload) for payload in payloads]


async def _get(
    info: strawberry.Info, resource: str, id: str, convert: Callable[[dict[str, Any]], T]
) -> T | None:
    """
    Fetch a single item by identifier.

    An upstream 404 resolves to None; every other failure propagates as a
    field error.
    """
    try:
        payload = await get_client(info).get_resource(resource, id)
    except UpstreamNotFoundError:
        logger.info("Resource not found", resource=resource, id=id)
        return None
    return convert(payload)


# Collection resolvers
async def resolve_films(info: strawberry.Info) -> list[Film]:
    return await _list(info, "films", film_from_payload)


async def resolve_people(info: strawberry.Info) -> list[Person]:
    return await _list(info, "people", person_from_payload)


async def resolve_locations(info: strawberry.Info) -> list[Location]:
    return await _list(info, "locations", location_from_payload)


async def resolve_species(info: strawberry.Info) -> list[Species]:
    return await _list(info, "species", species_from_payload)


async def resolve_vehicles(info: strawberry.Info) -> list[Vehicle]:
    return await _list(info, "vehicles", vehicle_from_payload)


# Single-item resolvers
async def resolve_film_by_id(info: strawberry.Info, id: str) -> Film | None:
    return await _get(info, "films", id, film_from_payload)


async def resolve_person_by_id(info: strawberry.Info, id: str) -> Person | None:
    return await _get(info, "people", id, person_from_payload)


async def resolve_location_by_id(info: strawberry.Info, id: str) -> Location | None:
    return await _get(info, "locations", id, location_from_payload)


async def resolve_species_by_id(info: strawberry.Info, id: str) -> Species | None:
    return await _get(info, "species", id, species_from_payload)


async def resolve_vehicle_by_id(info: strawberry.Info, id: str) -> Vehicle | None:
    return await _get(info, "vehicles", id, vehicle_from_payload)
