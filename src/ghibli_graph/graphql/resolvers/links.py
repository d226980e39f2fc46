"""Resolvers that dereference upstream URLs stored on a parent object.

List links fetch every URL concurrently and keep the input order. Fetch
errors propagate so that only the failing field is reported.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import strawberry

from ...logging import get_logger
from ...upstream import GhibliClient
from .payloads import (
    film_from_payload,
    person_from_payload,
    species_from_payload,
)

if TYPE_CHECKING:
    from ..types.film import Film
    from ..types.person import Person
    from ..types.species import Species

logger = get_logger(__name__)

T = TypeVar("T")


def get_client(info: strawberry.Info) -> GhibliClient:
    """Get the upstream client from the GraphQL context."""
    return info.context["ghibli"]


async def _resolve_many(
    info: strawberry.Info, urls: Sequence[str], convert: Callable[[dict[str, Any]], T]
) -> list[T]:
    payloads = await get_client(info).get_objects(urls)
    logger.debug("Resolved linked resources", field=info.field_name, count=len(payloads))
    return [convert(payload) for payload in payloads]


async def _resolve_one(
    info: strawberry.Info, url: str | None, convert: Callable[[dict[str, Any]], T]
) -> T | None:
    if url is None:
        return None
    return convert(await get_client(info).get_object(url))


async def resolve_linked_films(info: strawberry.Info, urls: Sequence[str]) -> list[Film]:
    return await _resolve_many(info, urls, film_from_payload)


async def resolve_linked_people(info: strawberry.Info, urls: Sequence[str]) -> list[Person]:
    return await _resolve_many(info, urls, person_from_payload)


async def resolve_linked_species(info: strawberry.Info, urls: Sequence[str]) -> list[Species]:
    return await _resolve_many(info, urls, species_from_payload)


async def resolve_linked_person(info: strawberry.Info, url: str | None) -> Person | None:
    return await _resolve_one(info, url, person_from_payload)


async def resolve_linked_species_item(info: strawberry.Info, url: str | None) -> Species | None:
    return await _resolve_one(info, url, species_from_payload)
