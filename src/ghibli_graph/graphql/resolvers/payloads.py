"""Conversion of upstream JSON payloads into GraphQL types.

Scalar fields pass through verbatim; a key missing upstream becomes ``None``.
Link fields keep their raw URL(s) on private attributes for the link resolvers.
"""

from __future__ import annotations

from typing import Any

from ..types.film import Film
from ..types.location import Location
from ..types.person import Person
from ..types.species import Species
from ..types.vehicle import Vehicle


def _url_list(value: Any) -> list[Any]:
    # Entries are kept as-is so the resolved list matches the upstream count;
    # non-URL entries are rejected when the link is resolved
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def _url(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _text_list(value: Any) -> list[str | None] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return list(value)


def _joined(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return ", ".join(str(item) for item in value)


def film_from_payload(payload: dict[str, Any]) -> Film:
    return Film(
        id=payload.get("id"),
        title=payload.get("title"),
        description=payload.get("description"),
        director=payload.get("director"),
        producer=payload.get("producer"),
        release_date=payload.get("release_date"),
        rt_score=payload.get("rt_score"),
        locations=_text_list(payload.get("locations")),
        vehicles=_text_list(payload.get("vehicles")),
        url=payload.get("url"),
        people_urls=_url_list(payload.get("people")),
        species_urls=_url_list(payload.get("species")),
    )


def person_from_payload(payload: dict[str, Any]) -> Person:
    return Person(
        id=payload.get("id"),
        name=payload.get("name"),
        gender=payload.get("gender"),
        age=payload.get("age"),
        eye_color=payload.get("eye_color"),
        hair_color=payload.get("hair_color"),
        url=payload.get("url"),
        length=payload.get("length"),
        film_urls=_url_list(payload.get("films")),
        species_url=_url(payload.get("species")),
    )


def location_from_payload(payload: dict[str, Any]) -> Location:
    return Location(
        id=payload.get("id"),
        name=payload.get("name"),
        climate=payload.get("climate"),
        terrain=payload.get("terrain"),
        surface_water=payload.get("surface_water"),
        url=payload.get("url"),
        resident_urls=_url_list(payload.get("residents")),
        film_urls=_url_list(payload.get("films")),
    )


def species_from_payload(payload: dict[str, Any]) -> Species:
    return Species(
        id=payload.get("id"),
        name=payload.get("name"),
        classification=payload.get("classification"),
        eye_colors=payload.get("eye_colors"),
        hair_colors=payload.get("hair_colors"),
        url=payload.get("url"),
        people_urls=_url_list(payload.get("people")),
        film_urls=_url_list(payload.get("films")),
    )


def vehicle_from_payload(payload: dict[str, Any]) -> Vehicle:
    return Vehicle(
        id=payload.get("id"),
        name=payload.get("name"),
        description=payload.get("description"),
        vehicle_class=payload.get("vehicle_class"),
        length=payload.get("length"),
        films=_joined(payload.get("films")),
        url=payload.get("url"),
        pilot_url=_url(payload.get("pilot")),
    )
