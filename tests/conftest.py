"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ghibli_graph.upstream import GhibliClient  # noqa: E402

BASE_URL = "https://ghibli.test"

FILM_ID = "2baf70d1-42bb-4437-b551-e5fed5a87abe"
PAZU_ID = "fe93adf2-2f3a-4ec4-9f68-5422f1b87c01"
SHEETA_ID = "598f7048-74ff-41e0-92ef-87dc1ad980a9"
DOLA_ID = "3bc0b41e-3569-4d20-ae73-2da329bf0786"
MUSKA_ID = "40c005ce-3725-4f15-8409-3e1b1b14b583"
HUMAN_ID = "af3910a6-429f-4c74-9ad5-dfe1c4aa04f2"
GOLIATH_ID = "4e09b023-f650-4747-9ab9-eacf14540cfb"
TOWN_ID = "11014596-71b0-4b3e-b8c0-1c4b15f28b9a"


def url(resource: str, item_id: str) -> str:
    return f"{BASE_URL}/{resource}/{item_id}"


def make_person(item_id: str, name: str, **extra: Any) -> dict[str, Any]:
    payload = {
        "id": item_id,
        "name": name,
        "gender": "Male",
        "age": "13",
        "eye_color": "Black",
        "hair_color": "Brown",
        "films": [url("films", FILM_ID)],
        "species": url("species", HUMAN_ID),
        "url": url("people", item_id),
    }
    payload.update(extra)
    return payload


FILM = {
    "id": FILM_ID,
    "title": "Castle in the Sky",
    "original_title": "天空の城ラピュタ",
    "description": "The orphan Sheeta inherited a mysterious crystal that links her to Laputa.",
    "director": "Hayao Miyazaki",
    "producer": "Isao Takahata",
    "release_date": "1986",
    "running_time": "124",
    "rt_score": "95",
    "people": [url("people", PAZU_ID), url("people", SHEETA_ID), url("people", DOLA_ID)],
    "species": [url("species", HUMAN_ID)],
    "locations": [f"{BASE_URL}/locations/"],
    "vehicles": [url("vehicles", GOLIATH_ID)],
    "url": url("films", FILM_ID),
}

PAZU = make_person(PAZU_ID, "Pazu")
SHEETA = make_person(SHEETA_ID, "Lusheeta Toel Ul Laputa", gender="Female")
DOLA = make_person(DOLA_ID, "Dola", gender="Female", age="60", hair_color="Red")
MUSKA = make_person(MUSKA_ID, "Romska Palo Ul Laputa", age="33")

HUMAN = {
    "id": HUMAN_ID,
    "name": "Human",
    "classification": "Mammal",
    "eye_colors": "Black, Blue, Brown, Grey, Green, Hazel",
    "hair_colors": "Black, Blonde, Brown, Grey, White",
    "people": [url("people", PAZU_ID), url("people", SHEETA_ID)],
    "films": [url("films", FILM_ID)],
    "url": url("species", HUMAN_ID),
}

GOLIATH = {
    "id": GOLIATH_ID,
    "name": "Goliath",
    "description": "A airship owned by the Government.",
    "vehicle_class": "Airship",
    "length": "1,000",
    "pilot": url("people", MUSKA_ID),
    "films": url("films", FILM_ID),
    "url": url("vehicles", GOLIATH_ID),
}

MINING_TOWN = {
    "id": TOWN_ID,
    "name": "Mining Town",
    "climate": "Mild",
    "terrain": "Hill",
    "surface_water": "40",
    "residents": [url("people", PAZU_ID)],
    "films": [url("films", FILM_ID)],
    "url": url("locations", TOWN_ID),
}


class FakeUpstream:
    """In-memory stand-in for the upstream REST API, served via httpx.MockTransport.

    Unknown URLs answer 404. Every request URL is recorded in ``requests``.
    """

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.routes: dict[str, Any] = {}
        self.requests: list[str] = []

    def add_json(self, path_or_url: str, payload: Any, status_code: int = 200) -> None:
        self.routes[self._url(path_or_url)] = ("json", status_code, payload)

    def add_text(self, path_or_url: str, text: str, status_code: int = 200) -> None:
        self.routes[self._url(path_or_url)] = ("text", status_code, text)

    def add_error(self, path_or_url: str, exc_type: type[httpx.TransportError]) -> None:
        self.routes[self._url(path_or_url)] = ("raise", 0, exc_type)

    def count(self, path_or_url: str) -> int:
        target = self._url(path_or_url)
        return sum(1 for requested in self.requests if requested == target)

    def _url(self, path_or_url: str) -> str:
        if path_or_url.startswith("http"):
            return path_or_url
        return f"{self.base_url}{path_or_url}"

    def handler(self, request: httpx.Request) -> httpx.Response:
        requested = str(request.url)
        self.requests.append(requested)

        route = self.routes.get(requested)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})

        kind, status_code, value = route
        if kind == "raise":
            raise value("simulated failure", request=request)
        if kind == "text":
            return httpx.Response(status_code, text=value)
        return httpx.Response(status_code, json=value)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    """A fake upstream seeded with one film and its linked resources."""
    upstream = FakeUpstream()
    upstream.add_json("/films", [FILM])
    upstream.add_json("/people", [PAZU, SHEETA, DOLA, MUSKA])
    upstream.add_json("/species", [HUMAN])
    upstream.add_json("/vehicles", [GOLIATH])
    upstream.add_json("/locations", [MINING_TOWN])
    upstream.add_json(url("films", FILM_ID), FILM)
    for person in (PAZU, SHEETA, DOLA, MUSKA):
        upstream.add_json(person["url"], person)
    upstream.add_json(HUMAN["url"], HUMAN)
    upstream.add_json(GOLIATH["url"], GOLIATH)
    upstream.add_json(MINING_TOWN["url"], MINING_TOWN)
    return upstream


@pytest_asyncio.fixture
async def ghibli_client(fake_upstream: FakeUpstream) -> AsyncGenerator[GhibliClient, None]:
    """A GhibliClient wired to the fake upstream."""
    client = GhibliClient(base_url=BASE_URL, timeout=5.0, transport=fake_upstream.transport())
    yield client
    await client.aclose()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
