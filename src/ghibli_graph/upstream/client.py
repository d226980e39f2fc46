"""Async HTTP client for the Studio Ghibli REST API."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx

from ..config import settings
from ..logging import get_logger
from .errors import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamNotFoundError,
    UpstreamPayloadError,
)

logger = get_logger(__name__)

# Upstream resource paths, each with a collection GET and an item GET at /{resource}/{id}
RESOURCES = frozenset({"films", "people", "locations", "species", "vehicles"})


class GhibliClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the upstream API.

    Every call issues a fresh GET; responses are never cached or shared
    between callers. The underlying connection pool is created on first use
    and released by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Upstream API root (defaults to ``settings.api_base_url``)
            timeout: Per-request timeout in seconds (defaults to ``settings.http_timeout``)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def resource_url(self, resource: str, item_id: str | None = None) -> str:
        """Build the collection URL, or the item URL when ``item_id`` is given."""
        if resource not in RESOURCES:
            raise ValueError(f"Unknown upstream resource: {resource}")
        if item_id is None:
            return f"{self.base_url}/{resource}"
        return f"{self.base_url}/{resource}/{quote(item_id, safe='')}"

    async def get_json(self, url: str) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        Raises:
            UpstreamConnectionError: If no response was received
            UpstreamNotFoundError: If upstream answered 404
            UpstreamHTTPError: For any other non-2xx status
            UpstreamPayloadError: If the body is not valid JSON
        """
        logger.debug("Fetching upstream resource", url=url)

        try:
            response = await self.http.get(url)
        except httpx.TransportError as e:
            logger.warning("Upstream request failed", url=url, error=str(e))
            raise UpstreamConnectionError(f"Upstream request to {url} failed: {e}", url) from e

        if response.status_code == 404:
            logger.info("Upstream resource not found", url=url)
            raise UpstreamNotFoundError(url)

        if not response.is_success:
            logger.warning(
                "Upstream returned error status", url=url, status_code=response.status_code
            )
            raise UpstreamHTTPError(url, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                "Upstream returned a non-JSON body",
                url=url,
                content_type=response.headers.get("content-type"),
            )
            raise UpstreamPayloadError(f"Upstream response from {url} is not JSON", url) from e

    async def get_object(self, url: str) -> dict[str, Any]:
        """GET ``url`` and require a JSON object body."""
        payload = await self.get_json(url)
        if not isinstance(payload, dict):
            raise UpstreamPayloadError(
                f"Expected a JSON object from {url}, got {type(payload).__name__}", url
            )
        return payload

    async def get_objects(self, urls: Sequence[str]) -> list[dict[str, Any]]:
        """GET every URL concurrently; results keep the order of ``urls``.

        One request is issued per entry, duplicates included. A non-URL entry
        fails the whole list before any request is sent.
        """
        if not urls:
            return []
        invalid = [url for url in urls if not isinstance(url, str) or not url]
        if invalid:
            raise UpstreamPayloadError(
                f"Link list contains non-URL entries: {invalid!r}", str(invalid[0])
            )
        return list(await asyncio.gather(*(self.get_object(url) for url in urls)))

    async def list_resource(self, resource: str) -> list[dict[str, Any]]:
        """GET the collection endpoint for ``resource``."""
        url = self.resource_url(resource)
        payload = await self.get_json(url)
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise UpstreamPayloadError(f"Expected a JSON array of objects from {url}", url)
        return payload

    async def get_resource(self, resource: str, item_id: str) -> dict[str, Any]:
        """GET a single item of ``resource`` by identifier."""
        return await self.get_object(self.resource_url(resource, item_id))
