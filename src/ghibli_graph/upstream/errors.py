"""Errors raised when talking to the upstream REST API."""


class UpstreamError(Exception):
    """Base error for a failed upstream request."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class UpstreamHTTPError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"Upstream request to {url} failed with status {status_code}", url)
        self.status_code = status_code


class UpstreamNotFoundError(UpstreamHTTPError):
    """Upstream answered 404 Not Found."""

    def __init__(self, url: str):
        super().__init__(url, 404)


class UpstreamConnectionError(UpstreamError):
    """The request never produced a response (DNS, connect, timeout, ...)."""


class UpstreamPayloadError(UpstreamError):
    """The response body is not JSON, or not the JSON shape that was expected."""
