"""HTTP transport for the Twitch API."""

import json
import logging
from typing import Any, Protocol

import httpx

from ..config.settings import APIConfig
from ..core.errors import (
    DeserializationError,
    NotFoundError,
    TransportError,
    TwitchServerError,
    UnauthorizedError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


class SupportsQueryParams(Protocol):
    """Anything that can render itself as query parameters."""

    def to_query_params(self) -> dict[str, str]: ...


class TwitchHttpClient:
    """Performs GET requests against the Twitch API and decodes the JSON body."""

    def __init__(self, config: APIConfig, client: httpx.AsyncClient | None = None):
        """Initialize with API settings and an optional preconfigured httpx client."""
        self.base_url = config.base_url.rstrip('/')
        self.client_id = config.client_id
        self.accept = config.accept_header
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout))

    async def close(self):
        """Close the underlying HTTP client if it was created here."""
        if self._owns_client:
            await self.client.aclose()

    def create_url(self, path: str) -> str:
        """Absolute url for a path relative to the base url."""
        return f"{self.base_url}{path}"

    def default_headers(self) -> dict[str, str]:
        headers = {"Accept": self.accept}
        if self.client_id:
            headers["Client-ID"] = self.client_id
        return headers

    async def get_json(self, path: str, params: SupportsQueryParams | None = None) -> Any:
        """GET `path` and return the decoded JSON body.

        Raises a TwitchClientError subclass for transport failures, status
        codes other than 200 and bodies that are not JSON.
        """
        url = self.create_url(path)
        query = params.to_query_params() if params is not None else {}

        logger.debug(f"GET {url} params={query}")
        try:
            response = await self.client.get(url, params=query, headers=self.default_headers())
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        self._check_status(response, url)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON response from {url}: {e}")
            raise DeserializationError(f"Invalid JSON response from {url}: {e}") from e

    def _check_status(self, response: httpx.Response, url: str) -> None:
        """Map any status other than 200 to an exception."""
        status = response.status_code
        if status == 200:
            return

        body = response.text
        logger.warning(f"GET {url} returned HTTP {status}")

        if status == 401:
            raise UnauthorizedError(
                f"Tried to access a secured resource prior to authentication: {url}",
                status, url, body,
            )
        if status == 404:
            raise NotFoundError(f"Resource not found: {url}", status, url, body)
        if 500 <= status < 600:
            raise TwitchServerError(f"Twitch server error HTTP {status}: {body}", status, url, body)
        raise UnexpectedStatusError(f"Unhandled response status HTTP {status}: {body}", status, url, body)
