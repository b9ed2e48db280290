"""Read-only client for the Twitch REST API (v3).

By using this client you agree to follow the Twitch API Terms of Service.
This library is in no way affiliated with, authorized, maintained,
sponsored or endorsed by Twitch or any of its affiliates or subsidiaries.
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config.settings import TwitchConfig
from ..core.errors import DeserializationError
from ..core.models import (
    BasicInfo,
    Channel,
    ChannelStream,
    FeaturedStreams,
    Ingests,
    Streams,
    StreamsSummary,
    TopGames,
    TwitchModel,
)
from ..core.params import (
    FeaturedStreamsParams,
    StreamsParams,
    StreamsSummaryParams,
    TopGamesParams,
)
from .http import SupportsQueryParams, TwitchHttpClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=TwitchModel)


class TwitchClient:
    """Client for the Twitch API.

    Usage:

        async with TwitchClient(client_id="my-client-id") as client:
            top_games = await client.top_games(TopGamesParams.new().with_limit(5))
            for info in top_games.top:
                print(info.game.name, info.viewers)

    A client id is optional but highly recommended, anonymous requests get
    rate limited by Twitch.
    """

    def __init__(self, config: TwitchConfig | None = None, *,
                 client_id: str | None = None,
                 http_client: httpx.AsyncClient | None = None):
        """Initialize from configuration.

        `client_id` overrides the configured one. An injected `http_client`
        is not closed by this client.
        """
        self.config = config or TwitchConfig()
        api_config = self.config.api
        if client_id is not None:
            api_config = api_config.model_copy(update={"client_id": client_id})
        self.http = TwitchHttpClient(api_config, http_client)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.http.close()

    async def top_games(self, params: TopGamesParams | None = None) -> TopGames:
        """Games sorted by number of current viewers, most popular first."""
        return await self._get("/games/top", TopGames, params or TopGamesParams())

    async def ingests(self) -> Ingests:
        """List of RTMP ingest points."""
        return await self._get("/ingests", Ingests)

    async def basic_info(self) -> BasicInfo:
        """Top level links and authorization status."""
        return await self._get("/", BasicInfo)

    async def stream(self, channel: str) -> ChannelStream:
        """Stream of a channel. `stream` of the result is None if offline."""
        return await self._get(f"/streams/{_segment(channel)}", ChannelStream)

    async def streams(self, params: StreamsParams | None = None) -> Streams:
        """Streams matching the params, sorted by number of viewers descending."""
        return await self._get("/streams", Streams, params or StreamsParams())

    async def featured_streams(self, params: FeaturedStreamsParams | None = None) -> FeaturedStreams:
        """Featured (promoted) streams."""
        return await self._get("/streams/featured", FeaturedStreams, params or FeaturedStreamsParams())

    async def streams_summary(self, params: StreamsSummaryParams | None = None) -> StreamsSummary:
        """Summary of current streams, optionally for a single game."""
        return await self._get("/streams/summary", StreamsSummary, params or StreamsSummaryParams())

    async def channel(self, channel: str) -> Channel:
        """Channel object."""
        return await self._get(f"/channels/{_segment(channel)}", Channel)

    async def _get(self, path: str, model: type[ModelT], params: SupportsQueryParams | None = None) -> ModelT:
        """GET `path` and parse the body into `model`."""
        data = await self.http.get_json(path, params)
        return _parse(model, data, path)


def _parse(model: type[ModelT], data: Any, path: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} response for {path}: {e}")
        raise DeserializationError(f"Unexpected {model.__name__} response for {path}: {e}") from e


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment.

    Empty names and dot segments would be collapsed into a different
    endpoint, so they are rejected.
    """
    if value in ("", ".", ".."):
        raise ValueError(f"Invalid channel name: {value!r}")
    return quote(value, safe="")
