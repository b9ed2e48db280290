"""Request parameters for `TwitchClient` methods.

Every parameter object is immutable. The `with_*` methods return a modified
copy, so parameter sets can be shared and derived from each other:

    base = StreamsParams.new().with_game("StarCraft II: Heart of the Swarm")
    live = base.with_stream_type(StreamType.LIVE).with_limit(50)

Only parameters that were explicitly set are sent; everything else falls
back to the Twitch defaults.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

MAX_LIMIT = 100


class StreamType(Enum):
    """Restricts `StreamsParams` to streams of a certain type."""

    ALL = "all"
    PLAYLIST = "playlist"
    LIVE = "live"


def _check_offset(offset: int) -> int:
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    return offset


def _check_limit(limit: int) -> int:
    if not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_LIMIT} (inclusive), got {limit}")
    return limit


def _query_params(pairs: list[tuple[str, str | None]]) -> dict[str, str]:
    return {name: value for name, value in pairs if value is not None}


def _str_or_none(value: int | None) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class TopGamesParams:
    """Parameters for the top games."""

    offset: int | None = None
    limit: int | None = None

    @classmethod
    def new(cls) -> "TopGamesParams":
        """Synonym for the default constructor, reads better before `with_*` calls."""
        return cls()

    def with_offset(self, offset: int) -> "TopGamesParams":
        """Offset for pagination. Twitch defaults to 0."""
        return replace(self, offset=_check_offset(offset))

    def with_limit(self, limit: int) -> "TopGamesParams":
        """Maximum number of games. Twitch defaults to 10, maximum is 100."""
        return replace(self, limit=_check_limit(limit))

    def to_query_params(self) -> dict[str, str]:
        return _query_params([
            ("offset", _str_or_none(self.offset)),
            ("limit", _str_or_none(self.limit)),
        ])


@dataclass(frozen=True)
class StreamsParams:
    """Parameters for the streams listing."""

    game: str | None = None
    channels: tuple[str, ...] = ()
    offset: int | None = None
    limit: int | None = None
    client_id: str | None = None
    stream_type: StreamType | None = None

    @classmethod
    def new(cls) -> "StreamsParams":
        """Synonym for the default constructor, reads better before `with_*` calls."""
        return cls()

    def with_game(self, game: str) -> "StreamsParams":
        """Streams categorized under game. Twitch defaults to all games."""
        return replace(self, game=game)

    def with_channel(self, channel: str) -> "StreamsParams":
        """Add a channel. Can be chained to query several channels."""
        return replace(self, channels=self.channels + (channel,))

    def with_channels(self, channels: Iterable[str]) -> "StreamsParams":
        """Replace the channel list. An empty iterable restores the default (all channels)."""
        return replace(self, channels=tuple(channels))

    def with_offset(self, offset: int) -> "StreamsParams":
        """Offset for pagination. Twitch defaults to 0."""
        return replace(self, offset=_check_offset(offset))

    def with_limit(self, limit: int) -> "StreamsParams":
        """Maximum number of streams. Twitch defaults to 25, maximum is 100."""
        return replace(self, limit=_check_limit(limit))

    def with_client_id(self, client_id: str) -> "StreamsParams":
        """Only show streams from applications of `client_id`."""
        return replace(self, client_id=client_id)

    def with_stream_type(self, stream_type: StreamType) -> "StreamsParams":
        """Only show streams of a certain type. Twitch defaults to all."""
        return replace(self, stream_type=StreamType(stream_type))

    def to_query_params(self) -> dict[str, str]:
        return _query_params([
            ("game", self.game),
            ("channel", ",".join(self.channels) if self.channels else None),
            ("offset", _str_or_none(self.offset)),
            ("limit", _str_or_none(self.limit)),
            ("client_id", self.client_id),
            ("stream_type", self.stream_type.value if self.stream_type else None),
        ])


@dataclass(frozen=True)
class FeaturedStreamsParams:
    """Parameters for the featured streams.

    The number of promoted streams varies from day to day, there is no
    guarantee on how many streams are featured at a given time.
    """

    offset: int | None = None
    limit: int | None = None

    @classmethod
    def new(cls) -> "FeaturedStreamsParams":
        return cls()

    def with_offset(self, offset: int) -> "FeaturedStreamsParams":
        """Offset for pagination. Twitch defaults to 0."""
        return replace(self, offset=_check_offset(offset))

    def with_limit(self, limit: int) -> "FeaturedStreamsParams":
        """Maximum number of featured streams. Twitch defaults to 25, maximum is 100."""
        return replace(self, limit=_check_limit(limit))

    def to_query_params(self) -> dict[str, str]:
        return _query_params([
            ("offset", _str_or_none(self.offset)),
            ("limit", _str_or_none(self.limit)),
        ])


@dataclass(frozen=True)
class StreamsSummaryParams:
    """Parameters for the streams summary."""

    game: str | None = None

    @classmethod
    def new(cls) -> "StreamsSummaryParams":
        return cls()

    def with_game(self, game: str) -> "StreamsSummaryParams":
        """Summarize only streams of this game. Twitch defaults to all games."""
        return replace(self, game=game)

    def to_query_params(self) -> dict[str, str]:
        return _query_params([("game", self.game)])
