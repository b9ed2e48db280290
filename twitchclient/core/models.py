"""Response models for the Twitch REST API (v3).

Models mirror the JSON bodies Twitch returns. They are immutable once
parsed; unknown keys are ignored so additions on the Twitch side do not
break deserialization. Keys with a leading underscore (`_id`, `_total`,
`_links`) are exposed without it.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingLinkError
from .paging import Paging


class TwitchModel(BaseModel):
    """Base for all response models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class LinkedModel(TwitchModel):
    """Model carrying a `_links` object of related API urls."""

    links: dict[str, str] = Field(default_factory=dict, alias="_links")

    def get_link(self, key: str) -> str | None:
        """Link with the given key, or None if Twitch did not send it."""
        return self.links.get(key)

    def get_expected_link(self, key: str) -> str:
        """Link with the given key, raising MissingLinkError if absent."""
        try:
            return self.links[key]
        except KeyError:
            raise MissingLinkError(key, self.links) from None


class PagedModel(LinkedModel):
    """Linked model whose `self` and `next` links point at result pages."""

    @property
    def current_page_link(self) -> str:
        return self.get_expected_link("self")

    @property
    def next_page_link(self) -> str:
        return self.get_expected_link("next")

    @property
    def link_self(self) -> str:
        return self.current_page_link

    @property
    def link_next(self) -> str:
        return self.next_page_link

    def paging(self) -> Paging:
        """Paging of the current page, parsed from its link."""
        link = self.current_page_link
        paging = Paging.from_url(link)
        if paging is None:
            raise MissingLinkError("self", self.links, f"Expected link 'self' to carry paging but got: {link}")
        return paging


class ImageLinks(TwitchModel):
    """Urls of one image in several sizes.

    `template` contains `{width}` and `{height}` placeholders.
    """

    large: str
    medium: str
    small: str
    template: str

    def sized(self, width: int, height: int) -> str:
        """Fill the template with a concrete size."""
        return self.template.replace("{width}", str(width)).replace("{height}", str(height))


# Games

class Game(LinkedModel):
    """Information about the game itself."""

    id: int = Field(alias="_id")
    giantbomb_id: int | None = None
    name: str
    box_image_links: ImageLinks = Field(alias="box")
    logo_image_links: ImageLinks = Field(alias="logo")


class GameInfo(TwitchModel):
    """Current stats about a game."""

    viewers: int
    channels: int
    game: Game


class TopGames(PagedModel):
    """Games sorted by number of current viewers, most popular first."""

    total: int = Field(alias="_total")
    top: list[GameInfo] = Field(default_factory=list)


# Ingests

class Ingest(TwitchModel):
    """RTMP ingest point.

    Broadcasting to `url_template` with the stream key injected puts the
    content live on Twitch.
    """

    id: int = Field(alias="_id")
    name: str
    availability: float
    is_default: bool = Field(alias="default")
    url_template: str

    def url_for(self, stream_key: str) -> str:
        return self.url_template.replace("{stream_key}", stream_key)


class Ingests(LinkedModel):
    """List of ingest points."""

    ingests: list[Ingest] = Field(default_factory=list)

    @property
    def link_self(self) -> str:
        return self.get_expected_link("self")


# Root

class Authorization(TwitchModel):
    """Scopes and lifetime of an authorization."""

    scopes: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class Token(TwitchModel):
    """Authentication token status. Invalid for unauthenticated access."""

    valid: bool
    user_name: str | None = None
    authorization: Authorization | None = None


class BasicInfo(LinkedModel):
    """Basic information about the API and the authentication status."""

    token: Token

    @property
    def link_user(self) -> str:
        return self.get_expected_link("user")

    @property
    def link_channel(self) -> str:
        return self.get_expected_link("channel")

    @property
    def link_search(self) -> str:
        return self.get_expected_link("search")

    @property
    def link_streams(self) -> str:
        return self.get_expected_link("streams")

    @property
    def link_ingests(self) -> str:
        return self.get_expected_link("ingests")

    @property
    def link_teams(self) -> str:
        return self.get_expected_link("teams")

    # Only present for authenticated access
    @property
    def link_users(self) -> str | None:
        return self.get_link("users")

    @property
    def link_channels(self) -> str | None:
        return self.get_link("channels")

    @property
    def link_chat(self) -> str | None:
        return self.get_link("chat")


# Channels

class Channel(LinkedModel):
    """Channel information.

    Channels are the home location of a user's content: they have a stream,
    store videos and display information and status.
    """

    id: int = Field(alias="_id")
    name: str
    display_name: str
    game: str | None = None
    status: str | None = None
    mature: bool | None = None
    delay: int | None = None
    language: str | None = None
    broadcaster_language: str | None = None
    created_at: datetime
    updated_at: datetime
    logo: str | None = None
    banner: str | None = None
    video_banner: str | None = None
    background: str | None = None
    profile_banner: str | None = None
    profile_banner_background_color: str | None = None
    partner: bool = False
    url: str
    views: int = 0
    followers: int = 0

    @property
    def link_self(self) -> str:
        return self.get_expected_link("self")

    @property
    def link_follows(self) -> str:
        return self.get_expected_link("follows")

    @property
    def link_commercial(self) -> str:
        return self.get_expected_link("commercial")

    @property
    def link_stream_key(self) -> str:
        return self.get_expected_link("stream_key")

    @property
    def link_chat(self) -> str:
        return self.get_expected_link("chat")

    @property
    def link_features(self) -> str:
        return self.get_expected_link("features")

    @property
    def link_subscriptions(self) -> str:
        return self.get_expected_link("subscriptions")

    @property
    def link_editors(self) -> str:
        return self.get_expected_link("editors")

    @property
    def link_teams(self) -> str:
        return self.get_expected_link("teams")

    @property
    def link_videos(self) -> str:
        return self.get_expected_link("videos")


# Streams

class Stream(LinkedModel):
    """A live broadcast of a channel."""

    id: int = Field(alias="_id")
    game: str | None = None
    viewers: int
    average_fps: float
    delay: int | None = None
    video_height: int
    is_playlist: bool = False
    created_at: datetime
    channel: Channel
    preview: ImageLinks


class Streams(PagedModel):
    """Streams sorted by number of viewers, descending."""

    total: int = Field(alias="_total")
    streams: list[Stream] = Field(default_factory=list)

    @property
    def link_featured(self) -> str:
        return self.get_expected_link("featured")

    @property
    def link_summary(self) -> str:
        return self.get_expected_link("summary")

    @property
    def link_followed(self) -> str:
        return self.get_expected_link("followed")


class FeaturedStream(TwitchModel):
    """Featured (promoted) stream."""

    text: str
    image: str
    title: str
    sponsored: bool = False
    priority: int = 0
    scheduled: bool = False
    stream: Stream


class FeaturedStreams(PagedModel):
    """Page of featured streams."""

    featured: list[FeaturedStream] = Field(default_factory=list)


class ChannelStream(LinkedModel):
    """Stream of a specific channel; `stream` is None while offline."""

    stream: Stream | None = None

    @property
    def is_online(self) -> bool:
        return self.stream is not None

    @property
    def link_self(self) -> str:
        return self.get_expected_link("self")

    @property
    def link_channel(self) -> str:
        return self.get_expected_link("channel")


class StreamsSummary(LinkedModel):
    """Summary of current streams."""

    viewers: int
    channels: int

    @property
    def link_self(self) -> str:
        return self.get_expected_link("self")
