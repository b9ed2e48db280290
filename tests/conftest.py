"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from twitchclient.config.settings import APIConfig, TwitchConfig

BASE = "https://api.twitch.tv/kraken"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config():
    """Create a test configuration with a client id."""
    return TwitchConfig(api=APIConfig(client_id="test-client-id"))


def image_links(prefix: str) -> dict:
    return {
        "large": f"{prefix}-640x360.jpg",
        "medium": f"{prefix}-320x180.jpg",
        "small": f"{prefix}-80x45.jpg",
        "template": f"{prefix}-{{width}}x{{height}}.jpg",
    }


@pytest.fixture
def channel_json():
    """Channel body as returned by /channels/test_channel."""
    return {
        "mature": False,
        "status": "test status",
        "broadcaster_language": "en",
        "display_name": "test_channel",
        "game": "Gaming Talk Shows",
        "delay": None,
        "language": "en",
        "_id": 12345,
        "name": "test_channel",
        "created_at": "2007-05-22T10:39:54Z",
        "updated_at": "2015-02-12T04:15:49Z",
        "logo": "http://static-cdn.jtvnw.net/jtv_user_pictures/test_channel-profile_image-300x300.jpeg",
        "banner": None,
        "video_banner": None,
        "background": None,
        "profile_banner": None,
        "profile_banner_background_color": "null",
        "partner": True,
        "url": "https://secure.twitch.tv/test_channel",
        "views": 49144894,
        "followers": 215780,
        "_links": {
            "self": f"{BASE}/channels/test_channel",
            "follows": f"{BASE}/channels/test_channel/follows",
            "commercial": f"{BASE}/channels/test_channel/commercial",
            "stream_key": f"{BASE}/channels/test_channel/stream_key",
            "chat": f"{BASE}/chat/test_channel",
            "features": f"{BASE}/channels/test_channel/features",
            "subscriptions": f"{BASE}/channels/test_channel/subscriptions",
            "editors": f"{BASE}/channels/test_channel/editors",
            "teams": f"{BASE}/channels/test_channel/teams",
            "videos": f"{BASE}/channels/test_channel/videos",
        },
    }


@pytest.fixture
def stream_json(channel_json):
    """Single live stream body."""
    return {
        "game": "StarCraft II: Heart of the Swarm",
        "viewers": 2123,
        "average_fps": 29.9880749574,
        "delay": 0,
        "video_height": 720,
        "is_playlist": False,
        "created_at": "2015-02-12T04:42:31Z",
        "_id": 4989654544,
        "channel": channel_json,
        "preview": image_links("http://static-cdn.jtvnw.net/previews-ttv/live_user_test_channel"),
        "_links": {"self": f"{BASE}/streams/test_channel"},
    }


@pytest.fixture
def game_info_json():
    """Entry of the top games list."""
    return {
        "game": {
            "name": "Counter-Strike: Global Offensive",
            "box": image_links("http://static-cdn.jtvnw.net/ttv-boxart/Counter-Strike:%20Global%20Offensive"),
            "logo": image_links("http://static-cdn.jtvnw.net/ttv-logoart/Counter-Strike:%20Global%20Offensive"),
            "_links": {},
            "_id": 32399,
            "giantbomb_id": 36113,
        },
        "viewers": 23873,
        "channels": 305,
    }


@pytest.fixture
def top_games_json(game_info_json):
    """Body of /games/top?limit=2&offset=0."""
    return {
        "_links": {
            "self": f"{BASE}/games/top?limit=2&offset=0",
            "next": f"{BASE}/games/top?limit=2&offset=2",
        },
        "_total": 322,
        "top": [game_info_json, game_info_json],
    }


@pytest.fixture
def ingests_json():
    """Body of /ingests."""
    return {
        "_links": {"self": f"{BASE}/ingests"},
        "ingests": [
            {
                "name": "EU: Amsterdam, NL",
                "default": False,
                "_id": 24,
                "url_template": "rtmp://live-ams.twitch.tv/app/{stream_key}",
                "availability": 1.0,
            },
            {
                "name": "US West: San Francisco, CA",
                "default": True,
                "_id": 25,
                "url_template": "rtmp://live.twitch.tv/app/{stream_key}",
                "availability": 0.5,
            },
        ],
    }


@pytest.fixture
def basic_info_json():
    """Body of / for unauthenticated access."""
    return {
        "token": {"valid": False, "authorization": None},
        "_links": {
            "user": f"{BASE}/user",
            "channel": f"{BASE}/channel",
            "search": f"{BASE}/search",
            "streams": f"{BASE}/streams",
            "ingests": f"{BASE}/ingests",
            "teams": f"{BASE}/teams",
        },
    }


@pytest.fixture
def streams_json(stream_json):
    """Body of /streams?limit=2&offset=0&stream_type=live."""
    return {
        "_total": 12345,
        "streams": [stream_json, stream_json],
        "_links": {
            "summary": f"{BASE}/streams/summary",
            "followed": f"{BASE}/streams/followed",
            "next": f"{BASE}/streams?limit=2&offset=2&stream_type=live",
            "featured": f"{BASE}/streams/featured",
            "self": f"{BASE}/streams?limit=2&offset=0&stream_type=live",
        },
    }


@pytest.fixture
def featured_streams_json(stream_json):
    """Body of /streams/featured."""
    return {
        "_links": {
            "self": f"{BASE}/streams/featured?limit=25&offset=0",
            "next": f"{BASE}/streams/featured?limit=25&offset=25",
        },
        "featured": [
            {
                "image": "http://s.jtvnw.net/jtv_user_pictures/hosted_images/TwitchPartnerSpotlight.png",
                "text": "<p>some html to describe this featured stream</p>",
                "title": "Twitch Partner Spotlight",
                "sponsored": False,
                "priority": 3,
                "scheduled": True,
                "stream": stream_json,
            }
        ],
    }


@pytest.fixture
def summary_json():
    """Body of /streams/summary."""
    return {
        "viewers": 194774,
        "channels": 4144,
        "_links": {"self": f"{BASE}/streams/summary"},
    }


@pytest.fixture
def offline_stream_json():
    """Body of /streams/test_channel while offline."""
    return {
        "stream": None,
        "_links": {
            "self": f"{BASE}/streams/test_channel",
            "channel": f"{BASE}/channels/test_channel",
        },
    }
