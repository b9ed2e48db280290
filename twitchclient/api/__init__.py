"""Twitch API client layer."""

from .client import TwitchClient
from .http import TwitchHttpClient

__all__ = ["TwitchClient", "TwitchHttpClient"]
