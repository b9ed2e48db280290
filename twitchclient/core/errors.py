"""Exceptions raised by the Twitch client."""


class TwitchClientError(Exception):
    """Base class for all client errors."""


class TransportError(TwitchClientError):
    """Network, TLS or timeout failure while talking to Twitch."""


class DeserializationError(TwitchClientError):
    """Response body is not valid JSON or does not have the expected shape."""


class HTTPStatusError(TwitchClientError):
    """Twitch answered with a status code other than 200."""

    def __init__(self, message: str, status_code: int, url: str, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


class TwitchServerError(HTTPStatusError):
    """Twitch server error indicated by a 5xx response status."""


class UnauthorizedError(HTTPStatusError):
    """Tried to access a secured resource prior to authentication."""


class NotFoundError(HTTPStatusError):
    """Requested resource does not exist (e.g. unknown channel)."""


class UnexpectedStatusError(HTTPStatusError):
    """Status code the client has no handling for."""


class MissingLinkError(TwitchClientError, KeyError):
    """An expected entry of a response's `_links` object is absent."""

    def __init__(self, key: str, links: dict[str, str], message: str | None = None):
        super().__init__(message or f"Expected links to contain '{key}' but got: {sorted(links)}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
