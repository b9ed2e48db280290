"""Pagination info parsed from Twitch page links."""

import re
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from .params import MAX_LIMIT

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Paging:
    """Offset and limit of a page of results."""

    offset: int | None = None
    limit: int | None = None

    @property
    def is_default(self) -> bool:
        """True when no limit is set, i.e. Twitch picks the page size."""
        return self.limit is None

    @classmethod
    def from_url(cls, url: str) -> "Paging | None":
        """Parse `limit` and `offset` from the query of a page link.

        Returns None if the link carries no limit in 1..MAX_LIMIT. A missing
        or unparseable offset is reported as 0, which is what Twitch assumes.
        When a key repeats, the last value counts.
        """
        query = parse_qs(urlsplit(url).query)

        limit = _last_int(query, "limit")
        if limit is None or not 1 <= limit <= MAX_LIMIT:
            return None

        offset = _last_int(query, "offset")
        return cls(offset=offset if offset is not None else 0, limit=limit)


def _last_int(query: dict[str, list[str]], key: str) -> int | None:
    """Last value of `key` if it is a plain unsigned decimal number."""
    values = query.get(key)
    if not values or not _DIGITS.fullmatch(values[-1]):
        return None
    return int(values[-1])
