"""Server-side vote validation.

A ``Ballot`` is what the vote endpoint stores: a validated query, a
normalized http(s) URL with its registrable domain, a vote of exactly +1 or
-1 and the day it was cast.
"""

from __future__ import annotations

import datetime
from typing import Self
from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict
import tldextract


# Bundled list snapshot only; no fetch or disk cache at runtime
_suffix_extractor = tldextract.TLDExtract(
    cache_dir=None,
    suffix_list_urls=(),
    include_psl_private_domains=True,
)


class BallotError(ValueError):
    """Base class for ballot validation failures."""


class InvalidQueryError(BallotError):
    def __init__(self) -> None:
        super().__init__("invalid query")


class InvalidURLError(BallotError):
    def __init__(self) -> None:
        super().__init__("invalid url")


class InvalidVoteError(BallotError):
    def __init__(self) -> None:
        super().__init__("invalid vote; must be -1 or 1")


def normalize_url(link: str) -> str:
    """Drop the fragment and lowercase the host of an http(s) URL.

    Raises:
        InvalidURLError: if the URL has another scheme or no host.
    """
    try:
        parts = urlsplit(link)
        # Accessing .port validates it
        _ = parts.port
    except ValueError as exc:
        raise InvalidURLError() from exc

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidURLError()

    # Only host and port are case-insensitive; userinfo is kept as sent
    userinfo, _, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}@{hostport.lower()}" if userinfo else hostport.lower()
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, ""))


def extract_domain(url: str) -> str:
    """Registrable domain of ``url`` (public suffix plus one label).

    "https://news.bbc.co.uk/x" gives "bbc.co.uk". Private suffixes from the
    public suffix list count as suffixes too.

    Raises:
        InvalidURLError: if the host is an IP address, a bare suffix or has no
            known public suffix.
    """
    host = urlsplit(url).hostname or ""
    parts = _suffix_extractor(host)
    if not parts.domain or not parts.suffix:
        raise InvalidURLError()
    return f"{parts.domain}.{parts.suffix}"


class Ballot(BaseModel):
    """A single validated vote as stored by the backend."""

    model_config = ConfigDict(frozen=True)

    query: str
    url: str
    domain: str
    value: int
    date: str

    @classmethod
    def create(cls, query: str, url: str, value: int, *, today: datetime.date | None = None) -> Self:
        """Validate raw vote fields and build a ballot.

        Raises:
            InvalidQueryError: empty query.
            InvalidURLError: URL is not an absolute http(s) URL with a domain.
            InvalidVoteError: value is not +1 or -1.
        """
        if not query:
            raise InvalidQueryError()

        normalized = normalize_url(url)
        domain = extract_domain(normalized)

        if value not in (-1, 1):
            raise InvalidVoteError()

        day = today or datetime.date.today()
        return cls(query=query, url=normalized, domain=domain, value=value, date=day.strftime("%Y%m%d"))


class VoteTally(BaseModel):
    """Vote total for one URL."""

    model_config = ConfigDict(frozen=True)

    url: str
    votes: int
