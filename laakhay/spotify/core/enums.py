"""Core enumerations and value types shared by endpoints and models.

Architecture:
    String enums carry the exact textual form the Web API expects, so a
    value can be pushed into a query string or JSON body without a
    separate mapping table.

Key Types:
    - HttpMethod: Request methods used by endpoints
    - UrlBase: Which API prefix an endpoint is resolved against
    - ItemType / AlbumType / TimeRange / TopItemType: Domain enums
    - Market: ISO 3166-1 alpha-2 market code (or "from_token")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import UnsupportedUrlBaseError

if TYPE_CHECKING:
    from ..runtime.rest.client import RestClient


class HttpMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value

    @property
    def sends_content_length(self) -> bool:
        """Whether requests with this method carry a Content-Length header."""
        return self in (HttpMethod.POST, HttpMethod.PUT)


class UrlBase(str, Enum):
    """URL bases for endpoints."""

    API_V1 = "api_v1"

    def endpoint_for(self, client: RestClient, endpoint: str) -> str:
        """Resolve an endpoint path into an absolute URL using the client.

        Raises:
            UnsupportedUrlBaseError: If the base has no resolution rule
        """
        if self is UrlBase.API_V1:
            return client.rest_endpoint(endpoint)
        raise UnsupportedUrlBaseError(self)


class ItemType(str, Enum):
    """Object types returned by the Web API."""

    USER = "user"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"
    AUDIOBOOK = "audiobook"
    CHAPTER = "chapter"
    COLLECTION = "collection"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class AlbumType(str, Enum):
    """Album groups, also used to filter an artist's albums."""

    ALBUM = "album"
    SINGLE = "single"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"

    def __str__(self) -> str:
        return self.value


class TimeRange(str, Enum):
    """Time frame over which a user's top items are computed."""

    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"

    def __str__(self) -> str:
        return self.value


class TopItemType(str, Enum):
    """Kind of entity returned by the top items endpoint."""

    ARTISTS = "artists"
    TRACKS = "tracks"

    def __str__(self) -> str:
        return self.value


_MARKET_CODE = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True)
class Market:
    """A market (country) code.

    The canonical textual form is the two-letter ISO 3166-1 alpha-2 code,
    or ``from_token`` to let the API use the country of the user's account.
    """

    code: str

    FROM_TOKEN_CODE = "from_token"

    def __post_init__(self) -> None:
        code = self.code.strip()
        if code.lower() == self.FROM_TOKEN_CODE:
            object.__setattr__(self, "code", self.FROM_TOKEN_CODE)
            return
        code = code.upper()
        if not _MARKET_CODE.match(code):
            raise ValueError(f"Invalid market code: {self.code!r}")
        object.__setattr__(self, "code", code)

    @classmethod
    def from_token(cls) -> Market:
        return cls(cls.FROM_TOKEN_CODE)

    def __str__(self) -> str:
        return self.code
