"""Album endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..api.endpoint import Endpoint, Pageable, declare_endpoint
from ..api.params import JsonParams
from ..core.enums import HttpMethod, Market


@declare_endpoint(HttpMethod.GET, "albums/{id}")
@dataclass(frozen=True)
class GetAlbum(Endpoint):
    """Catalog information for a single album. Decodes into ``Album``."""

    id: str
    market: Market | None = None


@declare_endpoint(HttpMethod.GET, "albums")
@dataclass(frozen=True)
class GetSeveralAlbums(Endpoint):
    """Several albums by ID (at most 20). Decodes into ``Albums``."""

    ids: list[str]
    market: Market | None = None


@declare_endpoint(HttpMethod.GET, "albums/{id}/tracks")
@dataclass(frozen=True)
class GetAlbumTracks(Endpoint, Pageable):
    """Tracks of an album. Items decode into ``SimplifiedTrack``."""

    id: str
    market: Market | None = None


@declare_endpoint(HttpMethod.GET, "me/albums")
@dataclass(frozen=True)
class GetUserSavedAlbums(Endpoint, Pageable):
    """Albums saved in the current user's library. Items decode into ``SavedAlbum``."""

    market: Market | None = None


@dataclass(frozen=True)
class SaveAlbumsForCurrentUser(Endpoint):
    """Save albums to the current user's library."""

    ids: list[str]

    def method(self) -> HttpMethod:
        return HttpMethod.PUT

    def path(self) -> str:
        return "me/albums"

    def body(self) -> tuple[str, bytes] | None:
        return JsonParams.into_body({"ids": list(self.ids)})


@dataclass(frozen=True)
class RemoveUserSavedAlbums(Endpoint):
    """Remove albums from the current user's library."""

    ids: list[str]

    def method(self) -> HttpMethod:
        return HttpMethod.DELETE

    def path(self) -> str:
        return "me/albums"

    def body(self) -> tuple[str, bytes] | None:
        return JsonParams.into_body({"ids": list(self.ids)})


@declare_endpoint(HttpMethod.GET, "me/albums/contains")
@dataclass(frozen=True)
class CheckUserSavedAlbums(Endpoint):
    """Whether albums are saved in the library. Decodes into ``list[bool]``."""

    ids: list[str]
