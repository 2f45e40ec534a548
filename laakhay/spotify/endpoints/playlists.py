"""Playlist endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..api.endpoint import Endpoint, Pageable, declare_endpoint
from ..core.enums import HttpMethod, Market


@declare_endpoint(HttpMethod.POST, "playlists/{id}/tracks")
@dataclass(frozen=True)
class AddItemsToPlaylist(Endpoint):
    """Add track or episode URIs to a playlist. Decodes into ``SnapshotId``."""

    id: str
    uris: list[str]
    position: int | None = None


@declare_endpoint(HttpMethod.GET, "playlists/{id}/tracks")
@dataclass(frozen=True)
class GetPlaylistItems(Endpoint, Pageable):
    """Items of a playlist. Items decode into ``PlaylistTrack``."""

    id: str
    market: Market | None = None
    fields: str | None = None
    additional_types: list[str] | None = None
