"""Track objects.

``Track.album`` refers to ``SimplifiedAlbum``, which itself lives next to
the album objects that embed simplified tracks; the forward reference is
resolved in the package ``__init__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import ItemType
from .artists import SimplifiedArtist
from .misc import ExternalIds, ExternalUrls, Restrictions

if TYPE_CHECKING:
    from .albums import SimplifiedAlbum


class LinkedFrom(BaseModel):
    """The originally requested track when track relinking applied."""

    external_urls: ExternalUrls | None = None
    href: str | None = None
    id: str | None = None
    type: ItemType | None = None
    uri: str | None = None

    model_config = ConfigDict(frozen=True)


class SimplifiedTrack(BaseModel):
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int = 1
    duration_ms: int = Field(..., ge=0)
    explicit: bool = False
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    href: str | None = None
    id: str | None = None
    is_playable: bool | None = None
    linked_from: LinkedFrom | None = None
    restrictions: Restrictions | None = None
    name: str
    preview_url: str | None = None
    track_number: int = 1
    type: ItemType = ItemType.TRACK
    uri: str
    is_local: bool = False

    model_config = ConfigDict(frozen=True)


class Track(SimplifiedTrack):
    """Full track object."""

    album: SimplifiedAlbum
    external_ids: ExternalIds = Field(default_factory=ExternalIds)
    popularity: int = Field(0, ge=0, le=100)


class SavedTrack(BaseModel):
    """A track in the current user's library."""

    added_at: str
    track: Track

    model_config = ConfigDict(frozen=True)


class Tracks(BaseModel):
    tracks: list[Track | None]

    model_config = ConfigDict(frozen=True)
