"""Album objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import AlbumType, ItemType
from .artists import SimplifiedArtist
from .misc import (
    Copyright,
    ExternalIds,
    ExternalUrls,
    Image,
    Page,
    ReleaseDatePrecision,
    Restrictions,
)
from .tracks import SimplifiedTrack


class SimplifiedAlbum(BaseModel):
    """Album as embedded in tracks and artist album listings.

    ``album_group`` is only present in an artist's album listing.
    """

    album_type: AlbumType
    total_tracks: int = Field(0, ge=0)
    available_markets: list[str] = Field(default_factory=list)
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    href: str | None = None
    id: str
    images: list[Image] = Field(default_factory=list)
    name: str
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    restrictions: Restrictions | None = None
    type: ItemType = ItemType.ALBUM
    uri: str
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    album_group: AlbumType | None = None

    model_config = ConfigDict(frozen=True)


class Album(SimplifiedAlbum):
    """Full album object including its first page of tracks."""

    tracks: Page[SimplifiedTrack]
    copyrights: list[Copyright] = Field(default_factory=list)
    external_ids: ExternalIds = Field(default_factory=ExternalIds)
    genres: list[str] = Field(default_factory=list)
    label: str | None = None
    popularity: int = Field(0, ge=0, le=100)


class Albums(BaseModel):
    """Several albums; unknown IDs come back as None."""

    albums: list[Album | None]

    model_config = ConfigDict(frozen=True)


class SavedAlbum(BaseModel):
    """An album in the current user's library."""

    added_at: str
    album: Album

    model_config = ConfigDict(frozen=True)
