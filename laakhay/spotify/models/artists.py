"""Artist objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import ItemType
from .misc import ExternalUrls, Followers, Image


class SimplifiedArtist(BaseModel):
    """Artist as embedded in albums and tracks."""

    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    href: str | None = None
    id: str
    name: str
    type: ItemType = ItemType.ARTIST
    uri: str

    model_config = ConfigDict(frozen=True)


class Artist(SimplifiedArtist):
    """Full artist object."""

    followers: Followers = Field(default_factory=Followers)
    genres: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    popularity: int = Field(0, ge=0, le=100)


class Artists(BaseModel):
    """Several artists; unknown IDs come back as None."""

    artists: list[Artist | None]

    model_config = ConfigDict(frozen=True)
