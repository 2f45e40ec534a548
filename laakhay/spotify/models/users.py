"""User profile objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import ItemType
from .misc import ExternalUrls, Followers, Image


class ExplicitContent(BaseModel):
    filter_enabled: bool = False
    filter_locked: bool = False

    model_config = ConfigDict(frozen=True)


class User(BaseModel):
    """Public user profile."""

    display_name: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    followers: Followers | None = None
    href: str | None = None
    id: str
    images: list[Image] = Field(default_factory=list)
    type: ItemType = ItemType.USER
    uri: str

    model_config = ConfigDict(frozen=True)


class CurrentUser(User):
    """Profile of the user owning the access token.

    ``country``, ``email``, ``product`` and ``explicit_content`` are only
    present with the matching ``user-read-*`` scopes.
    """

    country: str | None = None
    email: str | None = None
    explicit_content: ExplicitContent | None = None
    product: str | None = None
