"""Shared Web API objects and the generic ``Page`` envelope."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Image(BaseModel):
    """Cover art or profile image."""

    url: str
    height: int | None = None
    width: int | None = None

    model_config = ConfigDict(frozen=True)


class ExternalUrls(BaseModel):
    spotify: str | None = None

    model_config = ConfigDict(frozen=True)


class ExternalIds(BaseModel):
    """Known external identifiers (ISRC, EAN, UPC)."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None

    model_config = ConfigDict(frozen=True)


class Followers(BaseModel):
    href: str | None = None
    total: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)


class ReleaseDatePrecision(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class Restrictions(BaseModel):
    """Why content is restricted (``market``, ``product`` or ``explicit``)."""

    reason: str

    model_config = ConfigDict(frozen=True)


class CopyrightType(str, Enum):
    COPYRIGHT = "C"
    PERFORMANCE = "P"


class Copyright(BaseModel):
    text: str
    type: CopyrightType

    model_config = ConfigDict(frozen=True)


class Cursors(BaseModel):
    """Cursors used by cursor-based (not offset) paging."""

    after: str | None = None
    before: str | None = None

    model_config = ConfigDict(frozen=True)


class Page(BaseModel, Generic[T]):
    """One page of an offset-paginated resource.

    ``next`` and ``previous`` are fully qualified URLs, or None at either
    end of the collection.
    """

    href: str
    limit: int = Field(..., ge=0)
    next: str | None = None
    offset: int = Field(..., ge=0)
    previous: str | None = None
    total: int = Field(..., ge=0)
    items: list[T]

    model_config = ConfigDict(frozen=True)


class SnapshotId(BaseModel):
    """Playlist version identifier returned by playlist mutations."""

    snapshot_id: str

    model_config = ConfigDict(frozen=True)
