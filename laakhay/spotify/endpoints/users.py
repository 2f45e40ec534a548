"""User profile and personalization endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..api.endpoint import Endpoint, Pageable, declare_endpoint
from ..core.enums import HttpMethod, TimeRange, TopItemType


@declare_endpoint(HttpMethod.GET, "me")
@dataclass(frozen=True)
class GetCurrentUserProfile(Endpoint):
    """Profile of the user owning the token. Decodes into ``CurrentUser``."""


@declare_endpoint(HttpMethod.GET, "me/top/{type}")
@dataclass(frozen=True)
class GetUserTopItems(Endpoint, Pageable):
    """The current user's top artists or tracks.

    Items decode into ``Artist`` or ``Track`` depending on ``type``.
    """

    type: TopItemType
    time_range: TimeRange | None = None
