"""Artist endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..api.endpoint import Endpoint, Pageable, declare_endpoint
from ..api.params import QueryParams
from ..core.enums import AlbumType, HttpMethod, Market


@declare_endpoint(HttpMethod.GET, "artists/{id}")
@dataclass(frozen=True)
class GetArtist(Endpoint):
    """Catalog information for a single artist. Decodes into ``Artist``."""

    id: str


@declare_endpoint(HttpMethod.GET, "artists/{id}/albums")
@dataclass(frozen=True)
class GetArtistAlbums(Endpoint, Pageable):
    """An artist's albums. Items decode into ``SimplifiedAlbum``.

    ``include_groups`` filters by album group; duplicates are sent once, in
    the order given.
    """

    id: str
    include_groups: list[AlbumType] | None = None
    market: Market | None = None

    def parameters(self) -> QueryParams:
        params = QueryParams()
        if self.include_groups:
            groups = list(dict.fromkeys(AlbumType(group) for group in self.include_groups))
            params.push("include_groups", groups)
        params.push_opt("market", self.market)
        return params
