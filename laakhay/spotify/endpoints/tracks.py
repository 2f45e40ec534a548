"""Track endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..api.endpoint import Endpoint, declare_endpoint
from ..core.enums import HttpMethod, Market


@declare_endpoint(HttpMethod.GET, "tracks/{id}")
@dataclass(frozen=True)
class GetTrack(Endpoint):
    """Catalog information for a single track. Decodes into ``Track``."""

    id: str
    market: Market | None = None
