"""Playback control endpoints.

All of them need the ``user-modify-playback-state`` scope and return no
useful body: dispatch them through ``ignore()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..api.endpoint import Endpoint, declare_endpoint
from ..api.params import JsonParams, QueryParams
from ..core.enums import HttpMethod


@declare_endpoint(HttpMethod.PUT, "me/player/pause")
@dataclass(frozen=True)
class PausePlayback(Endpoint):
    device_id: str | None = None


@declare_endpoint(HttpMethod.PUT, "me/player/seek")
@dataclass(frozen=True)
class SeekToPosition(Endpoint):
    """Seek within the current track."""

    position_ms: int
    device_id: str | None = None

    def __post_init__(self) -> None:
        if self.position_ms < 0:
            raise ValueError("position_ms must be non-negative")


@declare_endpoint(HttpMethod.PUT, "me/player/volume")
@dataclass(frozen=True)
class SetPlaybackVolume(Endpoint):
    volume_percent: int
    device_id: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.volume_percent <= 100:
            raise ValueError("volume_percent must be between 0 and 100")


@dataclass(frozen=True)
class StartPlayback(Endpoint):
    """Start a new context or resume playback.

    ``offset`` is either a position (int) in the context or the URI of the
    item to start with. Without any field set the request has no body and
    resumes the current playback.
    """

    device_id: str | None = None
    context_uri: str | None = None
    uris: list[str] = field(default_factory=list)
    offset: int | str | None = None
    position_ms: int | None = None

    def method(self) -> HttpMethod:
        return HttpMethod.PUT

    def path(self) -> str:
        return "me/player/play"

    def parameters(self) -> QueryParams:
        return QueryParams().push_opt("device_id", self.device_id)

    def body(self) -> tuple[str, bytes] | None:
        body: dict[str, Any] = {}
        if self.context_uri is not None:
            body["context_uri"] = self.context_uri
        if self.uris:
            body["uris"] = list(self.uris)
        if self.offset is not None:
            key = "position" if isinstance(self.offset, int) else "uri"
            body["offset"] = {key: self.offset}
        if self.position_ms is not None:
            body["position_ms"] = self.position_ms
        if not body:
            return None
        return JsonParams.into_body(body)
