"""Playlist item objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .tracks import Track
from .users import User


class PlaylistTrack(BaseModel):
    """An entry of a playlist.

    ``track`` is None when the item is no longer available.
    """

    added_at: str | None = None
    added_by: User | None = None
    is_local: bool = False
    track: Track | None = None

    model_config = ConfigDict(frozen=True)
