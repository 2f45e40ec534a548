"""Web API data models.

Architecture:
    Pydantic v2 models used as deserialization targets for ``Endpoint.query``
    and the paging engine. All models are immutable (frozen=True). Unknown
    response fields are ignored, so the models keep working as the Web API
    adds fields.

Design Decisions:
    - ``Page[T]`` is generic: ``Page[SimplifiedTrack]`` validates the items
    - Simplified objects are base classes of the full objects
    - Any model is optional: ``into=Any`` returns the raw JSON value

Model Categories:
    - Shared: Image, ExternalUrls, ExternalIds, Followers, Copyright, Page
    - Catalog: Album, Artist, Track and their simplified/saved variants
    - Users: User, CurrentUser
    - Playlists: PlaylistTrack, SnapshotId
    - Auth: Token
"""

from .albums import Album, Albums, SavedAlbum, SimplifiedAlbum
from .artists import Artist, Artists, SimplifiedArtist
from .misc import (
    Copyright,
    CopyrightType,
    Cursors,
    ExternalIds,
    ExternalUrls,
    Followers,
    Image,
    Page,
    ReleaseDatePrecision,
    Restrictions,
    SnapshotId,
)
from .playlists import PlaylistTrack
from .token import Token
from .tracks import LinkedFrom, SavedTrack, SimplifiedTrack, Track, Tracks
from .users import CurrentUser, ExplicitContent, User

# Track.album refers to SimplifiedAlbum, defined after the tracks module
Track.model_rebuild(_types_namespace={"SimplifiedAlbum": SimplifiedAlbum})
for _model in (SavedTrack, Tracks, PlaylistTrack):
    _model.model_rebuild(_types_namespace={"SimplifiedAlbum": SimplifiedAlbum})
del _model

__all__ = [
    "Album",
    "Albums",
    "Artist",
    "Artists",
    "Copyright",
    "CopyrightType",
    "CurrentUser",
    "Cursors",
    "ExplicitContent",
    "ExternalIds",
    "ExternalUrls",
    "Followers",
    "Image",
    "LinkedFrom",
    "Page",
    "PlaylistTrack",
    "ReleaseDatePrecision",
    "Restrictions",
    "SavedAlbum",
    "SavedTrack",
    "SimplifiedAlbum",
    "SimplifiedArtist",
    "SimplifiedTrack",
    "SnapshotId",
    "Token",
    "Track",
    "Tracks",
]
