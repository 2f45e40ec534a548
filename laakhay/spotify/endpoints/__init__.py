"""Endpoint definitions, grouped like the Web API reference."""

from .albums import (
    CheckUserSavedAlbums,
    GetAlbum,
    GetAlbumTracks,
    GetSeveralAlbums,
    GetUserSavedAlbums,
    RemoveUserSavedAlbums,
    SaveAlbumsForCurrentUser,
)
from .artists import GetArtist, GetArtistAlbums
from .player import PausePlayback, SeekToPosition, SetPlaybackVolume, StartPlayback
from .playlists import AddItemsToPlaylist, GetPlaylistItems
from .tracks import GetTrack
from .users import GetCurrentUserProfile, GetUserTopItems

__all__ = [
    "AddItemsToPlaylist",
    "CheckUserSavedAlbums",
    "GetAlbum",
    "GetAlbumTracks",
    "GetArtist",
    "GetArtistAlbums",
    "GetCurrentUserProfile",
    "GetPlaylistItems",
    "GetSeveralAlbums",
    "GetTrack",
    "GetUserSavedAlbums",
    "GetUserTopItems",
    "PausePlayback",
    "RemoveUserSavedAlbums",
    "SaveAlbumsForCurrentUser",
    "SeekToPosition",
    "SetPlaybackVolume",
    "StartPlayback",
]
