"""Authorization scopes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Scope(str, Enum):
    """Permission a user grants to the application."""

    UGC_IMAGE_UPLOAD = "ugc-image-upload"
    USER_READ_PLAYBACK_STATE = "user-read-playback-state"
    USER_MODIFY_PLAYBACK_STATE = "user-modify-playback-state"
    USER_READ_CURRENTLY_PLAYING = "user-read-currently-playing"
    STREAMING = "streaming"
    PLAYLIST_READ_PRIVATE = "playlist-read-private"
    PLAYLIST_READ_COLLABORATIVE = "playlist-read-collaborative"
    PLAYLIST_MODIFY_PRIVATE = "playlist-modify-private"
    PLAYLIST_MODIFY_PUBLIC = "playlist-modify-public"
    USER_FOLLOW_MODIFY = "user-follow-modify"
    USER_FOLLOW_READ = "user-follow-read"
    USER_READ_PLAYBACK_POSITION = "user-read-playback-position"
    USER_TOP_READ = "user-top-read"
    USER_READ_RECENTLY_PLAYED = "user-read-recently-played"
    USER_LIBRARY_MODIFY = "user-library-modify"
    USER_LIBRARY_READ = "user-library-read"
    USER_READ_EMAIL = "user-read-email"
    USER_READ_PRIVATE = "user-read-private"

    def __str__(self) -> str:
        return self.value


def playlist() -> set[Scope]:
    """Read and modify public, private and collaborative playlists."""
    return playlist_read() | playlist_modify()


def playlist_read() -> set[Scope]:
    return {Scope.PLAYLIST_READ_PRIVATE, Scope.PLAYLIST_READ_COLLABORATIVE}


def playlist_modify() -> set[Scope]:
    return {Scope.PLAYLIST_MODIFY_PUBLIC, Scope.PLAYLIST_MODIFY_PRIVATE}


def user_details() -> set[Scope]:
    return {Scope.USER_READ_PRIVATE, Scope.USER_READ_EMAIL}


def user_library() -> set[Scope]:
    return {Scope.USER_LIBRARY_READ, Scope.USER_LIBRARY_MODIFY}


def user_recents() -> set[Scope]:
    return {Scope.USER_TOP_READ, Scope.USER_READ_RECENTLY_PLAYED}


def user_follow() -> set[Scope]:
    return {Scope.USER_FOLLOW_READ, Scope.USER_FOLLOW_MODIFY}


def user_playback() -> set[Scope]:
    return {
        Scope.USER_READ_PLAYBACK_POSITION,
        Scope.USER_READ_PLAYBACK_STATE,
        Scope.USER_READ_CURRENTLY_PLAYING,
        Scope.USER_MODIFY_PLAYBACK_STATE,
        Scope.STREAMING,
    }


def all_scopes() -> set[Scope]:
    return set(Scope)


def scopes_to_string(scopes: Iterable[Scope | str]) -> str:
    """Space separated ``scope`` parameter value, sorted for stable URLs."""
    return " ".join(sorted({Scope(scope).value for scope in scopes}))
