#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os

from laakhay.spotify import Spotify, paged_with_limit
from laakhay.spotify.endpoints import GetAlbum, GetAlbumTracks
from laakhay.spotify.models import Album, SimplifiedTrack


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print an album and its tracks (client credentials)")
    p.add_argument("album_id", nargs="?", default="4aawyAB9vmqN3uQ7FjRGTy")
    p.add_argument("limit", nargs="?", type=int, default=20)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with Spotify.with_client_credentials(
        os.environ["SPOTIFY_CLIENT_ID"], os.environ["SPOTIFY_CLIENT_SECRET"]
    ) as spotify:
        spotify.request_token()

        album = GetAlbum(id=args.album_id).query(spotify, Album)
        tracks = paged_with_limit(GetAlbumTracks(id=args.album_id), args.limit).query(
            spotify, SimplifiedTrack
        )

    print("=" * 65)
    print(f"Album   : {album.name}")
    print(f"Artists : {', '.join(artist.name for artist in album.artists)}")
    print(f"Tracks  : {album.total_tracks}")
    print("=" * 65)
    for track in tracks:
        minutes, seconds = divmod(track.duration_ms // 1000, 60)
        print(f"{track.track_number:>3}. {track.name:50} {minutes}:{seconds:02d}")
    print("=" * 65)


if __name__ == "__main__":
    main()
