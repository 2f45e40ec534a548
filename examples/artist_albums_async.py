#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from laakhay.spotify import Spotify, paged
from laakhay.spotify.api import Pagination
from laakhay.spotify.core import AlbumType
from laakhay.spotify.endpoints import GetArtistAlbums
from laakhay.spotify.models import SimplifiedAlbum


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream an artist's albums page by page")
    p.add_argument("artist_id", nargs="?", default="0TnOYISbd1XYRBk9myaseg")
    p.add_argument("--limit", type=int, default=None, help="stop after this many albums")
    p.add_argument("--singles", action="store_true", help="include singles")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    groups = [AlbumType.ALBUM, AlbumType.SINGLE] if args.singles else [AlbumType.ALBUM]
    pagination = Pagination.all() if args.limit is None else Pagination.with_limit(args.limit)

    async with Spotify.with_client_credentials(
        os.environ["SPOTIFY_CLIENT_ID"], os.environ["SPOTIFY_CLIENT_SECRET"]
    ) as spotify:
        await spotify.request_token_async()

        session = paged(GetArtistAlbums(id=args.artist_id, include_groups=groups), pagination)
        iterator = session.iter(spotify, SimplifiedAlbum)
        async for album in iterator:
            print(f"{album.release_date or '?':12} {album.album_type.value:12} {album.name}")
        print(f"-- {iterator.items_yielded} albums in {iterator.pages_fetched} pages")


if __name__ == "__main__":
    asyncio.run(main())
