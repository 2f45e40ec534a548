#!/usr/bin/env python3
"""Authorize a user with PKCE and print their top tracks.

The redirect URI must be registered for the application. After granting
access, paste the URL the browser was redirected to.
"""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path

from laakhay.spotify import Spotify, paged_with_limit
from laakhay.spotify.auth import Scope
from laakhay.spotify.core import TimeRange, TopItemType
from laakhay.spotify.endpoints import GetCurrentUserProfile, GetUserTopItems
from laakhay.spotify.models import CurrentUser, Token, Track


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the current user's top tracks")
    p.add_argument("--redirect-uri", default="http://localhost:8888/callback")
    p.add_argument("--time-range", default="MEDIUM_TERM", choices=[t.name for t in TimeRange])
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--token-file", type=Path, default=Path(".spotify-token.json"))
    return p.parse_args()


def main() -> None:
    args = parse_args()
    spotify = Spotify.with_authorization_code_pkce(
        os.environ["SPOTIFY_CLIENT_ID"],
        args.redirect_uri,
        [Scope.USER_TOP_READ, Scope.USER_READ_PRIVATE],
    )
    spotify.on_token_refresh(lambda token: args.token_file.write_text(token.model_dump_json()))

    if args.token_file.exists():
        spotify.set_token(Token.model_validate(json.loads(args.token_file.read_text())))
    else:
        print(f"Open this URL and authorize the application:\n\n{spotify.user_authorization_url()}\n")
        spotify.request_token_from_redirect_url(input("Redirected URL: ").strip())
        args.token_file.write_text(spotify.token.model_dump_json())

    with spotify:
        user = GetCurrentUserProfile().query(spotify, CurrentUser)
        endpoint = GetUserTopItems(type=TopItemType.TRACKS, time_range=TimeRange[args.time_range])
        tracks = paged_with_limit(endpoint, args.limit).query(spotify, Track)

    print(f"Top tracks for {user.display_name or user.id}:")
    for position, track in enumerate(tracks, start=1):
        print(f"{position:>3}. {track.name} - {track.album.name}")


if __name__ == "__main__":
    main()
