"""Shared Spotify Web API constants.

This module centralizes URLs, timeouts and protocol limits used by the
transports, the auth flows and the pagination engine so those modules can
stay small and focused.
"""

from __future__ import annotations

# REST base URL. Endpoint paths are resolved relative to it, so the
# trailing slash is significant.
BASE_API_URL = "https://api.spotify.com/v1/"

# Accounts service URLs used by the OAuth flows
AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
TOKEN_URL = "https://accounts.spotify.com/api/token"

# Transport defaults (seconds)
DEFAULT_TIMEOUT = 10.0

# Largest page size the Web API accepts for offset-paginated resources
MAX_PAGE_LIMIT = 50

# Tokens are treated as expired this many seconds before `expires_at`
TOKEN_EXPIRY_MARGIN_SECONDS = 10

# PKCE parameters
CODE_VERIFIER_LENGTH = 128
STATE_LENGTH = 16

USER_AGENT = "laakhay-spotify"
