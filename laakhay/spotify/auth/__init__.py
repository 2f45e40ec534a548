"""OAuth flows.

    Flow                            User resources   Client secret   Refresh
    Authorization code with PKCE    yes              no              yes
    Client credentials              no               yes             no
"""

from . import scopes
from .base import AuthFlow, parse_token, token_request
from .client_credentials import ClientCredentials
from .pkce import AuthCodePKCE, generate_code_challenge, generate_code_verifier
from .scopes import Scope, scopes_to_string

__all__ = [
    "AuthCodePKCE",
    "AuthFlow",
    "ClientCredentials",
    "Scope",
    "generate_code_challenge",
    "generate_code_verifier",
    "parse_token",
    "scopes",
    "scopes_to_string",
    "token_request",
]
