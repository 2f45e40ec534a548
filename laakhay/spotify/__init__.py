"""Laakhay Spotify - Typed client for the Spotify Web API."""

from .api import (
    MAX_LIMIT,
    Endpoint,
    FormParams,
    Ignore,
    JsonParams,
    LazilyPagedIter,
    Pageable,
    Paged,
    Pagination,
    QueryParams,
    declare_endpoint,
    ignore,
    paged,
    paged_all,
    paged_with_limit,
    paged_with_limit_and_offset,
    path_escaped,
)
from .auth import AuthCodePKCE, AuthFlow, ClientCredentials, Scope, scopes
from .core import (
    AlbumType,
    ApiError,
    AuthError,
    BodyError,
    ClientError,
    DataTypeError,
    HttpMethod,
    ItemType,
    Market,
    MovedPermanentlyError,
    ServiceError,
    ServiceMessageError,
    ServiceObjectError,
    SpotifyError,
    TimeRange,
    TopItemType,
    UnrecognizedServiceError,
    UrlBase,
    UrlParseError,
)
from .models import Page, Token
from .runtime import AsyncClient, Client, HttpRequest, HttpResponse, RestClient
from .spotify import Spotify

__version__ = "0.1.0"

__all__ = [
    # Client
    "Spotify",
    # Transport contract
    "AsyncClient",
    "Client",
    "HttpRequest",
    "HttpResponse",
    "RestClient",
    # Endpoints and dispatch
    "Endpoint",
    "Pageable",
    "declare_endpoint",
    "Ignore",
    "ignore",
    "FormParams",
    "JsonParams",
    "QueryParams",
    "path_escaped",
    # Pagination
    "MAX_LIMIT",
    "LazilyPagedIter",
    "Paged",
    "Pagination",
    "paged",
    "paged_all",
    "paged_with_limit",
    "paged_with_limit_and_offset",
    # Auth
    "AuthCodePKCE",
    "AuthFlow",
    "ClientCredentials",
    "Scope",
    "scopes",
    # Models
    "Page",
    "Token",
    # Enums
    "AlbumType",
    "HttpMethod",
    "ItemType",
    "Market",
    "TimeRange",
    "TopItemType",
    "UrlBase",
    # Exceptions
    "ApiError",
    "AuthError",
    "BodyError",
    "ClientError",
    "DataTypeError",
    "MovedPermanentlyError",
    "ServiceError",
    "ServiceMessageError",
    "ServiceObjectError",
    "SpotifyError",
    "UnrecognizedServiceError",
    "UrlParseError",
]
