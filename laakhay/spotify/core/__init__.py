"""Core components."""

from .enums import AlbumType, HttpMethod, ItemType, Market, TimeRange, TopItemType, UrlBase
from .exceptions import (
    ApiError,
    AuthError,
    BodyError,
    ClientError,
    CodeNotFoundError,
    DataTypeError,
    EmptyAccessTokenError,
    FormBodyError,
    InvalidStateError,
    JsonBodyError,
    JsonError,
    MovedPermanentlyError,
    NoCodeVerifierError,
    NoRefreshTokenError,
    NoStateError,
    ResponseError,
    ServiceError,
    ServiceMessageError,
    ServiceObjectError,
    SpotifyError,
    UnrecognizedServiceError,
    UnsupportedUrlBaseError,
    UrlParseError,
)

__all__ = [
    "HttpMethod",
    "UrlBase",
    "ItemType",
    "AlbumType",
    "TimeRange",
    "TopItemType",
    "Market",
    # Errors
    "SpotifyError",
    "ApiError",
    "ClientError",
    "UrlParseError",
    "BodyError",
    "JsonBodyError",
    "FormBodyError",
    "JsonError",
    "DataTypeError",
    "MovedPermanentlyError",
    "UnsupportedUrlBaseError",
    "ResponseError",
    "ServiceError",
    "ServiceMessageError",
    "ServiceObjectError",
    "UnrecognizedServiceError",
    "AuthError",
    "CodeNotFoundError",
    "InvalidStateError",
    "NoStateError",
    "NoCodeVerifierError",
    "EmptyAccessTokenError",
    "NoRefreshTokenError",
]
