"""Custom exception hierarchy.

Every failure the dispatch and pagination engines can produce is one of
the ``ApiError`` subclasses below. They are raised to the immediate caller
and never retried or swallowed inside the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .enums import UrlBase


class SpotifyError(Exception):
    """Base exception for all library errors."""

    pass


class ApiError(SpotifyError):
    """Error raised while dispatching an endpoint."""

    pass


class ClientError(ApiError):
    """The transport failed to perform the request.

    The transport's own exception is kept as ``source`` (and chained as
    ``__cause__``) without being interpreted.
    """

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"client error: {source}")
        self.source = source


class UrlParseError(ApiError):
    """A URL could not be parsed into an absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL") -> None:
        super().__init__(f"failed to parse url: {url!r} ({reason})")
        self.url = url
        self.reason = reason


class BodyError(ApiError):
    """Request body data could not be created."""

    def __init__(self, message: str, source: BaseException | None = None) -> None:
        super().__init__(f"failed to create form data: {message}")
        self.source = source


class JsonBodyError(BodyError):
    """Body parameters could not be JSON encoded."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"failed to JSON encode form parameters: {source}", source)


class FormBodyError(BodyError):
    """Body parameters could not be URL encoded."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"failed to URL encode form parameters: {source}", source)


class JsonError(ApiError):
    """JSON data could not be parsed."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"could not parse JSON: {source}")
        self.source = source


class DataTypeError(ApiError):
    """Valid JSON did not match the requested data type."""

    def __init__(self, typename: str, source: BaseException) -> None:
        super().__init__(f"could not parse {typename} data from JSON: {source}")
        self.typename = typename
        self.source = source


class MovedPermanentlyError(ApiError):
    """The resource has been moved permanently (HTTP 301)."""

    def __init__(self, location: str | None = None) -> None:
        super().__init__(f"moved permanently to: {location or '<UNKNOWN>'}")
        self.location = location


class UnsupportedUrlBaseError(ApiError):
    """The client does not know how to resolve an endpoint's URL base."""

    def __init__(self, url_base: UrlBase) -> None:
        super().__init__(f"unsupported URL base: {url_base!r}")
        self.url_base = url_base


class ResponseError(ApiError):
    """The service answered with an error status or an unreadable body."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceError(ResponseError):
    """The service returned a response body that is not JSON."""

    def __init__(self, status_code: int, data: bytes = b"") -> None:
        super().__init__(f"spotify internal server error {status_code}", status_code)
        self.data = data


class ServiceMessageError(ResponseError):
    """The service returned an error message with an HTTP error status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"spotify server error ({status_code}): {message}", status_code)
        self.message = message


class ServiceObjectError(ResponseError):
    """The service returned an error object with an HTTP error status."""

    def __init__(self, status_code: int, obj: Any) -> None:
        super().__init__(f"spotify server error ({status_code}): {obj!r}", status_code)
        self.obj = obj

    @property
    def message(self) -> str | None:
        """The nested ``message`` of a ``{"error": {"message": ...}}`` payload."""
        if isinstance(self.obj, dict):
            message = self.obj.get("message")
            if isinstance(message, str):
                return message
        return None


class UnrecognizedServiceError(ResponseError):
    """The service returned an HTTP error with JSON that was not recognized."""

    def __init__(self, status_code: int, obj: Any) -> None:
        super().__init__(f"spotify server error ({status_code}): {obj!r}", status_code)
        self.obj = obj


class AuthError(SpotifyError):
    """Error raised by an OAuth flow."""

    pass


class CodeNotFoundError(AuthError):
    """The redirect URL does not carry an authorization ``code``."""

    def __init__(self) -> None:
        super().__init__("authorization code not found")


class InvalidStateError(AuthError):
    """The ``state`` returned by the accounts service does not match."""

    def __init__(self, expected: str, got: str | None) -> None:
        super().__init__(f"invalid state parameter: expected {expected} got {got}")
        self.expected = expected
        self.got = got


class NoStateError(AuthError):
    """No state was generated before verifying a redirect."""

    def __init__(self) -> None:
        super().__init__(
            "AuthCodePKCE has no state. Generate a user authorization URL by "
            "calling user_authorization_url() first"
        )


class NoCodeVerifierError(AuthError):
    """No PKCE code verifier was generated before requesting a token."""

    def __init__(self) -> None:
        super().__init__(
            "AuthCodePKCE has no code verifier. Generate one by calling "
            "user_authorization_url() first"
        )


class EmptyAccessTokenError(AuthError):
    """A request was attempted before any access token was obtained."""

    def __init__(self) -> None:
        super().__init__("access token is empty")


class NoRefreshTokenError(AuthError):
    """A refresh was requested but the current token has no refresh token."""

    def __init__(self) -> None:
        super().__init__("no refresh token available")
