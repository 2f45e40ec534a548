"""Response classification.

Pure functions shared by the typed, ignore and paged dispatch paths in
both their blocking and awaitable forms. They only look at an already
received ``HttpResponse``.

Priority:
    1. a body that is not JSON is a ``ServiceError``, whatever the status
    2. 301 is ``MovedPermanentlyError``
    3. any other non-2xx status is classified from the JSON payload,
       ``message`` first, then ``error``
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import (
    ApiError,
    DataTypeError,
    MovedPermanentlyError,
    ServiceError,
    ServiceMessageError,
    ServiceObjectError,
    UnrecognizedServiceError,
)
from ..runtime.rest.models import HttpResponse

MOVED_PERMANENTLY = 301

_MISSING = object()


def parse_json(response: HttpResponse) -> Any:
    """Parse the response body as JSON.

    Raises:
        ServiceError: If the body is not valid JSON (status is not consulted)
    """
    try:
        return json.loads(response.body)
    except ValueError as exc:
        raise ServiceError(response.status, bytes(response.body)) from exc


def error_from_payload(status: int, value: Any) -> ApiError:
    """Build the error for a non-successful status with a JSON payload."""
    error_value: Any = _MISSING
    if isinstance(value, dict):
        if "message" in value:
            error_value = value["message"]
        elif "error" in value:
            error_value = value["error"]

    if error_value is _MISSING:
        return UnrecognizedServiceError(status, value)
    if isinstance(error_value, str):
        return ServiceMessageError(status, error_value)
    return ServiceObjectError(status, error_value)


def classify(response: HttpResponse, value: Any) -> ApiError | None:
    """Decide whether a parsed response is an error.

    Returns:
        The error to raise, or None for a successful response
    """
    if response.status == MOVED_PERMANENTLY:
        return MovedPermanentlyError(response.header("Location"))
    if not response.is_success:
        return error_from_payload(response.status, value)
    return None


def checked_json(response: HttpResponse) -> Any:
    """Parse and classify a response, returning the JSON value on success."""
    value = parse_json(response)
    error = classify(response, value)
    if error is not None:
        raise error
    return value


def check_status(response: HttpResponse) -> None:
    """Classify a response whose successful body is irrelevant.

    The body is only parsed when the status is not a success, so empty
    2xx bodies are accepted.
    """
    if response.is_success:
        return
    value = parse_json(response)
    error = classify(response, value)
    if error is not None:
        raise error


@lru_cache(maxsize=256)
def _adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def type_name(into: Any) -> str:
    """Human readable name of a deserialization target."""
    name = getattr(into, "__name__", None)
    if isinstance(name, str) and not getattr(into, "__args__", None):
        return name
    return repr(into).replace("typing.", "")


def decode(value: Any, into: Any) -> Any:
    """Deserialize a JSON value into ``into``.

    ``Any`` returns the JSON value untouched.

    Raises:
        DataTypeError: If the value does not match the requested type
    """
    if into is Any:
        return value
    try:
        adapter = _adapter(into)
    except TypeError:
        # unhashable annotations (e.g. Annotated with dict metadata)
        adapter = TypeAdapter(into)
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise DataTypeError(type_name(into), exc) from exc
