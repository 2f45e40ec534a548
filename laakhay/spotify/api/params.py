"""Query string and request body builders.

Parameters are kept as an ordered list of ``(key, value)`` pairs. Keys may
repeat and insertion order is preserved all the way to the wire, so the
URLs and bodies an endpoint produces are reproducible.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any
from urllib.parse import quote_plus, urlsplit, urlunsplit

from pydantic import BaseModel

from ..core.exceptions import FormBodyError, JsonBodyError

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Characters escaped in a single path segment, on top of controls and non-ASCII
_PATH_SEGMENT_UNSAFE = frozenset(' "#<>`?{}%/')


def to_param_value(value: Any) -> str:
    """Convert a value into its canonical query-string form.

    Booleans become ``true``/``false``, enums their wire value, and lists
    or tuples are joined with literal commas.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_param_value(item) for item in value)
    return str(value)


def _form_encode(text: str) -> str:
    # application/x-www-form-urlencoded byte serializer: only alphanumerics
    # and `*-._` stay literal, spaces become `+`
    return quote_plus(text, safe="*").replace("~", "%7E")


def path_escaped(segment: str) -> str:
    """Escape a string for use as a single URL path segment."""
    out: list[str] = []
    for ch in segment:
        code = ord(ch)
        if 0x20 < code < 0x7F and ch not in _PATH_SEGMENT_UNSAFE:
            out.append(ch)
        else:
            out.extend(f"%{byte:02X}" for byte in ch.encode("utf-8"))
    return "".join(out)


class QueryParams:
    """Ordered query parameters for an endpoint."""

    def __init__(self, pairs: Iterable[tuple[str, Any]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        if pairs is not None:
            self.extend(pairs)

    def push(self, key: str, value: Any) -> QueryParams:
        """Append a parameter."""
        self._pairs.append((key, to_param_value(value)))
        return self

    def push_opt(self, key: str, value: Any | None) -> QueryParams:
        """Append a parameter only when ``value`` is not None."""
        if value is not None:
            self.push(key, value)
        return self

    def extend(self, pairs: Iterable[tuple[str, Any]]) -> QueryParams:
        for key, value in pairs:
            self.push(key, value)
        return self

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pairs!r})"

    def to_query_string(self) -> str:
        """Serialize the pairs, percent-encoded, in insertion order."""
        return "&".join(f"{_form_encode(key)}={_form_encode(value)}" for key, value in self._pairs)

    def add_to_url(self, url: str) -> str:
        """Return ``url`` with the parameters appended to its query string."""
        if not self._pairs:
            return url
        parts = urlsplit(url)
        encoded = self.to_query_string()
        query = f"{parts.query}&{encoded}" if parts.query else encoded
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


class FormParams(QueryParams):
    """Ordered parameters sent as an ``application/x-www-form-urlencoded`` body."""

    def into_body(self) -> tuple[str, bytes] | None:
        """Encode the parameters as a request body.

        Raises:
            FormBodyError: If a value cannot be encoded
        """
        if not self._pairs:
            return None
        try:
            data = self.to_query_string().encode("ascii")
        except UnicodeError as exc:
            raise FormBodyError(exc) from exc
        return FORM_CONTENT_TYPE, data


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    # value types such as Market define their wire form via __str__
    if type(value).__str__ is not object.__str__:
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonParams:
    """JSON request bodies.

    Object keys are emitted in insertion order with compact separators.
    """

    @staticmethod
    def into_body(value: Any) -> tuple[str, bytes]:
        """Encode ``value`` as a JSON request body.

        Raises:
            JsonBodyError: If the value cannot be serialized
        """
        try:
            text = json.dumps(
                value,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
                default=_json_default,
            )
            data = text.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise JsonBodyError(exc) from exc
        return JSON_CONTENT_TYPE, data
