"""Unit tests for response classification.

The priority order matters: a body that is not JSON is reported before
the status is looked at, and ``message`` wins over ``error``.
"""

from typing import Any

import pytest
from pydantic import BaseModel

from laakhay.spotify.api.classify import (
    check_status,
    checked_json,
    classify,
    decode,
    error_from_payload,
    type_name,
)
from laakhay.spotify.core import (
    DataTypeError,
    MovedPermanentlyError,
    ServiceError,
    ServiceMessageError,
    ServiceObjectError,
    UnrecognizedServiceError,
)
from laakhay.spotify.runtime.rest import HttpResponse


def response(status=200, body=b"{}", headers=None):
    return HttpResponse(status=status, headers=headers or {}, body=body)


class TestErrorFromPayload:
    """Test payload shape recognition."""

    def test_message_wins_over_error(self):
        error = error_from_payload(400, {"message": "bad request", "error": {"status": 400}})
        assert isinstance(error, ServiceMessageError)
        assert error.message == "bad request"

    def test_error_string(self):
        error = error_from_payload(400, {"error": "invalid_client"})
        assert isinstance(error, ServiceMessageError)
        assert error.message == "invalid_client"

    def test_error_object(self):
        payload = {"status": 404, "message": "Non existing id"}
        error = error_from_payload(404, {"error": payload})
        assert isinstance(error, ServiceObjectError)
        assert error.obj == payload
        assert error.message == "Non existing id"

    def test_non_string_message_is_object(self):
        error = error_from_payload(500, {"message": ["a", "b"]})
        assert isinstance(error, ServiceObjectError)

    @pytest.mark.parametrize("payload", [{"foo": "bar"}, ["x"], None, 3])
    def test_unrecognized(self, payload):
        error = error_from_payload(500, payload)
        assert isinstance(error, UnrecognizedServiceError)
        assert error.obj == payload
        assert error.status_code == 500


class TestChecked:
    """Test the full classification of raw responses."""

    def test_success_returns_json(self):
        assert checked_json(response(body=b'{"a": 1}')) == {"a": 1}

    def test_non_json_body_with_success_status(self):
        with pytest.raises(ServiceError) as exc_info:
            checked_json(response(200, b"not json"))
        assert exc_info.value.status_code == 200
        assert exc_info.value.data == b"not json"

    def test_non_json_body_with_error_status(self):
        with pytest.raises(ServiceError) as exc_info:
            checked_json(response(502, b"<html>Bad gateway</html>"))
        assert exc_info.value.status_code == 502

    def test_redirect_with_location(self):
        rsp = response(301, b"{}", {"location": "https://api.spotify.com/v1/albums/new"})
        with pytest.raises(MovedPermanentlyError) as exc_info:
            checked_json(rsp)
        assert exc_info.value.location == "https://api.spotify.com/v1/albums/new"

    def test_redirect_without_location(self):
        with pytest.raises(MovedPermanentlyError) as exc_info:
            checked_json(response(301, b"{}"))
        assert exc_info.value.location is None

    def test_classify_success_is_none(self):
        assert classify(response(204), None) is None

    def test_error_status(self):
        body = b'{"error": {"status": 401, "message": "No token provided"}}'
        with pytest.raises(ServiceObjectError) as exc_info:
            checked_json(response(401, body))
        assert exc_info.value.status_code == 401


class TestCheckStatus:
    """Test the ignore path classification."""

    @pytest.mark.parametrize("body", [b"", b"not json", b"{}"])
    def test_success_body_is_not_parsed(self, body):
        check_status(response(200, body))
        check_status(response(204, body))

    def test_error_status_is_classified(self):
        with pytest.raises(ServiceMessageError):
            check_status(response(403, b'{"message": "Player command failed"}'))

    def test_error_status_without_json(self):
        with pytest.raises(ServiceError):
            check_status(response(500, b""))


class Item(BaseModel):
    value: int


class TestDecode:
    """Test deserialization into caller-chosen types."""

    def test_any_returns_raw_value(self):
        value = {"x": [1, 2]}
        assert decode(value, Any) is value

    def test_model(self):
        assert decode({"value": 3}, Item) == Item(value=3)

    def test_generic_collection(self):
        assert decode([True, False], list[bool]) == [True, False]

    def test_mismatch_raises_data_type_error(self):
        with pytest.raises(DataTypeError) as exc_info:
            decode({"value": "nope"}, Item)
        assert exc_info.value.typename == "Item"

    def test_type_names(self):
        assert type_name(Item) == "Item"
        assert type_name(list[bool]) == "list[bool]"
