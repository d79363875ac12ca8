"""Unit tests for response envelope classification."""

from __future__ import annotations

import pytest

from tms_sdk.errors import TMSApiError
from tms_sdk.transport.envelope import (
    HttpFailure,
    LegacyFailure,
    Success,
    classify_response,
    parse_envelope,
)


class TestHttpFailures:
    def test_not_found_with_error_field(self):
        envelope = classify_response(404, {"error": "not found"})
        assert envelope == HttpFailure(
            status_code=404, code=404, message="not found", details={"error": "not found"}
        )

    def test_body_code_preferred_over_status(self):
        envelope = classify_response(400, {"code": 4001, "message": "bad field"})
        assert envelope.code == 4001
        assert envelope.message == "bad field"

    def test_error_preferred_over_message(self):
        envelope = classify_response(500, {"error": "boom", "message": "ignored"})
        assert envelope.message == "boom"

    def test_null_fields_fall_back(self):
        envelope = classify_response(502, {"code": None, "error": None, "message": None})
        assert envelope.code == 502
        assert envelope.message == "An error occurred"

    def test_default_message(self):
        assert classify_response(503, {}).message == "An error occurred"

    def test_non_object_body(self):
        envelope = classify_response(500, ["unexpected"])
        assert isinstance(envelope, HttpFailure)
        assert envelope.code == 500
        assert envelope.details == ["unexpected"]

    def test_non_2xx_wins_over_data(self):
        assert isinstance(classify_response(401, {"data": {"id": "x"}}), HttpFailure)


class TestLegacyFailures:
    def test_insufficient_balance(self):
        body = {"code": 1001, "success": False, "message": "insufficient balance", "extra": {"need": 5}}
        assert classify_response(200, body) == LegacyFailure(
            code=1001, message="insufficient balance", details={"need": 5}
        )

    def test_default_message_and_missing_extra(self):
        envelope = classify_response(200, {"code": 7, "success": False})
        assert envelope == LegacyFailure(code=7, message="An error occurred", details=None)

    def test_legacy_ignores_error_field(self):
        envelope = classify_response(200, {"code": 7, "success": False, "error": "nope"})
        assert envelope.message == "An error occurred"

    def test_zero_code_is_success(self):
        body = {"code": 0, "success": False, "data": {"id": "x"}}
        assert classify_response(200, body) == Success({"id": "x"})

    def test_success_must_be_explicitly_false(self):
        assert isinstance(classify_response(200, {"code": 5, "success": 0}), Success)
        assert isinstance(classify_response(200, {"code": 5}), Success)
        assert isinstance(classify_response(200, {"code": 5, "success": None}), Success)

    def test_string_zero_code_is_a_failure(self):
        assert isinstance(classify_response(200, {"code": "0", "success": False}), LegacyFailure)

    def test_null_code_counts_as_present(self):
        assert isinstance(classify_response(200, {"code": None, "success": False}), LegacyFailure)


class TestSuccess:
    def test_data_wrapped(self):
        assert classify_response(200, {"data": {"id": "x"}}) == Success({"id": "x"})

    def test_flat_body(self):
        assert classify_response(200, {"id": "x"}) == Success({"id": "x"})

    def test_null_data_is_returned(self):
        assert classify_response(200, {"data": None, "success": True}) == Success(None)

    def test_created_status(self):
        assert classify_response(201, {"data": [1, 2]}) == Success([1, 2])

    def test_non_object_body(self):
        assert classify_response(200, [1, 2]) == Success([1, 2])


class TestParseEnvelope:
    def test_returns_payload(self):
        assert parse_envelope(200, {"data": {"id": "x"}}) == {"id": "x"}

    def test_http_failure_raises(self):
        with pytest.raises(TMSApiError) as excinfo:
            parse_envelope(404, {"error": "not found"})
        error = excinfo.value
        assert error.code == 404
        assert error.message == "not found"
        assert str(error) == "not found"
        assert error.status_code == 404
        assert error.details == {"error": "not found"}
        assert error.is_legacy is False

    def test_legacy_failure_raises(self):
        body = {"code": 1001, "success": False, "message": "insufficient balance", "extra": [1]}
        with pytest.raises(TMSApiError) as excinfo:
            parse_envelope(200, body)
        error = excinfo.value
        assert error.code == 1001
        assert error.message == "insufficient balance"
        assert error.details == [1]
        assert error.status_code == 200
        assert error.is_legacy is True
