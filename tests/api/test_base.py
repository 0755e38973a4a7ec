"""Tests for api/base.py - Unified API response format."""

from datetime import timezone

from api.base import success_response, error_response, ErrorCodes


class TestSuccessResponse:

    def test_structure(self):
        resp = success_response({"message": "ok"})
        assert resp.success is True
        assert resp.data == {"message": "ok"}
        assert resp.error is None

    def test_timestamp_is_utc(self):
        assert success_response({}).meta.timestamp.tzinfo == timezone.utc


class TestErrorResponse:

    def test_structure(self):
        resp = error_response(ErrorCodes.INVALID_CREDENTIALS, "CredentialSignin")
        assert resp.success is False
        assert resp.data is None
        assert resp.error.code == "INVALID_CREDENTIALS"
        assert resp.error.message == "CredentialSignin"

    def test_request_ids_unique(self):
        assert error_response("ERR", "a").meta.request_id != error_response("ERR", "b").meta.request_id
