"""Tests for api/errors.py - global exception handlers."""

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from api.errors import register_error_handlers


@pytest.fixture
def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/crash")
    async def crash():
        raise RuntimeError("kaboom")

    @app.get("/fine")
    async def fine():
        return {"ok": True}

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:

    def test_unhandled_is_500_without_details(self, error_client):
        response = error_client.get("/crash")
        assert response.status_code == 500
        assert response.json()["error"] == {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}
        assert "kaboom" not in response.text

    def test_unhandled_is_logged(self, error_client, caplog):
        with caplog.at_level("ERROR", logger="api.errors"):
            error_client.get("/crash")
        assert "Unhandled exception on GET /crash" in caplog.text

    def test_normal_responses_untouched(self, error_client):
        response = error_client.get("/fine")
        assert response.status_code == 200
        assert response.json() == {"ok": True}
