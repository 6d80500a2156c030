"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected, and the WSGI shim wires the store.
"""

import importlib
import sys
from unittest.mock import MagicMock, patch

from a2wsgi import ASGIMiddleware
from fastapi.testclient import TestClient

from app.infrastructure.blogging.mongo_store import MongoStore
from app.main import app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status, version and store state."""
        response = client.get("/api/health")
        body = response.json()
        assert body["status"] == "ok"
        assert "version" in body
        assert body["database"] == "down"

    def test_health_reports_reachable_store(self) -> None:
        store = MagicMock(spec=MongoStore)
        store.ping.return_value = True
        app.state.store = store
        try:
            body = client.get("/api/health").json()
        finally:
            app.state.store = None
        assert body["database"] == "up"


class TestLifespan:
    """Tests for store open/close around the application lifespan."""

    def test_store_opened_and_closed(self) -> None:
        with patch("app.main.MongoStore") as store_cls:
            with TestClient(app):
                store_cls.return_value.open.assert_called_once()
                assert app.state.store is store_cls.return_value
            store_cls.return_value.close.assert_called_once()
        assert app.state.store is None


class TestWsgi:
    """Tests for the WSGI compatibility layer."""

    def test_wsgi_opens_store(self) -> None:
        sys.modules.pop("app.wsgi", None)
        with patch.object(MongoStore, "open", autospec=True, side_effect=lambda self: self):
            wsgi = importlib.import_module("app.wsgi")
        try:
            assert isinstance(app.state.store, MongoStore)
            assert isinstance(wsgi.application, ASGIMiddleware)
            assert callable(wsgi.application)
        finally:
            app.state.store = None
            sys.modules.pop("app.wsgi", None)
