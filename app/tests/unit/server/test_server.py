"""Unit tests for the FastAPI application and its lifespan."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_namespace_service
from server.server import handler

pytestmark = pytest.mark.unit


class TestLifespan:
    def test_lifespan_builds_namespace_service(self):
        with TestClient(handler):
            assert handler.state.namespace_service is get_namespace_service()
            assert handler.state.settings is not None

    def test_development_startup_clears_cache(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "development")

        with patch("infrastructure.i18n.factory.logger") as mock_logger:
            with TestClient(handler):
                service = handler.state.namespace_service

        assert service.cache.enabled is False
        events = [c.args[0] for c in mock_logger.info.call_args_list]
        assert "namespace_cache_cleared_on_startup" in events

    @pytest.mark.asyncio
    async def test_bundled_locales_fall_back_to_english(self):
        """The bundled locale tree serves English for untranslated namespaces."""
        service = get_namespace_service()

        t = await service.get_translator("hi", ["common", "navigation"])

        assert t("navigation.home") == "Home"
        assert t("common.greeting", {"name": "Sam"}) == "Hello Sam"


class TestRoutes:
    def test_routes_are_registered(self):
        paths = {route.path for route in handler.routes}
        assert {"/health", "/version", "/i18n/{locale}", "/tags", "/tags/normalize"} <= paths
