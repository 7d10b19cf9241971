"""Unit tests for the translation dictionary routes."""

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services import get_settings
from server.server import handler

pytestmark = pytest.mark.unit


class TestGetTranslations:
    def test_merged_dictionary(self, client):
        response = client.get("/i18n/ru", params=[("namespace", "common"), ("namespace", "navigation")])

        assert response.status_code == 200
        assert response.json() == {
            "common": {"buttons": {"calculate": "Рассчитать"}},
            "navigation": {"home": "Home"},
        }

    def test_default_namespace(self, client):
        response = client.get("/i18n/en")

        assert response.status_code == 200
        assert response.json() == {"common": {"buttons": {"calculate": "Calculate"}}}

    def test_locale_is_case_insensitive(self, client):
        assert client.get("/i18n/RU").status_code == 200

    def test_unsupported_locale_returns_404(self, client):
        response = client.get("/i18n/fr")

        assert response.status_code == 404
        assert "Unsupported locale" in response.json()["detail"]

    def test_locale_outside_supported_list_returns_404(self, client):
        handler.dependency_overrides[get_settings] = lambda: Settings(
            i18n=I18nSettings(I18N_SUPPORTED_LOCALES="en,es")
        )

        assert client.get("/i18n/ru").status_code == 404
        assert client.get("/i18n/es").status_code == 200

    def test_missing_namespace_is_empty(self, client):
        response = client.get("/i18n/es", params={"namespace": "unknown"})

        assert response.status_code == 200
        assert response.json() == {"unknown": {}}

    def test_responses_are_cached(self, client, memory_fetcher):
        client.get("/i18n/en", params={"namespace": "navigation"})
        fetches = memory_fetcher.fetch_count
        client.get("/i18n/en", params={"namespace": "navigation"})

        assert memory_fetcher.fetch_count == fetches
