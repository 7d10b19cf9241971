"""Fixtures for HTTP route tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import (
    InMemoryDictionaryFetcher,
    NamespaceCache,
    NamespaceLoader,
    NamespaceService,
)
from infrastructure.services import get_namespace_service
from server.server import handler


@pytest.fixture
def memory_fetcher():
    return InMemoryDictionaryFetcher(
        {
            "en": {
                "common": {"buttons": {"calculate": "Calculate"}},
                "navigation": {"home": "Home"},
            },
            "ru": {"common": {"buttons": {"calculate": "Рассчитать"}}},
        }
    )


@pytest.fixture
def client(memory_fetcher):
    """TestClient with the namespace service backed by memory_fetcher."""
    service = NamespaceService(
        loader=NamespaceLoader(memory_fetcher),
        cache=NamespaceCache(enabled=True),
    )
    handler.dependency_overrides[get_namespace_service] = lambda: service
    with TestClient(handler) as test_client:
        yield test_client
    handler.dependency_overrides.clear()
