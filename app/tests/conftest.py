"""Top-level test fixtures shared by every test package."""

import pytest

from infrastructure.configuration import I18nSettings, Settings, TagsSettings
from infrastructure.services import (
    get_item_content_loader,
    get_namespace_service,
    get_settings,
    get_tag_assigner,
    get_tag_catalog,
)
from models.calculators import CalculatorSchema

PROVIDERS = (
    get_settings,
    get_namespace_service,
    get_item_content_loader,
    get_tag_catalog,
    get_tag_assigner,
)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cache singletons so no state leaks between tests."""
    for provider in PROVIDERS:
        provider.cache_clear()
    yield
    for provider in PROVIDERS:
        provider.cache_clear()


@pytest.fixture
def make_settings(tmp_path):
    """Factory for Settings pointing at a temporary locales tree."""

    def _make_settings(app_env="production", cache_enabled=None, locales_dir=None, **kwargs):
        i18n_kwargs = {"I18N_LOCALES_DIR": locales_dir or tmp_path}
        if cache_enabled is not None:
            i18n_kwargs["I18N_CACHE_ENABLED"] = cache_enabled
        return Settings(
            APP_ENV=app_env,
            i18n=I18nSettings(**i18n_kwargs),
            tags=kwargs.pop("tags", TagsSettings()),
            **kwargs,
        )

    return _make_settings


@pytest.fixture
def make_calculator():
    """Factory for CalculatorSchema instances."""

    def _make_calculator(id="test-calculator", slug=None, category="math", tags=None, **kwargs):
        return CalculatorSchema(
            id=id,
            slug=slug or id,
            category=category,
            tags=tags,
            **kwargs,
        )

    return _make_calculator
