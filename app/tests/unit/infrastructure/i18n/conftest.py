"""Feature-level fixtures for i18n system tests.

Provides in-memory and on-disk dictionary trees for namespace loading,
merging, caching and translation scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import (
    InMemoryDictionaryFetcher,
    NamespaceCache,
    NamespaceLoader,
    NamespaceService,
)


@pytest.fixture
def en_resources():
    """Default-locale dictionaries."""
    return {
        "common": {
            "buttons": {"calculate": "Calculate", "reset": "Reset"},
            "greeting": "Hello {name}",
        },
        "navigation": {"home": "Home", "calculators": "Calculators"},
        "calculators/ui": {"sections": {"all": "All calculators"}},
        "legacy/ui": {"ok": "OK"},
    }


@pytest.fixture
def ru_resources():
    """Partial Russian dictionaries (no navigation, no legacy/ui)."""
    return {
        "common": {
            "buttons": {"calculate": "Рассчитать", "reset": "Сбросить"},
            "greeting": "Привет, {name}",
        },
        "calculators/ui": {"sections": {"all": "Все калькуляторы"}},
    }


@pytest.fixture
def fetcher(en_resources, ru_resources):
    """In-memory fetcher holding en and ru dictionaries."""
    return InMemoryDictionaryFetcher({"en": en_resources, "ru": ru_resources})


@pytest.fixture
def loader(fetcher):
    return NamespaceLoader(fetcher, default_fallback="en")


@pytest.fixture
def make_service(loader):
    """Factory for NamespaceService with an enabled or disabled cache."""

    def _make_service(cache_enabled=True, debug=False):
        return NamespaceService(
            loader=loader,
            cache=NamespaceCache(enabled=cache_enabled),
            default_locale="en",
            debug=debug,
        )

    return _make_service


@pytest.fixture
def locales_dir(tmp_path):
    """On-disk locales tree with JSON and YAML dictionaries.

    Layout:
    - en/common.json
    - en/calculators/ui.json
    - en/legacy/ui.yml
    - en/calculators/items/mortgage-calculator.json
    - ru/common.json
    - ru/broken.json (invalid JSON)
    - ru/list.yaml (top level is a list)
    """
    en = tmp_path / "en"
    (en / "calculators" / "items").mkdir(parents=True)
    (en / "legacy").mkdir()
    ru = tmp_path / "ru"
    ru.mkdir()

    (en / "common.json").write_text(
        json.dumps({"buttons": {"calculate": "Calculate"}}), encoding="utf-8"
    )
    (en / "calculators" / "ui.json").write_text(
        json.dumps({"sections": {"all": "All calculators"}}), encoding="utf-8"
    )
    with open(en / "legacy" / "ui.yml", "w", encoding="utf-8") as f:
        yaml.dump({"ok": "OK", "confirm": {"title": "Are you sure?"}}, f)
    (en / "calculators" / "items" / "mortgage-calculator.json").write_text(
        json.dumps(
            {
                "title": "Mortgage Calculator",
                "shortDescription": "Estimate your monthly payment.",
                "howTo": ["Enter the amount", "Click Calculate"],
            }
        ),
        encoding="utf-8",
    )
    (ru / "common.json").write_text(
        json.dumps({"buttons": {"calculate": "Рассчитать"}}, ensure_ascii=False),
        encoding="utf-8",
    )
    (ru / "broken.json").write_text("{not json", encoding="utf-8")
    with open(ru / "list.yaml", "w", encoding="utf-8") as f:
        yaml.dump(["a", "b"], f)

    return tmp_path
