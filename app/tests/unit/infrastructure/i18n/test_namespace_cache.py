"""Tests for infrastructure.i18n.cache module."""

import threading

import pytest

from infrastructure.i18n import Locale, NamespaceCache, build_cache_key

pytestmark = pytest.mark.unit


class TestBuildCacheKey:
    def test_key_format(self):
        assert build_cache_key("en", ["navigation", "common"]) == "en:common,navigation"

    def test_key_is_order_independent(self):
        assert build_cache_key(Locale.RU, ["b", "a"]) == build_cache_key("ru", ["a", "b"])


class TestNamespaceCache:
    """Tests for NamespaceCache."""

    def test_set_and_get(self):
        cache = NamespaceCache()
        merged = {"common": {"a": "b"}}

        assert cache.set("en", ["common"], merged) is merged
        assert cache.get("en", ["common"]) is merged
        assert "en:common" in cache
        assert len(cache) == 1

    def test_get_is_order_independent(self):
        cache = NamespaceCache()
        merged = {"a": {}, "b": {}}
        cache.set("en", ["a", "b"], merged)

        assert cache.get("en", ["b", "a"]) is merged

    def test_first_write_wins(self):
        cache = NamespaceCache()
        first = cache.set("en", ["common"], {"common": {"v": "1"}})
        second = cache.set("en", ["common"], {"common": {"v": "2"}})

        assert second is first

    def test_disabled_cache_never_stores(self):
        cache = NamespaceCache(enabled=False)
        merged = {"common": {}}

        assert cache.set("en", ["common"], merged) is merged
        assert cache.get("en", ["common"]) is None
        assert len(cache) == 0

    def test_clear(self):
        cache = NamespaceCache()
        cache.set("en", ["common"], {})
        cache.set("ru", ["common"], {})

        cache.clear()

        assert len(cache) == 0
        assert cache.get("en", ["common"]) is None

    def test_stats(self):
        cache = NamespaceCache()
        cache.get("en", ["common"])
        cache.set("en", ["common"], {})
        cache.get("en", ["common"])

        assert cache.get_stats() == {"enabled": True, "entries": 1, "hits": 1, "misses": 1}

    def test_concurrent_writers_share_one_entry(self):
        cache = NamespaceCache()
        results = []

        def writer(i):
            results.append(cache.set("en", ["common"], {"writer": i}))

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 1
        assert all(result is results[0] for result in results)
