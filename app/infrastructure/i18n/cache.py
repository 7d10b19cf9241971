"""Process-wide cache of merged namespace dictionaries.

Entries are keyed by locale plus the sorted, comma-joined namespace list,
so ["b", "a"] and ["a", "b"] share an entry even though merge order is
significant. Call sites are expected to request a namespace set in one
consistent order.

A disabled cache (development-like environments) never stores and never
returns entries, so content edits show up on the next request.
"""

import threading
from typing import Any, Dict, Optional, Sequence

from infrastructure.i18n.models import Locale, MergedDictionary, locale_code
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def build_cache_key(locale: Locale | str, namespaces: Sequence[str]) -> str:
    """Build the cache key "<locale>:<sorted,namespaces>"."""
    return f"{locale_code(locale)}:{','.join(sorted(namespaces))}"


class NamespaceCache:
    """Thread-safe map of cache key -> merged dictionary.

    Attributes:
        enabled: Whether reads and writes are honored.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._entries: Dict[str, MergedDictionary] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(
        self, locale: Locale | str, namespaces: Sequence[str]
    ) -> Optional[MergedDictionary]:
        """Return the cached merged dictionary, or None on miss or when disabled."""
        if not self.enabled:
            return None

        key = build_cache_key(locale, namespaces)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1
        return entry

    def set(
        self,
        locale: Locale | str,
        namespaces: Sequence[str],
        merged: MergedDictionary,
    ) -> MergedDictionary:
        """Store a merged dictionary unless disabled.

        If another task stored the same key first, the existing entry is
        kept and returned so that every caller shares one object.
        """
        if not self.enabled:
            return merged

        key = build_cache_key(locale, namespaces)
        with self._lock:
            return self._entries.setdefault(key, merged)

    def clear(self) -> None:
        """Remove every entry, regardless of the enabled flag."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info("namespace_cache_cleared", entry_count=count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with enabled flag, entry count, hits and misses.
        """
        with self._lock:
            return {
                "enabled": self.enabled,
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }
