"""i18n system - namespace loading, merging, caching and translation.

Main components:
- models: Locale, Dictionary types, LoadNamespacesOptions
- fetchers: DictionaryFetcher, FileDictionaryFetcher, InMemoryDictionaryFetcher
- loader: NamespaceLoader (fallback-locale resolution)
- merger: merge_namespaces and deep_merge
- cache: NamespaceCache keyed by locale + sorted namespaces
- translator: Translator (key path resolution and {param} substitution)
- service: NamespaceService tying the above together
- items: ItemContentLoader for calculator/standard/article content
"""

from infrastructure.i18n.cache import NamespaceCache, build_cache_key
from infrastructure.i18n.exceptions import (
    DictionaryFetchError,
    DictionaryNotFoundError,
    DictionaryParseError,
)
from infrastructure.i18n.fetchers import (
    DictionaryFetcher,
    FileDictionaryFetcher,
    InMemoryDictionaryFetcher,
)
from infrastructure.i18n.items import ItemContentLoader, LoadedContent
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.merger import deep_merge, merge_namespaces
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    LOCALE_NAMES,
    Dictionary,
    LoadNamespacesOptions,
    Locale,
    MergedDictionary,
)
from infrastructure.i18n.service import NamespaceService
from infrastructure.i18n.translator import Translator, create_translator

__all__ = [
    "Locale",
    "DEFAULT_LOCALE",
    "LOCALE_NAMES",
    "Dictionary",
    "MergedDictionary",
    "LoadNamespacesOptions",
    "DictionaryFetchError",
    "DictionaryNotFoundError",
    "DictionaryParseError",
    "DictionaryFetcher",
    "FileDictionaryFetcher",
    "InMemoryDictionaryFetcher",
    "NamespaceLoader",
    "deep_merge",
    "merge_namespaces",
    "NamespaceCache",
    "build_cache_key",
    "Translator",
    "create_translator",
    "NamespaceService",
    "ItemContentLoader",
    "LoadedContent",
]
