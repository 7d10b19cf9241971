"""Namespace service: load, merge and cache translation namespaces.

Usage:
    from infrastructure.services import get_namespace_service

    service = get_namespace_service()
    t = await service.get_translator("ru", ["common", "navigation"])
    t("navigation.home")
"""

import asyncio
import copy
from typing import Optional, Sequence

from infrastructure.i18n.cache import NamespaceCache
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.merger import has_translations, merge_namespaces
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    LoadNamespacesOptions,
    Locale,
    MergedDictionary,
    locale_code,
)
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class NamespaceService:
    """Loads namespace sets through the cache.

    Namespaces of one request are fetched concurrently; results stay
    paired with their namespace by index regardless of completion order.

    Attributes:
        loader: NamespaceLoader used for each namespace.
        cache: NamespaceCache shared by all requests of the process.
        default_locale: Fallback locale when options name none.
        debug: Passed to translators (warn on missing keys).
    """

    def __init__(
        self,
        loader: NamespaceLoader,
        cache: NamespaceCache,
        default_locale: Locale | str = DEFAULT_LOCALE,
        debug: bool = False,
    ):
        self.loader = loader
        self.cache = cache
        self.default_locale = default_locale
        self.debug = debug

    async def get_or_load(
        self,
        locale: Locale | str,
        namespaces: Sequence[str],
        options: Optional[LoadNamespacesOptions] = None,
    ) -> MergedDictionary:
        """Return the merged dictionary for a locale and namespace list.

        Args:
            locale: Requested locale.
            namespaces: Namespaces, lowest priority first.
            options: Fallback locale and missing-translation logging.

        Returns:
            Merged dictionary (from cache when enabled and present). Each
            call gets its own copy; the cached entry is never handed out.
        """
        options = options or LoadNamespacesOptions()
        fallback = (
            options.fallback_locale
            if options.fallback_locale is not None
            else self.default_locale
        )
        namespaces = list(namespaces)

        cached = self.cache.get(locale, namespaces)
        if cached is not None:
            return copy.deepcopy(cached)

        dictionaries = await asyncio.gather(
            *(self.loader.load(locale, ns, fallback) for ns in namespaces)
        )
        merged = merge_namespaces(namespaces, dictionaries)
        merged = self.cache.set(locale, namespaces, merged)

        if options.log_missing and not has_translations(merged):
            logger.warning(
                "no_translations_loaded",
                locale=locale_code(locale),
                namespaces=namespaces,
            )

        return copy.deepcopy(merged)

    async def get_translator(
        self,
        locale: Locale | str,
        namespaces: Sequence[str],
        options: Optional[LoadNamespacesOptions] = None,
    ) -> Translator:
        """Load namespaces and build a Translator over the merged result."""
        merged = await self.get_or_load(locale, namespaces, options)
        return Translator(merged, debug=self.debug)

    def clear_cache(self) -> None:
        """Empty the namespace cache."""
        self.cache.clear()
