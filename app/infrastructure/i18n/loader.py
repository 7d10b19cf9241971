"""Namespace loader with fallback-locale resolution.

Resolves a (locale, namespace) pair to a dictionary through a
DictionaryFetcher. A missing resource is retried once with the fallback
locale; if that also fails the loader degrades to an empty dictionary.
Missing translations must never fail a render, so load() never raises
for fetch errors.
"""

from typing import Optional, Tuple

from infrastructure.i18n.exceptions import DictionaryFetchError
from infrastructure.i18n.fetchers import DictionaryFetcher
from infrastructure.i18n.models import DEFAULT_LOCALE, Dictionary, Locale, locale_code
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class NamespaceLoader:
    """Loads single namespace dictionaries with one fallback attempt.

    Attributes:
        fetcher: DictionaryFetcher used for every resource.
        default_fallback: Fallback locale used when callers pass none.
    """

    def __init__(
        self,
        fetcher: DictionaryFetcher,
        default_fallback: Locale | str = DEFAULT_LOCALE,
    ):
        self.fetcher = fetcher
        self.default_fallback = default_fallback

    async def fetch_with_fallback(
        self,
        locale: Locale | str,
        namespace: str,
        fallback_locale: Optional[Locale | str] = None,
    ) -> Optional[Tuple[Dictionary, str]]:
        """Fetch a namespace, retrying once with the fallback locale.

        Args:
            locale: Requested locale.
            namespace: Namespace to fetch.
            fallback_locale: Locale to retry with (default: default_fallback).

        Returns:
            (dictionary, locale code that served it), or None when both the
            requested and fallback locales are missing.
        """
        requested = locale_code(locale)
        fallback = locale_code(
            fallback_locale if fallback_locale is not None else self.default_fallback
        )

        try:
            return await self.fetcher.fetch(requested, namespace), requested
        except DictionaryFetchError as primary_error:
            if requested == fallback:
                logger.warning(
                    "namespace_load_failed",
                    namespace=namespace,
                    locale=requested,
                    error=str(primary_error),
                )
                return None

        try:
            dictionary = await self.fetcher.fetch(fallback, namespace)
        except DictionaryFetchError as fallback_error:
            logger.warning(
                "namespace_load_failed",
                namespace=namespace,
                locale=requested,
                fallback_locale=fallback,
                error=str(fallback_error),
            )
            return None

        logger.debug(
            "namespace_loaded_from_fallback",
            namespace=namespace,
            locale=requested,
            fallback_locale=fallback,
        )
        return dictionary, fallback

    async def load(
        self,
        locale: Locale | str,
        namespace: str,
        fallback_locale: Optional[Locale | str] = None,
    ) -> Dictionary:
        """Load a namespace dictionary, degrading to {} when unavailable.

        Args:
            locale: Requested locale.
            namespace: Namespace to load.
            fallback_locale: Locale to retry with (default: default_fallback).

        Returns:
            The requested locale's dictionary, else the fallback locale's,
            else an empty dictionary.
        """
        result = await self.fetch_with_fallback(locale, namespace, fallback_locale)
        if result is None:
            return {}
        return result[0]
