"""Factory functions for creating i18n components.

Wires fetcher, loader, cache and service from application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.cache import NamespaceCache
from infrastructure.i18n.fetchers import DictionaryFetcher, FileDictionaryFetcher
from infrastructure.i18n.items import ItemContentLoader
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.service import NamespaceService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_fetcher(settings: Settings) -> DictionaryFetcher:
    """Create the filesystem fetcher configured by settings.i18n."""
    return FileDictionaryFetcher(
        locales_dir=Path(settings.i18n.LOCALES_DIR),
        extensions=settings.i18n.DICTIONARY_EXTENSIONS,
    )


def create_namespace_service(
    settings: Settings,
    fetcher: Optional[DictionaryFetcher] = None,
) -> NamespaceService:
    """Create and configure a NamespaceService.

    In development-like environments the cache is disabled and cleared
    once here, so no entry survives a reload boundary.

    Args:
        settings: Application settings.
        fetcher: Optional fetcher (default: filesystem fetcher from settings).

    Returns:
        NamespaceService: Configured service instance.

    Usage:
        service = create_namespace_service(get_settings())
        merged = await service.get_or_load("en", ["common", "navigation"])
    """
    fetcher = fetcher or create_fetcher(settings)
    default_locale = settings.i18n.DEFAULT_LOCALE

    cache = NamespaceCache(
        enabled=settings.i18n.cache_enabled_for(settings.is_development)
    )
    service = NamespaceService(
        loader=NamespaceLoader(fetcher, default_fallback=default_locale),
        cache=cache,
        default_locale=default_locale,
        debug=settings.is_development,
    )

    if settings.is_development:
        cache.clear()
        logger.info("namespace_cache_cleared_on_startup", app_env=settings.APP_ENV)

    logger.info(
        "namespace_service_created",
        default_locale=default_locale,
        cache_enabled=cache.enabled,
    )
    return service


def create_item_content_loader(
    settings: Settings,
    fetcher: Optional[DictionaryFetcher] = None,
) -> ItemContentLoader:
    """Create an ItemContentLoader sharing the settings' locale tree."""
    fetcher = fetcher or create_fetcher(settings)
    return ItemContentLoader(
        NamespaceLoader(fetcher, default_fallback=settings.i18n.DEFAULT_LOCALE)
    )
