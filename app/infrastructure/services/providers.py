"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import ItemContentLoader, NamespaceService
from infrastructure.i18n.factory import create_item_content_loader, create_namespace_service
from packages.tags import TagAssigner, TagCatalog


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_namespace_service() -> NamespaceService:
    """
    Get application-scoped namespace service singleton.

    Building it constructs the process-wide namespace cache; in
    development-like environments that cache is cleared at this point.

    Returns:
        NamespaceService: Cached service wired from settings.i18n.

    Usage:
        @router.get("/i18n/{locale}")
        async def get_dictionary(locale: str, service: NamespaceServiceDep):
            return await service.get_or_load(locale, ["common"])
    """
    return create_namespace_service(get_settings())


@lru_cache
def get_item_content_loader() -> ItemContentLoader:
    """
    Get application-scoped item content loader singleton.

    Returns:
        ItemContentLoader: Loader reading calculators/standards/learn items.
    """
    return create_item_content_loader(get_settings())


@lru_cache
def get_tag_catalog() -> TagCatalog:
    """
    Get the static tag catalog.

    Returns:
        TagCatalog: Catalog of all domain/topic/intent tag definitions.
    """
    return TagCatalog()


@lru_cache
def get_tag_assigner() -> TagAssigner:
    """
    Get application-scoped tag assigner singleton.

    Returns:
        TagAssigner: Rule-based assigner bound to the static catalog and
        configured with settings.tags.MAX_TOPIC_TAGS.
    """
    settings = get_settings()
    return TagAssigner(
        catalog=get_tag_catalog(),
        max_topic_tags=settings.tags.MAX_TOPIC_TAGS,
    )
