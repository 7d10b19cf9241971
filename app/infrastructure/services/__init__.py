"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    ItemContentLoaderDep,
    NamespaceServiceDep,
    SettingsDep,
    TagAssignerDep,
    TagCatalogDep,
)
from infrastructure.services.providers import (
    get_item_content_loader,
    get_namespace_service,
    get_settings,
    get_tag_assigner,
    get_tag_catalog,
)

__all__ = [
    "SettingsDep",
    "NamespaceServiceDep",
    "ItemContentLoaderDep",
    "TagCatalogDep",
    "TagAssignerDep",
    "get_settings",
    "get_namespace_service",
    "get_item_content_loader",
    "get_tag_catalog",
    "get_tag_assigner",
]
