"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import ItemContentLoader, NamespaceService
from infrastructure.services.providers import (
    get_item_content_loader,
    get_namespace_service,
    get_settings,
    get_tag_assigner,
    get_tag_catalog,
)
from packages.tags import TagAssigner, TagCatalog

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Namespace loading/caching service
NamespaceServiceDep = Annotated[NamespaceService, Depends(get_namespace_service)]

# Item content (calculators/standards/articles)
ItemContentLoaderDep = Annotated[ItemContentLoader, Depends(get_item_content_loader)]

# Tag catalog and assigner
TagCatalogDep = Annotated[TagCatalog, Depends(get_tag_catalog)]
TagAssignerDep = Annotated[TagAssigner, Depends(get_tag_assigner)]

__all__ = [
    "SettingsDep",
    "NamespaceServiceDep",
    "ItemContentLoaderDep",
    "TagCatalogDep",
    "TagAssignerDep",
]
