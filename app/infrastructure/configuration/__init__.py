"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
calculator portal using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation loading settings class
    TagsSettings: Tag taxonomy settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locales_dir = settings.i18n.LOCALES_DIR
    max_topics = settings.tags.MAX_TOPIC_TAGS

    # Check environment
    if settings.is_development:
        # Development-specific logic...
    ```
"""

from infrastructure.configuration.features import TagsSettings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings", "TagsSettings", "ServerSettings"]
