"""Infrastructure modules for the calculator portal.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, ...)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Namespace loading, merging, caching and translation resolution
- services: Dependency injection providers (get_settings, SettingsDep, ...)
"""
