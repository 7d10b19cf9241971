"""Calculator portal configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Feature settings
from infrastructure.configuration.features import TagsSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings

DEVELOPMENT_ENVIRONMENTS = frozenset({"development", "dev", "local"})


class Settings(BaseSettings):
    """Calculator portal configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Features**: Feature package configurations (tags)
    - **Infrastructure**: Core system configurations (i18n, server)

    Environment Variables:
        APP_ENV: Runtime environment name (development, dev, local, production, ...)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.i18n.cache_enabled_for(settings.is_development):
            # Configure namespace cache...

        # Check environment
        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    APP_ENV: str = "production"
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Feature settings
    tags: TagsSettings

    # Infrastructure settings
    i18n: I18nSettings
    server: ServerSettings

    @property
    def is_development(self) -> bool:
        """Check if the application is running in a development-like mode.

        Returns:
            True if APP_ENV names a development environment, False otherwise.
        """
        return self.APP_ENV.strip().lower() in DEVELOPMENT_ENVIRONMENTS

    @property
    def is_production(self) -> bool:
        """Check if the application is running in a production-like mode.

        Returns:
            True unless APP_ENV names a development environment.
        """
        return not self.is_development

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Features
            "tags": TagsSettings,
            # Infrastructure
            "i18n": I18nSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
