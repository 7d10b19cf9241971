"""Translation loading infrastructure settings."""

from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings, split_list_value

# .../app/infrastructure/configuration/infrastructure/i18n.py -> .../app/locales
DEFAULT_LOCALES_DIR = Path(__file__).resolve().parents[3] / "locales"


class I18nSettings(InfrastructureSettings):
    """Translation dictionary loading and caching configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Root directory holding <locale>/<namespace>.<ext> files
        I18N_DEFAULT_LOCALE: Fallback locale code (default: en); must be supported
        I18N_SUPPORTED_LOCALES: Locale codes served over HTTP, as a JSON list
            or comma separated (e.g. "en,ru")
        I18N_DICTIONARY_EXTENSIONS: Extensions tried in order per resource,
            as a JSON list or comma separated
        I18N_CACHE_ENABLED: Force the namespace cache on/off (default: on in
            production-like environments, off in development-like ones)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        root = settings.i18n.LOCALES_DIR
        enabled = settings.i18n.cache_enabled_for(settings.is_development)
        ```
    """

    LOCALES_DIR: Path = Field(default=DEFAULT_LOCALES_DIR, alias="I18N_LOCALES_DIR")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en", "ru", "es", "tr", "hi"],
        alias="I18N_SUPPORTED_LOCALES",
    )
    DICTIONARY_EXTENSIONS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [".json", ".yml", ".yaml"],
        alias="I18N_DICTIONARY_EXTENSIONS",
    )
    CACHE_ENABLED: Optional[bool] = Field(default=None, alias="I18N_CACHE_ENABLED")

    @field_validator("SUPPORTED_LOCALES", "DICTIONARY_EXTENSIONS", mode="before")
    @classmethod
    def split_list(cls, v: Any) -> Any:
        return split_list_value(v)

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def lowercase_default_locale(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("SUPPORTED_LOCALES")
    @classmethod
    def lowercase_locales(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(code.strip().lower() for code in v))

    @field_validator("DICTIONARY_EXTENSIONS")
    @classmethod
    def ensure_leading_dot(cls, v: List[str]) -> List[str]:
        """Normalize extensions to the ".ext" form."""
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]

    @model_validator(mode="after")
    def default_locale_is_supported(self) -> "I18nSettings":
        if self.DEFAULT_LOCALE not in self.SUPPORTED_LOCALES:
            raise ValueError(
                f"I18N_DEFAULT_LOCALE '{self.DEFAULT_LOCALE}' is not in "
                f"I18N_SUPPORTED_LOCALES {self.SUPPORTED_LOCALES}"
            )
        return self

    def is_supported(self, locale: str) -> bool:
        """Whether a locale code is enabled for this deployment."""
        return locale.strip().lower() in self.SUPPORTED_LOCALES

    def cache_enabled_for(self, is_development: bool) -> bool:
        """Resolve whether the namespace cache should be active.

        Args:
            is_development: Whether the application runs in a development-like mode.

        Returns:
            The explicit CACHE_ENABLED override if set, otherwise True only
            outside development.
        """
        if self.CACHE_ENABLED is not None:
            return self.CACHE_ENABLED
        return not is_development
