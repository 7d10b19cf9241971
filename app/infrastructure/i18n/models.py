"""Translation models for the i18n system.

Defines the supported locales, the dictionary shapes produced by loaders
and merged by the namespace service, and the options accepted when
loading namespaces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class Locale(str, Enum):
    """Supported locale identifiers.

    Plain language codes; "en" is the process-wide default and fallback.
    """

    EN = "en"
    RU = "ru"
    ES = "es"
    TR = "tr"
    HI = "hi"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale code (e.g., "en", "ru"). Case insensitive.

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str.strip().lower())
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def display_name(self) -> str:
        """Native display name of the locale (e.g. "Español")."""
        return LOCALE_NAMES[self]


DEFAULT_LOCALE = Locale.EN

LOCALE_NAMES: Dict[Locale, str] = {
    Locale.EN: "English",
    Locale.RU: "Русский",
    Locale.ES: "Español",
    Locale.TR: "Türkçe",
    Locale.HI: "हिन्दी",
}

# Leaves are strings; anything else nested under a key is another Dictionary.
# JSON booleans/numbers pass through untouched but never resolve as text.
Dictionary = Dict[str, Any]
DictionaryValue = Union[str, Dictionary]
MergedDictionary = Dictionary


def locale_code(locale: Union["Locale", str]) -> str:
    """Return the plain code for a Locale member or a raw locale string.

    Raw strings are accepted so that unsupported codes (e.g. "fr") can
    still be requested and fall back to the default locale.
    """
    if isinstance(locale, Locale):
        return locale.value
    return str(locale)


def is_nested(value: Any) -> bool:
    """True for nested dictionary values (not leaves, lists or None)."""
    return isinstance(value, dict)


@dataclass(frozen=True)
class LoadNamespacesOptions:
    """Options for loading a set of namespaces.

    Attributes:
        fallback_locale: Locale to retry with when a namespace is missing.
            Defaults to the service's default locale.
        log_missing: Warn when the merged result is completely empty.
    """

    fallback_locale: Optional[Union[Locale, str]] = None
    log_missing: bool = False
