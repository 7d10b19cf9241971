"""Translation resolution over a merged dictionary.

A Translator is built once per merged dictionary and called with a key
path such as "common.button.calculate" or "calculators/ui.sections.all"
("/" and "." are interchangeable). A miss returns the key itself so a
missing translation shows up as visible text instead of an error.
"""

import re
from typing import Any, Mapping, Optional

from infrastructure.i18n.models import Dictionary, is_nested
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# {name} or {name.with.dots}
PLACEHOLDER_PATTERN = re.compile(r"\{(\w+(?:\.\w+)*)\}")


def normalize_key(key: str) -> str:
    """Rewrite "/" separators to "." (e.g. "legacy/ui.ok" -> "legacy.ui.ok")."""
    return key.replace("/", ".")


def lookup(dictionary: Dictionary, key: str) -> Optional[str]:
    """Walk a dotted key path through the dictionary.

    Returns:
        The string at the path, or None if a segment is missing or the
        final value is not a string.
    """
    current: Any = dictionary
    for segment in key.split("."):
        if not is_nested(current):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current if isinstance(current, str) else None


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace {placeholder} occurrences with values from params.

    Placeholders without a matching param are left as they are.
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


class Translator:
    """Callable translation resolver bound to one dictionary.

    Attributes:
        dictionary: Merged dictionary the translator reads from.
        debug: Warn about missing keys (development-like environments).
    """

    def __init__(self, dictionary: Dictionary, debug: bool = False):
        self.dictionary = dictionary
        self.debug = debug

    def __call__(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.translate(key, params)

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Resolve a key and substitute template parameters.

        Args:
            key: Dotted or slashed key path.
            params: Optional values for {placeholder} substitution.

        Returns:
            The translated string, or key unchanged when not found.
        """
        normalized = normalize_key(key)
        value = lookup(self.dictionary, normalized)

        if value is None:
            if self.debug:
                logger.warning(
                    "translation_missing",
                    key=key,
                    normalized_key=normalized,
                    available_keys=list(self.dictionary.keys()),
                )
            return key

        if params:
            return interpolate(value, params)
        return value

    def has(self, key: str) -> bool:
        """Check whether a key resolves to a string."""
        return lookup(self.dictionary, normalize_key(key)) is not None


def create_translator(dictionary: Dictionary, debug: bool = False) -> Translator:
    """Create a Translator for a merged dictionary."""
    return Translator(dictionary, debug=debug)
