"""Dictionary fetching interface and implementations.

A fetcher resolves one (locale, namespace) pair to a raw dictionary. It
does no fallback and no caching; both belong to the layers above it.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence

import yaml

from infrastructure.i18n.exceptions import DictionaryNotFoundError, DictionaryParseError
from infrastructure.i18n.models import Dictionary, Locale, locale_code
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_EXTENSIONS = (".json", ".yml", ".yaml")


class DictionaryFetcher(ABC):
    """Abstract base for dictionary fetchers.

    Implementations decide where dictionaries live (filesystem, bundled
    resources, a remote store) but all address them the same way:
    <locale>/<namespace>, with "/" in the namespace acting as a directory
    separator.
    """

    @abstractmethod
    async def fetch(self, locale: Locale | str, namespace: str) -> Dictionary:
        """Fetch the dictionary for a locale and namespace.

        Args:
            locale: Locale to fetch.
            namespace: Flat ("common") or path-like ("legacy/ui") namespace.

        Returns:
            Parsed dictionary.

        Raises:
            DictionaryNotFoundError: If no resource exists.
            DictionaryParseError: If the resource is not a valid mapping.
        """


class FileDictionaryFetcher(DictionaryFetcher):
    """Fetcher for JSON/YAML dictionaries on the local filesystem.

    Expects files at <locales_dir>/<locale>/<namespace>.<ext>, trying each
    extension in order, e.g. locales/en/calculators/ui.json.

    Attributes:
        locales_dir: Root directory of the dictionary tree.
        extensions: Extensions tried, in order, for each resource.
    """

    def __init__(
        self,
        locales_dir: Path,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ):
        self.locales_dir = Path(locales_dir)
        self.extensions = tuple(extensions)

        if not self.locales_dir.exists():
            logger.warning(
                "locales_dir_missing",
                locales_dir=str(self.locales_dir),
            )

    def resolve_path(self, locale: Locale | str, namespace: str) -> Optional[Path]:
        """Return the first existing file for the resource, or None."""
        code = locale_code(locale)
        if not _is_safe_segment(code) or not _is_safe_namespace(namespace):
            return None

        base = self.locales_dir.joinpath(code, *namespace.split("/"))
        for ext in self.extensions:
            candidate = base.with_name(base.name + ext)
            if candidate.is_file():
                return candidate
        return None

    async def fetch(self, locale: Locale | str, namespace: str) -> Dictionary:
        path = self.resolve_path(locale, namespace)
        if path is None:
            raise DictionaryNotFoundError(locale_code(locale), namespace)
        return await asyncio.to_thread(self._read, path, locale_code(locale), namespace)

    @staticmethod
    def _read(path: Path, locale: str, namespace: str) -> Dictionary:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("dictionary_parse_error", file=str(path), error=str(e))
            raise DictionaryParseError(locale, namespace, str(e)) from e
        except OSError as e:
            raise DictionaryNotFoundError(locale, namespace, str(e)) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error(
                "invalid_dictionary_format",
                file=str(path),
                expected="dict",
                actual=type(data).__name__,
            )
            raise DictionaryParseError(locale, namespace, "top level is not a mapping")
        return data


class InMemoryDictionaryFetcher(DictionaryFetcher):
    """Fetcher over an in-memory {locale: {namespace: dictionary}} store.

    Counts fetch attempts, which makes cache behavior observable in tests.
    """

    def __init__(self, resources: Optional[Dict[str, Dict[str, Dictionary]]] = None):
        self.resources: Dict[str, Dict[str, Dictionary]] = {
            locale_code(locale): dict(namespaces)
            for locale, namespaces in (resources or {}).items()
        }
        self.fetch_count = 0
        self.calls: list[tuple[str, str]] = []

    def add(self, locale: Locale | str, namespace: str, dictionary: Dictionary) -> None:
        """Register (or replace) a dictionary."""
        self.resources.setdefault(locale_code(locale), {})[namespace] = dictionary

    def namespaces(self, locale: Locale | str) -> Iterable[str]:
        return self.resources.get(locale_code(locale), {}).keys()

    async def fetch(self, locale: Locale | str, namespace: str) -> Dictionary:
        code = locale_code(locale)
        self.fetch_count += 1
        self.calls.append((code, namespace))
        try:
            return self.resources[code][namespace]
        except KeyError:
            raise DictionaryNotFoundError(code, namespace) from None


def _is_safe_segment(segment: str) -> bool:
    return bool(segment) and segment not in (".", "..") and "/" not in segment and "\\" not in segment


def _is_safe_namespace(namespace: str) -> bool:
    if not namespace or namespace.startswith("/"):
        return False
    return all(_is_safe_segment(part) for part in namespace.split("/"))
