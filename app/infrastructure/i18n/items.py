"""Loaders for per-item content (calculators, standards, articles).

Item content lives in namespaces shaped "<category>/items/<slug>" and is
resolved with the same fallback-locale policy as regular namespaces.
Unlike namespace loads, a double miss yields None so that callers can
substitute placeholder content from the default_*_content() helpers. A
file that exists but does not validate counts as missing for its locale.
"""

import re
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import Dictionary, Locale, locale_code
from infrastructure.logging import get_module_logger
from models.content import ArticleContent, CalculatorContent, StandardContent

logger = get_module_logger()

ContentT = TypeVar("ContentT", bound=BaseModel)

CALCULATOR_ITEMS = "calculators/items"
STANDARD_ITEMS = "standards/items"
ARTICLE_ITEMS = "learn/items"


@dataclass(frozen=True)
class LoadedContent(Generic[ContentT]):
    """Item content together with the locale that actually served it."""

    content: ContentT
    locale: str
    requested_locale: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """True when the content came from the fallback locale."""
        return self.requested_locale is not None and self.locale != self.requested_locale


class ItemContentLoader:
    """Loads and validates item content files.

    Attributes:
        loader: NamespaceLoader providing fetch + fallback.
    """

    def __init__(self, loader: NamespaceLoader):
        self.loader = loader

    async def _load(
        self,
        kind: str,
        items_namespace: str,
        model: Type[ContentT],
        locale: Locale | str,
        slug: str,
    ) -> Optional[LoadedContent[ContentT]]:
        namespace = f"{items_namespace}/{slug}"
        requested = locale_code(locale)
        fallback = locale_code(self.loader.default_fallback)

        result = await self.loader.fetch_with_fallback(requested, namespace)
        content = self._validate(kind, slug, model, result)
        if content is None and result is not None and result[1] != fallback:
            result = await self.loader.fetch_with_fallback(fallback, namespace)
            content = self._validate(kind, slug, model, result)

        if content is None:
            logger.warning(
                "item_content_not_found",
                kind=kind,
                slug=slug,
                locale=requested,
                fallback_locale=fallback,
            )
            return None

        return LoadedContent(
            content=content,
            locale=result[1],
            requested_locale=requested,
        )

    @staticmethod
    def _validate(
        kind: str,
        slug: str,
        model: Type[ContentT],
        result: Optional[Tuple[Dictionary, str]],
    ) -> Optional[ContentT]:
        if result is None:
            return None

        data, served_locale = result
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "item_content_invalid",
                kind=kind,
                slug=slug,
                locale=served_locale,
                error_count=e.error_count(),
                errors=[".".join(str(part) for part in err["loc"]) for err in e.errors()],
            )
            return None

    async def load_calculator_content(
        self, locale: Locale | str, slug: str
    ) -> Optional[LoadedContent[CalculatorContent]]:
        """Load calculators/items/<slug> for a locale."""
        return await self._load("calculator", CALCULATOR_ITEMS, CalculatorContent, locale, slug)

    async def load_standard_content(
        self, locale: Locale | str, country: str, slug: str
    ) -> Optional[LoadedContent[StandardContent]]:
        """Load standards/items/<slug> for a locale.

        Standard item files are not split by country; country only
        identifies the request in logs.
        """
        loaded = await self._load("standard", STANDARD_ITEMS, StandardContent, locale, slug)
        if loaded is None:
            logger.debug("standard_content_missing", country=country, slug=slug)
        return loaded

    async def load_article_content(
        self, locale: Locale | str, slug: str
    ) -> Optional[LoadedContent[ArticleContent]]:
        """Load learn/items/<slug> for a locale."""
        return await self._load("article", ARTICLE_ITEMS, ArticleContent, locale, slug)


def title_from_slug(slug: str) -> str:
    """Turn "mortgage-calculator" into "Mortgage Calculator"."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), slug.replace("-", " "))


def default_calculator_content(slug: str) -> CalculatorContent:
    """Placeholder content for a calculator without an item file."""
    return CalculatorContent(
        title=title_from_slug(slug),
        short_description="Calculator description",
        how_to=["Enter values", "Click Calculate", "View results"],
    )


def default_standard_content(slug: str) -> StandardContent:
    """Placeholder content for a standard without an item file."""
    return StandardContent(
        title=title_from_slug(slug),
        short_description="Standard description",
    )


def default_article_content(slug: str) -> ArticleContent:
    """Placeholder content for an article without an item file."""
    return ArticleContent(
        title=title_from_slug(slug),
        short_description="Article description",
        content_html="<p>Article content</p>",
    )
