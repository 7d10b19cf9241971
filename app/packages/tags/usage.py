"""Tag usage analysis over a set of calculators.

Only declared tags that exist in the catalog are counted. The caller
supplies the calculators (e.g. the enabled entries of a registry).
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from infrastructure.i18n.models import DEFAULT_LOCALE, Locale
from models.calculators import CalculatorSchema
from packages.tags.definitions import GROUP_ORDER, TagCatalog, TagGroup
from packages.tags.schemas import TagSummary, TagUsage

DEFAULT_TOP_TAGS_LIMIT = 20


def _declared_catalog_tags(calculators: Iterable[CalculatorSchema], catalog: TagCatalog):
    for calculator in calculators:
        for tag_id in calculator.tags or ():
            if tag_id in catalog:
                yield tag_id


def get_used_tag_ids(
    calculators: Iterable[CalculatorSchema], catalog: Optional[TagCatalog] = None
) -> List[str]:
    """Distinct catalog tag ids declared by the calculators, first-seen order."""
    catalog = catalog or TagCatalog()
    return list(dict.fromkeys(_declared_catalog_tags(calculators, catalog)))


def get_used_tags(
    calculators: Iterable[CalculatorSchema],
    locale: Locale | str = DEFAULT_LOCALE,
    catalog: Optional[TagCatalog] = None,
) -> List[TagSummary]:
    """Used tags with labels and groups."""
    catalog = catalog or TagCatalog()
    summaries = []
    for tag_id in get_used_tag_ids(calculators, catalog):
        definition = catalog.get_definition(tag_id)
        summaries.append(
            TagSummary(id=tag_id, label=definition.label_for(locale), group=definition.group)
        )
    return summaries


def get_tag_frequency(
    calculators: Iterable[CalculatorSchema], catalog: Optional[TagCatalog] = None
) -> Dict[str, int]:
    """Number of calculators declaring each catalog tag."""
    catalog = catalog or TagCatalog()
    return dict(Counter(_declared_catalog_tags(calculators, catalog)))


def get_top_used_tags(
    calculators: Iterable[CalculatorSchema],
    locale: Locale | str = DEFAULT_LOCALE,
    limit: int = DEFAULT_TOP_TAGS_LIMIT,
    include_intent: bool = False,
    catalog: Optional[TagCatalog] = None,
) -> List[TagUsage]:
    """Most used tags.

    Sorted by count (descending), then group (domain, topic, intent), then
    label (case-insensitive). Intent tags are left out unless
    include_intent is set.
    """
    catalog = catalog or TagCatalog()
    calculators = list(calculators)
    frequency = get_tag_frequency(calculators, catalog)

    usages = [
        TagUsage(id=tag.id, label=tag.label, group=tag.group, count=frequency[tag.id])
        for tag in get_used_tags(calculators, locale, catalog)
        if include_intent or tag.group != TagGroup.INTENT
    ]
    usages.sort(key=lambda u: (-u.count, GROUP_ORDER[u.group], u.label.casefold()))
    return usages[:limit]


def get_used_tags_for_category(
    calculators: Iterable[CalculatorSchema],
    category: str,
    locale: Locale | str = DEFAULT_LOCALE,
    catalog: Optional[TagCatalog] = None,
) -> List[TagUsage]:
    """Tags used within one category, sorted by count then label."""
    catalog = catalog or TagCatalog()
    in_category = [c for c in calculators if c.category == category]
    frequency = get_tag_frequency(in_category, catalog)

    usages = []
    for tag_id, count in frequency.items():
        definition = catalog.get_definition(tag_id)
        usages.append(
            TagUsage(id=tag_id, label=definition.label_for(locale), group=definition.group, count=count)
        )
    usages.sort(key=lambda u: (-u.count, u.label.casefold()))
    return usages
