"""Tags package - tag catalog, rule-based assignment and usage analysis."""

from packages.tags.assigner import TagAssigner, assign_tags, normalize_tags
from packages.tags.definitions import (
    CATEGORY_TO_DOMAIN,
    TAG_DEFINITIONS,
    TagCatalog,
    TagDefinition,
    TagGroup,
    TagValidationResult,
)
from packages.tags.schemas import TagSummary, TagUsage
from packages.tags.usage import (
    get_tag_frequency,
    get_top_used_tags,
    get_used_tag_ids,
    get_used_tags,
    get_used_tags_for_category,
)

__all__ = [
    "TagAssigner",
    "assign_tags",
    "normalize_tags",
    "CATEGORY_TO_DOMAIN",
    "TAG_DEFINITIONS",
    "TagCatalog",
    "TagDefinition",
    "TagGroup",
    "TagValidationResult",
    "TagSummary",
    "TagUsage",
    "get_tag_frequency",
    "get_top_used_tags",
    "get_used_tag_ids",
    "get_used_tags",
    "get_used_tags_for_category",
]
