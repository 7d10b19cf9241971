"""Tag taxonomy feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class TagsSettings(FeatureSettings):
    """Configuration for calculator tag assignment and browsing.

    Environment Variables:
        TAGS_MAX_TOPIC_TAGS: Maximum topic tags inferred per calculator (default: 5)
        TAGS_TOP_LIMIT: Number of tags returned by "top used tags" listings (default: 20)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        limit = settings.tags.TOP_TAGS_LIMIT
        ```
    """

    MAX_TOPIC_TAGS: int = Field(default=5, alias="TAGS_MAX_TOPIC_TAGS", ge=0)
    TOP_TAGS_LIMIT: int = Field(default=20, alias="TAGS_TOP_LIMIT", ge=1)
