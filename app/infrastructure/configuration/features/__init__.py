"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.tags import TagsSettings

__all__ = [
    "TagsSettings",
]
