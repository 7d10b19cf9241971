"""Pydantic schemas for the tags package."""

from typing import List

from pydantic import BaseModel, Field

from packages.tags.definitions import TagGroup


class TagSummary(BaseModel):
    """A catalog tag with its label in the requested locale."""

    id: str = Field(..., description="Tag id", examples=["compound-interest"])
    label: str = Field(..., description="Localized label")
    group: TagGroup = Field(..., description="Tag group")


class TagUsage(TagSummary):
    """A tag with the number of calculators that declare it."""

    count: int = Field(..., ge=0, description="Number of calculators using the tag")


class TagValidationResponse(BaseModel):
    valid: bool
    invalid: List[str] = Field(default_factory=list)


class NormalizedTagsResponse(BaseModel):
    """Normalized tags of a calculator plus validation of its declared tags."""

    calculator_id: str = Field(..., description="Calculator id")
    tags: List[str] = Field(..., description="Normalized tag ids")
    validation: TagValidationResponse
