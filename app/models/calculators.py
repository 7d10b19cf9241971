"""Calculator schema as consumed by the tag system."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CalculatorSchema(BaseModel):
    """Static calculator definition.

    Only the fields used for tagging and browsing are modelled; inputs,
    outputs and formulas of the full definition are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": "auto-loan-calculator",
                "slug": "auto-loan-calculator",
                "category": "finance",
                "tags": ["auto-loan", "interest"],
            }
        },
    )

    id: str = Field(..., min_length=1, description="Stable calculator identifier")
    slug: str = Field(..., min_length=1, description="URL slug")
    category: str = Field(..., min_length=1, description="Catalog category")
    tags: Optional[List[str]] = Field(None, description="Hand-authored tag ids")
    is_enabled: bool = Field(True, description="Disabled calculators are hidden")
