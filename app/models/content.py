"""Localized item content: calculators, standards and articles.

Item files live at <locale>/<category>/items/<slug>.json and use
camelCase keys; both camelCase and snake_case are accepted here.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for content models (camelCase aliases, unknown keys ignored)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SeoContent(ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class CalculatorExample(ContentModel):
    title: str
    description: str
    steps: List[str] = Field(default_factory=list)
    result_description: Optional[str] = None


class FaqEntry(ContentModel):
    question: str
    answer: str


class InputContent(ContentModel):
    label: str
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    unit_label: Optional[str] = None


class OutputContent(ContentModel):
    label: str
    unit_label: Optional[str] = None


class CalculatorContent(ContentModel):
    """Translated texts of one calculator page."""

    title: str
    short_description: str
    long_description: Optional[str] = None
    how_to: List[str] = Field(default_factory=list)
    examples: List[CalculatorExample] = Field(default_factory=list)
    faq: List[FaqEntry] = Field(default_factory=list)
    seo: Optional[SeoContent] = None
    inputs: List[InputContent] = Field(default_factory=list)
    outputs: List[OutputContent] = Field(default_factory=list)


class StandardFormula(ContentModel):
    title: str
    formula: str
    description: Optional[str] = None


class StandardTable(ContentModel):
    title: str
    rows: List[List[str]] = Field(default_factory=list)
    description: Optional[str] = None


class StandardContent(ContentModel):
    """Translated texts of one building standard page."""

    title: str
    short_description: str
    long_description: Optional[str] = None
    formulas: List[StandardFormula] = Field(default_factory=list)
    tables: List[StandardTable] = Field(default_factory=list)
    seo: Optional[SeoContent] = None


class ArticleContent(ContentModel):
    """Translated texts of one "learn" article."""

    title: str
    short_description: str
    content_html: str
    seo: Optional[SeoContent] = None
