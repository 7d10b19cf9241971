"""Shared pydantic models for calculators and localized item content."""

from models.calculators import CalculatorSchema
from models.content import (
    ArticleContent,
    CalculatorContent,
    CalculatorExample,
    FaqEntry,
    InputContent,
    OutputContent,
    SeoContent,
    StandardContent,
    StandardFormula,
    StandardTable,
)

__all__ = [
    "CalculatorSchema",
    "ArticleContent",
    "CalculatorContent",
    "CalculatorExample",
    "FaqEntry",
    "InputContent",
    "OutputContent",
    "SeoContent",
    "StandardContent",
    "StandardFormula",
    "StandardTable",
]
