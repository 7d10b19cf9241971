"""Feature-level fixtures for tag taxonomy tests."""

import pytest

from packages.tags import TagAssigner, TagCatalog


@pytest.fixture
def catalog():
    return TagCatalog()


@pytest.fixture
def assigner(catalog):
    return TagAssigner(catalog=catalog)


@pytest.fixture
def registry(make_calculator):
    """A small calculator registry with declared tags."""
    return [
        make_calculator(
            "mortgage-calculator",
            category="finance",
            tags=["finance", "mortgage", "interest", "calculator"],
        ),
        make_calculator(
            "auto-loan-calculator",
            category="finance",
            tags=["finance", "auto-loan", "car-loan", "interest", "calculator"],
        ),
        make_calculator(
            "compound-interest",
            category="finance",
            tags=["finance", "interest", "compound-interest", "not-a-tag", "calculator"],
        ),
        make_calculator(
            "concrete-calculator",
            category="construction",
            tags=["construction", "concrete", "estimator"],
        ),
        make_calculator("percentage-calculator", category="math", tags=None),
        make_calculator(
            "temperature-converter",
            category="tools",
            tags=["tools", "temperature", "converter"],
        ),
    ]
