"""Tests for packages.tags.assigner module."""

from unittest.mock import patch

import pytest

from packages.tags import TagAssigner, TagGroup, assign_tags, normalize_tags
from packages.tags.definitions import CATEGORY_TO_DOMAIN

pytestmark = pytest.mark.unit


class TestAssign:
    """Tests for TagAssigner.assign()."""

    @pytest.mark.parametrize(
        "calc_id,category,expected",
        [
            ("auto-loan-calculator", "finance", ["finance", "auto-loan", "car-loan", "calculator"]),
            ("mortgage-calculator", "finance", ["finance", "mortgage", "calculator"]),
            ("quadratic-equation-solver", "math", ["math", "quadratic", "equation", "calculator"]),
            ("temperature-converter", "tools", ["tools", "temperature", "converter"]),
            ("paint-calculator", "construction", ["construction", "paint", "estimator"]),
            ("retirement-calculator", "finance", ["finance", "retirement", "savings", "planner"]),
            ("password-generator", "tools", ["tools", "password", "generator"]),
            ("fuel-consumption-calculator", "auto", ["auto", "fuel-consumption", "fuel", "calculator"]),
            ("weight-converter", "tools", ["tools", "weight", "converter"]),
            ("cement-calculator", "engineering", ["construction", "concrete", "calculator"]),
        ],
    )
    def test_assign(self, assigner, make_calculator, calc_id, category, expected):
        assert assigner.assign(make_calculator(calc_id, category=category)) == expected

    def test_matching_is_case_insensitive(self, assigner, make_calculator):
        calculator = make_calculator("Mortgage-Calculator", slug="MORTGAGE", category="finance")
        assert assigner.assign(calculator) == ["finance", "mortgage", "calculator"]

    def test_slug_is_matched(self, assigner, make_calculator):
        calculator = make_calculator("calc-17", slug="bmi-calculator", category="health")
        assert assigner.assign(calculator) == ["health", "bmi", "calculator"]

    def test_weight_rule_looks_at_id_only(self, assigner, make_calculator):
        calculator = make_calculator("mass", slug="weight-converter", category="tools")
        assert assigner.assign(calculator) == ["tools", "converter"]

    def test_weight_rule_excludes_body_fat(self, assigner, make_calculator):
        calculator = make_calculator("body-fat-weight", category="health")
        assert assigner.assign(calculator) == ["health", "body-fat", "calculator"]

    def test_topics_are_truncated_to_five(self, assigner, make_calculator):
        calculator = make_calculator(
            "savings-interest-roi-retirement-mortgage-loan", category="finance"
        )
        assert assigner.assign(calculator) == [
            "finance",
            "mortgage",
            "savings",
            "interest",
            "compound-interest",
            "roi",
            "planner",
        ]

    def test_max_topic_tags_is_configurable(self, catalog, make_calculator):
        assigner = TagAssigner(catalog=catalog, max_topic_tags=1)
        calculator = make_calculator("auto-loan-calculator", category="finance")
        assert assigner.assign(calculator) == ["finance", "auto-loan", "calculator"]

    def test_unknown_category_has_no_domain(self, assigner, make_calculator):
        assert assigner.assign(make_calculator("bmi", category="misc")) == ["bmi", "calculator"]

    def test_intent_first_match_wins(self, assigner, make_calculator):
        """A converter that is also a generator gets the converter intent."""
        calculator = make_calculator("random-unit-converter", category="tools")
        assert assigner.intent_tag(calculator) == "converter"

    @pytest.mark.parametrize(
        "calc_id,category,intent",
        [
            ("qr-code", "tools", "generator"),
            ("emergency-fund", "finance", "planner"),
            ("zodiac-compatibility", "compatibility", "checker"),
            ("roof-estimator", "math", "estimator"),
            ("tile-layout", "construction", "estimator"),
            ("bmi-calculator", "health", "calculator"),
        ],
    )
    def test_intent_tag(self, assigner, make_calculator, calc_id, category, intent):
        assert assigner.intent_tag(make_calculator(calc_id, category=category)) == intent

    @pytest.mark.parametrize("category", sorted(CATEGORY_TO_DOMAIN))
    @pytest.mark.parametrize(
        "calc_id",
        [
            "savings-interest-roi-retirement-mortgage-loan",
            "temperature-speed-length-converter",
            "random-password-qr-generator",
            "pregnancy-due-date",
            "car-affordability",
            "number-to-words",
            "plain",
        ],
    )
    def test_one_domain_one_intent_at_most_five_topics(
        self, assigner, catalog, make_calculator, category, calc_id
    ):
        tags = assigner.assign(make_calculator(calc_id, category=category))
        groups = [catalog.group_of(tag) for tag in tags]

        assert len(tags) == len(set(tags))
        assert groups.count(TagGroup.DOMAIN) == 1
        assert groups.count(TagGroup.INTENT) == 1
        assert groups.count(TagGroup.TOPIC) <= 5
        assert None not in groups


class TestNormalize:
    """Tests for TagAssigner.normalize()."""

    def test_invalid_declared_tags_fall_back_to_assign(self, assigner, make_calculator):
        calculator = make_calculator("mortgage-calculator", category="finance", tags=["not-a-real-tag"])
        assert assigner.normalize(calculator) == assigner.assign(calculator)

    def test_empty_declared_tags_fall_back_to_assign(self, assigner, make_calculator):
        calculator = make_calculator("mortgage-calculator", category="finance", tags=[])
        assert assigner.normalize(calculator) == ["finance", "mortgage", "calculator"]

    def test_missing_declared_tags_fall_back_to_assign(self, assigner, make_calculator):
        calculator = make_calculator("mortgage-calculator", category="finance")
        assert assigner.normalize(calculator) == ["finance", "mortgage", "calculator"]

    def test_valid_declared_tags_are_kept(self, assigner, make_calculator):
        calculator = make_calculator(
            "mortgage-calculator", category="finance", tags=["interest", "bogus"]
        )
        assert assigner.normalize(calculator) == ["interest", "finance", "calculator"]

    def test_domain_and_intent_not_duplicated(self, assigner, make_calculator):
        calculator = make_calculator(
            "mortgage-calculator",
            category="finance",
            tags=["finance", "mortgage", "calculator"],
        )
        assert assigner.normalize(calculator) == ["finance", "mortgage", "calculator"]

    def test_invalid_tags_are_logged(self, assigner, make_calculator):
        calculator = make_calculator("bmi", category="health", tags=["bmi", "bogus"])

        with patch("packages.tags.assigner.logger") as mock_logger:
            assigner.normalize(calculator)

        mock_logger.info.assert_called_once_with(
            "calculator_tags_invalid", calculator_id="bmi", invalid=["bogus"]
        )


class TestModuleFunctions:
    def test_assign_tags(self, make_calculator):
        calculator = make_calculator("bmi-calculator", category="health")
        assert assign_tags(calculator) == ["health", "bmi", "calculator"]

    def test_normalize_tags(self, make_calculator):
        calculator = make_calculator("bmi-calculator", category="health", tags=["nope"])
        assert normalize_tags(calculator) == ["health", "bmi", "calculator"]
