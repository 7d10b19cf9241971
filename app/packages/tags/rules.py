"""Rule tables used by the tag assigner.

Topic rules are evaluated in order (finance, math, construction, health,
auto, tools) and every matching rule contributes its tags. Intent rules
form a decision list where only the first match applies.

Matching is substring based and case-insensitive on the calculator id and
slug; a few rules look at the id only.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple

from models.calculators import CalculatorSchema

Predicate = Callable[["CalculatorFacts"], bool]


@dataclass(frozen=True)
class CalculatorFacts:
    """Lower-cased view of the calculator fields that rules inspect."""

    id: str
    slug: str
    category: str

    @classmethod
    def from_calculator(cls, calculator: CalculatorSchema) -> "CalculatorFacts":
        return cls(
            id=calculator.id.lower(),
            slug=calculator.slug.lower(),
            category=calculator.category,
        )


def mentions(*needles: str) -> Predicate:
    """Match when any needle occurs in the id or the slug."""
    return lambda facts: any(n in facts.id or n in facts.slug for n in needles)


def id_contains(*needles: str) -> Predicate:
    """Match when any needle occurs in the id."""
    return lambda facts: any(n in facts.id for n in needles)


def category_is(*categories: str) -> Predicate:
    return lambda facts: facts.category in categories


def any_of(*predicates: Predicate) -> Predicate:
    return lambda facts: any(p(facts) for p in predicates)


def none_of(*predicates: Predicate) -> Predicate:
    return lambda facts: not any(p(facts) for p in predicates)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda facts: all(p(facts) for p in predicates)


@dataclass(frozen=True)
class TopicRule:
    """A topic rule: when ``when`` matches, contribute tags.

    ``variants`` are checked in order once the rule matches; the first
    matching variant replaces the default ``tags``.
    """

    name: str
    when: Predicate
    tags: Tuple[str, ...]
    variants: Tuple[Tuple[Predicate, Tuple[str, ...]], ...] = field(default=())

    def apply(self, facts: CalculatorFacts) -> Tuple[str, ...]:
        if not self.when(facts):
            return ()
        for predicate, tags in self.variants:
            if predicate(facts):
                return tags
        return self.tags


@dataclass(frozen=True)
class IntentRule:
    """An intent rule: when ``when`` matches, the calculator gets ``intent``."""

    intent: str
    when: Predicate

    def apply(self, facts: CalculatorFacts) -> Optional[str]:
        return self.intent if self.when(facts) else None


def _topic(name: str, when: Predicate, *tags: str, variants=()) -> TopicRule:
    return TopicRule(name=name, when=when, tags=tags, variants=tuple(variants))


TOPIC_RULES: Sequence[TopicRule] = (
    # Finance
    _topic(
        "loan",
        mentions("loan"),
        "loan",
        variants=[
            (mentions("auto"), ("auto-loan", "car-loan")),
            (mentions("mortgage"), ("mortgage",)),
        ],
    ),
    _topic("mortgage", mentions("mortgage"), "mortgage"),
    _topic("investment", mentions("investment"), "investment", "compound-interest"),
    _topic("savings", mentions("savings"), "savings", "interest"),
    _topic("interest", mentions("interest"), "interest", "compound-interest"),
    _topic("roi", mentions("roi"), "roi", "investment"),
    _topic("retirement", mentions("retirement"), "retirement", "savings"),
    _topic("salary", any_of(mentions("salary"), id_contains("take-home")), "salary", "tax"),
    _topic("net-worth", mentions("net-worth"), "net-worth"),
    _topic("emergency-fund", mentions("emergency-fund"), "emergency-fund", "savings"),
    _topic("overpayment", mentions("overpayment"), "loan", "interest"),
    # Math
    _topic("percent", mentions("percent"), "percent"),
    _topic("area", mentions("area"), "area"),
    _topic("volume", mentions("volume"), "volume"),
    _topic(
        "equation",
        mentions("equation"),
        "equation",
        variants=[(mentions("quadratic"), ("quadratic", "equation"))],
    ),
    _topic("pythagorean", mentions("pythagorean"), "pythagorean", "area"),
    _topic(
        "statistics",
        any_of(mentions("statistics"), id_contains("standard-deviation", "average")),
        "probability",
    ),
    # Construction
    _topic("paint", mentions("paint"), "paint"),
    _topic("primer", mentions("primer"), "primer"),
    _topic("putty", mentions("putty"), "putty"),
    _topic("tile", mentions("tile"), "tile"),
    _topic("laminate", mentions("laminate"), "laminate"),
    _topic("concrete", mentions("concrete"), "concrete"),
    _topic("cement", mentions("cement"), "concrete"),
    _topic("brick", mentions("brick"), "bricks"),
    _topic("foundation", mentions("foundation"), "foundation"),
    _topic("rebar", mentions("rebar"), "rebar"),
    _topic("stair", mentions("stair"), "stairs"),
    _topic("pipe", mentions("pipe"), "pipes"),
    _topic("electrical", any_of(mentions("electrical"), id_contains("cable")), "electrical"),
    _topic("gravel", any_of(mentions("gravel"), id_contains("sand")), "concrete"),
    # Health
    _topic("bmi", mentions("bmi"), "bmi"),
    _topic("calorie", mentions("calorie"), "calories"),
    _topic("pregnancy", any_of(mentions("pregnancy"), id_contains("due-date")), "pregnancy", "due-date"),
    _topic("body-fat", mentions("body-fat"), "body-fat"),
    _topic("heart-rate", mentions("heart-rate"), "heart-rate"),
    _topic("bmr", mentions("bmr"), "calories"),
    _topic("water-intake", mentions("water-intake"), "calories"),
    _topic("macronutrient", mentions("macronutrient"), "calories"),
    # Auto
    _topic(
        "fuel",
        mentions("fuel"),
        "fuel",
        "fuel-consumption",
        variants=[(mentions("consumption"), ("fuel-consumption", "fuel"))],
    ),
    _topic("depreciation", mentions("depreciation"), "depreciation"),
    _topic("maintenance", mentions("maintenance"), "maintenance"),
    _topic("car-tax", mentions("car-tax"), "car-tax", "tax"),
    _topic(
        "affordability",
        any_of(mentions("affordability"), id_contains("cost-of-ownership")),
        "car-loan",
        "depreciation",
        "maintenance",
    ),
    # Tools; intent ids named here are dropped by the assigner
    _topic("converter", mentions("converter"), "converter"),
    _topic("temperature", mentions("temperature"), "temperature", "converter"),
    _topic("speed", mentions("speed"), "speed", "converter"),
    _topic("length", mentions("length"), "length", "converter"),
    _topic(
        "weight",
        all_of(id_contains("weight"), none_of(id_contains("body-fat", "ideal-weight"))),
        "weight",
        "converter",
    ),
    _topic("date", any_of(mentions("date"), id_contains("days-between")), "date", "time"),
    _topic("random", mentions("random"), "random", "generator"),
    _topic("password", mentions("password"), "password", "generator"),
    _topic("qr", mentions("qr"), "qr", "generator"),
    _topic("crypto", mentions("crypto"), "crypto"),
    _topic("number-to-words", mentions("number-to-words"), "number-to-words", "converter"),
    _topic("roman-numerals", mentions("roman-numerals"), "roman-numerals", "converter"),
)

INTENT_RULES: Sequence[IntentRule] = (
    IntentRule("converter", mentions("converter")),
    IntentRule(
        "generator",
        any_of(mentions("generator"), id_contains("random", "password", "qr")),
    ),
    IntentRule(
        "planner",
        any_of(mentions("planner"), id_contains("retirement", "emergency-fund")),
    ),
    IntentRule("checker", any_of(mentions("checker"), id_contains("compatibility"))),
    IntentRule("estimator", any_of(mentions("estimator"), category_is("construction"))),
)

DEFAULT_INTENT = "calculator"
