"""Tag assigner.

Derives the tag set of a calculator from its category, id and slug, and
reconciles hand-authored tags with the catalog.
"""

from typing import Iterable, List, Optional, Sequence

from infrastructure.logging import get_module_logger
from models.calculators import CalculatorSchema
from packages.tags.definitions import TagCatalog, TagGroup
from packages.tags.rules import (
    DEFAULT_INTENT,
    INTENT_RULES,
    TOPIC_RULES,
    CalculatorFacts,
    IntentRule,
    TopicRule,
)

logger = get_module_logger()

MAX_TOPIC_TAGS = 5


def _unique(tag_ids: Iterable[str]) -> List[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(tag_ids))


class TagAssigner:
    """Assigns domain, topic and intent tags to calculators.

    Attributes:
        catalog: Tag catalog used for category lookup and validation.
        max_topic_tags: Upper bound on topic tags per calculator.
    """

    def __init__(
        self,
        catalog: Optional[TagCatalog] = None,
        max_topic_tags: int = MAX_TOPIC_TAGS,
        topic_rules: Sequence[TopicRule] = TOPIC_RULES,
        intent_rules: Sequence[IntentRule] = INTENT_RULES,
        default_intent: str = DEFAULT_INTENT,
    ):
        self.catalog = catalog or TagCatalog()
        self.max_topic_tags = max_topic_tags
        self.topic_rules = tuple(topic_rules)
        self.intent_rules = tuple(intent_rules)
        self.default_intent = default_intent

    def domain_tag(self, calculator: CalculatorSchema) -> Optional[str]:
        return self.catalog.domain_tag_for_category(calculator.category)

    def topic_tags(self, calculator: CalculatorSchema) -> List[str]:
        """Topic tags from all matching rules, deduplicated and truncated.

        Ids that are not topic tags in the catalog (e.g. the "converter"
        and "generator" intents some tool rules name) are dropped.
        """
        facts = CalculatorFacts.from_calculator(calculator)
        matched: List[str] = []
        for rule in self.topic_rules:
            matched.extend(rule.apply(facts))
        topics = [
            tag_id
            for tag_id in _unique(matched)
            if self.catalog.group_of(tag_id) == TagGroup.TOPIC
        ]
        return topics[: self.max_topic_tags]

    def intent_tag(self, calculator: CalculatorSchema) -> str:
        """Intent of the first matching rule, or the default intent."""
        facts = CalculatorFacts.from_calculator(calculator)
        for rule in self.intent_rules:
            intent = rule.apply(facts)
            if intent is not None:
                return intent
        return self.default_intent

    def assign(self, calculator: CalculatorSchema) -> List[str]:
        """Infer tags as [domain, *topics, intent] without duplicates."""
        tags: List[str] = []
        domain = self.domain_tag(calculator)
        if domain:
            tags.append(domain)
        else:
            logger.debug(
                "calculator_category_unmapped",
                calculator_id=calculator.id,
                category=calculator.category,
            )
        tags.extend(self.topic_tags(calculator))
        tags.append(self.intent_tag(calculator))
        return _unique(tags)

    def normalize(self, calculator: CalculatorSchema) -> List[str]:
        """Reconcile declared tags with the catalog.

        Declared tags unknown to the catalog are dropped. When at least one
        declared tag survives, the domain and intent tags are added to it;
        otherwise the tags are inferred with assign().
        """
        if calculator.tags:
            validation = self.catalog.validate(calculator.tags)
            if not validation.valid:
                logger.info(
                    "calculator_tags_invalid",
                    calculator_id=calculator.id,
                    invalid=validation.invalid,
                )
            declared = [t for t in calculator.tags if t in self.catalog]
            if declared:
                tags = list(declared)
                domain = self.domain_tag(calculator)
                if domain:
                    tags.append(domain)
                tags.append(self.intent_tag(calculator))
                return _unique(tags)

        return self.assign(calculator)


_default_assigner: Optional[TagAssigner] = None


def _get_default_assigner() -> TagAssigner:
    global _default_assigner
    if _default_assigner is None:
        _default_assigner = TagAssigner()
    return _default_assigner


def assign_tags(calculator: CalculatorSchema) -> List[str]:
    """Assign tags with the default catalog and rules."""
    return _get_default_assigner().assign(calculator)


def normalize_tags(calculator: CalculatorSchema) -> List[str]:
    """Normalize tags with the default catalog and rules."""
    return _get_default_assigner().normalize(calculator)
