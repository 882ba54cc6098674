"""Decide whether a statement concerns US-China relations.

The classifier looks for keyword signals across a statement's topic, context
and quote. It is biased toward inclusion: a statement is only excluded when
its topic names an unrelated bilateral relationship or a domestic issue *and*
no US signal appears anywhere in its text. Borderline statements are kept,
since missing a relevant statement is worse than including a tangential one.

Rules are evaluated in order; the first hit decides:

1. Positive signal anywhere in the text -> relevant.
2. Exclusion phrase in the topic -> not relevant.
3. Soft signal anywhere in the text -> relevant.
4. Otherwise -> relevant.
"""

from dataclasses import dataclass
from enum import StrEnum

from rhetoric_trends.classify.rules import KeywordRule
from rhetoric_trends.data import RawStatement

# fmt: off
# Explicit or coded references to the US and US-China frictions.
POSITIVE_SIGNALS: tuple[str, ...] = (
    # Explicit US references
    "united states", "u.s.", " us ", "america", "washington", "trump", "biden",
    "us-china", "china-us", "china-u.s.", "u.s.-china", "sino-american",
    # Trade war / economic coercion
    "tariff", "trade war", "economic coercion", "section 232", "section 301",
    "entity list", "export control", "reciprocal",
    "protectionism", "trade barrier", "trade friction", "trade dispute",
    # Coded anti-US language
    "hegemony", "hegemonism", "unilateralism", "unilateral",
    "cold war mentality", "cold-war", "containment", "zero-sum", "zero sum",
    "power politics", "bloc confrontation", "bloc politics",
    "decoupling", "de-risking", "de-coupling",
    "long-arm jurisdiction", "extraterritorial",
    "small yard", "high fence", "small circles",
    # Alliance system
    "nato", "aukus", "quad", "five eyes", "indo-pacific", "indo pacific",
    "alliance system", "military alliance", "expand alliance",
    # Taiwan
    "taiwan", "one-china", "one china principle",
    # Tech competition
    "semiconductor", "chip war", "tech war", "technology blockade",
    "ai governance", "technology restriction",
    # Multipolar order
    "multipolar", "multi-polar", "unipolarity", "unipolar",
    "true multilateralism", "democratization of international relations",
    "reform of global governance", "reform global governance",
    # Security / military
    "south china sea", "freedom of navigation", "thaad", "missile defense",
    "missile defence", "arms sales",
    # Bilateral issues
    "fentanyl", "counternarcotics", "counter-narcotics",
    # Strategic response language
    "self-reliance", "dual circulation", "breaking the encirclement",
    "break the encirclement", "external containment", "external suppression",
    "breaking chains", "breaking of chains",
)

# Third-country bilateral pairs and domestic topics. Only checked against the
# topic field.
EXCLUSION_PATTERNS: tuple[str, ...] = (
    "china-pakistan", "china-sri lanka", "china-nepal", "china-bangladesh",
    "china-cambodia", "china-laos", "china-myanmar", "china-thailand",
    "china-vietnam", "china-singapore", "china-malaysia", "china-indonesia",
    "china-kazakhstan", "china-uzbekistan", "china-turkmenistan",
    "china-brazil", "china-argentina", "china-mexico", "china-cuba",
    "china-saudi", "china-iran", "china-iraq", "china-africa",
    "china-egypt", "china-nigeria", "china-kenya", "china-ethiopia",
    "anti-corruption", "party discipline", "party governance",
    "internal party", "political rectification", "inspection work",
    "sister city", "people-to-people", "cultural exchange",
    "pandas", "panda diplomacy",
)

# Generic major-power and international-order language.
SOFT_SIGNALS: tuple[str, ...] = (
    "major power", "great power", "superpower", "international order",
    "new type of international relations", "community with a shared future",
    "win-win", "mutual respect", "peaceful coexistence",
    "non-interference", "core interests", "sovereignty",
    "developing countries", "global south",
)
# fmt: on


class TextScope(StrEnum):
    """Which part of a statement a relevance rule inspects."""

    FULL_TEXT = "full_text"
    TOPIC = "topic"


@dataclass(frozen=True)
class RelevanceRule:
    """A keyword rule restricted to one part of the statement."""

    scope: TextScope
    rule: KeywordRule[bool]


RELEVANCE_RULES: tuple[RelevanceRule, ...] = (
    RelevanceRule(TextScope.FULL_TEXT, KeywordRule(True, POSITIVE_SIGNALS)),
    RelevanceRule(TextScope.TOPIC, KeywordRule(False, EXCLUSION_PATTERNS)),
    RelevanceRule(TextScope.FULL_TEXT, KeywordRule(True, SOFT_SIGNALS)),
)


def _statement_text(statement: RawStatement) -> str:
    return f"{statement.topic} {statement.context} {statement.quote_or_paraphrase}".lower()


def is_us_relevant(statement: RawStatement) -> bool:
    """Return True if the statement bears on US-China relations.

    Args:
        statement: Statement to classify; only ``topic``, ``context`` and
            ``quote_or_paraphrase`` are read.

    Returns:
        False only for statements whose topic names an unrelated bilateral
        or domestic subject and which carry no US signal.
    """
    texts = {
        TextScope.FULL_TEXT: _statement_text(statement),
        TextScope.TOPIC: statement.topic.lower(),
    }
    for relevance_rule in RELEVANCE_RULES:
        if relevance_rule.rule.matches(texts[relevance_rule.scope]):
            return relevance_rule.rule.result
    return True
