"""Map open-vocabulary topic strings to a small set of topic categories.

Raw topics come from statement extraction and number in the hundreds
("US tariffs on Chinese EVs", "Xi-Biden summit", "Global Development
Initiative", ...). Categories are tested from the most specific to the most
generic, so that a broad word like "relations" in "cross-strait relations"
does not pull a Taiwan topic into Diplomacy.
"""

from rhetoric_trends.classify.rules import KeywordRule, first_match
from rhetoric_trends.data import TopicCategory

TOPIC_RULES: tuple[KeywordRule[TopicCategory], ...] = (
    KeywordRule(
        TopicCategory.TAIWAN,
        ("taiwan", "one-china", "separatism", "reunification", "cross-strait"),
    ),
    KeywordRule(
        TopicCategory.TECHNOLOGY,
        (
            "tech",
            "ai ",
            "artificial intelligence",
            "semiconductor",
            "cyber",
            "digital",
            "innovation",
            "5g",
            "chip",
        ),
    ),
    KeywordRule(
        TopicCategory.MILITARY_AND_SECURITY,
        (
            "military",
            "defense",
            "defence",
            "security",
            "south china sea",
            "arms",
            "nuclear",
            "navy",
            "army",
            "pla",
            "weapon",
        ),
    ),
    KeywordRule(
        TopicCategory.HUMAN_RIGHTS_AND_GOVERNANCE,
        (
            "human rights",
            "xinjiang",
            "hong kong",
            "tibet",
            "uyghur",
            "democracy",
            "governance",
            "sanction",
        ),
    ),
    KeywordRule(
        TopicCategory.BELT_AND_ROAD,
        ("belt and road", "bri", "silk road", "connectivity", "infrastructure"),
    ),
    KeywordRule(
        TopicCategory.TRADE_AND_ECONOMY,
        (
            "trade",
            "tariff",
            "econom",
            "commerce",
            "investment",
            "financial",
            "market",
            "supply chain",
            "export",
            "import",
            "fiscal",
            "gdp",
            "growth",
        ),
    ),
    KeywordRule(
        TopicCategory.MULTILATERAL_AND_GLOBAL,
        (
            "multilateral",
            "brics",
            "united nations",
            "un ",
            "global governance",
            "international order",
            "g20",
            "sco",
            "apec",
            "wto",
            "climate",
            "developing countries",
            "global south",
        ),
    ),
    KeywordRule(
        TopicCategory.DIPLOMACY,
        (
            "bilateral",
            "diplom",
            "relations",
            "cooperation",
            "summit",
            "visit",
            "dialogue",
            "engagement",
            "foreign",
            "partnership",
            "strategic",
            "sovereignty",
            "core interests",
        ),
    ),
)


def normalize_topic(raw: str) -> TopicCategory:
    """Map a raw topic string to its category, or ``Other`` if nothing matches."""
    return first_match(TOPIC_RULES, raw.lower(), TopicCategory.OTHER)
