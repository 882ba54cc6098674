"""Core data models for Rhetoric Trends."""

from dataclasses import dataclass, field
from enum import StrEnum


class CanonicalTone(StrEnum):
    """The six rhetorical stances a statement's tone is normalized to.

    Ordered from most hostile to most friendly.
    """

    CONFRONTATIONAL = "confrontational"
    ASSERTIVE = "assertive"
    CAUTIOUS = "cautious"
    NEUTRAL = "neutral"
    COOPERATIVE = "cooperative"
    CONCILIATORY = "conciliatory"


class TopicCategory(StrEnum):
    """Subject-matter buckets for free-text statement topics."""

    DIPLOMACY = "Diplomacy"
    TRADE_AND_ECONOMY = "Trade & Economy"
    TAIWAN = "Taiwan"
    TECHNOLOGY = "Technology"
    MILITARY_AND_SECURITY = "Military & Security"
    HUMAN_RIGHTS_AND_GOVERNANCE = "Human Rights & Governance"
    BELT_AND_ROAD = "Belt & Road"
    MULTILATERAL_AND_GLOBAL = "Multilateral & Global"
    OTHER = "Other"


# Sentiment score per tone: -2 (hostile) to +2 (friendly)
TONE_SCORES: dict[CanonicalTone, int] = {
    CanonicalTone.CONFRONTATIONAL: -2,
    CanonicalTone.ASSERTIVE: -1,
    CanonicalTone.CAUTIOUS: 0,
    CanonicalTone.NEUTRAL: 0,
    CanonicalTone.COOPERATIVE: 1,
    CanonicalTone.CONCILIATORY: 2,
}

HOSTILE_TONES: frozenset[CanonicalTone] = frozenset(
    {CanonicalTone.CONFRONTATIONAL, CanonicalTone.ASSERTIVE}
)
COOPERATIVE_TONES: frozenset[CanonicalTone] = frozenset(
    {CanonicalTone.COOPERATIVE, CanonicalTone.CONCILIATORY}
)


@dataclass(frozen=True)
class RawStatement:
    """A claim attributed to a speaker, as extracted from an article."""

    speaker: str
    context: str = ""
    quote_or_paraphrase: str = ""
    topic: str = ""
    framing: str = ""
    tone: str = ""
    tone_intensity: int = 0
    speaker_type: str | None = None
    speaker_title: str | None = None
    speaker_importance: int | None = None


@dataclass(frozen=True)
class Article:
    """A source article and the statements extracted from it.

    ``date`` is an ISO ``YYYY-MM-DD`` string, or empty when unknown.
    """

    url: str
    date: str = ""
    title: str = ""
    statements: tuple[RawStatement, ...] = ()


@dataclass(frozen=True)
class EnrichedStatement(RawStatement):
    """A raw statement with its article metadata and derived classifications."""

    article_url: str = ""
    article_date: str = ""
    article_title: str = ""
    canonical_tone: CanonicalTone = CanonicalTone.NEUTRAL
    topic_category: TopicCategory = TopicCategory.OTHER
    is_us_relevant: bool = True


@dataclass(frozen=True)
class Bucket:
    """Aggregate statistics for one time period.

    ``period`` is ``YYYY-MM`` for monthly buckets and ``YYYY-Qn`` for
    quarterly ones. Percentages and rates are in [0, 100] with one decimal;
    ``sentiment_index`` is in [-2, 2] with two decimals.
    """

    period: str
    label: str
    total: int
    tone_counts: dict[CanonicalTone, int] = field(default_factory=dict)
    tone_percents: dict[CanonicalTone, float] = field(default_factory=dict)
    topic_counts: dict[TopicCategory, int] = field(default_factory=dict)
    avg_intensity: float = 0.0
    sentiment_index: float = 0.0
    hostility_rate: float = 0.0
    cooperation_rate: float = 0.0
    speaker_counts: dict[str, int] = field(default_factory=dict)


MonthlyBucket = Bucket
QuarterlyBucket = Bucket
