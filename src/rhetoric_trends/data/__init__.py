"""Data models for Rhetoric Trends."""

from rhetoric_trends.data.models import (
    COOPERATIVE_TONES,
    HOSTILE_TONES,
    TONE_SCORES,
    Article,
    Bucket,
    CanonicalTone,
    EnrichedStatement,
    MonthlyBucket,
    QuarterlyBucket,
    RawStatement,
    TopicCategory,
)

__all__ = [
    "COOPERATIVE_TONES",
    "HOSTILE_TONES",
    "TONE_SCORES",
    "Article",
    "Bucket",
    "CanonicalTone",
    "EnrichedStatement",
    "MonthlyBucket",
    "QuarterlyBucket",
    "RawStatement",
    "TopicCategory",
]
