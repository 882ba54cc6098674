"""Keyword classifiers for tone, topic and relevance."""

from rhetoric_trends.classify.relevance import is_us_relevant
from rhetoric_trends.classify.rules import KeywordRule, first_match
from rhetoric_trends.classify.tone import normalize_tone
from rhetoric_trends.classify.topic import normalize_topic

__all__ = [
    "KeywordRule",
    "first_match",
    "is_us_relevant",
    "normalize_tone",
    "normalize_topic",
]
