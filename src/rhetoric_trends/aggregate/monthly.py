"""Aggregate enriched statements into calendar-month buckets."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from rhetoric_trends.aggregate.stats import (
    cooperation_rate,
    empty_tone_counts,
    empty_topic_counts,
    hostility_rate,
    round_half_away,
    tone_percents,
)
from rhetoric_trends.data import (
    TONE_SCORES,
    CanonicalTone,
    EnrichedStatement,
    MonthlyBucket,
    TopicCategory,
)

logger = logging.getLogger(__name__)

DEFAULT_IMPORTANCE_WEIGHT = 3

# fmt: off
MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# fmt: on

_MONTH_KEY_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def month_key(date: str) -> str | None:
    """Return the ``YYYY-MM`` prefix of an ISO date, or None if it has none."""
    key = date[:7]
    if not _MONTH_KEY_RE.match(key):
        return None
    return key


def month_label(key: str) -> str:
    """Render ``"2024-09"`` as ``"Sep 2024"``."""
    year, month = key.split("-")
    return f"{MONTH_LABELS[int(month) - 1]} {year}"


@dataclass
class _MonthTally:
    """Running sums for one month while statements are being grouped."""

    total: int = 0
    tone_counts: dict[CanonicalTone, int] = field(default_factory=empty_tone_counts)
    topic_counts: dict[TopicCategory, int] = field(default_factory=empty_topic_counts)
    speaker_counts: dict[str, int] = field(default_factory=dict)
    intensity_sum: int = 0
    sentiment_weighted_sum: float = 0.0
    sentiment_weight_sum: float = 0.0

    def add(self, statement: EnrichedStatement, default_weight: int) -> None:
        self.total += 1
        self.tone_counts[statement.canonical_tone] += 1
        self.topic_counts[statement.topic_category] += 1
        self.speaker_counts[statement.speaker] = self.speaker_counts.get(statement.speaker, 0) + 1
        self.intensity_sum += statement.tone_intensity

        weight = (
            statement.speaker_importance
            if statement.speaker_importance is not None
            else default_weight
        )
        self.sentiment_weighted_sum += TONE_SCORES[statement.canonical_tone] * weight
        self.sentiment_weight_sum += weight

    def to_bucket(self, key: str) -> MonthlyBucket:
        total = self.total
        avg_intensity = round_half_away(self.intensity_sum / total, 2) if total > 0 else 0.0
        sentiment_index = (
            round_half_away(self.sentiment_weighted_sum / self.sentiment_weight_sum, 2)
            if self.sentiment_weight_sum > 0
            else 0.0
        )
        return MonthlyBucket(
            period=key,
            label=month_label(key),
            total=total,
            tone_counts=self.tone_counts,
            tone_percents=tone_percents(self.tone_counts, total),
            topic_counts=self.topic_counts,
            avg_intensity=avg_intensity,
            sentiment_index=sentiment_index,
            hostility_rate=hostility_rate(self.tone_counts, total),
            cooperation_rate=cooperation_rate(self.tone_counts, total),
            speaker_counts=self.speaker_counts,
        )


def aggregate_monthly(
    statements: Iterable[EnrichedStatement],
    *,
    default_weight: int = DEFAULT_IMPORTANCE_WEIGHT,
) -> list[MonthlyBucket]:
    """Group statements by the month of their article date.

    The sentiment index of each bucket is the mean tone score weighted by
    ``speaker_importance``; statements with unknown importance count with
    ``default_weight``. Statements without a usable ``YYYY-MM`` date are left
    out. Months with no statements get no bucket.

    Args:
        statements: Enriched statements, already limited to the caller's scope.
        default_weight: Weight for statements with no speaker importance.

    Returns:
        One bucket per month present, sorted ascending by month.
    """
    tallies: dict[str, _MonthTally] = {}
    skipped = 0

    for statement in statements:
        key = month_key(statement.article_date)
        if key is None:
            skipped += 1
            continue
        tallies.setdefault(key, _MonthTally()).add(statement, default_weight)

    if skipped:
        logger.debug("Skipped %d statements without a usable article date", skipped)

    return [tallies[key].to_bucket(key) for key in sorted(tallies)]
