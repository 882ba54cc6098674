"""Re-group monthly buckets into calendar quarters.

Counts (tones, topics, speakers) are summed across the months of a quarter,
and the tone percentages and hostility/cooperation rates are recomputed from
those sums. Average intensity and the sentiment index, however, are the
statement-weighted mean of the *already rounded* monthly values. This keeps
output identical to earlier releases; recomputing them from per-statement
sums would require the raw statements.
"""

import math
from collections.abc import Iterable

from rhetoric_trends.aggregate.stats import (
    cooperation_rate,
    empty_tone_counts,
    empty_topic_counts,
    hostility_rate,
    round_half_away,
    tone_percents,
)
from rhetoric_trends.data import CanonicalTone, MonthlyBucket, QuarterlyBucket, TopicCategory


def quarter_key(month: str) -> str:
    """Return the ``YYYY-Qn`` key for a ``YYYY-MM`` month key."""
    year, m = month.split("-")
    return f"{year}-Q{math.ceil(int(m) / 3)}"


def _combine(key: str, buckets: list[MonthlyBucket]) -> QuarterlyBucket:
    total = sum(b.total for b in buckets)
    tone_counts = empty_tone_counts()
    topic_counts = empty_topic_counts()
    speaker_counts: dict[str, int] = {}
    intensity_sum = 0.0
    sentiment_sum = 0.0

    for bucket in buckets:
        for tone in CanonicalTone:
            tone_counts[tone] += bucket.tone_counts.get(tone, 0)
        for category in TopicCategory:
            topic_counts[category] += bucket.topic_counts.get(category, 0)
        for speaker, count in bucket.speaker_counts.items():
            speaker_counts[speaker] = speaker_counts.get(speaker, 0) + count
        intensity_sum += bucket.avg_intensity * bucket.total
        sentiment_sum += bucket.sentiment_index * bucket.total

    return QuarterlyBucket(
        period=key,
        label=key,
        total=total,
        tone_counts=tone_counts,
        tone_percents=tone_percents(tone_counts, total),
        topic_counts=topic_counts,
        avg_intensity=round_half_away(intensity_sum / total, 2) if total > 0 else 0.0,
        sentiment_index=round_half_away(sentiment_sum / total, 2) if total > 0 else 0.0,
        hostility_rate=hostility_rate(tone_counts, total),
        cooperation_rate=cooperation_rate(tone_counts, total),
        speaker_counts=speaker_counts,
    )


def aggregate_quarterly(monthly_buckets: Iterable[MonthlyBucket]) -> list[QuarterlyBucket]:
    """Combine monthly buckets into one bucket per quarter, sorted ascending.

    Args:
        monthly_buckets: Output of ``aggregate_monthly``.

    Returns:
        Quarterly buckets labelled with their ``YYYY-Qn`` key.
    """
    grouped: dict[str, list[MonthlyBucket]] = {}
    for bucket in monthly_buckets:
        grouped.setdefault(quarter_key(bucket.period), []).append(bucket)

    return [_combine(key, grouped[key]) for key in sorted(grouped)]
