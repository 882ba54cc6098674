"""Tests for quarterly aggregation."""

from rhetoric_trends.aggregate.monthly import aggregate_monthly
from rhetoric_trends.aggregate.quarterly import aggregate_quarterly, quarter_key
from rhetoric_trends.aggregate.stats import empty_tone_counts, empty_topic_counts
from rhetoric_trends.data import Bucket, CanonicalTone, EnrichedStatement, TopicCategory


def _bucket(
    period: str,
    total: int,
    *,
    tone: CanonicalTone = CanonicalTone.NEUTRAL,
    avg_intensity: float = 0.0,
    sentiment_index: float = 0.0,
    speakers: dict[str, int] | None = None,
) -> Bucket:
    tone_counts = empty_tone_counts()
    tone_counts[tone] = total
    topic_counts = empty_topic_counts()
    topic_counts[TopicCategory.OTHER] = total
    return Bucket(
        period=period,
        label=period,
        total=total,
        tone_counts=tone_counts,
        topic_counts=topic_counts,
        avg_intensity=avg_intensity,
        sentiment_index=sentiment_index,
        speaker_counts=speakers or {},
    )


def test_quarter_key() -> None:
    assert quarter_key("2024-01") == "2024-Q1"
    assert quarter_key("2024-03") == "2024-Q1"
    assert quarter_key("2024-04") == "2024-Q2"
    assert quarter_key("2024-09") == "2024-Q3"
    assert quarter_key("2024-12") == "2024-Q4"


def test_groups_and_sorts_quarters() -> None:
    buckets = [
        _bucket("2023-11", 1),
        _bucket("2024-01", 2),
        _bucket("2024-02", 3),
        _bucket("2024-04", 4),
    ]
    quarters = aggregate_quarterly(buckets)
    assert [q.period for q in quarters] == ["2023-Q4", "2024-Q1", "2024-Q2"]
    assert [q.label for q in quarters] == ["2023-Q4", "2024-Q1", "2024-Q2"]
    assert [q.total for q in quarters] == [1, 5, 4]


def test_counts_are_summed() -> None:
    buckets = [
        _bucket("2024-01", 2, tone=CanonicalTone.ASSERTIVE, speakers={"Wang Yi": 2}),
        _bucket(
            "2024-03",
            3,
            tone=CanonicalTone.COOPERATIVE,
            speakers={"Wang Yi": 1, "Xi Jinping": 2},
        ),
    ]
    [quarter] = aggregate_quarterly(buckets)
    assert quarter.tone_counts[CanonicalTone.ASSERTIVE] == 2
    assert quarter.tone_counts[CanonicalTone.COOPERATIVE] == 3
    assert sum(quarter.tone_counts.values()) == quarter.total == 5
    assert quarter.topic_counts[TopicCategory.OTHER] == 5
    assert sum(quarter.topic_counts.values()) == 5
    assert quarter.speaker_counts == {"Wang Yi": 3, "Xi Jinping": 2}


def test_rates_recomputed_from_summed_counts() -> None:
    buckets = [
        _bucket("2024-07", 1, tone=CanonicalTone.CONFRONTATIONAL),
        _bucket("2024-08", 3, tone=CanonicalTone.CONCILIATORY),
    ]
    [quarter] = aggregate_quarterly(buckets)
    assert quarter.hostility_rate == 25.0
    assert quarter.cooperation_rate == 75.0
    assert quarter.tone_percents[CanonicalTone.CONFRONTATIONAL] == 25.0
    assert quarter.tone_percents[CanonicalTone.CONCILIATORY] == 75.0


def test_intensity_and_sentiment_are_weighted_means_of_monthly_values() -> None:
    buckets = [
        _bucket("2024-10", 1, avg_intensity=1.0, sentiment_index=-2.0),
        _bucket("2024-11", 3, avg_intensity=2.0, sentiment_index=1.0),
    ]
    [quarter] = aggregate_quarterly(buckets)
    # (1*1.0 + 3*2.0) / 4
    assert quarter.avg_intensity == 1.75
    # (1*-2.0 + 3*1.0) / 4
    assert quarter.sentiment_index == 0.25


def test_sentiment_uses_rounded_monthly_values() -> None:
    buckets = [
        _bucket("2024-04", 2, sentiment_index=0.33),
        _bucket("2024-05", 1, sentiment_index=1.0),
    ]
    [quarter] = aggregate_quarterly(buckets)
    # (2*0.33 + 1*1.0) / 3 = 0.5533...
    assert quarter.sentiment_index == 0.55


def test_empty_input() -> None:
    assert aggregate_quarterly([]) == []


def test_from_monthly_output() -> None:
    statements = [
        EnrichedStatement(
            speaker="Spokesperson",
            article_date=date,
            canonical_tone=tone,
            topic_category=TopicCategory.TAIWAN,
            tone_intensity=4,
        )
        for date, tone in [
            ("2024-01-05", CanonicalTone.CONFRONTATIONAL),
            ("2024-02-05", CanonicalTone.CAUTIOUS),
            ("2024-05-05", CanonicalTone.COOPERATIVE),
        ]
    ]
    quarters = aggregate_quarterly(aggregate_monthly(statements))
    assert [q.period for q in quarters] == ["2024-Q1", "2024-Q2"]
    q1, q2 = quarters
    assert q1.total == 2
    assert q1.avg_intensity == 4.0
    # monthly indexes -2.0 and 0.0, one statement each
    assert q1.sentiment_index == -1.0
    assert q1.hostility_rate == 50.0
    assert q2.cooperation_rate == 100.0
    assert q2.topic_counts[TopicCategory.TAIWAN] == 1


def test_percentages_and_index_stay_in_bounds() -> None:
    tones = list(CanonicalTone)
    topics = list(TopicCategory)
    importances = [None, 0, 1, 2, 3, 4, 5]
    statements = [
        EnrichedStatement(
            speaker=f"Speaker {i % 5}",
            article_date=f"{2023 + i % 2}-{1 + (i * 7) % 12:02d}-15",
            canonical_tone=tones[(i * i) % len(tones)],
            topic_category=topics[i % len(topics)],
            tone_intensity=1 + i % 5,
            speaker_importance=importances[i % len(importances)],
        )
        for i in range(211)
    ]
    monthly = aggregate_monthly(statements)
    quarterly = aggregate_quarterly(monthly)

    assert sum(b.total for b in monthly) == sum(q.total for q in quarterly) == 211
    for bucket in [*monthly, *quarterly]:
        assert all(0.0 <= p <= 100.0 for p in bucket.tone_percents.values())
        assert 0.0 <= bucket.hostility_rate <= 100.0
        assert 0.0 <= bucket.cooperation_rate <= 100.0
        assert -2.0 <= bucket.sentiment_index <= 2.0
        assert 1.0 <= bucket.avg_intensity <= 5.0
