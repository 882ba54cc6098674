"""Speaker-level summaries over buckets and statements."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from rhetoric_trends.aggregate.stats import empty_tone_counts, tone_percents
from rhetoric_trends.data import Bucket, CanonicalTone, EnrichedStatement


@dataclass(frozen=True)
class SpeakerToneProfile:
    """How a single speaker's statements are distributed across tones."""

    speaker: str
    total: int
    tone_counts: dict[CanonicalTone, int] = field(default_factory=dict)
    tone_percents: dict[CanonicalTone, float] = field(default_factory=dict)


def _rank(counts: dict[str, int], limit: int) -> list[str]:
    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [speaker for speaker, _ in ranked[:limit]]


def top_speakers(buckets: Iterable[Bucket], limit: int = 8) -> list[str]:
    """Return the most active speakers summed across buckets, most active first."""
    totals: dict[str, int] = {}
    for bucket in buckets:
        for speaker, count in bucket.speaker_counts.items():
            totals[speaker] = totals.get(speaker, 0) + count
    return _rank(totals, limit)


def speaker_tone_profiles(
    statements: Iterable[EnrichedStatement],
    limit: int = 10,
) -> list[SpeakerToneProfile]:
    """Compute tone distributions for the ``limit`` most active speakers.

    Args:
        statements: Enriched statements to summarize.
        limit: Maximum number of speakers to return.

    Returns:
        Profiles ordered by statement count, most active first.
    """
    tones_by_speaker: dict[str, dict[CanonicalTone, int]] = {}
    totals: dict[str, int] = {}
    for statement in statements:
        counts = tones_by_speaker.setdefault(statement.speaker, empty_tone_counts())
        counts[statement.canonical_tone] += 1
        totals[statement.speaker] = totals.get(statement.speaker, 0) + 1

    return [
        SpeakerToneProfile(
            speaker=speaker,
            total=totals[speaker],
            tone_counts=tones_by_speaker[speaker],
            tone_percents=tone_percents(tones_by_speaker[speaker], totals[speaker]),
        )
        for speaker in _rank(totals, limit)
    ]
