"""Rounding and tally helpers shared by the bucket aggregators."""

import math

from rhetoric_trends.data import COOPERATIVE_TONES, HOSTILE_TONES, CanonicalTone, TopicCategory


def round_half_away(value: float, places: int) -> float:
    """Round to ``places`` decimals, with halves rounded away from zero.

    The value is scaled first and rounded once, so ``round_half_away(0.125, 2)``
    rounds the float ``12.5`` and yields ``0.13``. Python's built-in ``round``
    rounds halves to even and is not used here.
    """
    factor = 10**places
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    if value < 0 and rounded:
        return -rounded
    return rounded


def percent(count: int, total: int) -> float:
    """Percentage of ``total`` with one decimal; 0 for an empty total.

    The ratio is scaled to tenths of a percent in a single multiplication, so
    23 of 80 gives exactly 287.5 tenths and rounds up to 28.8.
    """
    if total <= 0:
        return 0.0
    return math.floor(count / total * 1000 + 0.5) / 10


def empty_tone_counts() -> dict[CanonicalTone, int]:
    return {tone: 0 for tone in CanonicalTone}


def empty_topic_counts() -> dict[TopicCategory, int]:
    return {category: 0 for category in TopicCategory}


def tone_percents(tone_counts: dict[CanonicalTone, int], total: int) -> dict[CanonicalTone, float]:
    # Each tone is rounded on its own; the values need not sum to 100.
    return {tone: percent(tone_counts[tone], total) for tone in CanonicalTone}


def hostility_rate(tone_counts: dict[CanonicalTone, int], total: int) -> float:
    return percent(sum(tone_counts[tone] for tone in HOSTILE_TONES), total)


def cooperation_rate(tone_counts: dict[CanonicalTone, int], total: int) -> float:
    return percent(sum(tone_counts[tone] for tone in COOPERATIVE_TONES), total)
