"""Normalize free-text tone labels to one of six canonical tones."""

from rhetoric_trends.classify.rules import KeywordRule, first_match
from rhetoric_trends.data import CanonicalTone

# Hostile signals dominate cooperative framing in composite labels such as
# "confrontational/conciliatory".
TONE_RULES: tuple[KeywordRule[CanonicalTone], ...] = (
    KeywordRule(CanonicalTone.CONFRONTATIONAL, ("confrontational",)),
    KeywordRule(CanonicalTone.CONCILIATORY, ("conciliatory",)),
    KeywordRule(
        CanonicalTone.COOPERATIVE,
        ("cooperative", "constructive", "encouraging", "supportive"),
    ),
    KeywordRule(CanonicalTone.ASSERTIVE, ("assertive", "confident")),
    KeywordRule(CanonicalTone.CAUTIOUS, ("cautious",)),
    KeywordRule(CanonicalTone.NEUTRAL, ("neutral",)),
)


def normalize_tone(raw: str) -> CanonicalTone:
    """Map a raw tone label to a canonical tone.

    Unrecognized or empty labels fall back to ``neutral``.
    """
    return first_match(TONE_RULES, raw.lower().strip(), CanonicalTone.NEUTRAL)
