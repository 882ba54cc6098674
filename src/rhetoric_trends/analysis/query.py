"""Filtering and sorting of enriched statements for browsing."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from rhetoric_trends.data import CanonicalTone, EnrichedStatement, TopicCategory


class SortField(StrEnum):
    """Statement attributes a listing can be sorted by."""

    DATE = "date"
    SPEAKER = "speaker"
    TOPIC = "topic"
    TONE = "tone"
    TONE_INTENSITY = "tone_intensity"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


_SORT_KEYS: dict[SortField, Callable[[EnrichedStatement], Any]] = {
    SortField.DATE: lambda s: s.article_date,
    SortField.SPEAKER: lambda s: s.speaker.casefold(),
    SortField.TOPIC: lambda s: s.topic_category.value.casefold(),
    SortField.TONE: lambda s: s.canonical_tone.value,
    SortField.TONE_INTENSITY: lambda s: s.tone_intensity,
}


@dataclass(frozen=True)
class StatementFilter:
    """Conjunction of user-selected constraints on a statement listing.

    Empty selections place no constraint.

    Attributes:
        search_text: Case-insensitive substring of the quote, context or speaker.
        speakers: Allowed speakers.
        topic_categories: Allowed topic categories.
        tones: Allowed canonical tones.
        month: ``YYYY-MM`` prefix the article date must start with.
    """

    search_text: str = ""
    speakers: tuple[str, ...] = ()
    topic_categories: tuple[TopicCategory, ...] = ()
    tones: tuple[CanonicalTone, ...] = ()
    month: str | None = None

    @property
    def is_active(self) -> bool:
        return bool(
            self.search_text or self.speakers or self.topic_categories or self.tones or self.month
        )

    def matches(self, statement: EnrichedStatement) -> bool:
        if self.search_text:
            needle = self.search_text.lower()
            if not (
                needle in statement.quote_or_paraphrase.lower()
                or needle in statement.context.lower()
                or needle in statement.speaker.lower()
            ):
                return False
        if self.speakers and statement.speaker not in self.speakers:
            return False
        if self.topic_categories and statement.topic_category not in self.topic_categories:
            return False
        if self.tones and statement.canonical_tone not in self.tones:
            return False
        if self.month and not statement.article_date.startswith(self.month):
            return False
        return True

    def apply(self, statements: Iterable[EnrichedStatement]) -> list[EnrichedStatement]:
        """Return the matching statements in their input order."""
        return [s for s in statements if self.matches(s)]


def sort_statements(
    statements: Iterable[EnrichedStatement],
    field: SortField = SortField.DATE,
    direction: SortDirection = SortDirection.DESC,
) -> list[EnrichedStatement]:
    """Sort statements by one field. Ties keep their input order in both directions.

    Speakers and topics compare case-insensitively.
    """
    return sorted(
        statements,
        key=_SORT_KEYS[field],
        reverse=direction == SortDirection.DESC,
    )


def distinct_speakers(statements: Iterable[EnrichedStatement]) -> list[str]:
    return sorted({s.speaker for s in statements})


def distinct_tones(statements: Iterable[EnrichedStatement]) -> list[CanonicalTone]:
    return sorted({s.canonical_tone for s in statements})
