"""Consumer-side helpers for browsing statements and speakers."""

from rhetoric_trends.analysis.query import (
    SortDirection,
    SortField,
    StatementFilter,
    distinct_speakers,
    distinct_tones,
    sort_statements,
)
from rhetoric_trends.analysis.speakers import (
    SpeakerToneProfile,
    speaker_tone_profiles,
    top_speakers,
)

__all__ = [
    "SortDirection",
    "SortField",
    "SpeakerToneProfile",
    "StatementFilter",
    "distinct_speakers",
    "distinct_tones",
    "sort_statements",
    "speaker_tone_profiles",
    "top_speakers",
]
