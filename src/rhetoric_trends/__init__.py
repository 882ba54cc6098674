"""Rhetoric Trends: tone, topic and relevance trends in extracted news statements."""

from rhetoric_trends.aggregate import (
    aggregate_monthly,
    aggregate_quarterly,
    round_half_away,
)
from rhetoric_trends.analysis import (
    SortDirection,
    SortField,
    SpeakerToneProfile,
    StatementFilter,
    distinct_speakers,
    distinct_tones,
    sort_statements,
    speaker_tone_profiles,
    top_speakers,
)
from rhetoric_trends.classify import (
    KeywordRule,
    first_match,
    is_us_relevant,
    normalize_tone,
    normalize_topic,
)
from rhetoric_trends.config import TrendsConfig, create_from_config, load_config
from rhetoric_trends.corpus import load_corpus, parse_corpus
from rhetoric_trends.data import (
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
from rhetoric_trends.enrich import enrich, enrich_statement
from rhetoric_trends.export import result_to_dict, write_result
from rhetoric_trends.pipeline import Pipeline, PipelineResult, TrendPipeline
from rhetoric_trends.run_logger import RunLogger

__all__ = [
    # Models
    "Article",
    "Bucket",
    "CanonicalTone",
    "EnrichedStatement",
    "MonthlyBucket",
    "QuarterlyBucket",
    "RawStatement",
    "TONE_SCORES",
    "TopicCategory",
    # Classifiers
    "KeywordRule",
    "first_match",
    "is_us_relevant",
    "normalize_tone",
    "normalize_topic",
    # Enrichment and aggregation
    "aggregate_monthly",
    "aggregate_quarterly",
    "enrich",
    "enrich_statement",
    "round_half_away",
    # Analysis
    "SortDirection",
    "SortField",
    "SpeakerToneProfile",
    "StatementFilter",
    "distinct_speakers",
    "distinct_tones",
    "sort_statements",
    "speaker_tone_profiles",
    "top_speakers",
    # Pipelines
    "Pipeline",
    "PipelineResult",
    "TrendPipeline",
    # Corpus and export
    "load_corpus",
    "parse_corpus",
    "result_to_dict",
    "write_result",
    # Logging
    "RunLogger",
    # Config
    "TrendsConfig",
    "create_from_config",
    "load_config",
]
