"""Pipeline protocol and result type."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from rhetoric_trends.data import Article, EnrichedStatement, MonthlyBucket, QuarterlyBucket


@dataclass(frozen=True)
class PipelineResult:
    """Everything a pipeline run produces.

    ``enriched`` holds every statement of the corpus; ``statements`` is the
    subset the buckets were computed from.
    """

    enriched: list[EnrichedStatement] = field(default_factory=list)
    statements: list[EnrichedStatement] = field(default_factory=list)
    monthly: list[MonthlyBucket] = field(default_factory=list)
    quarterly: list[QuarterlyBucket] = field(default_factory=list)

    @property
    def relevant_count(self) -> int:
        return sum(1 for s in self.enriched if s.is_us_relevant)


class Pipeline(Protocol):
    """Interface for statement trend pipelines."""

    def run(self, articles: Mapping[str, Article]) -> PipelineResult:
        """Enrich and aggregate the statements of a corpus.

        Args:
            articles: Articles keyed by identity.

        Returns:
            Enriched statements and their time buckets.
        """
        ...
