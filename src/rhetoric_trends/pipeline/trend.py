"""Enrich-then-aggregate trend pipeline."""

import logging
import time
from collections.abc import Mapping

from rhetoric_trends.aggregate import (
    DEFAULT_IMPORTANCE_WEIGHT,
    aggregate_monthly,
    aggregate_quarterly,
)
from rhetoric_trends.data import Article, QuarterlyBucket
from rhetoric_trends.enrich import enrich
from rhetoric_trends.pipeline.base import PipelineResult
from rhetoric_trends.run_logger import RunLogger

logger = logging.getLogger(__name__)


class TrendPipeline:
    """Pipeline that classifies statements and buckets them by month and quarter.

    Flow:
    1. Every statement is enriched with tone, topic and relevance
    2. The aggregation scope is chosen (relevant statements only, or all)
    3. Scoped statements are aggregated into monthly buckets
    4. Monthly buckets are combined into quarterly buckets

    Args:
        relevance_only: Aggregate only statements classified as US-relevant.
        default_importance_weight: Sentiment weight for statements with no
            speaker importance.
        include_quarterly: Whether to build quarterly buckets.
        run_logger: Optional RunLogger for stage logging.
    """

    def __init__(
        self,
        relevance_only: bool = True,
        default_importance_weight: int = DEFAULT_IMPORTANCE_WEIGHT,
        include_quarterly: bool = True,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._relevance_only = relevance_only
        self._default_weight = default_importance_weight
        self._include_quarterly = include_quarterly
        self._run_logger = run_logger

    def _log_stage(
        self, stage: str, component: str, input_data: object, output_data: object, t0: float
    ) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                stage=stage,
                component=component,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=time.monotonic() - t0,
            )

    def run(self, articles: Mapping[str, Article]) -> PipelineResult:
        """Execute the pipeline.

        Args:
            articles: Articles keyed by identity.

        Returns:
            PipelineResult with all enriched statements, the aggregated
            scope and its buckets.
        """
        statement_total = sum(len(a.statements) for a in articles.values())
        if self._run_logger:
            self._run_logger.start_run(
                "trend",
                {"article_count": len(articles), "statement_count": statement_total},
            )

        # Step 1: Enrich
        t0 = time.monotonic()
        enriched = enrich(articles)
        self._log_stage(
            "enrichment",
            "enrich",
            {"statement_count": statement_total},
            {"statement_count": len(enriched)},
            t0,
        )

        # Step 2: Choose aggregation scope
        t0 = time.monotonic()
        if self._relevance_only:
            scoped = [s for s in enriched if s.is_us_relevant]
        else:
            scoped = list(enriched)
        self._log_stage(
            "scope",
            "relevance_filter" if self._relevance_only else "all_statements",
            {"statement_count": len(enriched)},
            {"statement_count": len(scoped)},
            t0,
        )
        logger.info(f"Aggregating {len(scoped)} of {len(enriched)} statements")

        # Step 3: Monthly buckets
        t0 = time.monotonic()
        monthly = aggregate_monthly(scoped, default_weight=self._default_weight)
        self._log_stage(
            "monthly_aggregation",
            "aggregate_monthly",
            {"statement_count": len(scoped)},
            {"periods": [b.period for b in monthly]},
            t0,
        )

        # Step 4: Quarterly buckets
        quarterly: list[QuarterlyBucket] = []
        if self._include_quarterly:
            t0 = time.monotonic()
            quarterly = aggregate_quarterly(monthly)
            self._log_stage(
                "quarterly_aggregation",
                "aggregate_quarterly",
                {"bucket_count": len(monthly)},
                {"periods": [b.period for b in quarterly]},
                t0,
            )

        if self._run_logger:
            self._run_logger.finish_run(len(scoped), len(monthly), len(quarterly))

        return PipelineResult(
            enriched=enriched,
            statements=scoped,
            monthly=monthly,
            quarterly=quarterly,
        )
