"""Pipeline module for statement trend analysis."""

from rhetoric_trends.pipeline.base import Pipeline, PipelineResult
from rhetoric_trends.pipeline.trend import TrendPipeline

__all__ = [
    "Pipeline",
    "PipelineResult",
    "TrendPipeline",
]
