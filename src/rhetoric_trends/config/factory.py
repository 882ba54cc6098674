"""Factory functions to create components from configuration."""

from pathlib import Path

from rhetoric_trends.config.models import TrendPipelineConfig, TrendsConfig
from rhetoric_trends.pipeline.base import Pipeline
from rhetoric_trends.pipeline.trend import TrendPipeline
from rhetoric_trends.run_logger import RunLogger


def create_pipeline(
    config: TrendPipelineConfig,
    run_logger: RunLogger | None = None,
    *,
    relevance_only_override: bool | None = None,
) -> Pipeline:
    """Create a pipeline from config."""
    if isinstance(config, TrendPipelineConfig):
        relevance_only = (
            relevance_only_override
            if relevance_only_override is not None
            else config.relevance_only
        )
        return TrendPipeline(
            relevance_only=relevance_only,
            default_importance_weight=config.default_importance_weight,
            include_quarterly=config.include_quarterly,
            run_logger=run_logger,
        )
    msg = f"Unknown pipeline config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: TrendsConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    relevance_only_override: bool | None = None,
) -> tuple[Pipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        relevance_only_override: Override the pipeline's relevance_only setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(
        config.pipeline,
        run_logger=run_logger,
        relevance_only_override=relevance_only_override,
    )
    return (pipeline, run_logger)
