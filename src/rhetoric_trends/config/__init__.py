"""Configuration module for Rhetoric Trends."""

from rhetoric_trends.config.factory import create_from_config, create_pipeline
from rhetoric_trends.config.loader import get_default_config_path, load_config
from rhetoric_trends.config.models import (
    LoggingConfig,
    PipelineConfig,
    TrendPipelineConfig,
    TrendsConfig,
)

__all__ = [
    "LoggingConfig",
    "PipelineConfig",
    "TrendPipelineConfig",
    "TrendsConfig",
    "create_from_config",
    "create_pipeline",
    "get_default_config_path",
    "load_config",
]
