"""Pydantic configuration models for Rhetoric Trends."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# Pipeline Configs
# ============================================================


class TrendPipelineConfig(BaseModel):
    """Configuration for the enrich-then-aggregate trend pipeline."""

    type: Literal["trend"] = "trend"
    relevance_only: bool = True
    default_importance_weight: int = Field(default=3, ge=0)
    include_quarterly: bool = True

    model_config = {"frozen": True}


PipelineConfig = TrendPipelineConfig


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for pipeline run logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TrendsConfig(BaseModel):
    """Root configuration for Rhetoric Trends."""

    pipeline: PipelineConfig = Field(default_factory=TrendPipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
