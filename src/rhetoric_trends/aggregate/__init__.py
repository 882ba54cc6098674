"""Time-bucket aggregation module."""

from rhetoric_trends.aggregate.monthly import (
    DEFAULT_IMPORTANCE_WEIGHT,
    aggregate_monthly,
    month_key,
    month_label,
)
from rhetoric_trends.aggregate.quarterly import aggregate_quarterly, quarter_key
from rhetoric_trends.aggregate.stats import round_half_away

__all__ = [
    "DEFAULT_IMPORTANCE_WEIGHT",
    "aggregate_monthly",
    "aggregate_quarterly",
    "month_key",
    "month_label",
    "quarter_key",
    "round_half_away",
]
