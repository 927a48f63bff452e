"""Aggregation, error metrics and dashboard summaries."""

from . import aggregate, metrics, summary, types
from .aggregate import by_day, by_hour_of_day, cluster_stats
from .metrics import compute_metrics, error_series
from .summary import build_city_dataset, summarise

__all__ = [
    "aggregate",
    "metrics",
    "summary",
    "types",
    "by_day",
    "by_hour_of_day",
    "cluster_stats",
    "compute_metrics",
    "error_series",
    "build_city_dataset",
    "summarise",
]
