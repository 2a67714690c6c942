"""Runtime configuration helpers."""

from tripconsensus.config.settings import AggregationSettings, resolve_aggregation_settings

__all__ = [
    "AggregationSettings",
    "resolve_aggregation_settings",
]
