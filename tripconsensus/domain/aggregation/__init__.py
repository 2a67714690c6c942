"""Deterministic aggregation stages."""

from tripconsensus.domain.aggregation.blackout import BlackoutResult, filter_blackouts, sort_windows
from tripconsensus.domain.aggregation.budget import median_budget, normalize_budgets, parse_budget
from tripconsensus.domain.aggregation.dates import (
    count_date_tokens,
    parse_calendar_date,
    parse_date_interval,
    parse_date_intervals,
    split_date_tokens,
)
from tripconsensus.domain.aggregation.intervals import intersect_participants, intervals_overlap, overlap_of
from tripconsensus.domain.aggregation.vibes import tally_vibes

__all__ = [
    "BlackoutResult",
    "count_date_tokens",
    "filter_blackouts",
    "intersect_participants",
    "intervals_overlap",
    "median_budget",
    "normalize_budgets",
    "overlap_of",
    "parse_budget",
    "parse_calendar_date",
    "parse_date_interval",
    "parse_date_intervals",
    "sort_windows",
    "split_date_tokens",
    "tally_vibes",
]
