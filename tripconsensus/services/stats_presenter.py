"""Presentation helpers for the rendering layer."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from tripconsensus.domain.models import AggregateStats

_NOT_AVAILABLE = "not available yet"


def stats_to_payload(stats: AggregateStats) -> dict[str, Any]:
    """JSON-safe, camelCase payload in the shape the dashboard reads."""
    return stats.model_dump(mode="json", by_alias=True)


def _format_day(value: Optional[dt.datetime]) -> str:
    if value is None:
        return "?"
    return value.date().isoformat()


def _plural_days(count: int) -> str:
    return f"{count} day" if count == 1 else f"{count} days"


def render_stats_text(stats: AggregateStats) -> str:
    lines: list[str] = [f"Trip consensus ({stats.total_responses} responses)", "=" * 40]

    budget = f"${stats.median_budget:,}" if stats.median_budget else _NOT_AVAILABLE
    lines.append(f"Median budget: {budget}")

    date_range = stats.date_range
    if date_range.available:
        lines.append(
            f"Dates: {_format_day(date_range.start)} - {_format_day(date_range.end)}"
            f" ({_plural_days(date_range.window_days or 0)} window)"
        )
    else:
        lines.append(f"Dates: {_NOT_AVAILABLE}")

    for window in stats.overlapping_ranges:
        lines.append(f"  - {_format_day(window.start)} - {_format_day(window.end)} ({_plural_days(window.day_count)})")
    if stats.blackout_fallback_applied:
        lines.append("  ! every option overlaps someone's blackout dates")

    vibes = ", ".join(stats.common_vibes) if stats.common_vibes else _NOT_AVAILABLE
    lines.append(f"Top vibes: {vibes}")
    return "\n".join(lines)


__all__ = ["render_stats_text", "stats_to_payload"]
