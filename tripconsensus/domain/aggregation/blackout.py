"""Blackout filtering of intersected windows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tripconsensus.domain.aggregation.intervals import intervals_overlap
from tripconsensus.domain.enums import BlackoutFallback
from tripconsensus.domain.models import DateInterval


@dataclass(frozen=True)
class BlackoutResult:
    windows: list[DateInterval] = field(default_factory=list)
    fallback_applied: bool = False
    removed_count: int = 0


def collides_with_blackout(window: DateInterval, blackouts: Sequence[DateInterval]) -> bool:
    return any(intervals_overlap(window, blackout) for blackout in blackouts)


def sort_windows(windows: Sequence[DateInterval]) -> list[DateInterval]:
    """Longest window first; equal lengths keep the earliest start first."""
    return sorted(windows, key=lambda window: (-window.day_count, window.start))


def filter_blackouts(
    candidates: Sequence[DateInterval],
    blackouts: Sequence[DateInterval],
    policy: BlackoutFallback = BlackoutFallback.UNFILTERED,
) -> BlackoutResult:
    """Drop candidate windows touching any blackout.

    Under ``BlackoutFallback.UNFILTERED`` a filter that would remove every
    candidate is bypassed and the unfiltered candidates are returned, with
    ``fallback_applied`` set so callers can flag the possible conflicts.
    """
    kept = [window for window in candidates if not collides_with_blackout(window, blackouts)]
    removed = len(candidates) - len(kept)

    if not kept and candidates and policy == BlackoutFallback.UNFILTERED:
        return BlackoutResult(
            windows=sort_windows(candidates),
            fallback_applied=True,
            removed_count=removed,
        )
    return BlackoutResult(windows=sort_windows(kept), removed_count=removed)
