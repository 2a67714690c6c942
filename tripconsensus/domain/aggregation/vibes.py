"""Vibe tally."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from tripconsensus.domain.constants import DEFAULT_TOP_VIBES


def tally_vibes(choice_lists: Iterable[Iterable[str]], limit: int = DEFAULT_TOP_VIBES) -> list[str]:
    """Most frequent vibes first; equal counts keep first-appearance order."""
    if limit <= 0:
        return []
    counts: Counter[str] = Counter()
    for choices in choice_lists:
        counts.update(choices)
    # Counter.most_common orders ties by first insertion.
    return [vibe for vibe, _count in counts.most_common(limit)]
