"""N-way intersection of participants' preferred date windows."""

from __future__ import annotations

from collections.abc import Sequence

from tripconsensus.domain.models import DateInterval


def intervals_overlap(a: DateInterval, b: DateInterval) -> bool:
    # Inclusive on both ends: sharing a single day counts.
    return a.start <= b.end and b.start <= a.end


def overlap_of(a: DateInterval, b: DateInterval) -> DateInterval:
    return DateInterval(start=max(a.start, b.start), end=min(a.end, b.end))


def intersect_participants(per_participant: Sequence[Sequence[DateInterval]]) -> list[DateInterval]:
    """Return the windows every contributing participant can make.

    Participants without any usable interval are skipped rather than treated
    as unavailable. The working set is narrowed one participant at a time and
    the loop stops as soon as it is empty.
    """
    contributors = [list(intervals) for intervals in per_participant if intervals]
    if not contributors:
        return []

    working = contributors[0]
    for intervals in contributors[1:]:
        working = [
            overlap_of(current, candidate)
            for current in working
            for candidate in intervals
            if intervals_overlap(current, candidate)
        ]
        if not working:
            break
    return working
