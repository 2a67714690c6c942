"""Budget normalization: free-text budget brackets to a point estimate."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Optional

_AMOUNT = r"\$?\s*(\d[\d,]*)"

_RANGE_RE = re.compile(rf"{_AMOUNT}\s*[-–]\s*{_AMOUNT}")
_UNDER_RE = re.compile(rf"<\s*{_AMOUNT}")
_PLUS_RE = re.compile(rf"{_AMOUNT}\s*\+")
_SINGLE_RE = re.compile(_AMOUNT)


def _to_int(token: str) -> Optional[int]:
    digits = token.replace(",", "")
    if not digits.isdigit():
        return None
    return int(digits)


def _parse_range(text: str) -> Optional[int]:
    m = _RANGE_RE.search(text)
    if not m:
        return None
    low, high = _to_int(m.group(1)), _to_int(m.group(2))
    if low is None or high is None:
        return None
    # Half-up rounding.
    return (low + high + 1) // 2


def _parse_under(text: str) -> Optional[int]:
    # "< $X" means the participant is comfortable up to X.
    m = _UNDER_RE.search(text)
    return _to_int(m.group(1)) if m else None


def _parse_plus(text: str) -> Optional[int]:
    m = _PLUS_RE.search(text)
    return _to_int(m.group(1)) if m else None


def _parse_single(text: str) -> Optional[int]:
    m = _SINGLE_RE.search(text)
    return _to_int(m.group(1)) if m else None


_BUDGET_PARSERS: tuple[Callable[[str], Optional[int]], ...] = (
    _parse_range,
    _parse_under,
    _parse_plus,
    _parse_single,
)


def parse_budget(text: str) -> Optional[int]:
    """Return the representative amount for a budget bracket, or None when unreadable."""
    if not text or not text.strip():
        return None
    for parser in _BUDGET_PARSERS:
        value = parser(text)
        if value is not None:
            return value
    return None


def median_budget(values: Iterable[int]) -> int:
    """Lower-median order statistic: element ``n // 2`` of the ascending values."""
    ordered = sorted(values)
    if not ordered:
        return 0
    return ordered[len(ordered) // 2]


def normalize_budgets(budgets: Iterable[str]) -> list[int]:
    parsed = (parse_budget(text) for text in budgets)
    return [value for value in parsed if value is not None]
