"""Date-range token parsing.

Survey answers arrive in several shapes: ``"2025-06-01 to 2025-06-10"``,
``"06/01/2025 - 06/10/2025"``, ``{"start": ..., "end": ...}`` objects, or a
single ``;``-joined string holding several of those. Each shape is handled by
a small parser returning an interval or ``None``; the first parser that
succeeds wins and anything unreadable is dropped without raising.
"""

from __future__ import annotations

import datetime as dt
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Optional

from pydantic import ValidationError

from tripconsensus.domain.constants import RANGE_SEPARATORS, TOKEN_LIST_SEPARATOR
from tripconsensus.domain.models import DateInterval, pin_to_noon

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T\s]\d{1,2}:\d{2}\S*)?$")
_US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def _build_date(year: str, month: str, day: str) -> Optional[dt.datetime]:
    try:
        return pin_to_noon(dt.date(int(year), int(month), int(day)))
    except ValueError:
        return None


def _parse_iso_date(text: str) -> Optional[dt.datetime]:
    m = _ISO_DATE_RE.match(text)
    if not m:
        return None
    return _build_date(m.group(1), m.group(2), m.group(3))


def _parse_us_date(text: str) -> Optional[dt.datetime]:
    m = _US_DATE_RE.match(text)
    if not m:
        return None
    return _build_date(m.group(3), m.group(1), m.group(2))


_DATE_PARSERS: tuple[Callable[[str], Optional[dt.datetime]], ...] = (
    _parse_iso_date,
    _parse_us_date,
)


def parse_calendar_date(value: Any) -> Optional[dt.datetime]:
    """Parse one end of a range into a noon-pinned datetime."""
    if isinstance(value, (dt.date, dt.datetime)):
        return pin_to_noon(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    for parser in _DATE_PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    return None


def _make_interval(start: Any, end: Any) -> Optional[DateInterval]:
    start_at = parse_calendar_date(start)
    end_at = parse_calendar_date(end)
    if start_at is None or end_at is None:
        return None
    try:
        return DateInterval(start=start_at, end=end_at)
    except ValidationError:
        return None


def _parse_range_mapping(token: Any) -> Optional[DateInterval]:
    if not isinstance(token, Mapping):
        return None
    return _make_interval(token.get("start"), token.get("end"))


def _parse_range_string(token: Any) -> Optional[DateInterval]:
    if not isinstance(token, str):
        return None
    for separator in RANGE_SEPARATORS:
        if separator in token:
            start, _, end = token.partition(separator)
            return _make_interval(start, end)
    return None


_RANGE_PARSERS: tuple[Callable[[Any], Optional[DateInterval]], ...] = (
    _parse_range_mapping,
    _parse_range_string,
)


def parse_date_interval(token: Any) -> Optional[DateInterval]:
    """Parse a single range token; ``None`` when no parser accepts it."""
    for parser in _RANGE_PARSERS:
        interval = parser(token)
        if interval is not None:
            return interval
    return None


def split_date_tokens(value: Any) -> list[Any]:
    """Flatten a date field into individual range tokens.

    The fetch layer does not guarantee arrays: a field may be one string
    joined with ``;``, a list of such strings, or a list of mappings.
    """
    if value is None:
        return []
    if isinstance(value, (str, Mapping)):
        value = [value]
    tokens: list[Any] = []
    for item in value:
        if isinstance(item, str):
            tokens.extend(part.strip() for part in item.split(TOKEN_LIST_SEPARATOR) if part.strip())
        elif isinstance(item, Mapping):
            tokens.append(item)
    return tokens


def parse_date_intervals(value: Any) -> list[DateInterval]:
    parsed = (parse_date_interval(token) for token in split_date_tokens(value))
    return [interval for interval in parsed if interval is not None]


def count_date_tokens(values: Iterable[Any]) -> int:
    return sum(len(split_date_tokens(value)) for value in values)
