"""Date-range token parsing tests."""

import datetime as dt

import pytest
from pydantic import ValidationError

from tripconsensus.domain.aggregation.dates import (
    parse_calendar_date,
    parse_date_interval,
    parse_date_intervals,
    split_date_tokens,
)
from tripconsensus.domain.constants import NOON
from tripconsensus.domain.models import DateInterval


def _day(text: str) -> dt.datetime:
    return dt.datetime.combine(dt.date.fromisoformat(text), NOON)


def test_iso_range_with_to_separator():
    interval = parse_date_interval("2025-06-01 to 2025-06-10")
    assert interval == DateInterval(start=_day("2025-06-01"), end=_day("2025-06-10"))
    assert interval.start.time() == NOON
    assert interval.day_count == 10


def test_us_range_with_dash_separator():
    interval = parse_date_interval("6/1/2025 - 06/10/2025")
    assert interval.start == _day("2025-06-01")
    assert interval.end == _day("2025-06-10")


def test_time_suffix_is_stripped():
    interval = parse_date_interval("2025-06-01T00:00:00.000Z - 2025-06-03T23:59:00Z")
    assert interval.start == _day("2025-06-01")
    assert interval.end == _day("2025-06-03")


def test_to_separator_takes_priority_over_dash():
    # Split on " to " first, which leaves an unreadable left side.
    assert parse_date_interval("2025-06-01 - 2025-06-03 to 2025-06-10") is None


@pytest.mark.parametrize(
    "token",
    [
        "not a date",
        "2025-06-01",
        "2025-06-01 / 2025-06-05",
        "2025-02-30 - 2025-03-02",
        "2025-06-01 - someday",
        "2025-06-10 - 2025-06-01",
        "",
        None,
        42,
    ],
)
def test_unreadable_tokens_are_dropped(token):
    assert parse_date_interval(token) is None


def test_mapping_tokens_are_parsed_field_by_field():
    interval = parse_date_interval({"start": "2025-06-01", "end": "06/10/2025"})
    assert interval.start == _day("2025-06-01")
    assert interval.end == _day("2025-06-10")

    native = parse_date_interval({"start": dt.date(2025, 6, 1), "end": dt.datetime(2025, 6, 2, 23, 30)})
    assert native.end == _day("2025-06-02")

    assert parse_date_interval({"start": "2025-06-01"}) is None
    assert parse_date_interval({"start": "2025-06-01", "end": "soon"}) is None


def test_calendar_dates_are_pinned_to_noon():
    assert parse_calendar_date("2025-12-31") == _day("2025-12-31")
    assert parse_calendar_date(dt.datetime(2025, 12, 31, 0, 5)) == _day("2025-12-31")
    assert parse_calendar_date("31/12/2025") is None


def test_semicolon_joined_fields_are_split():
    assert split_date_tokens(None) == []
    assert split_date_tokens("a; b ;; ") == ["a", "b"]
    assert split_date_tokens(["a;b", {"start": "x"}, 7]) == ["a", "b", {"start": "x"}]


def test_parse_date_intervals_keeps_only_valid_ranges():
    intervals = parse_date_intervals("2025-06-01 - 2025-06-05; not a date; 2025-07-01 to 2025-07-03")
    assert [interval.day_count for interval in intervals] == [5, 3]


def test_date_interval_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        DateInterval(start=dt.date(2025, 6, 2), end=dt.date(2025, 6, 1))


def test_single_day_interval_counts_one_day():
    interval = DateInterval(start=dt.date(2025, 6, 1), end=dt.datetime(2025, 6, 1, 8, 0))
    assert interval.day_count == 1
    assert interval.end.time() == NOON
