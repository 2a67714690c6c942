"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from tripconsensus.domain.constants import NOON

DateToken = Union[str, dict[str, Any]]


def pin_to_noon(value: Union[dt.date, dt.datetime]) -> dt.datetime:
    if isinstance(value, dt.datetime):
        value = value.date()
    return dt.datetime.combine(value, NOON)


def _as_token_tuple(value: Any) -> Any:
    if value is None:
        return ()
    if isinstance(value, (str, Mapping, DateInterval)):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return value
    tokens: list[Any] = []
    for item in value:
        if isinstance(item, DateInterval):
            tokens.append({"start": item.start, "end": item.end})
        elif isinstance(item, Mapping):
            tokens.append(dict(item))
        elif isinstance(item, str):
            tokens.append(item)
    return tuple(tokens)


class SurveyResponse(BaseModel):
    """One participant's survey, as delivered by the fetch layer.

    Accepts camelCase (client) and snake_case (backend) keys alike and ignores
    every field the aggregation does not read.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    budget: str = ""
    preferred_dates: tuple[DateToken, ...] = ()
    blackout_dates: tuple[DateToken, ...] = ()
    vibe_choices: tuple[str, ...] = ()

    @field_validator("budget", mode="before")
    @classmethod
    def _coerce_budget(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("preferred_dates", "blackout_dates", mode="before")
    @classmethod
    def _coerce_date_tokens(cls, value: Any) -> Any:
        return _as_token_tuple(value)

    @field_validator("vibe_choices", mode="before")
    @classmethod
    def _coerce_vibes(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        elif isinstance(value, (set, frozenset)):
            # Sets carry no order of their own; sort for reproducible tie-breaks.
            value = sorted(item for item in value if isinstance(item, str))
        if not isinstance(value, (list, tuple)):
            return value
        cleaned = (item.strip() for item in value if isinstance(item, str))
        return tuple(dict.fromkeys(item for item in cleaned if item))


class DateInterval(BaseModel):
    """Inclusive calendar window; both ends are pinned to noon."""

    model_config = ConfigDict(frozen=True)

    start: dt.datetime
    end: dt.datetime

    @field_validator("start", "end", mode="before")
    @classmethod
    def _accept_dates(cls, value: Any) -> Any:
        if isinstance(value, (dt.date, dt.datetime)):
            return pin_to_noon(value)
        return value

    @field_validator("start", "end")
    @classmethod
    def _pin(cls, value: dt.datetime) -> dt.datetime:
        return pin_to_noon(value)

    @model_validator(mode="after")
    def _check_order(self) -> "DateInterval":
        if self.start > self.end:
            raise ValueError("interval start must not be after its end")
        return self

    @property
    def day_count(self) -> int:
        return (self.end.date() - self.start.date()).days + 1

    @field_serializer("start", "end", when_used="json")
    def _serialize_day(self, value: dt.datetime) -> str:
        return value.date().isoformat()


class OverlapWindow(BaseModel):
    """A window every participant can make, annotated with its length."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    start: dt.datetime
    end: dt.datetime
    day_count: int

    @classmethod
    def from_interval(cls, interval: DateInterval) -> "OverlapWindow":
        return cls(start=interval.start, end=interval.end, day_count=interval.day_count)

    @field_serializer("start", "end", when_used="json")
    def _serialize_day(self, value: dt.datetime) -> str:
        return value.date().isoformat()


class DateRangeSummary(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    window_days: Optional[int] = None

    @property
    def available(self) -> bool:
        return self.start is not None

    @field_serializer("start", "end", when_used="json")
    def _serialize_day(self, value: Optional[dt.datetime]) -> Optional[str]:
        return value.date().isoformat() if value is not None else None


class AggregateStats(BaseModel):
    """Read-only consensus summary produced by one aggregation call."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    median_budget: int = 0
    date_range: DateRangeSummary = Field(default_factory=DateRangeSummary)
    overlapping_ranges: list[OverlapWindow] = Field(default_factory=list)
    common_vibes: list[str] = Field(default_factory=list)
    total_responses: int = 0
    blackout_fallback_applied: bool = False
