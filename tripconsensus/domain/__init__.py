"""Domain package exports."""

from tripconsensus.domain.constants import DEFAULT_TOP_VIBES, NOON
from tripconsensus.domain.enums import BlackoutFallback
from tripconsensus.domain.exceptions import DomainError, InvalidSurveyInput
from tripconsensus.domain.models import (
    AggregateStats,
    DateInterval,
    DateRangeSummary,
    OverlapWindow,
    SurveyResponse,
)

__all__ = [
    "AggregateStats",
    "BlackoutFallback",
    "DateInterval",
    "DateRangeSummary",
    "DomainError",
    "InvalidSurveyInput",
    "OverlapWindow",
    "SurveyResponse",
    "DEFAULT_TOP_VIBES",
    "NOON",
]
