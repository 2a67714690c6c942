"""Aggregation settings snapshot from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from tripconsensus.domain.constants import DEFAULT_TOP_VIBES
from tripconsensus.domain.enums import BlackoutFallback

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _is_enabled(value: str | None, default: bool) -> bool:
    normalized = str(value or "").strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def resolve_blackout_fallback(value: str | None = None) -> BlackoutFallback:
    raw = value if value is not None else os.getenv("BLACKOUT_FALLBACK")
    mode = str(raw or "").strip().lower()
    if mode in {item.value for item in BlackoutFallback}:
        return BlackoutFallback(mode)
    return BlackoutFallback.UNFILTERED


def resolve_top_vibes_limit(value: str | None = None) -> int:
    raw = value if value is not None else os.getenv("TOP_VIBES_LIMIT")
    try:
        limit = int(str(raw or "").strip())
    except ValueError:
        return DEFAULT_TOP_VIBES
    return limit if limit > 0 else DEFAULT_TOP_VIBES


class AggregationSettings(BaseModel):
    blackout_fallback: BlackoutFallback = Field(default=BlackoutFallback.UNFILTERED)
    top_vibes_limit: int = Field(default=DEFAULT_TOP_VIBES, gt=0)
    diagnostics_enabled: bool = Field(default=True)


def resolve_aggregation_settings(
    *,
    blackout_fallback: str | None = None,
    top_vibes_limit: str | None = None,
) -> AggregationSettings:
    """Build settings from explicit overrides, falling back to the environment."""
    return AggregationSettings(
        blackout_fallback=resolve_blackout_fallback(blackout_fallback),
        top_vibes_limit=resolve_top_vibes_limit(top_vibes_limit),
        diagnostics_enabled=_is_enabled(os.getenv("AGGREGATION_DIAGNOSTICS"), default=True),
    )


__all__ = [
    "AggregationSettings",
    "resolve_aggregation_settings",
]
