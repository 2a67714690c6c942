"""Single entrypoint for survey aggregation.

Budgets, date windows and vibes from every participant are folded into one
``AggregateStats``. The call is pure: it reads only its arguments, keeps no
state between calls and never raises for messy answers. Only a caller
handing over something that is not a sequence of survey responses gets an
``InvalidSurveyInput``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from pydantic import ValidationError

from tripconsensus.config.settings import AggregationSettings
from tripconsensus.domain.aggregation import (
    count_date_tokens,
    filter_blackouts,
    intersect_participants,
    median_budget,
    normalize_budgets,
    parse_date_intervals,
    tally_vibes,
)
from tripconsensus.domain.exceptions import InvalidSurveyInput
from tripconsensus.domain.models import (
    AggregateStats,
    DateInterval,
    DateRangeSummary,
    OverlapWindow,
    SurveyResponse,
)
from tripconsensus.infrastructure.logging import StructuredLogger


def _error_fields(exc: ValidationError) -> str:
    # Field locations only; pydantic's own message would echo the raw answer.
    locations = {".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()}
    return ", ".join(sorted(loc for loc in locations if loc)) or "<root>"


def coerce_responses(responses: Any) -> list[SurveyResponse]:
    if responses is None:
        return []
    if isinstance(responses, (str, bytes, Mapping)) or not isinstance(responses, Sequence):
        raise InvalidSurveyInput(
            f"survey responses must be a sequence of records, got {type(responses).__name__}"
        )

    coerced: list[SurveyResponse] = []
    for index, item in enumerate(responses):
        if isinstance(item, SurveyResponse):
            coerced.append(item)
            continue
        if not isinstance(item, Mapping):
            raise InvalidSurveyInput(
                f"survey response #{index} must be a mapping, got {type(item).__name__}"
            )
        try:
            coerced.append(SurveyResponse.model_validate(dict(item)))
        except ValidationError as exc:
            raise InvalidSurveyInput(
                f"survey response #{index} has fields of the wrong type: {_error_fields(exc)}"
            ) from exc
    return coerced


def _summarize_range(windows: Sequence[DateInterval]) -> DateRangeSummary:
    if not windows:
        return DateRangeSummary()
    return DateRangeSummary(
        start=min(window.start for window in windows),
        end=max(window.end for window in windows),
        window_days=max(window.day_count for window in windows),
    )


def aggregate_survey_responses(
    responses: Any,
    *,
    settings: Optional[AggregationSettings] = None,
    logger: Optional[StructuredLogger] = None,
) -> AggregateStats:
    """Fold every participant's survey into one consensus summary."""
    settings = settings or AggregationSettings()
    if logger is None:
        # One logger per call: its own trace id and stage timers.
        logger = StructuredLogger(enabled=settings.diagnostics_enabled)

    surveys = coerce_responses(responses)
    if not surveys:
        return AggregateStats()

    logger.stage_start("budget")
    budgets = normalize_budgets(survey.budget for survey in surveys)
    logger.stage_end("budget", parsed_count=len(budgets), skipped_count=len(surveys) - len(budgets))

    logger.stage_start("dates")
    preferred_by_participant = [parse_date_intervals(survey.preferred_dates) for survey in surveys]
    blackouts = [
        interval
        for survey in surveys
        for interval in parse_date_intervals(survey.blackout_dates)
    ]
    preferred_count = sum(len(intervals) for intervals in preferred_by_participant)
    raw_count = count_date_tokens(
        [survey.preferred_dates for survey in surveys] + [survey.blackout_dates for survey in surveys]
    )
    logger.stage_end(
        "dates",
        valid_ranges=preferred_count,
        blackout_ranges=len(blackouts),
        dropped_ranges=raw_count - preferred_count - len(blackouts),
        contributing_participants=sum(1 for intervals in preferred_by_participant if intervals),
    )

    logger.stage_start("intersect")
    candidates = intersect_participants(preferred_by_participant)
    logger.stage_end("intersect", candidate_windows=len(candidates))

    logger.stage_start("blackout")
    filtered = filter_blackouts(candidates, blackouts, settings.blackout_fallback)
    if filtered.fallback_applied:
        logger.warning(
            "blackout",
            "every common window collides with a blackout period; keeping unfiltered windows",
            candidate_windows=len(candidates),
        )
    logger.stage_end("blackout", removed_windows=filtered.removed_count, valid_windows=len(filtered.windows))

    logger.stage_start("vibes")
    vibes = tally_vibes((survey.vibe_choices for survey in surveys), limit=settings.top_vibes_limit)
    logger.stage_end("vibes", common_vibes=len(vibes))

    stats = AggregateStats(
        median_budget=median_budget(budgets),
        date_range=_summarize_range(filtered.windows),
        overlapping_ranges=[OverlapWindow.from_interval(window) for window in filtered.windows],
        common_vibes=vibes,
        total_responses=len(surveys),
        blackout_fallback_applied=filtered.fallback_applied,
    )
    logger.summary(
        total_responses=stats.total_responses,
        valid_windows=len(stats.overlapping_ranges),
        blackout_fallback_applied=stats.blackout_fallback_applied,
    )
    return stats
