"""Application orchestration layer."""

from tripconsensus.application.survey_stats import aggregate_survey_responses, coerce_responses

__all__ = ["aggregate_survey_responses", "coerce_responses"]
