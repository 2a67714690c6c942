"""Group trip preference aggregation."""

from tripconsensus.application.survey_stats import aggregate_survey_responses

__all__ = ["aggregate_survey_responses"]
