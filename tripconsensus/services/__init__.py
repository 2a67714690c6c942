"""Service layer public exports."""

from tripconsensus.services.stats_presenter import render_stats_text, stats_to_payload

__all__ = ["render_stats_text", "stats_to_payload"]
