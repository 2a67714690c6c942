"""tripconsensus CLI: aggregate a group's survey responses from a JSON file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from tripconsensus.application.survey_stats import aggregate_survey_responses
from tripconsensus.config.settings import resolve_aggregation_settings
from tripconsensus.domain.enums import BlackoutFallback
from tripconsensus.domain.exceptions import InvalidSurveyInput
from tripconsensus.services.stats_presenter import render_stats_text, stats_to_payload

_RESPONSE_KEYS = ("responses", "survey_responses", "surveyResponses")


def _load_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def _extract_responses(payload: Any) -> Any:
    """Accept a bare list or a trip-details object carrying the responses."""
    if isinstance(payload, dict):
        for key in _RESPONSE_KEYS:
            if key in payload:
                return payload[key]
        raise InvalidSurveyInput(f"expected one of {', '.join(_RESPONSE_KEYS)} in the input object")
    return payload


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripconsensus", description="Group trip preference aggregation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    aggregate = subparsers.add_parser("aggregate", help="Summarize survey responses into one consensus plan")
    aggregate.add_argument("source", help="JSON file with survey responses, or - for stdin")
    aggregate.add_argument("--format", default="text", choices=["text", "json"])
    aggregate.add_argument(
        "--blackout-fallback",
        default=None,
        choices=[item.value for item in BlackoutFallback],
        help="What to show when every common window hits a blackout (default: $BLACKOUT_FALLBACK or unfiltered)",
    )
    aggregate.add_argument("--top-vibes", type=_positive_int, default=None, help="How many vibes to report")
    return parser


def _run_aggregate(args: argparse.Namespace) -> int:
    try:
        responses = _extract_responses(_load_payload(str(args.source)))
        settings = resolve_aggregation_settings(
            blackout_fallback=args.blackout_fallback,
            top_vibes_limit=None if args.top_vibes is None else str(args.top_vibes),
        )
        stats = aggregate_survey_responses(responses, settings=settings)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidSurveyInput) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        print(json.dumps(stats_to_payload(stats), ensure_ascii=False, indent=2))
    else:
        print(render_stats_text(stats))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    if args.command == "aggregate":
        return _run_aggregate(args)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
