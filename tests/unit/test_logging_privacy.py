"""Structured logging and redaction tests."""

import io
import json

from tripconsensus.infrastructure.logging import StructuredLogger
from tripconsensus.security.redact import redact_sensitive, sanitize_for_logging


def test_sanitize_replaces_personal_fields_recursively():
    payload = {
        "trip_id": "t1",
        "responses": [
            {"name": "Sam", "budget": "$500 - $1,000", "preferredDates": ["2025-06-01 - 2025-06-10"]},
        ],
        "valid_ranges": 3,
        "phone": "+1 555 123 4567",
    }
    sanitized = sanitize_for_logging(payload)

    assert sanitized["trip_id"] == "t1"
    assert sanitized["valid_ranges"] == 3
    assert sanitized["phone"] == "***REDACTED***"
    response = sanitized["responses"][0]
    assert response["name"] == "***REDACTED***"
    assert response["budget"] == "***REDACTED***"
    assert response["preferredDates"] == "***REDACTED***"
    assert payload["responses"][0]["name"] == "Sam"


def test_sanitize_accepts_extra_keys():
    assert sanitize_for_logging({"vibe_choices": ["beach"]}, extra_keys=["vibeChoices"]) == {
        "vibe_choices": "***REDACTED***"
    }


def test_redact_sensitive_masks_secrets_and_emails():
    text = "token=abc123 sent to sam@example.com with Authorization: Bearer xyz.789"
    redacted = redact_sensitive(text)
    assert "abc123" not in redacted
    assert "sam@example.com" not in redacted
    assert "xyz.789" not in redacted
    assert redact_sensitive("") == ""


def test_logger_emits_json_lines_with_counts():
    output = io.StringIO()
    logger = StructuredLogger(trace_id="t-1", output=output)

    logger.stage_start("dates")
    logger.stage_end("dates", valid_ranges=2, budget="$900")
    logger.summary(total_responses=2)

    lines = [json.loads(line) for line in output.getvalue().splitlines()]
    assert [line["event"] for line in lines] == ["stage_start", "stage_end", "summary"]
    assert lines[1]["valid_ranges"] == 2
    assert lines[1]["budget"] == "***REDACTED***"
    assert "duration_ms" in lines[1]
    assert all(line["trace_id"] == "t-1" for line in lines)


def test_disabled_logger_is_silent():
    output = io.StringIO()
    logger = StructuredLogger(output=output, enabled=False)
    logger.warning("blackout", "nothing to see")
    assert output.getvalue() == ""
