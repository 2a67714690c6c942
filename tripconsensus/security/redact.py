"""Helpers for keeping personal survey data and secrets out of logs."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_REDACTED = "***REDACTED***"

# Survey fields and contact details are personal data; only counts and
# aggregates may be logged. Keys are compared after dropping case, "_" and "-".
_PERSONAL_KEYS = frozenset(
    {
        "password",
        "apikey",
        "token",
        "accesstoken",
        "refreshtoken",
        "authtoken",
        "secret",
        "credentials",
        "phone",
        "email",
        "userid",
        "name",
        "budget",
        "preferreddates",
        "blackoutdates",
        "livelocation",
    }
)

_QUERY_VALUE_RE = re.compile(
    r"(?i)(?P<prefix>\b(?:key|api[_-]?key|token|secret|signature|sig|password|passwd)\s*=\s*)(?P<value>[^&\s\"']+)"
)
_JSON_KV_RE = re.compile(
    r"(?i)(?P<prefix>(?:[\"']?(?:api[_-]?key|x-api-key|token|secret|signature|sig|password|passwd)[\"']?\s*[:=]\s*[\"']?))(?P<value>[^\"',\s}]+)"
)
_AUTH_HEADER_RE = re.compile(
    r"(?i)(?P<prefix>\bauthorization\s*:\s*(?:bearer|basic|token)\s+)(?P<value>[^\s,;]+)"
)
_BEARER_RE = re.compile(
    r"(?i)(?P<prefix>\bbearer\s+)(?P<value>[A-Za-z0-9._~+/=-]+)"
)
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")


def _replace_value(pattern: re.Pattern[str], text: str) -> str:
    def repl(match: re.Match[str]) -> str:
        return f"{match.group('prefix')}{_REDACTED}"

    return pattern.sub(repl, text)


def _normalize_key(key: str) -> str:
    return key.lower().replace("_", "").replace("-", "")


def redact_sensitive(text: str) -> str:
    """Redact secret-shaped values and e-mail addresses in free text."""
    if not text:
        return text

    redacted = str(text)
    value_patterns: tuple[re.Pattern[str], ...] = (
        _QUERY_VALUE_RE,
        _JSON_KV_RE,
        _AUTH_HEADER_RE,
        _BEARER_RE,
    )
    for pattern in value_patterns:
        redacted = _replace_value(pattern, redacted)

    redacted = _EMAIL_RE.sub(_REDACTED, redacted)
    return redacted


def sanitize_for_logging(obj: Any, extra_keys: Iterable[str] = ()) -> Any:
    """Return a copy of ``obj`` with values under personal keys replaced.

    Mappings are walked recursively, lists and tuples element by element.
    ``extra_keys`` extends the built-in set of personal keys.
    """
    extra = frozenset(_normalize_key(key) for key in extra_keys)
    return _sanitize(obj, _PERSONAL_KEYS | extra)


def _sanitize(obj: Any, keys: frozenset[str]) -> Any:
    if isinstance(obj, Mapping):
        return {
            key: _REDACTED if _normalize_key(str(key)) in keys else _sanitize(value, keys)
            for key, value in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_sanitize(item, keys) for item in obj]
    return obj


__all__ = ["redact_sensitive", "sanitize_for_logging"]
