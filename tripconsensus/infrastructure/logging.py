"""Structured logging: JSON lines with personal data redacted."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from tripconsensus.security.redact import redact_sensitive, sanitize_for_logging


class StructuredLogger:
    """Emit one JSON object per line; personal fields never reach the output."""

    def __init__(self, trace_id: Optional[str] = None, output=None, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}
        self.enabled = enabled

    def _emit(self, data: dict[str, Any]) -> None:
        if not self.enabled:
            return
        data = sanitize_for_logging(data)
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            line = redact_sensitive(line)
            self._output.write(line + "\n")
            self._output.flush()
        except Exception as exc:
            # Last-resort fallback to avoid silent logger failures.
            try:
                fallback = {
                    "event": "logger_internal_error",
                    "trace_id": self.trace_id,
                    "timestamp": time.time(),
                    "error": str(exc),
                }
                sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
                sys.stderr.flush()
            except Exception:
                return

    def stage_start(self, stage: str, **extra: Any) -> None:
        self._timers[stage] = time.time()
        self._emit({"event": "stage_start", "stage": stage, **extra})

    def stage_end(self, stage: str, **extra: Any) -> None:
        start = self._timers.pop(stage, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({
            "event": "stage_end",
            "stage": stage,
            "duration_ms": duration_ms,
            **extra,
        })

    def warning(self, stage: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "stage": stage, "message": redact_sensitive(message), **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})

