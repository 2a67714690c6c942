"""Privacy helpers."""

from tripconsensus.security.redact import redact_sensitive, sanitize_for_logging

__all__ = ["redact_sensitive", "sanitize_for_logging"]
