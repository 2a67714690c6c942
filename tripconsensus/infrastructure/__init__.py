"""Infrastructure helpers."""

from tripconsensus.infrastructure.logging import StructuredLogger

__all__ = ["StructuredLogger"]
