"""Batch result reporting."""

from .reporter import ResultReporter, serialize_report, summarize

__all__ = ["ResultReporter", "serialize_report", "summarize"]
