"""Structured diagnostics utilities."""

from .diagnostics import DiagnosticEvent, DiagnosticLogger, utc_timestamp

__all__ = ["DiagnosticEvent", "DiagnosticLogger", "utc_timestamp"]
