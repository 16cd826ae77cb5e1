"""Fatal error types raised by the index build pipeline."""

from __future__ import annotations


class IndexBuildError(Exception):
    """Raised when a run cannot produce a trustworthy index."""

    def __init__(self, reason: str, hint: str = "") -> None:
        super().__init__(reason)
        self.reason = reason
        self.hint = hint


class ConfigurationError(IndexBuildError, ValueError):
    """Raised for malformed settings, list files, or wildcard entries."""


class MalformedDocumentationError(IndexBuildError):
    """Raised when an index page does not match any known markup dialect."""
