"""
Shared exceptions for claude-transcripts.

Filesystem failures during a scan are NOT wrapped: they propagate as the
original OSError subclass. These exceptions cover input validation only.

Exception Hierarchy:
    ClaudeTranscriptsError (base)
    └── InvalidDateError (unparseable --since value)
"""

from __future__ import annotations


class ClaudeTranscriptsError(Exception):
    """Base exception for all claude-transcripts errors."""


class InvalidDateError(ClaudeTranscriptsError):
    """Raised when a date filter value is not ISO-8601."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date '{value}'. Expected ISO-8601, e.g. 2026-01-24 or 2026-01-24T09:30:00+00:00")
