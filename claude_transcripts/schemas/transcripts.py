"""
Transcript scan schemas.

Models for scan inputs (filters) and outputs (records and aggregates).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

import pydantic

from claude_transcripts.schemas.base import StrictModel


class TranscriptRecord(StrictModel):
    """
    A discovered transcript file.

    Note: project_path is a best-effort decode of project_dir. When the
    filesystem can't disambiguate the encoding it is the literal decode,
    which may not be the directory the session actually ran in.
    """

    project_path: str  # Decoded original path (e.g., /home/chris/my-project)
    project_dir: str  # Encoded directory name (e.g., -home-chris-my-project)
    session_id: str  # UUID from filename
    file_path: Path  # Full path to .jsonl
    file_size: pydantic.NonNegativeInt  # Bytes
    modified_time: datetime


class ScanOptions(StrictModel):
    """Optional filters applied during a scan. Absent filters match everything."""

    project_filter: str | None = None  # Glob over decoded project path (* and ?)
    min_date: datetime | None = None  # Drop files modified strictly before this

    @pydantic.field_validator('min_date')
    @classmethod
    def make_min_date_aware(cls, v: datetime | None) -> datetime | None:
        """Interpret a naive datetime as local time so it compares against UTC mtimes."""
        if v is not None and v.tzinfo is None:
            return v.astimezone()
        return v


class ScanResult(StrictModel):
    """
    Result of a transcript scan.

    transcripts is in directory listing order (not sorted). total_size and
    project_count are always derived from transcripts; construct with
    from_transcripts() or empty().
    """

    transcripts: tuple[TranscriptRecord, ...]
    total_size: pydantic.NonNegativeInt
    project_count: pydantic.NonNegativeInt

    @pydantic.model_validator(mode='after')
    def check_aggregates(self) -> ScanResult:
        """Reject aggregates that disagree with the transcripts they summarize."""
        expected_size = sum(t.file_size for t in self.transcripts)
        if self.total_size != expected_size:
            raise ValueError(f'total_size {self.total_size} != sum of file sizes {expected_size}')
        expected_count = len({t.project_dir for t in self.transcripts})
        if self.project_count != expected_count:
            raise ValueError(f'project_count {self.project_count} != distinct project dirs {expected_count}')
        return self

    @classmethod
    def from_transcripts(cls, transcripts: Iterable[TranscriptRecord]) -> ScanResult:
        records = tuple(transcripts)
        return cls(
            transcripts=records,
            total_size=sum(t.file_size for t in records),
            project_count=len({t.project_dir for t in records}),
        )

    @classmethod
    def empty(cls) -> ScanResult:
        return cls(transcripts=(), total_size=0, project_count=0)
