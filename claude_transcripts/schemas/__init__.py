"""Pydantic schemas for transcript scanning."""

from __future__ import annotations

from claude_transcripts.schemas.base import StrictModel
from claude_transcripts.schemas.transcripts import ScanOptions, ScanResult, TranscriptRecord

__all__ = [
    'ScanOptions',
    'ScanResult',
    'StrictModel',
    'TranscriptRecord',
]
