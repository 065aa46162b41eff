"""Tests for scan schemas: aggregate invariants, immutability, date handling."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pydantic
import pytest

from claude_transcripts.schemas.transcripts import ScanOptions, ScanResult, TranscriptRecord


def make_record(project_dir: str, size: int) -> TranscriptRecord:
    return TranscriptRecord(
        project_path='/home/testuser/project',
        project_dir=project_dir,
        session_id='a1b2c3d4-e5f6-7890-abcd-ef1234567890',
        file_path=Path(f'/home/testuser/.claude/projects/{project_dir}/a1b2c3d4-e5f6-7890-abcd-ef1234567890.jsonl'),
        file_size=size,
        modified_time=datetime(2026, 1, 24, tzinfo=UTC),
    )


def test_from_transcripts_derives_aggregates() -> None:
    result = ScanResult.from_transcripts([make_record('-a', 10), make_record('-a', 20), make_record('-b', 5)])

    assert result.total_size == 35
    assert result.project_count == 2


def test_empty_result() -> None:
    assert ScanResult.empty().model_dump() == {'transcripts': (), 'total_size': 0, 'project_count': 0}


def test_inconsistent_aggregates_are_rejected() -> None:
    record = make_record('-a', 10)

    with pytest.raises(pydantic.ValidationError, match='total_size'):
        ScanResult(transcripts=(record,), total_size=11, project_count=1)
    with pytest.raises(pydantic.ValidationError, match='project_count'):
        ScanResult(transcripts=(record,), total_size=10, project_count=2)


def test_records_are_immutable() -> None:
    record = make_record('-a', 10)

    with pytest.raises(pydantic.ValidationError):
        record.file_size = 20  # type: ignore[misc]


def test_negative_file_size_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        make_record('-a', -1)


def test_naive_min_date_becomes_aware() -> None:
    options = ScanOptions(min_date=datetime(2026, 1, 22))

    assert options.min_date is not None
    assert options.min_date.tzinfo is not None
    assert options.min_date.replace(tzinfo=None) == datetime(2026, 1, 22)


def test_aware_min_date_unchanged() -> None:
    bound = datetime(2026, 1, 22, tzinfo=UTC)

    assert ScanOptions(min_date=bound).min_date == bound


def test_options_default_to_no_filters() -> None:
    options = ScanOptions()

    assert options.project_filter is None
    assert options.min_date is None


def test_result_serializes_to_json() -> None:
    result = ScanResult.from_transcripts([make_record('-a', 10)])

    dumped = result.model_dump(mode='json')

    assert dumped['total_size'] == 10
    assert dumped['project_count'] == 1
    assert dumped['transcripts'][0]['modified_time'] == '2026-01-24T00:00:00Z'
