"""
Transcript scanner service - catalogs session transcripts across all projects.

Walks ~/.claude/projects/, decodes each project directory name, applies the
project and date filters, and aggregates file metadata into a ScanResult.
"""

from __future__ import annotations

import re
from pathlib import Path

from claude_transcripts.matching import compile_project_filter
from claude_transcripts.paths import SESSIONS_INDEX_FILENAME, TRANSCRIPT_SUFFIX, get_projects_dir
from claude_transcripts.protocols import LoggerProtocol
from claude_transcripts.schemas.transcripts import ScanOptions, ScanResult, TranscriptRecord
from claude_transcripts.services.decoder import ProjectPathDecoder
from claude_transcripts.storage.local import LocalFileSystem
from claude_transcripts.storage.protocol import FileSystemBackend

__all__ = ['SESSION_ID_PATTERN', 'TranscriptScannerService', 'is_session_id']

# Canonical lowercase UUID, the only accepted transcript stem
SESSION_ID_PATTERN = re.compile(r'[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}')


def is_session_id(value: str) -> bool:
    """Check for a lowercase 8-4-4-4-12 hex UUID."""
    return SESSION_ID_PATTERN.fullmatch(value) is not None


class TranscriptScannerService:
    """
    Service for cataloging transcript files across all Claude Code projects.

    Errors are all-or-nothing: any OSError other than a missing projects
    root aborts the scan and propagates unchanged, discarding records already
    collected from earlier project directories.
    """

    def __init__(
        self,
        home_dir: Path | str,
        filesystem: FileSystemBackend | None = None,
        decoder: ProjectPathDecoder | None = None,
    ) -> None:
        """
        Initialize scanner.

        Args:
            home_dir: Home directory containing .claude/projects
            filesystem: Filesystem backend (default: live filesystem)
            decoder: Path decoder (default: decoder over the same backend)
        """
        self.filesystem = filesystem or LocalFileSystem()
        self.decoder = decoder or ProjectPathDecoder(self.filesystem)
        self.projects_dir = get_projects_dir(home_dir)

    async def scan(
        self,
        options: ScanOptions | None = None,
        logger: LoggerProtocol | None = None,
    ) -> ScanResult:
        """
        Scan for all transcript files.

        Args:
            options: Project and date filters (default: no filters)
            logger: Optional logger instance

        Returns:
            ScanResult; empty when the projects directory doesn't exist

        Raises:
            OSError: Any listing or stat failure other than a missing projects directory
        """
        options = options or ScanOptions()
        project_matcher = compile_project_filter(options.project_filter) if options.project_filter else None

        if logger:
            await logger.info(f'Scanning transcripts in: {self.projects_dir}')

        try:
            entries = await self.filesystem.list_entries(self.projects_dir)
        except FileNotFoundError:
            if logger:
                await logger.info(f'Projects directory not found: {self.projects_dir}')
            return ScanResult.empty()

        transcripts: list[TranscriptRecord] = []

        for entry in entries:
            if not entry.is_dir:
                continue

            project_dir = entry.name
            project_path = await self.decoder.decode(project_dir)

            if project_matcher is not None and project_matcher.fullmatch(project_path) is None:
                continue

            transcripts.extend(await self._scan_project(project_dir, project_path, options))

        result = ScanResult.from_transcripts(transcripts)

        if logger:
            await logger.info(
                f'Found {len(result.transcripts)} transcripts in {result.project_count} projects '
                f'({result.total_size:,} bytes)'
            )

        return result

    async def _scan_project(
        self,
        project_dir: str,
        project_path: str,
        options: ScanOptions,
    ) -> list[TranscriptRecord]:
        """Collect qualifying transcripts from one project directory."""
        full_project_dir = self.projects_dir / project_dir
        records: list[TranscriptRecord] = []

        for file_name in await self.filesystem.list_names(full_project_dir):
            if file_name == SESSIONS_INDEX_FILENAME or not file_name.endswith(TRANSCRIPT_SUFFIX):
                continue

            session_id = file_name.removesuffix(TRANSCRIPT_SUFFIX)
            if not is_session_id(session_id):
                continue

            file_path = full_project_dir / file_name
            file_stat = await self.filesystem.stat(file_path)

            if options.min_date is not None and file_stat.modified_time < options.min_date:
                continue

            records.append(
                TranscriptRecord(
                    project_path=project_path,
                    project_dir=project_dir,
                    session_id=session_id,
                    file_path=file_path,
                    file_size=file_stat.size,
                    modified_time=file_stat.modified_time,
                )
            )

        return records
