"""
Local filesystem backend.

Implements FileSystemBackend protocol against the live filesystem.
"""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path

from claude_transcripts.storage.protocol import DirectoryEntry, FileStat


class LocalFileSystem:
    """Read-only local filesystem backend."""

    async def list_entries(self, path: Path) -> list[DirectoryEntry]:
        with os.scandir(path) as it:
            # Symlinked directories are not followed, matching lstat semantics
            return [DirectoryEntry(name=entry.name, is_dir=entry.is_dir(follow_symlinks=False)) for entry in it]

    async def list_names(self, path: Path) -> list[str]:
        return os.listdir(path)

    async def stat(self, path: Path) -> FileStat:
        result = path.stat()
        return FileStat(
            size=result.st_size,
            modified_time=datetime.fromtimestamp(result.st_mtime, tz=UTC),
        )

    async def exists(self, path: str) -> bool:
        return os.path.exists(path)
