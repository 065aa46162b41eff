"""
Shared fixtures for transcript scanner tests.

InMemoryFileSystem stands in for the live filesystem so scans run against a
fixed tree; tests that need real directory semantics use tmp_path with
LocalFileSystem instead.
"""

from __future__ import annotations

import errno
import os
from datetime import UTC, datetime
from pathlib import Path, PurePosixPath

import pytest

from claude_transcripts.storage.protocol import DirectoryEntry, FileStat

HOME_DIR = '/home/testuser'
PROJECTS_DIR = f'{HOME_DIR}/.claude/projects'
DEFAULT_MTIME = datetime(2026, 1, 24, tzinfo=UTC)

SESSION_A = 'a1b2c3d4-e5f6-7890-abcd-ef1234567890'
SESSION_B = 'b2c3d4e5-f6a7-8901-bcde-f12345678901'
SESSION_C = 'c3d4e5f6-a7b8-9012-cdef-123456789012'


class InMemoryFileSystem:
    """FileSystemBackend over an ordered in-memory tree (listing order = insertion order)."""

    def __init__(self) -> None:
        # path -> FileStat for files, None for directories
        self.nodes: dict[str, FileStat | None] = {'/': None}
        self.failures: dict[str, OSError] = {}
        self.exists_calls: list[str] = []

    def add_dir(self, path: str) -> None:
        for parent in reversed(PurePosixPath(path).parents):
            self.nodes.setdefault(str(parent), None)
        self.nodes.setdefault(path, None)

    def add_file(self, path: str, size: int = 1024, modified_time: datetime = DEFAULT_MTIME) -> None:
        self.add_dir(str(PurePosixPath(path).parent))
        self.nodes[path] = FileStat(size=size, modified_time=modified_time)

    def add_transcript(self, project_dir: str, file_name: str, size: int = 1024, **kwargs: datetime) -> str:
        path = f'{PROJECTS_DIR}/{project_dir}/{file_name}'
        self.add_file(path, size, **kwargs)
        return path

    def fail(self, path: str, error: OSError) -> None:
        """Make listing or stat of path raise error."""
        self.failures[path] = error

    def _check(self, path: Path) -> str:
        key = str(path)
        if key in self.failures:
            raise self.failures[key]
        if key not in self.nodes:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), key)
        return key

    def _children(self, key: str) -> list[str]:
        return [p for p in self.nodes if p != '/' and str(PurePosixPath(p).parent) == key]

    async def list_entries(self, path: Path) -> list[DirectoryEntry]:
        key = self._check(path)
        return [DirectoryEntry(name=PurePosixPath(p).name, is_dir=self.nodes[p] is None) for p in self._children(key)]

    async def list_names(self, path: Path) -> list[str]:
        key = self._check(path)
        return [PurePosixPath(p).name for p in self._children(key)]

    async def stat(self, path: Path) -> FileStat:
        key = self._check(path)
        file_stat = self.nodes[key]
        if file_stat is None:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), key)
        return file_stat

    async def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        return path in self.nodes


@pytest.fixture
def fake_fs() -> InMemoryFileSystem:
    fs = InMemoryFileSystem()
    fs.add_dir(PROJECTS_DIR)
    return fs


def encode(path: Path | str) -> str:
    """Encode a path the way Claude Code names project directories (separators only)."""
    return str(path).replace('/', '-')


def write_transcript(project_dir: Path, file_name: str, size: int = 1024, mtime: float | None = None) -> Path:
    """Create a file of the given size, optionally with a fixed mtime (epoch seconds)."""
    project_dir.mkdir(parents=True, exist_ok=True)
    file_path = project_dir / file_name
    file_path.write_bytes(b'x' * size)
    if mtime is not None:
        os.utime(file_path, (mtime, mtime))
    return file_path
