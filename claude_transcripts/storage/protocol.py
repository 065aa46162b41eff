"""
Filesystem backend protocol.

Defines the read-only filesystem capability the decoder and scanner depend on,
so tests can substitute an in-memory tree for the live filesystem.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

import attrs


@attrs.define(frozen=True)
class DirectoryEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool


@attrs.define(frozen=True)
class FileStat:
    """File metadata needed for a transcript record."""

    size: int
    modified_time: datetime  # timezone-aware, UTC


@runtime_checkable
class FileSystemBackend(Protocol):
    """Protocol for read-only filesystem access."""

    async def list_entries(self, path: Path) -> list[DirectoryEntry]:
        """
        List a directory with entry types.

        Args:
            path: Directory to list

        Returns:
            Entries in listing order

        Raises:
            FileNotFoundError: If path doesn't exist
            OSError: For any other listing failure
        """
        ...

    async def list_names(self, path: Path) -> list[str]:
        """
        List entry names of a directory.

        Raises:
            OSError: If the directory can't be listed
        """
        ...

    async def stat(self, path: Path) -> FileStat:
        """
        Read size and modification time, following symlinks.

        Raises:
            OSError: If the file can't be stat'ed
        """
        ...

    async def exists(self, path: str) -> bool:
        """Check whether any filesystem entry exists at path."""
        ...
