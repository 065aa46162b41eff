"""Read-only filesystem backends used for scanning and path verification."""

from claude_transcripts.storage.local import LocalFileSystem
from claude_transcripts.storage.protocol import DirectoryEntry, FileStat, FileSystemBackend

__all__ = [
    'DirectoryEntry',
    'FileStat',
    'FileSystemBackend',
    'LocalFileSystem',
]
