"""
Filesystem layout of Claude Code project storage.

Claude Code stores transcripts as:

    ~/.claude/projects/<encoded-dir>/<session-uuid>.jsonl

where <encoded-dir> is the project's absolute path with every `/` replaced
by `-`. Real dashes in directory names are encoded the same way, so the
encoding is lossy; see `claude_transcripts.services.decoder` for recovery.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    'CLAUDE_DIR_NAME',
    'ENCODING_MARKER',
    'PATH_SEPARATOR',
    'PROJECTS_DIR_NAME',
    'SESSIONS_INDEX_FILENAME',
    'TRANSCRIPT_SUFFIX',
    'get_projects_dir',
]

# Character substituted for every path separator in project directory names
ENCODING_MARKER = '-'
PATH_SEPARATOR = '/'

CLAUDE_DIR_NAME = '.claude'
PROJECTS_DIR_NAME = 'projects'

# Per-project index written by Claude Code, never a transcript
SESSIONS_INDEX_FILENAME = 'sessions-index.json'
TRANSCRIPT_SUFFIX = '.jsonl'


def get_projects_dir(home_dir: Path | str) -> Path:
    """
    Return the project storage root for a home directory.

    The home directory is used as given; it is not resolved or validated.

    Examples:
        >>> get_projects_dir('/home/chris')
        PosixPath('/home/chris/.claude/projects')
    """
    return Path(home_dir) / CLAUDE_DIR_NAME / PROJECTS_DIR_NAME
