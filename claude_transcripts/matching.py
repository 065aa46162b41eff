"""
Glob matching for the project filter.

Only `*` (any sequence, including `/`) and `?` (any single character) are
special. Everything else, dots included, matches literally, and a pattern
must match the whole decoded path.
"""

from __future__ import annotations

import re

__all__ = ['compile_project_filter', 'matches_project_filter']


def compile_project_filter(pattern: str) -> re.Pattern[str]:
    """
    Convert a glob pattern into an anchored regex.

    Examples:
        >>> compile_project_filter('/home/*/app.?').pattern
        '/home/.*/app\\\\..'
    """
    translated = ''.join('.*' if char == '*' else '.' if char == '?' else re.escape(char) for char in pattern)
    return re.compile(translated)


def matches_project_filter(path: str, pattern: str | None) -> bool:
    """Return True if path fully matches pattern. No pattern matches everything."""
    if not pattern:
        return True
    return compile_project_filter(pattern).fullmatch(path) is not None
