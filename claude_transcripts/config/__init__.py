"""Settings and home-directory resolution."""

from __future__ import annotations

from claude_transcripts.config.base import (
    TranscriptSettings,
    get_settings,
    lazy_settings,
    resolve_home_dir,
    settings,
)

__all__ = [
    'TranscriptSettings',
    'get_settings',
    'lazy_settings',
    'resolve_home_dir',
    'settings',
]
