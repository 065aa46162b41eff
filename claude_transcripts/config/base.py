"""
Configuration for claude-transcripts.

Settings are read from environment variables, optionally via a .env file.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings


T = TypeVar('T', bound='TranscriptSettings')


class TranscriptSettings(pydantic_settings.BaseSettings):
    """Scanner configuration."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown .env entries
    )

    # Application metadata
    APP_NAME: str = 'claude-transcripts'
    VERSION: str = '0.1.0'

    # Home directory override (default: current user's home)
    CLAUDE_TRANSCRIPTS_HOME: pathlib.Path | None = None

    @pydantic.field_validator('CLAUDE_TRANSCRIPTS_HOME')
    @classmethod
    def validate_home(cls, v: pathlib.Path | None) -> pathlib.Path | None:
        """Home override must be absolute; relative paths would depend on cwd."""
        if v is not None and not v.is_absolute():
            raise ValueError('CLAUDE_TRANSCRIPTS_HOME must be an absolute path')
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))


# Module-level singleton (lazy-loaded)
settings = lazy_settings(TranscriptSettings)


def resolve_home_dir() -> pathlib.Path:
    """Return the configured home directory, falling back to the current user's home."""
    return settings.CLAUDE_TRANSCRIPTS_HOME or pathlib.Path.home()
