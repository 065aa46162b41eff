#!/usr/bin/env python3
"""
Command-line interface for claude-transcripts.

Provides commands to catalog Claude Code session transcripts and to decode
project directory names.
"""

from __future__ import annotations

import asyncio
import traceback
from datetime import datetime
from pathlib import Path

import typer

from claude_transcripts.cli.logger import CLILogger
from claude_transcripts.config import resolve_home_dir
from claude_transcripts.exceptions import ClaudeTranscriptsError, InvalidDateError
from claude_transcripts.schemas.transcripts import ScanOptions, ScanResult
from claude_transcripts.services.decoder import ProjectPathDecoder
from claude_transcripts.services.scanner import TranscriptScannerService

app = typer.Typer(
    name='claude-transcripts',
    help='Catalog Claude Code session transcripts',
    add_completion=False,
)


def _parse_since(value: str | None) -> datetime | None:
    """Parse an ISO-8601 date or datetime for the --since option."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise InvalidDateError(value) from None


def _format_size(size: int) -> str:
    return f'{size / 1024 / 1024:.2f} MB'


@app.command()
def scan(
    project: str | None = typer.Option(None, '--project', '-p', help='Glob over decoded project path (* and ?)'),
    since: str | None = typer.Option(None, '--since', '-s', help='Only transcripts modified at or after (ISO-8601)'),
    home: Path | None = typer.Option(None, '--home', help='Home directory (default: configured or current user)'),
    as_json: bool = typer.Option(False, '--json', help='Print the scan result as JSON'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """List transcript files with size and project totals."""
    asyncio.run(_scan_async(project, since, home, as_json, verbose))


@app.command()
def decode(
    encoded: list[str] = typer.Argument(..., help='Encoded project directory names (e.g. -home-chris-my-project)'),
) -> None:
    """Decode project directory names into filesystem paths."""
    asyncio.run(_decode_async(encoded))


async def _scan_async(
    project: str | None,
    since: str | None,
    home: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Async implementation of scan command."""
    logger = CLILogger(verbose=verbose)

    try:
        options = ScanOptions(project_filter=project, min_date=_parse_since(since))
        scanner = TranscriptScannerService(home_dir=home or resolve_home_dir())
        result = await scanner.scan(options, logger=logger)
    except (ClaudeTranscriptsError, OSError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        await logger.error(f'Failed to scan transcripts: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    _print_scan_result(result)


def _print_scan_result(result: ScanResult) -> None:
    """Print one line per transcript followed by totals."""
    for transcript in result.transcripts:
        typer.echo(
            f'{transcript.modified_time:%Y-%m-%d %H:%M}  {transcript.file_size:>12,}  '
            f'{transcript.session_id}  {transcript.project_path}'
        )

    if result.transcripts:
        typer.echo()
    typer.secho(
        f'✓ Found {len(result.transcripts):,} transcripts in {result.project_count:,} projects',
        fg=typer.colors.GREEN,
    )
    typer.echo(f'  Total size: {_format_size(result.total_size)}')


async def _decode_async(encoded_names: list[str]) -> None:
    """Async implementation of decode command."""
    decoder = ProjectPathDecoder()
    for name in encoded_names:
        typer.echo(f'{name} -> {await decoder.decode(name)}')


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
