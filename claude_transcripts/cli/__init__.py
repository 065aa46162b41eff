"""Command-line interface for claude-transcripts."""
