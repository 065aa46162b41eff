"""Locate and catalog Claude Code session transcripts under ~/.claude/projects/."""
