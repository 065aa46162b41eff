"""Service layer for transcript discovery."""

from claude_transcripts.services.decoder import ProjectPathDecoder, iter_candidate_paths, simple_decode
from claude_transcripts.services.scanner import TranscriptScannerService, is_session_id

__all__ = [
    'ProjectPathDecoder',
    'TranscriptScannerService',
    'is_session_id',
    'iter_candidate_paths',
    'simple_decode',
]
