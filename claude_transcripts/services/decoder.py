"""
Project path decoder - recovers real paths from encoded directory names.

Claude Code encodes a project path by replacing every `/` with `-`:

    /home/chris/project -> -home-chris-project

Real dashes in directory names are encoded the same way, so
`-home-chris-my-project` could be `/home/chris/my/project` or
`/home/chris/my-project`. The decoder enumerates every grouping of the
dash-separated segments and asks the filesystem which one exists.
"""

from __future__ import annotations

from collections.abc import Iterator

from claude_transcripts.paths import ENCODING_MARKER, PATH_SEPARATOR
from claude_transcripts.storage.local import LocalFileSystem
from claude_transcripts.storage.protocol import FileSystemBackend

__all__ = ['ProjectPathDecoder', 'iter_candidate_paths', 'simple_decode']


def simple_decode(encoded: str) -> str:
    """
    Decode by treating every marker as a path separator.

    Examples:
        >>> simple_decode('-home-chris-my-project')
        '/home/chris/my/project'
    """
    return PATH_SEPARATOR + encoded[1:].replace(ENCODING_MARKER, PATH_SEPARATOR)


def iter_candidate_paths(encoded: str) -> Iterator[str]:
    """
    Lazily yield every reconstruction of an encoded name.

    Each marker after the leading one is either a separator (start a new
    component) or a literal dash (merge into the previous component). New
    component is explored before merge at every segment, so the first
    candidate is always the simple decode and `/a/b-c` precedes `/a-b/c`.

    Yields up to 2 ** (segments - 1) candidates. Uses an explicit stack so
    deep paths never hit the recursion limit.

    Examples:
        >>> list(iter_candidate_paths('-a-b-c'))
        ['/a/b/c', '/a/b-c', '/a-b/c', '/a-b-c']
    """
    segments = encoded[1:].split(ENCODING_MARKER)
    stack: list[tuple[int, tuple[str, ...]]] = [(0, ())]

    while stack:
        index, components = stack.pop()
        if index == len(segments):
            yield PATH_SEPARATOR + PATH_SEPARATOR.join(components)
            continue

        segment = segments[index]
        # Pushed first so it pops after the whole new-component subtree
        if components:
            stack.append((index + 1, (*components[:-1], components[-1] + ENCODING_MARKER + segment)))
        stack.append((index + 1, (*components, segment)))


class ProjectPathDecoder:
    """
    Decodes project directory names into filesystem-verified paths.

    Stateless apart from the filesystem backend; every call probes the
    filesystem afresh, so results track the filesystem at call time.
    """

    def __init__(self, filesystem: FileSystemBackend | None = None) -> None:
        """
        Initialize decoder.

        Args:
            filesystem: Backend used for existence checks (default: live filesystem)
        """
        self.filesystem = filesystem or LocalFileSystem()

    async def decode(self, encoded: str) -> str:
        """
        Recover the most plausible original path for an encoded name.

        Never raises. Names without the leading marker are returned unchanged.
        When several reconstructions exist, the first in candidate order wins;
        when none exist, the simple decode is returned.

        Args:
            encoded: Encoded project directory name

        Returns:
            Decoded path
        """
        if not encoded.startswith(ENCODING_MARKER):
            return encoded

        simple_path = simple_decode(encoded)
        if await self.filesystem.exists(simple_path):
            return simple_path

        for candidate in iter_candidate_paths(encoded):
            if candidate == simple_path:
                continue
            if await self.filesystem.exists(candidate):
                return candidate

        return simple_path
