"""Marked-block scanning and splicing.

Pure functions over text: no file or network access. A marker matches a
line only when the line, minus its terminator, equals the marker exactly.
The first start/end pair wins; any later pair is ordinary content.
"""

from __future__ import annotations

from hostsync import END_MARKER, START_MARKER
from hostsync.errors import MalformedSourceError, TargetMalformedError


class UnterminatedBlock(ValueError):
    """A start marker was found with no end marker after it."""


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` only, keeping terminators.

    Unlike ``str.splitlines`` this leaves form feeds and other unicode
    separators inside lines, so joining the result gives back ``text``.
    """
    if not text:
        return []
    lines = [line + "\n" for line in text.split("\n")]
    last = lines.pop()[:-1]
    if last:
        lines.append(last)
    return lines


def _bare(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def find_block(
    lines: list[str],
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> tuple[int, int] | None:
    """Locate the first marked block in a list of lines.

    Args:
        lines: Lines as produced by ``split_lines``.
        start_marker: Exact text of the opening marker line.
        end_marker: Exact text of the closing marker line.

    Returns:
        (start, end) line indices, both inclusive, or None if no start
        marker is present.

    Raises:
        UnterminatedBlock: A start marker has no end marker after it.
    """
    start = None
    for i, line in enumerate(lines):
        if _bare(line) == start_marker:
            start = i
            break
    if start is None:
        return None

    for j in range(start + 1, len(lines)):
        if _bare(lines[j]) == end_marker:
            return start, j

    raise UnterminatedBlock(
        f"'{start_marker}' on line {start + 1} has no matching '{end_marker}'"
    )


def line_ending(text: str) -> str:
    """Return the terminator style of the first line: ``\\r\\n`` or ``\\n``."""
    first = text.find("\n")
    if first > 0 and text[first - 1] == "\r":
        return "\r\n"
    return "\n"


def normalize_block(block: str) -> str:
    """Return block text ending in exactly one line terminator.

    The terminator matches the block's own style, so a CRLF block stays CRLF.
    """
    return block.rstrip("\r\n") + line_ending(block)


def extract_block(
    text: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> str:
    """Extract the first marked block (markers included) from remote text.

    Raises:
        MalformedSourceError: No start marker, or no end marker after it.
    """
    lines = split_lines(text)
    try:
        span = find_block(lines, start_marker, end_marker)
    except UnterminatedBlock as e:
        raise MalformedSourceError(f"Remote content is malformed: {e}") from e
    if span is None:
        raise MalformedSourceError(
            f"Could not find the block between '{start_marker}' and '{end_marker}' "
            "in the remote content"
        )
    start, end = span
    return normalize_block("".join(lines[start:end + 1]))


def splice_block(
    local: str,
    block: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> tuple[str, str]:
    """Compose new local content carrying ``block``.

    If the local text already holds a block, it is removed (markers
    included) and the new block goes at the end of what remains. Otherwise
    the block is appended. Either way a line terminator (in the
    file's own style) is added first if the remaining text lacks one.

    Returns:
        (new_content, action) where action is "replaced" or "appended".

    Raises:
        TargetMalformedError: The local text has a start marker with no
            end marker after it.
    """
    lines = split_lines(local)
    try:
        span = find_block(lines, start_marker, end_marker)
    except UnterminatedBlock as e:
        raise TargetMalformedError(f"Local hosts content is malformed: {e}") from e

    if span is None:
        residual = local
        action = "appended"
    else:
        start, end = span
        residual = "".join(lines[:start] + lines[end + 1:])
        action = "replaced"

    if residual and not residual.endswith("\n"):
        residual += line_ending(residual)

    return residual + normalize_block(block), action


def read_block(
    text: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> str | None:
    """Return the block currently present in local text, or None.

    Raises:
        TargetMalformedError: The block is not terminated.
    """
    lines = split_lines(text)
    try:
        span = find_block(lines, start_marker, end_marker)
    except UnterminatedBlock as e:
        raise TargetMalformedError(f"Local hosts content is malformed: {e}") from e
    if span is None:
        return None
    start, end = span
    return "".join(lines[start:end + 1])
