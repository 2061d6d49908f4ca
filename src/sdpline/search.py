"""Prefix-based SDP line lookup with media-level then session-level fallback.

Both helpers operate on ``\\r\\n``-joined text blocks as produced by splitting
an SDP body into its session part and its media sections.  A media-level
match always shadows the session level: the session block is only consulted
when the media block has nothing for the given prefix.
"""

from __future__ import annotations

CRLF = "\r\n"


def _matching(block: str, prefix: str) -> list[str]:
    return [line for line in block.split(CRLF) if line.startswith(prefix)]


def find_line(block: str, prefix: str, fallback: str | None = None) -> str | None:
    """Return the first line of *block* starting with *prefix*.

    If *block* has no such line and a non-empty *fallback* block is given,
    the first match in *fallback* is returned instead.  Returns ``None`` when
    neither block has a match.
    """
    for line in block.split(CRLF):
        if line.startswith(prefix):
            return line
    if not fallback:
        return None

    for line in fallback.split(CRLF):
        if line.startswith(prefix):
            return line
    return None


def find_lines(block: str, prefix: str, fallback: str | None = None) -> list[str]:
    """Return every line of *block* starting with *prefix*, in order.

    The *fallback* block is scanned only when *block* yields no match at
    all; its lines are never merged with matches from *block*.
    """
    found = _matching(block, prefix)
    if found or not fallback:
        return found
    return _matching(fallback, prefix)
