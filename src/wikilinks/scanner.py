"""Locate wiki-link and embed spans in inline text.

A span is ``[[...]]``, optionally prefixed by ``!`` for an embed. The scanner
only delimits spans; it never rewrites their content.

Rules:
- The span closes at the first ``]]`` reached while parentheses are balanced.
- Square brackets do not nest.
- A backslash before ``[`` or ``]`` takes away its delimiter role. The
  backslash stays in the content.
- A construct that never closes is not a link; scanning moves on.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

OPEN = "[["
CLOSE = "]]"
EMBED_MARKER = "!"
ESCAPE = "\\"


class LinkSyntax(NamedTuple):
    """One delimited span.

    start is the offset of the ``!`` for embeds, else of the first ``[``;
    end is one past the closing ``]]``.
    """

    raw_span: str  # content between the delimiters
    source: str  # the whole construct as written
    start: int
    end: int
    is_embed: bool


def scan(text: str, start: int = 0) -> LinkSyntax | None:
    """Find the first well-formed span beginning at or after start.

    Args:
        text: Inline text buffer.
        start: Offset to search from.

    Returns:
        The span, or None if the rest of the buffer has no link.
    """
    pos = text.find(OPEN, max(start, 0))
    while pos != -1:
        syntax = _match_at(text, pos, start)
        if syntax is not None:
            return syntax
        pos = text.find(OPEN, pos + 1)
    return None


def iter_spans(text: str) -> Iterator[LinkSyntax]:
    """Yield every span in text, left to right, without overlaps."""
    pos = 0
    while True:
        syntax = scan(text, pos)
        if syntax is None:
            return
        yield syntax
        pos = syntax.end


def _match_at(text: str, pos: int, lower_bound: int) -> LinkSyntax | None:
    if pos > 0 and text[pos - 1] == ESCAPE:
        return None

    content_start = pos + len(OPEN)
    close = _find_close(text, content_start)
    if close is None or close == content_start:
        return None

    is_embed = pos > lower_bound and text[pos - 1] == EMBED_MARKER
    begin = pos - 1 if is_embed else pos
    end = close + len(CLOSE)
    return LinkSyntax(
        raw_span=text[content_start:close],
        source=text[begin:end],
        start=begin,
        end=end,
        is_embed=is_embed,
    )


def _find_close(text: str, begin: int) -> int | None:
    """Return the offset of the closing ``]]`` for content starting at begin."""
    depth = 0
    i = begin
    n = len(text)
    while i < n:
        ch = text[i]

        if ch == ESCAPE and i + 1 < n and text[i + 1] in "[]":
            # "\]]" followed by anything but another "]" still closes:
            # the escaped bracket is the first half of the closing pair.
            if (
                depth == 0
                and text[i + 1] == "]"
                and text.startswith("]", i + 2)
                and not text.startswith(CLOSE, i + 2)
            ):
                return i + 1
            i += 2
            continue

        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth:
                depth -= 1
        elif ch == "]" and depth == 0 and text.startswith(CLOSE, i):
            return i
        i += 1
    return None
