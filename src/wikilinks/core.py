"""Parse wiki links out of inline text.

The host pipeline hands over one inline text buffer at a time and splices the
returned nodes into its own tree. Everything here is a pure function of the
buffer and the configuration.
"""

from __future__ import annotations

from collections.abc import Iterator

from .config import WikiLinkConfig
from .fields import split_fields
from .models import WikiLinkNode
from .render import build_descriptor
from .resolver import resolve_link
from .scanner import LinkSyntax, iter_spans, scan

_DEFAULT_CONFIG = WikiLinkConfig()


def build_node(syntax: LinkSyntax, config: WikiLinkConfig | None = None) -> WikiLinkNode:
    """Turn a delimited span into a resolved, renderable node."""
    if config is None:
        config = _DEFAULT_CONFIG
    fields = split_fields(syntax.raw_span, config.alias_divider)
    resolved = resolve_link(fields, config)
    descriptor = build_descriptor(
        fields,
        resolved,
        config,
        is_embed=syntax.is_embed,
        source=syntax.source,
    )
    return WikiLinkNode(
        value=syntax.raw_span,
        is_embed=syntax.is_embed,
        target=fields.target,
        permalink=resolved.permalink,
        exists=resolved.exists,
        alias=resolved.alias,
        heading=resolved.heading,
        start=syntax.start,
        end=syntax.end,
        descriptor=descriptor,
    )


def parse_wiki_link(
    text: str,
    config: WikiLinkConfig | None = None,
    start: int = 0,
) -> WikiLinkNode | None:
    """Parse the first wiki link at or after start.

    Args:
        text: Inline text buffer.
        config: Parsing configuration (defaults apply when omitted).
        start: Offset to search from.

    Returns:
        The node, or None when no well-formed link remains.

    Raises:
        ResolverError: If a custom resolver returns a malformed result.
    """
    syntax = scan(text, start)
    if syntax is None:
        return None
    return build_node(syntax, config)


def iter_wiki_links(text: str, config: WikiLinkConfig | None = None) -> Iterator[WikiLinkNode]:
    """Yield every wiki link in text, in order."""
    for syntax in iter_spans(text):
        yield build_node(syntax, config)


def split_text(text: str, config: WikiLinkConfig | None = None) -> list[str | WikiLinkNode]:
    """Split text into plain-text pieces and wiki-link nodes.

    Concatenating the text pieces with each node's source text gives back
    the input. Empty text pieces are omitted.

    Example:
        "See [[Page]]." -> ["See ", <WikiLinkNode Page>, "."]
    """
    parts: list[str | WikiLinkNode] = []
    pos = 0
    for node in iter_wiki_links(text, config):
        if node.start > pos:
            parts.append(text[pos:node.start])
        parts.append(node)
        pos = node.end
    if pos < len(text):
        parts.append(text[pos:])
    return parts
