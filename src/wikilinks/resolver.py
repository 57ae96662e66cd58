"""Resolve link targets to permalinks.

Resolution has a single shape: build an ordered list of candidate permalinks
for the target, then take the first candidate the registry knows. When none
is known the link points at the first candidate and is marked as missing.

Candidates come from, in order of application:
1. page_resolver (optional): page name -> candidate page names
2. wiki_link_resolver (optional): page name -> candidate permalinks,
   otherwise the normalized path of each page name
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple

from .config import WikiLinkConfig
from .fields import LinkFields
from .paths import normalize_path

log = logging.getLogger(__name__)


class ResolverError(Exception):
    """Raised when a custom resolver returns something other than candidate strings."""

    def __init__(self, page_name: str, message: str) -> None:
        self.page_name = page_name
        self.message = message
        super().__init__(f"{page_name!r}: {message}")


class ResolvedLink(NamedTuple):
    """A link whose target has been matched against the registry."""

    permalink: str
    exists: bool
    alias: str | None = None
    heading: str | None = None


def _checked(page_name: str, result: object, resolver: Callable[[str], Sequence[str]]) -> list[str]:
    """Validate what a custom resolver returned."""
    name = getattr(resolver, "__name__", type(resolver).__name__)
    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        raise ResolverError(
            page_name, f"resolver {name} must return a sequence of strings, got {type(result).__name__}"
        )
    if not result:
        raise ResolverError(page_name, f"resolver {name} returned no candidates")
    for candidate in result:
        if not isinstance(candidate, str):
            raise ResolverError(
                page_name,
                f"resolver {name} returned a non-string candidate: {candidate!r}",
            )
    return list(result)


def candidate_permalinks(page_name: str, config: WikiLinkConfig) -> list[str]:
    """Build the ordered candidate permalinks for a page name.

    Args:
        page_name: Link target as written (before normalization).
        config: Parsing configuration.

    Returns:
        Non-empty list of candidates, most preferred first.

    Raises:
        ResolverError: If a custom resolver returns a malformed result.
    """
    names = [page_name]
    if config.page_resolver is not None:
        names = _checked(page_name, config.page_resolver(page_name), config.page_resolver)

    candidates: list[str] = []
    for name in names:
        if config.wiki_link_resolver is not None:
            resolved = config.wiki_link_resolver(name)
            candidates.extend(_checked(name, resolved, config.wiki_link_resolver))
        else:
            candidates.append(normalize_path(name, config.path_format))
    return candidates


def resolve_permalink(page_name: str, config: WikiLinkConfig) -> tuple[str, bool]:
    """Resolve a page name to (permalink, exists).

    An empty page name is a same-page reference: ("", False), no lookup.
    """
    if not page_name:
        return "", False

    candidates = candidate_permalinks(page_name, config)
    match_suffix = config.path_format == "obsidian-short"

    for candidate in candidates:
        match = config.registry.find(candidate, match_suffix=match_suffix)
        if match is not None:
            log.debug("Resolved %r to %r via candidate %r", page_name, match, candidate)
            return match, True

    log.debug("No permalink for %r (tried %s)", page_name, candidates)
    return candidates[0], False


def resolve_link(fields: LinkFields, config: WikiLinkConfig) -> ResolvedLink:
    """Resolve split link fields. The heading never affects resolution."""
    permalink, exists = resolve_permalink(fields.target, config)
    return ResolvedLink(
        permalink=permalink,
        exists=exists,
        alias=fields.alias,
        heading=fields.heading,
    )
