"""Split the inside of a wiki link into target, heading and alias."""

from __future__ import annotations

from typing import NamedTuple

from .config import DEFAULT_ALIAS_DIVIDER

HEADING_DIVIDER = "#"


class LinkFields(NamedTuple):
    """Sub-fields of a link, verbatim from the source text."""

    target: str  # empty for a link to a heading on the same page
    heading: str | None = None
    alias: str | None = None


def split_fields(raw_span: str, alias_divider: str = DEFAULT_ALIAS_DIVIDER) -> LinkFields:
    """Split raw span content into its fields.

    The first alias divider separates the alias; in what precedes it, the
    first "#" separates the heading. Nothing is trimmed.

    Examples:
        "Page" -> LinkFields("Page")
        "Page#Intro|Read this" -> LinkFields("Page", "Intro", "Read this")
        "#Intro" -> LinkFields("", "Intro")
    """
    link, has_alias, alias = raw_span.partition(alias_divider)
    target, has_heading, heading = link.partition(HEADING_DIVIDER)
    return LinkFields(
        target=target,
        heading=heading if has_heading else None,
        alias=alias if has_alias else None,
    )
