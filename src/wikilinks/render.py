"""Classify links and build their render descriptors.

Decision order (first match wins):

    not an embed              -> <a class="internal [new]" href=...>text</a>
    embed of an image file    -> <img src=permalink alt=alias-or-target>
    embed of a PDF            -> <iframe src="permalink#toolbar=0">
    embed of any other file   -> <p> holding the construct as written
    embed of a page           -> <a class="internal [new] transclusion">

The registry only influences the "new" class of links and transclusions.
Media embeds render the same whether or not their file is known.
"""

from __future__ import annotations

import re
from typing import Literal

from .config import DEFAULT_LINK_CLASS, TRANSCLUSION_CLASS, WikiLinkConfig
from .fields import HEADING_DIVIDER, LinkFields
from .models import RenderDescriptor, TextNode
from .resolver import ResolvedLink

LinkKind = Literal["link", "image", "pdf", "unsupported", "transclusion"]

IMAGE_EXTENSIONS = frozenset(
    {"apng", "avif", "bmp", "gif", "ico", "jpeg", "jpg", "png", "svg", "tif", "tiff", "webp"}
)
PDF_EXTENSION = "pdf"
# Embeds of these are page transclusions, like extensionless targets
PAGE_EXTENSIONS = frozenset({"md", "mdx"})

PDF_VIEWER_FRAGMENT = "#toolbar=0"

_EXTENSION_RE = re.compile(r"\.([A-Za-z0-9]+)$")
_WHITESPACE_RE = re.compile(r"\s+")


def file_extension(target: str) -> str | None:
    """Return the lowercased file extension of a target's last path segment."""
    name = target.rsplit("/", 1)[-1]
    match = _EXTENSION_RE.search(name)
    if not match:
        return None
    return match.group(1).lower()


def classify(target: str, is_embed: bool) -> LinkKind:
    """Decide what a link renders as, from the embed flag and file extension."""
    if not is_embed:
        return "link"

    extension = file_extension(target)
    if extension is None or extension in PAGE_EXTENSIONS:
        return "transclusion"
    if extension in IMAGE_EXTENSIONS:
        return "image"
    if extension == PDF_EXTENSION:
        return "pdf"
    return "unsupported"


def heading_slug(heading: str) -> str:
    """Anchor for a heading: lowercased, whitespace runs become single dashes."""
    return _WHITESPACE_RE.sub("-", heading.lower())


def display_text(fields: LinkFields) -> str:
    """Text shown for a link: the alias, else the target as written."""
    if fields.alias:
        return fields.alias
    if fields.heading is None:
        return fields.target
    if not fields.target:
        return fields.heading
    return f"{fields.target}{HEADING_DIVIDER}{fields.heading}"


def link_href(resolved: ResolvedLink, config: WikiLinkConfig) -> str:
    """href of a link, with the heading anchor appended when present."""
    href = resolved.permalink
    # Same-page heading links carry no permalink to template
    if href and config.href_template is not None:
        href = config.href_template(href)
    if resolved.heading is not None:
        href = f"{href}#{heading_slug(resolved.heading)}"
    return href


def link_class(exists: bool, config: WikiLinkConfig, *, transclusion: bool = False) -> str:
    """class attribute of a link or transclusion."""
    if config.wiki_link_class_name is not None and not transclusion:
        return config.wiki_link_class_name

    classes = [DEFAULT_LINK_CLASS]
    if not exists:
        classes.append(config.new_class_name)
    if transclusion:
        classes.append(TRANSCLUSION_CLASS)
    return " ".join(classes)


def build_descriptor(
    fields: LinkFields,
    resolved: ResolvedLink,
    config: WikiLinkConfig,
    *,
    is_embed: bool = False,
    source: str = "",
) -> RenderDescriptor:
    """Build the render descriptor for a resolved link.

    Args:
        fields: Fields split from the link.
        resolved: Resolution result for the fields.
        config: Parsing configuration (class names, href template).
        is_embed: Whether the link was written with a leading "!".
        source: The construct as written, shown by unsupported embeds.

    Returns:
        Descriptor of the element to render.
    """
    kind = classify(fields.target, is_embed)

    if kind == "image":
        return RenderDescriptor(
            tag_name="img",
            attributes={"src": resolved.permalink, "alt": fields.alias or fields.target},
        )

    if kind == "pdf":
        return RenderDescriptor(
            tag_name="iframe",
            attributes={"src": f"{resolved.permalink}{PDF_VIEWER_FRAGMENT}"},
        )

    if kind == "unsupported":
        return RenderDescriptor(tag_name="p", children=[TextNode(value=source)])

    return RenderDescriptor(
        tag_name="a",
        attributes={
            "class": link_class(resolved.exists, config, transclusion=kind == "transclusion"),
            "href": link_href(resolved, config),
        },
        children=[TextNode(value=display_text(fields))],
    )
