"""wikilinks - wiki-style links and embeds for markdown inline text."""

from ._logging import configure_logging
from .config import ConfigurationError, WikiLinkConfig
from .core import build_node, iter_wiki_links, parse_wiki_link, split_text
from .models import RenderDescriptor, TextNode, WikiLinkNode
from .permalinks import get_permalinks
from .resolver import ResolverError

__all__ = [
    "ConfigurationError",
    "RenderDescriptor",
    "ResolverError",
    "TextNode",
    "WikiLinkConfig",
    "WikiLinkNode",
    "build_node",
    "configure_logging",
    "get_permalinks",
    "iter_wiki_links",
    "parse_wiki_link",
    "split_text",
]

__version__ = "0.1.0"
