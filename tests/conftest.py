"""Shared test fixtures for wikilinks test suite.

Design:
- parse: parses a buffer and returns the single node it must contain
- content_root: empty content directory for permalink discovery
"""

from pathlib import Path
from typing import Any, Callable

import pytest

from wikilinks import WikiLinkConfig, WikiLinkNode, parse_wiki_link


# ─────────────────────────────────────────────────────────────────────────────
# Core Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def parse() -> Callable[..., WikiLinkNode]:
    """Parse text with the given options and return the first node.

    Usage:
        def test_link(parse):
            node = parse("[[Page]]", permalinks=["Page"])
            assert node.exists
    """
    def _parse(text: str, **options: Any) -> WikiLinkNode:
        node = parse_wiki_link(text, WikiLinkConfig.create(**options))
        assert node is not None, f"no wiki link found in {text!r}"
        return node
    return _parse


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Create an empty content directory."""
    root = tmp_path / "content"
    root.mkdir()
    return root


# ─────────────────────────────────────────────────────────────────────────────
# Helper Functions (for test code, not fixtures)
# ─────────────────────────────────────────────────────────────────────────────


def create_page(root: Path, path: str, content: str = "", permalink: str | None = None) -> Path:
    """Helper to create a markdown page, with frontmatter when permalink is given.

    Usage in tests:
        from conftest import create_page
        page = create_page(content_root, "guides/setup.md", "# Setup")
    """
    page = root / path
    page.parent.mkdir(parents=True, exist_ok=True)

    if permalink is not None:
        page.write_text(f"---\ntitle: Page\npermalink: {permalink}\n---\n\n{content}\n")
    else:
        page.write_text(content)
    return page
