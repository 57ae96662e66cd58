"""Tests for wikilinks.permalinks - registry discovery from a content directory."""

import logging
from pathlib import Path

import pytest

from conftest import create_page
from wikilinks import WikiLinkConfig, get_permalinks, parse_wiki_link
from wikilinks.permalinks import default_permalink


class TestDefaultPermalink:
    @pytest.mark.parametrize(
        "relative,expected",
        [
            ("guides/setup.md", "/guides/setup"),
            ("blog/index.md", "/blog"),
            ("index.md", "/"),
            ("Wiki Link.mdx", "/Wiki Link"),
            ("v1.2/notes.md", "/v1.2/notes"),
        ],
    )
    def test_mapping(self, relative, expected):
        assert default_permalink(relative) == expected


class TestGetPermalinks:
    """Tests for get_permalinks."""

    def test_missing_root(self, tmp_path: Path):
        assert get_permalinks(tmp_path / "nope") == []

    def test_file_root(self, tmp_path: Path):
        file_root = tmp_path / "file.md"
        file_root.write_text("x")

        assert get_permalinks(file_root) == []

    def test_collects_markdown_pages_sorted(self, content_root: Path):
        create_page(content_root, "index.md", "# Home")
        create_page(content_root, "guides/setup.md", "# Setup")
        create_page(content_root, "blog/index.md", "# Blog")
        create_page(content_root, "blog/first.mdx", "# First")
        create_page(content_root, "assets/diagram.png", "not markdown")

        assert get_permalinks(content_root) == ["/blog/first", "/blog", "/guides/setup", "/"]

    def test_frontmatter_permalink_overrides(self, content_root: Path):
        create_page(content_root, "drafts/post.md", "Body", permalink="/posts/hello")

        assert get_permalinks(content_root) == ["/posts/hello"]

    def test_ignore_patterns(self, content_root: Path):
        create_page(content_root, "keep.md")
        create_page(content_root, "drafts/skip.md")
        create_page(content_root, "_private.md")

        result = get_permalinks(content_root, ignore_patterns=["drafts/*", "_*"])

        assert result == ["/keep"]

    def test_custom_mapping(self, content_root: Path):
        create_page(content_root, "Some Page.md")

        result = get_permalinks(
            content_root,
            path_to_permalink=lambda rel: "/" + rel.removesuffix(".md").replace(" ", "-").lower(),
        )

        assert result == ["/some-page"]

    def test_duplicates_dropped(self, content_root: Path):
        create_page(content_root, "a.md", permalink="/same")
        create_page(content_root, "b.md", permalink="/same")

        assert get_permalinks(content_root) == ["/same"]

    def test_bad_frontmatter_falls_back(self, content_root: Path, caplog):
        page = content_root / "broken.md"
        page.write_text("---\ntitle: [unclosed\n---\n\nBody\n")

        with caplog.at_level(logging.DEBUG, logger="wikilinks.permalinks"):
            result = get_permalinks(content_root)

        assert result == ["/broken"]
        assert "Skipping frontmatter" in caplog.text

    def test_feeds_parser(self, content_root: Path):
        """Discovered permalinks resolve links end to end."""
        create_page(content_root, "notes/Wiki Link.md")
        config = WikiLinkConfig.create(
            permalinks=get_permalinks(content_root),
            path_format="obsidian-short",
        )

        node = parse_wiki_link("[[Wiki Link]]", config)

        assert node.exists is True
        assert node.permalink == "/notes/Wiki Link"
