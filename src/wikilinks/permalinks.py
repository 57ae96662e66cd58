"""Build a permalink registry from a content directory.

Every markdown file under the root becomes one permalink: its path relative
to the root, without extension, with a leading "/" and index pages collapsed
onto their folder. A ``permalink`` field in the file's frontmatter overrides
that default.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath

import frontmatter

from .paths import ROOT, collapse_index

log = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = frozenset({".md", ".mdx"})


def default_permalink(relative_path: str) -> str:
    """Map a POSIX path relative to the content root to its permalink.

    Examples:
        "guides/setup.md" -> "/guides/setup"
        "blog/index.md" -> "/blog"
        "index.md" -> "/"
    """
    stem = PurePosixPath(relative_path).with_suffix("").as_posix()
    return collapse_index(ROOT + stem.lstrip("/"))


def _frontmatter_permalink(path: Path) -> str | None:
    try:
        post = frontmatter.load(str(path))
    except Exception as e:
        log.debug("Skipping frontmatter of %s during permalink discovery: %s", path, e)
        return None

    permalink = post.metadata.get("permalink")
    if isinstance(permalink, str) and permalink.strip():
        return permalink.strip()
    return None


def get_permalinks(
    content_root: Path,
    ignore_patterns: Iterable[str] = (),
    path_to_permalink: Callable[[str], str] | None = None,
) -> list[str]:
    """Collect the permalinks of all markdown files under content_root.

    Args:
        content_root: Directory holding the markdown pages.
        ignore_patterns: fnmatch patterns matched against each file's POSIX
            path relative to content_root.
        path_to_permalink: Replaces the default path-to-permalink mapping
            (frontmatter overrides still win).

    Returns:
        Permalinks ordered by relative file path, without duplicates.
    """
    if not content_root.exists() or not content_root.is_dir():
        return []

    patterns = list(ignore_patterns)
    to_permalink = path_to_permalink or default_permalink

    permalinks: list[str] = []
    seen: set[str] = set()
    ignored = 0

    for path in sorted(content_root.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in MARKDOWN_SUFFIXES:
            continue

        relative = path.relative_to(content_root).as_posix()
        if any(fnmatch(relative, pattern) for pattern in patterns):
            ignored += 1
            continue

        permalink = _frontmatter_permalink(path) or to_permalink(relative)
        if permalink not in seen:
            seen.add(permalink)
            permalinks.append(permalink)

    log.info(
        "Discovered %d permalinks under %s (%d files ignored)",
        len(permalinks),
        content_root,
        ignored,
    )
    return permalinks
