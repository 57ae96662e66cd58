"""Turn link targets into paths under the supported path formats.

- raw: the target as written.
- obsidian-short: the target as written; it names a page at any folder depth,
  which the resolver accounts for when matching permalinks.
- obsidian-absolute: the target is relative to the content root and gains a
  leading "/".

Every format then collapses index pages onto their folder.
"""

from __future__ import annotations

from .config import PATH_FORMATS, ConfigurationError, PathFormat

INDEX_PAGE = "index"
ROOT = "/"


def collapse_index(path: str) -> str:
    """Map an index page path onto its folder path.

    Examples:
        "/some/folder/index" -> "/some/folder"
        "folder/index" -> "folder"
        "/index" -> "/"
        "index" -> "/"
    """
    suffix = "/" + INDEX_PAGE
    # Repeat so the result is itself fully collapsed ("a/index/index" -> "a")
    while path == INDEX_PAGE or path.endswith(suffix):
        path = "" if path == INDEX_PAGE else path[: -len(suffix)]
        if not path:
            return ROOT
    return path


def normalize_path(target: str, path_format: PathFormat = "raw") -> str:
    """Normalize a link target into the path used for permalink lookup.

    An empty target (same-page heading link) stays empty.

    Raises:
        ConfigurationError: If path_format is not a supported format.
    """
    if path_format not in PATH_FORMATS:
        raise ConfigurationError(
            f"Unknown path format {path_format!r}; expected one of: {', '.join(PATH_FORMATS)}"
        )

    if not target:
        return target

    path = target
    if path_format == "obsidian-absolute" and not path.startswith(ROOT):
        path = ROOT + path

    return collapse_index(path)
