"""Read-only registry of known page permalinks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Set


def ordered_permalinks(permalinks: Iterable[str]) -> tuple[str, ...]:
    """Fix the order of a permalink collection, dropping duplicates.

    Sequences keep their order (first occurrence wins). Sets have no order
    of their own, so they are sorted.
    """
    if isinstance(permalinks, Set):
        return tuple(sorted(permalinks, key=str))
    return tuple(dict.fromkeys(permalinks))


class PermalinkRegistry:
    """Ordered set of permalinks with exact and basename-suffix lookup.

    Entries are ordered by ordered_permalinks(). That order decides which
    entry wins when several share a suffix.
    """

    __slots__ = ("_entries", "_lookup")

    def __init__(self, permalinks: Iterable[str] = ()) -> None:
        self._entries: tuple[str, ...] = ordered_permalinks(permalinks)
        self._lookup: frozenset[str] = frozenset(self._entries)

    def __contains__(self, permalink: object) -> bool:
        return permalink in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PermalinkRegistry({list(self._entries)!r})"

    def find(self, candidate: str, *, match_suffix: bool = False) -> str | None:
        """Find the registry entry a candidate path refers to.

        An exact match always wins. With match_suffix, an entry whose path
        ends in "/<candidate>" also matches, so a bare page name finds the
        page at any folder depth.

        Args:
            candidate: Path to look up.
            match_suffix: Also accept entries ending in the candidate path.

        Returns:
            The matching entry, or None.
        """
        if candidate in self._lookup:
            return candidate

        if not match_suffix:
            return None

        name = candidate.lstrip("/")
        if not name:
            return None

        tail = f"/{name}"
        for entry in self._entries:
            if entry.endswith(tail):
                return entry
        return None
