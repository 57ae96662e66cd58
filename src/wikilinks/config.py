"""Configuration for wiki-link parsing.

A WikiLinkConfig is built once per processing run and passed explicitly into
every parse call. It is frozen, and the permalink registry it carries is never
mutated by the parser.
"""

from collections.abc import Callable, Sequence
from functools import cached_property
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .registry import PermalinkRegistry, ordered_permalinks

PathFormat = Literal["raw", "obsidian-short", "obsidian-absolute"]

PATH_FORMATS: tuple[str, ...] = ("raw", "obsidian-short", "obsidian-absolute")

DEFAULT_ALIAS_DIVIDER = "|"
DEFAULT_LINK_CLASS = "internal"
DEFAULT_NEW_CLASS = "new"
TRANSCLUSION_CLASS = "transclusion"


class ConfigurationError(Exception):
    """Raised when wiki-link options are invalid."""

    pass


class WikiLinkConfig(BaseModel):
    """Options shared by every parse call of a processing run.

    Fields:
        permalinks: Known page permalinks. Sequences keep their order for
            suffix tie-breaks; sets are sorted.
        path_format: How a link target becomes a path.
        alias_divider: Separates the target from the display alias.
        wiki_link_resolver: Maps a page name to candidate permalinks.
        page_resolver: Maps a page name to candidate page names, applied
            before normalization (or before wiki_link_resolver).
        wiki_link_class_name: Replaces the whole class of plain links.
        new_class_name: Class word added to links whose target is missing.
        href_template: Maps a permalink to the href of a link.

    Invalid or unknown options raise ConfigurationError, whether the config
    is built by calling the class or through create().
    """

    model_config = ConfigDict(frozen=True)

    permalinks: tuple[str, ...] = ()
    path_format: PathFormat = "raw"
    alias_divider: str = Field(default=DEFAULT_ALIAS_DIVIDER, min_length=1)
    wiki_link_resolver: Callable[[str], Sequence[str]] | None = None
    page_resolver: Callable[[str], Sequence[str]] | None = None
    wiki_link_class_name: str | None = None
    new_class_name: str = DEFAULT_NEW_CLASS
    href_template: Callable[[str], str] | None = None

    @field_validator("permalinks", mode="before")
    @classmethod
    def _order_permalinks(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            raise ValueError("expected a collection of permalinks, not a single string")
        # Order is significant for suffix matching
        return ordered_permalinks(value)

    def __init__(self, **options: Any) -> None:
        unknown = sorted(set(options) - set(type(self).model_fields))
        if unknown:
            raise ConfigurationError(f"Unknown wiki-link option(s): {', '.join(unknown)}")

        try:
            super().__init__(**options)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {loc}: {msg}")
            raise ConfigurationError("Invalid wiki-link options:\n" + "\n".join(errors)) from e

    @cached_property
    def registry(self) -> PermalinkRegistry:
        """Lookup structure over the configured permalinks."""
        return PermalinkRegistry(self.permalinks)

    @classmethod
    def create(cls, **options: Any) -> "WikiLinkConfig":
        """Build a configuration from keyword options.

        Equivalent to calling the class; kept as the named entry point for
        callers that build options as a mapping.

        Args:
            **options: Any WikiLinkConfig field.

        Returns:
            The validated, frozen configuration.

        Raises:
            ConfigurationError: If an option is unknown or has an invalid value.
        """
        return cls(**options)
