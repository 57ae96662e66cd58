"""Pydantic models for parsed wiki links."""

from typing import Literal

from pydantic import BaseModel, Field


class TextNode(BaseModel):
    """A text child of a render descriptor."""

    type: Literal["text"] = "text"
    value: str


class RenderDescriptor(BaseModel):
    """Tag, attributes and children of the element a link renders to.

    A later stage turns this into markup; the parser never produces markup
    text itself.
    """

    tag_name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[TextNode] = Field(default_factory=list)


class WikiLinkNode(BaseModel):
    """A wiki link or embed found in inline text, ready to splice into a tree."""

    type: Literal["wikiLink"] = "wikiLink"
    value: str  # raw content between the delimiters
    is_embed: bool = False
    target: str
    permalink: str  # "" for a heading on the same page
    exists: bool = False
    alias: str | None = None
    heading: str | None = None
    start: int  # offset of the construct in the source buffer
    end: int  # one past its last character
    descriptor: RenderDescriptor

    @property
    def h_name(self) -> str:
        return self.descriptor.tag_name

    @property
    def h_properties(self) -> dict[str, str]:
        return self.descriptor.attributes

    @property
    def h_children(self) -> list[TextNode]:
        return self.descriptor.children
