"""Managed region block models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class FolderLink(BaseModel):
    """Anchor entry pointing at one top-level project directory."""

    kind: Literal["link"] = "link"
    name: str = Field(..., min_length=1)
    title: str


class ReadmeSection(BaseModel):
    """Heading plus body copied from a subdirectory README."""

    kind: Literal["section"] = "section"
    heading: str
    body: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.heading, self.body)


class TextSpan(BaseModel):
    """Managed region text that is neither a link nor a section."""

    kind: Literal["text"] = "text"
    text: str


Block = Annotated[Union[FolderLink, ReadmeSection, TextSpan], Field(discriminator="kind")]


class ManagedRegion(BaseModel):
    """Parsed content of the region owned by the aggregator.

    Attributes:
        blocks: Blocks in document order.
        warnings: Format mismatches found while parsing.
    """

    blocks: list[Block] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def links(self) -> list[FolderLink]:
        return [block for block in self.blocks if isinstance(block, FolderLink)]

    @property
    def sections(self) -> list[ReadmeSection]:
        return [block for block in self.blocks if isinstance(block, ReadmeSection)]
