"""
Content block models for Morning Brief.

This module defines the typed internal representation that the converters
produce from digest text. The Notion wire format is only built from these
models at the serialization boundary (see ``morningbrief.notion.serializer``).
"""

from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class PlainText(BaseModel):
    """
    A run of literal text inside a line.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain_text"] = "plain_text"

    content: str = Field(
        ...,
        description="The literal text, preserved exactly (may be empty)"
    )


class Link(BaseModel):
    """
    A run of text that links to a URL, written as ``[text](url)`` in the source.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["link"] = "link"

    content: str = Field(
        ...,
        description="The visible link text"
    )

    url: str = Field(
        ...,
        description="The link target"
    )


RichSpan = Annotated[Union[PlainText, Link], Field(discriminator="kind")]


class Heading(BaseModel):
    """
    A heading block of level 1, 2 or 3.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"

    level: Literal[1, 2, 3] = Field(
        ...,
        description="Heading level, matching the number of leading '#' characters"
    )

    text: List[RichSpan] = Field(
        default_factory=list,
        description="Inline content of the heading"
    )

    @property
    def block_type(self) -> str:
        return f"heading_{self.level}"


class Paragraph(BaseModel):
    """
    A paragraph block built from consecutive non-blank lines.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"

    text: List[RichSpan] = Field(
        default_factory=list,
        description="Inline content of the paragraph"
    )

    @property
    def block_type(self) -> str:
        return "paragraph"


class BulletItem(BaseModel):
    """
    A single bulleted list item.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet_item"] = "bullet_item"

    text: List[RichSpan] = Field(
        default_factory=list,
        description="Inline content of the list item"
    )

    @property
    def block_type(self) -> str:
        return "bulleted_list_item"


ContentBlock = Annotated[Union[Heading, Paragraph, BulletItem], Field(discriminator="kind")]
