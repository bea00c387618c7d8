"""
Digest and publication models for Morning Brief.

This module defines the input handed over by the digest generator and the
records describing what was published to Notion.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Digest(BaseModel):
    """
    A generated daily digest in its raw markup form.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(
        ...,
        description="Raw digest markup: an introduction, a '---' line, then the body"
    )


class NotionPage(BaseModel):
    """
    A page in the Notion workspace, either a month page or a day page.
    """

    id: str = Field(
        ...,
        description="The Notion page id"
    )

    title: str = Field(
        ...,
        description="The plain-text page title"
    )

    parent_id: Optional[str] = Field(
        None,
        description="Id of the parent page, when known"
    )

    url: Optional[str] = Field(
        None,
        description="Public URL of the page when Notion returned one"
    )


class PublicationRecord(BaseModel):
    """
    One attempt to publish a digest, as stored in the publication log.
    """

    publication_id: Optional[int] = Field(
        None,
        description="Primary key (auto-increment in database)"
    )

    published_at: datetime = Field(
        default_factory=datetime.now,
        description="When the attempt finished"
    )

    digest_hash: str = Field(
        ...,
        description="SHA-256 hash of the digest content"
    )

    day_title: str = Field(
        ...,
        description="Title of the day page that was (or would have been) created"
    )

    month_page_id: Optional[str] = Field(
        None,
        description="Id of the resolved month page"
    )

    day_page_id: Optional[str] = Field(
        None,
        description="Id of the created day page"
    )

    success: bool = Field(
        ...,
        description="Whether the day page was created"
    )

    error_message: Optional[str] = Field(
        None,
        description="Error text for failed attempts"
    )
