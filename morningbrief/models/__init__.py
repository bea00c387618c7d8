"""Data models for Morning Brief."""

from .blocks import PlainText, Link, RichSpan, Heading, Paragraph, BulletItem, ContentBlock
from .digest import Digest, NotionPage, PublicationRecord

__all__ = [
    "PlainText",
    "Link",
    "RichSpan",
    "Heading",
    "Paragraph",
    "BulletItem",
    "ContentBlock",
    "Digest",
    "NotionPage",
    "PublicationRecord"
]
