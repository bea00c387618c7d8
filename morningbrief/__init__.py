"""
Morning Brief: files daily digests into Notion.

Converts digest markup into Notion content blocks and publishes each digest
as a day page under a page for the current month.
"""

__version__ = "0.1.0"
__author__ = "Morning Brief Project"

# Import main components
from .database import DatabaseManager
from .models import Digest, ContentBlock, NotionPage, PublicationRecord
from .converters import BaseConverter, BlockConverter, RichTextParser, parse_rich_text
from .notion import NotionClient, NotionError, PageResolver
from .publisher import DigestPublisher, PublicationResult

__all__ = [
    "DatabaseManager",
    "Digest",
    "ContentBlock",
    "NotionPage",
    "PublicationRecord",
    "BaseConverter",
    "BlockConverter",
    "RichTextParser",
    "parse_rich_text",
    "NotionClient",
    "NotionError",
    "PageResolver",
    "DigestPublisher",
    "PublicationResult"
]
