"""Notion API access and page resolution."""

from .errors import NotionError
from .client import NotionClient
from .resolver import PageResolver, day_page_title, month_name, ordinal_suffix
from .serializer import block_to_notion, blocks_to_notion, span_to_notion

__all__ = [
    "NotionError",
    "NotionClient",
    "PageResolver",
    "day_page_title",
    "month_name",
    "ordinal_suffix",
    "block_to_notion",
    "blocks_to_notion",
    "span_to_notion"
]
