"""Converters from digest markup to content blocks."""

from .base import BaseConverter
from .rich_text import RichTextParser, parse_rich_text
from .markdown import BlockConverter

__all__ = ["BaseConverter", "RichTextParser", "parse_rich_text", "BlockConverter"]
