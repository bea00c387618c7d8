"""
Digest markup converter for Morning Brief.

This module converts the markdown-like text produced by the digest generator
into Heading, Paragraph and BulletItem blocks. The digest starts with an
introduction that ends on a line containing only ``---``; everything before
and including that line is skipped. After it, lines are classified one at a
time:

- ``# ``, ``## ``, ``### `` start a heading of level 1, 2 or 3
- ``- `` starts a bulleted list item
- a blank line ends the current paragraph
- any other line is appended to the current paragraph

Paragraphs that mention "AI Summarized" are dropped entirely.
"""

import logging
import re
from typing import List, Optional

from ..models import BulletItem, ContentBlock, Heading, Paragraph
from .base import BaseConverter
from .rich_text import RichTextParser

INTRO_SEPARATOR = "---"
AI_SUMMARY_MARKER = "AI Summarized"

# Mention placeholders like @([Source](https://...)) only appear in headings
HEADING_PLACEHOLDER_PATTERN = re.compile(r"@\(\[.*?\]\(.*?\)\)")

HEADING_PREFIXES = (
    ("# ", 1),
    ("## ", 2),
    ("### ", 3),
)

BULLET_PREFIX = "- "


class BlockConverter(BaseConverter):
    """
    Single-pass line classifier that turns digest markup into content blocks.
    """

    def __init__(self, rich_text_parser: Optional[RichTextParser] = None):
        """
        Initialize the converter.

        Args:
            rich_text_parser: Parser used for inline links (defaults to RichTextParser)
        """
        self.rich_text_parser = rich_text_parser or RichTextParser()

    def convert(self, content: str) -> List[ContentBlock]:
        """
        Convert digest markup into an ordered list of content blocks.

        Args:
            content: The raw digest text

        Returns:
            List of blocks in source order; empty when no '---' line is present
        """
        blocks: List[ContentBlock] = []
        current_paragraph = ""
        skip_introduction = True

        for line in content.split("\n"):
            if skip_introduction:
                if line.strip() == INTRO_SEPARATOR:
                    skip_introduction = False
                continue

            heading_level = self._heading_level(line)
            if heading_level is not None:
                self._flush_paragraph(blocks, current_paragraph)
                current_paragraph = ""
                prefix_length = heading_level + 1
                blocks.append(self._create_heading_block(line[prefix_length:], heading_level))
            elif line.startswith(BULLET_PREFIX):
                self._flush_paragraph(blocks, current_paragraph)
                current_paragraph = ""
                blocks.append(self._create_bullet_block(line[len(BULLET_PREFIX):]))
            elif line.strip() == "":
                self._flush_paragraph(blocks, current_paragraph)
                current_paragraph = ""
            else:
                current_paragraph += line

        self._flush_paragraph(blocks, current_paragraph)

        logging.debug(f"Converted digest into {len(blocks)} blocks")
        return blocks

    def _heading_level(self, line: str) -> Optional[int]:
        for prefix, level in HEADING_PREFIXES:
            if line.startswith(prefix):
                return level
        return None

    def _flush_paragraph(self, blocks: List[ContentBlock], paragraph: str) -> None:
        if not paragraph:
            return
        block = self._create_paragraph_block(paragraph)
        if block is not None:
            blocks.append(block)

    def _create_heading_block(self, content: str, level: int) -> Heading:
        """Build a heading, removing mention placeholders before trimming."""
        filtered = HEADING_PLACEHOLDER_PATTERN.sub("", content).strip()
        return Heading(level=level, text=self.rich_text_parser.parse(filtered))

    def _create_paragraph_block(self, content: str) -> Optional[Paragraph]:
        """Build a paragraph, or None when the paragraph is generator boilerplate."""
        if AI_SUMMARY_MARKER in content:
            return None
        return Paragraph(text=self.rich_text_parser.parse(content))

    def _create_bullet_block(self, content: str) -> BulletItem:
        return BulletItem(text=self.rich_text_parser.parse(content))
