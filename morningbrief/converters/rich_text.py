"""
Inline rich text parsing for Morning Brief.

Splits a single line of digest text into plain-text and link spans.
"""

import re
from typing import List

from ..models import Link, PlainText, RichSpan

# Non-greedy so that two links on one line stay separate
LINK_PATTERN = re.compile(r"(\[.*?\]\(.*?\))")


def parse_rich_text(content: str) -> List[RichSpan]:
    """
    Parse ``[text](url)`` links out of a line of text.

    Every piece of the line becomes a span, including empty strings between
    adjacent links, so that joining the spans (with link decoration put
    back) reproduces the input exactly.

    Args:
        content: A line of text

    Returns:
        Ordered list of PlainText and Link spans
    """
    spans: List[RichSpan] = []

    # With one capture group, odd positions hold the matched links
    for index, part in enumerate(LINK_PATTERN.split(content)):
        if index % 2 == 1:
            # Only the first two pieces count: "[a](b](c)" links "a" to "b"
            text, url = part[1:-1].split("](")[:2]
            spans.append(Link(content=text, url=url))
        else:
            spans.append(PlainText(content=part))

    return spans


class RichTextParser:
    """
    Callable wrapper around parse_rich_text for injection into converters.
    """

    def parse(self, content: str) -> List[RichSpan]:
        return parse_rich_text(content)

    def __call__(self, content: str) -> List[RichSpan]:
        return self.parse(content)
