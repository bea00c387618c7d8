"""
Notion wire format for content blocks.

Converts the typed block models into the JSON payloads accepted by the
Notion pages and blocks endpoints.
"""

from typing import Any, Dict, List, Sequence

from ..models import ContentBlock, Link, RichSpan

NotionBlock = Dict[str, Any]


def span_to_notion(span: RichSpan) -> Dict[str, Any]:
    """Serialize one span as a Notion rich text item."""
    text: Dict[str, Any] = {"content": span.content}
    if isinstance(span, Link):
        text["link"] = {"url": span.url}
    return {"type": "text", "text": text}


def rich_text_to_notion(spans: Sequence[RichSpan]) -> List[Dict[str, Any]]:
    return [span_to_notion(span) for span in spans]


def block_to_notion(block: ContentBlock) -> NotionBlock:
    """
    Serialize one content block.

    Args:
        block: A Heading, Paragraph or BulletItem

    Returns:
        Dictionary shaped like ``{"type": t, t: {"rich_text": [...]}}``
    """
    block_type = block.block_type
    return {
        "object": "block",
        "type": block_type,
        block_type: {
            "rich_text": rich_text_to_notion(block.text)
        }
    }


def blocks_to_notion(blocks: Sequence[ContentBlock]) -> List[NotionBlock]:
    return [block_to_notion(block) for block in blocks]


def title_property(title: str) -> Dict[str, Any]:
    """Build the ``properties`` payload that sets a page title."""
    return {
        "title": {
            "title": [{"type": "text", "text": {"content": title}}]
        }
    }
