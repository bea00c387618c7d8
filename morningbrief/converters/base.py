"""
Base converter interface for Morning Brief.

This module defines the abstract interface that all digest converters must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import ContentBlock


class BaseConverter(ABC):
    """
    Abstract base class for all digest converters.

    Each converter turns the raw text of a digest into an ordered list of
    ContentBlock objects that can be attached to a Notion page.
    """

    @abstractmethod
    def convert(self, content: str) -> List[ContentBlock]:
        """
        Convert raw digest text into content blocks.

        Implementations must not raise on malformed input; unsupported
        syntax degrades to plain text.

        Args:
            content: The raw digest text

        Returns:
            List of ContentBlock objects in source order
        """
        pass
