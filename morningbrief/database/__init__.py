"""Publication log storage."""

from .manager import DatabaseManager

__all__ = ["DatabaseManager"]
