"""Error type for failures talking to the Notion API."""

from typing import Optional


class NotionError(Exception):
    """
    Raised for any failure while reading from or writing to Notion.

    Network, authentication and validation failures are not told apart;
    the original exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, operation: str = "unknown",
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is not None:
            return f"Notion Error ({self.operation}, HTTP {self.status_code}): {message}"
        return f"Notion Error ({self.operation}): {message}"
