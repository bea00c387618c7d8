"""
Month and day page resolution for Morning Brief.

Digests are filed under a fixed root page as::

    root
    └── March            (one page per month, found by title or created)
        ├── March 1st    (one page per run, always created)
        └── March 3rd

Concurrent runs are not coordinated: two runs that both miss the month
page will each create one.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..config import config
from ..converters import BaseConverter, BlockConverter
from ..models import Digest, NotionPage
from .client import NotionClient
from .errors import NotionError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ordinal_suffix(day: int) -> str:
    """
    Get the English ordinal suffix for a day of the month.

    Examples:
        ordinal_suffix(1)   # "st"
        ordinal_suffix(12)  # "th"
        ordinal_suffix(23)  # "rd"
    """
    if day % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def month_name(moment: datetime) -> str:
    """Long English month name, independent of the process locale."""
    return MONTH_NAMES[moment.month - 1]


def day_page_title(moment: datetime) -> str:
    """Title of a day page, e.g. "March 3rd"."""
    return f"{month_name(moment)} {moment.day}{ordinal_suffix(moment.day)}"


class PageResolver:
    """
    Finds or creates the month page and creates the day page for a digest.
    """

    def __init__(self, client: NotionClient, root_page_id: Optional[str] = None,
                 converter: Optional[BaseConverter] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the page resolver.

        Args:
            client: Notion client used for all remote calls
            root_page_id: Page holding the month pages (defaults to config value)
            converter: Converter for digest content (defaults to BlockConverter)
            clock: Returns the current time (defaults to datetime.now)
        """
        self.client = client
        self.root_page_id = root_page_id or config.notion_root_page_id
        self.converter = converter or BlockConverter()
        self.clock = clock or datetime.now

        if not self.root_page_id:
            raise ValueError("A Notion root page id is required")

    def resolve_month_page(self, root_id: Optional[str] = None) -> NotionPage:
        """
        Find the page for the current month under the root, creating it if missing.

        The first child page whose title contains the month name wins, so
        "March Notes" matches March when it is listed before "March".

        Args:
            root_id: Parent page to search (defaults to the configured root)

        Returns:
            The month page
        """
        parent_id = root_id or self.root_page_id
        current_month = month_name(self.clock())

        for page in self.client.list_child_pages(parent_id):
            if current_month in page.title:
                logging.info(f"Using existing month page '{page.title}' ({page.id})")
                return page

        logging.info(f"No page for {current_month} under {parent_id}, creating one")
        return self.client.create_page(parent_id, current_month)

    def create_day_page(self, container_id: str, digest: Digest) -> NotionPage:
        """
        Create today's page under the month page with the digest as its body.

        Args:
            container_id: Id of the month page
            digest: The digest to publish

        Returns:
            The created day page
        """
        title = day_page_title(self.clock())
        blocks = self.converter.convert(digest.content)

        try:
            return self.client.create_page(container_id, title, children=blocks)
        except NotionError as e:
            logging.error(f"Error creating day page in Notion: {e}")
            raise

    def update_digest(self, digest: Digest) -> NotionPage:
        """
        Publish a digest: resolve the month page, then create the day page.

        Every failure reaches the caller as a NotionError, including ones
        that are not raised by the client (a converter bug, an unexpected
        response shape). The original exception is kept as ``__cause__``.

        Args:
            digest: The digest to publish

        Returns:
            The created day page

        Raises:
            NotionError: If any step fails
        """
        try:
            month_page = self.resolve_month_page(self.root_page_id)
            return self.create_day_page(month_page.id, digest)
        except NotionError as e:
            logging.error(f"Error updating Notion: {e}")
            raise
        except Exception as e:
            logging.error(f"Error updating Notion: {e}")
            raise NotionError(str(e), operation="update_digest") from e
