"""
Digest publishing for Morning Brief.

Wraps PageResolver.update_digest so that a failed Notion update is reported
and logged instead of aborting the caller, and records every attempt in the
publication log when a database is available.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .database import DatabaseManager
from .models import Digest, NotionPage, PublicationRecord
from .notion import NotionError, PageResolver, day_page_title


@dataclass
class PublicationResult:
    """
    Outcome of one publish call.
    """
    success: bool
    page: Optional[NotionPage] = None
    error: Optional[NotionError] = None


class DigestPublisher:
    """
    Publishes digests to Notion and keeps a log of the attempts.
    """

    def __init__(self, resolver: PageResolver, database: Optional[DatabaseManager] = None):
        """
        Initialize the publisher.

        Args:
            resolver: Resolver that creates the month and day pages
            database: Optional connected database for the publication log
        """
        self.resolver = resolver
        self.db = database

    def publish(self, digest: Digest) -> PublicationResult:
        """
        Publish a digest to Notion.

        Args:
            digest: The digest to publish

        Returns:
            PublicationResult describing the created page or the error
        """
        started_at = self.resolver.clock()
        self._warn_if_already_published(started_at)

        result = PublicationResult(success=False)
        try:
            result.page = self.resolver.update_digest(digest)
            result.success = True
            logging.info(f"Notion update successful: {result.page.title} ({result.page.id})")
        except NotionError as e:
            result.error = e
            logging.error(f"Failed to update Notion: {e}")
        finally:
            self._record(digest, started_at, result)

        return result

    def _warn_if_already_published(self, now: datetime) -> None:
        if not self.db:
            return
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            if self.db.count_publications_since(start_of_day):
                logging.warning("A digest was already published today; creating another day page")
        except Exception as log_error:
            logging.warning(f"Failed to read publication log: {log_error}")

    def _record(self, digest: Digest, started_at: datetime, result: PublicationResult) -> None:
        if not self.db:
            return

        page = result.page
        try:
            record = PublicationRecord(
                published_at=self.resolver.clock(),
                digest_hash=self.db.calculate_digest_hash(digest),
                day_title=page.title if page else day_page_title(started_at),
                month_page_id=page.parent_id if page else None,
                day_page_id=page.id if page else None,
                success=result.success,
                error_message=str(result.error) if result.error else None
            )
            self.db.record_publication(record)
        except Exception as log_error:
            logging.warning(f"Failed to record publication: {log_error}")
