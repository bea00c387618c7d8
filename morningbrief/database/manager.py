"""
Database management for Morning Brief.

This module handles the DuckDB publication log that records every attempt
to publish a digest to Notion.
"""

import duckdb
import hashlib
from datetime import datetime
from typing import List, Optional

from ..models import Digest, PublicationRecord


class DatabaseManager:
    """
    Manages the DuckDB database for tracking digest publications.
    """

    def __init__(self, db_path: str = "morningbrief.db"):
        """
        Initialize the database manager.

        Args:
            db_path: Path to the DuckDB database file
        """
        self.db_path = db_path
        self.connection = None

    def connect(self):
        """Establish connection to the database."""
        self.connection = duckdb.connect(self.db_path)

    def disconnect(self):
        """Close the database connection."""
        if self.connection:
            self.connection.close()
            self.connection = None

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()

    def initialize_database(self):
        """
        Create all necessary tables if they don't exist.
        """
        if not self.connection:
            raise RuntimeError("Database connection not established")

        self.connection.execute("CREATE SEQUENCE IF NOT EXISTS publication_id_seq;")
        self.connection.execute("""
            CREATE TABLE IF NOT EXISTS publications (
                publication_id BIGINT PRIMARY KEY DEFAULT nextval('publication_id_seq'),
                published_at TIMESTAMP NOT NULL,
                digest_hash VARCHAR NOT NULL,
                day_title VARCHAR NOT NULL,
                month_page_id VARCHAR,
                day_page_id VARCHAR,
                success BOOLEAN NOT NULL,
                error_message TEXT
            )
        """)

    @staticmethod
    def calculate_digest_hash(digest: Digest) -> str:
        """
        Calculate the SHA-256 hash of a digest's content.

        Args:
            digest: The digest to hash

        Returns:
            The SHA-256 hash as a hex string
        """
        return hashlib.sha256(digest.content.encode('utf-8')).hexdigest()

    def record_publication(self, record: PublicationRecord) -> int:
        """
        Append a publication attempt to the log.

        Args:
            record: The attempt to record

        Returns:
            The id assigned to the record
        """
        if not self.connection:
            raise RuntimeError("Database connection not established")

        result = self.connection.execute("""
            INSERT INTO publications (
                published_at, digest_hash, day_title, month_page_id,
                day_page_id, success, error_message
            )
            VALUES (?, ?, ?, ?, ?, ?, ?)
            RETURNING publication_id
        """, [
            record.published_at,
            record.digest_hash,
            record.day_title,
            record.month_page_id,
            record.day_page_id,
            record.success,
            record.error_message
        ]).fetchone()

        return result[0]

    def list_publications(self, limit: int = 10) -> List[PublicationRecord]:
        """
        List the most recent publication attempts, newest first.

        Args:
            limit: Maximum number of records to return

        Returns:
            List of publication records
        """
        if not self.connection:
            raise RuntimeError("Database connection not established")

        results = self.connection.execute(f"""
            SELECT publication_id, published_at, digest_hash, day_title,
                   month_page_id, day_page_id, success, error_message
            FROM publications
            ORDER BY published_at DESC, publication_id DESC
            LIMIT {int(limit)}
        """).fetchall()

        return [self._row_to_record(row) for row in results]

    def get_last_publication(self, successful_only: bool = False) -> Optional[PublicationRecord]:
        """
        Get the most recent publication attempt.

        Args:
            successful_only: Skip failed attempts

        Returns:
            The latest record, or None if the log is empty
        """
        if not self.connection:
            raise RuntimeError("Database connection not established")

        query = """
            SELECT publication_id, published_at, digest_hash, day_title,
                   month_page_id, day_page_id, success, error_message
            FROM publications
        """
        if successful_only:
            query += " WHERE success"
        query += " ORDER BY published_at DESC, publication_id DESC LIMIT 1"

        row = self.connection.execute(query).fetchone()
        return self._row_to_record(row) if row else None

    def count_publications_since(self, since: datetime) -> int:
        """Count successful publications at or after a point in time."""
        if not self.connection:
            raise RuntimeError("Database connection not established")

        result = self.connection.execute("""
            SELECT COUNT(*) FROM publications
            WHERE success AND published_at >= ?
        """, [since]).fetchone()
        return result[0] if result else 0

    @staticmethod
    def _row_to_record(row) -> PublicationRecord:
        return PublicationRecord(
            publication_id=row[0],
            published_at=row[1],
            digest_hash=row[2],
            day_title=row[3],
            month_page_id=row[4],
            day_page_id=row[5],
            success=row[6],
            error_message=row[7]
        )
