#!/usr/bin/env python3
"""
Morning Brief - Daily digest publisher

Main entry point for Morning Brief. Reads a generated digest, converts it to
Notion blocks and files it under the page for the current month.
"""

import logging
import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

from morningbrief import __version__
from morningbrief.models import Digest
from morningbrief.converters import BlockConverter
from morningbrief.notion import NotionClient, NotionError, PageResolver, blocks_to_notion
from morningbrief.database import DatabaseManager
from morningbrief.publisher import DigestPublisher
from morningbrief.config import config


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.get("logging.level", "INFO").upper())
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file)
        ]
    )


def read_digest(path: Optional[str]) -> Digest:
    """
    Read a digest from a file, or from stdin when path is None or "-".

    Args:
        path: Path to the digest markdown file

    Returns:
        The digest
    """
    if path is None or path == "-":
        return Digest(content=sys.stdin.read())

    with open(Path(path), 'r', encoding='utf-8') as f:
        return Digest(content=f.read())


def run_dry_run(digest: Digest) -> None:
    """Print the Notion blocks a digest converts to, without calling Notion."""
    blocks = BlockConverter().convert(digest.content)
    logging.info(f"Dry run: digest converts to {len(blocks)} blocks")
    print(json.dumps(blocks_to_notion(blocks), indent=2, ensure_ascii=False))


def show_history(limit: int) -> None:
    """Print the most recent publication attempts."""
    with DatabaseManager(config.database_filename) as db:
        db.initialize_database()
        records = db.list_publications(limit)

    if not records:
        print("No digests have been published yet.")
        return

    for record in records:
        status = "ok" if record.success else f"failed: {record.error_message}"
        print(f"{record.published_at:%Y-%m-%d %H:%M}  {record.day_title:<16} {status}")


def run_publish(digest: Digest, root_page_id: Optional[str] = None) -> bool:
    """
    Publish a digest to Notion and record the attempt.

    Args:
        digest: The digest to publish
        root_page_id: Overrides the configured root page

    Returns:
        True if the day page was created
    """
    with DatabaseManager(config.database_filename) as db:
        db.initialize_database()

        with NotionClient() as client:
            resolver = PageResolver(client, root_page_id=root_page_id)
            result = DigestPublisher(resolver, database=db).publish(digest)

    if result.success:
        print(f"Today's digest has been added to Notion: {result.page.title}")
        if result.page.url:
            print(result.page.url)
    else:
        print(f"Failed to add today's digest to Notion: {result.error}")

    return result.success


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Morning Brief - publish daily digests to Notion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --digest digest.md                 # Publish a digest file
  cat digest.md | python main.py                    # Publish from stdin
  python main.py --digest digest.md --dry-run       # Print the Notion blocks only
  python main.py --history 5                        # Show the last 5 publications
        """
    )

    parser.add_argument(
        "--digest",
        type=str,
        help="Path to the digest markdown file (default: read stdin)"
    )

    parser.add_argument(
        "--root-page-id",
        type=str,
        help="Notion page that holds the month pages (overrides config)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Convert the digest and print the blocks without publishing"
    )

    parser.add_argument(
        "--history",
        type=int,
        nargs="?",
        const=10,
        help="Show the last N publication attempts (default: 10)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to the configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Morning Brief {__version__}"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)

    if args.config:
        config.config_path = Path(args.config)
        config.reload()

    setup_logging()

    if args.history is not None:
        show_history(args.history)
        return

    try:
        digest = read_digest(args.digest)
    except OSError as e:
        logging.error(f"Failed to read digest: {e}")
        print(f"\nFailed to read digest: {e}")
        sys.exit(1)

    if args.dry_run:
        run_dry_run(digest)
        return

    try:
        if not run_publish(digest, args.root_page_id):
            sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Publishing interrupted by user")
        print("\nPublishing interrupted.")

    except NotionError as e:
        logging.error(f"Publishing failed: {e}")
        print(f"\nPublishing failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
