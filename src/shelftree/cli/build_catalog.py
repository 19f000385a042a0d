"""CLI for generating the series catalog of a Calibre library."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
import sqlite3

from dotenv import load_dotenv

load_dotenv()

from shelftree.catalog import Capabilities, CatalogSettings, LoggingProgress, SearchIndexRecorder, SeriesCatalog
from shelftree.catalog.collaborators import Localizer
from shelftree.feeds import AtomFeedWriter, InMemoryPageStore
from shelftree.library import LibraryError, load_books
from shelftree.search import SeriesSearchIndex


logger = logging.getLogger(__name__)


def _settings_from_args(args: argparse.Namespace) -> CatalogSettings:
    settings = CatalogSettings.from_env()
    overrides = {
        "page_capacity": args.page_capacity,
        "split_threshold": args.split_threshold,
        "max_split_depth": args.max_split_depth,
        "locale": args.locale,
    }
    return replace(settings, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a paginated, letter-split series catalog")
    parser.add_argument("--library", required=True, help="Path to the Calibre metadata.db")
    parser.add_argument("--output-dir", default="catalog", help="Directory for generated feed pages")
    parser.add_argument("--search-db", default=None, help="Optional SQLite path for the series search index")
    parser.add_argument("--page-capacity", type=int, default=None, help="Maximum entries per page")
    parser.add_argument("--split-threshold", type=int, default=None, help="Group size above which to split by letter")
    parser.add_argument("--max-split-depth", type=int, default=None, help="Letter split levels (0 disables)")
    parser.add_argument("--locale", default=None, help="Locale for noise words, collation and labels")
    parser.add_argument("--dry-run", action="store_true", help="Build pages in memory without writing files")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        settings = _settings_from_args(args)
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        return 2

    try:
        books = load_books(args.library)
    except LibraryError as error:
        logger.error("%s", error)
        return 1

    try:
        search_index = SeriesSearchIndex(args.search_db) if args.search_db else SearchIndexRecorder()
        if isinstance(search_index, SeriesSearchIndex):
            search_index.reset()
    except sqlite3.Error as error:
        logger.error("Failed to open search index %s: %s", args.search_db, error)
        return 1

    writer = InMemoryPageStore() if args.dry_run else AtomFeedWriter(args.output_dir)

    progress = LoggingProgress()
    capabilities = Capabilities(
        writer=writer,
        progress=progress,
        search_index=search_index,
        localizer=Localizer(settings.locale),
    )

    try:
        catalog = SeriesCatalog(books, settings=settings, capabilities=capabilities)
        root = catalog.build()
    except OSError as error:
        logger.error("Catalog generation failed: %s", error)
        return 1
    finally:
        if isinstance(search_index, SeriesSearchIndex):
            search_index.close()

    pages = len(writer) if isinstance(writer, InMemoryPageStore) else writer.pages_written
    print(
        json.dumps(
            {
                "books": len(books),
                "series": len(catalog.context.ordered_series),
                "pages": pages,
                "root": root.link if root is not None else None,
                "dry_run": args.dry_run,
            },
            ensure_ascii=False,
            indent=2,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
