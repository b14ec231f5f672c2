"""Load books from a JSON file into the configured book store.

Usage:
    python -m scripts.seed_books books.json [--store memory|database]

The file must hold a JSON array of objects with ``title``, ``author`` and
``publishedYear`` (or ``published_year``), plus optional ``genre``, ``isbn``
and ``description``. Any ``id`` in the file is ignored; the store assigns ids.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from api.database import build_book_store
from domain.errors import BookServiceError
from domain.models import NewBook
from repositories import BookStore
from settings import STORE_DATABASE, STORE_MEMORY, Settings

logger = logging.getLogger("seed_books")


def new_book_from_entry(entry: Dict[str, Any]) -> NewBook:
    year = entry.get("publishedYear", entry.get("published_year"))
    return NewBook(
        title=entry["title"],
        author=entry["author"],
        published_year=int(year),
        genre=entry.get("genre"),
        isbn=entry.get("isbn"),
        description=entry.get("description"),
    )


def load_entries(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of books")
    return data


def seed(store: BookStore, entries: List[Dict[str, Any]]) -> int:
    created = 0
    for index, entry in enumerate(entries):
        try:
            new_book = new_book_from_entry(entry)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping entry %d: %s", index, exc)
            continue
        book = store.create_book(new_book)
        logger.debug("Seeded %s -> %s", book.title, book.id)
        created += 1
    return created


def main(argv: Optional[List[str]] = None) -> int:
    if not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    load_dotenv(Path(__file__).resolve().parents[1] / ".env")

    parser = argparse.ArgumentParser(description="Seed the book store from a JSON file.")
    parser.add_argument("path", type=Path, help="JSON array of books.")
    parser.add_argument("--store", choices=[STORE_MEMORY, STORE_DATABASE], default=None,
                        help="Override BOOK_STORE for this run.")
    args = parser.parse_args(argv)

    config = Settings()
    if args.store:
        config.BOOK_STORE = args.store

    try:
        entries = load_entries(args.path)
        store = build_book_store(config)
        created = seed(store, entries)
    except (OSError, ValueError, BookServiceError) as exc:
        logger.error("Seeding failed: %s", exc)
        return 1

    logger.info("Seeded %d of %d books into the %s store", created, len(entries), config.BOOK_STORE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
