"""
In-memory book store for development and tests.

Books live in an ordered list owned by the store instance and are lost on
restart. There is no locking; concurrent writers are not coordinated.
"""
import logging
from typing import List, Optional

from domain.errors import BookStoreError
from domain.models import Book, BookUpdate, NewBook
from repositories.base import BookStore

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("title", "author", "published_year")


def _norm(value: Optional[str]) -> str:
    return (value or "").lower()


def _check_required(changes: BookUpdate) -> None:
    """Refuse to null out a required field, the same as the table's NOT NULL columns."""
    nulled = [name for name, value in changes.changes().items() if name in REQUIRED_FIELDS and value is None]
    if nulled:
        logger.warning("Rejected update clearing required fields: %s", ", ".join(nulled))
        raise BookStoreError(f"NOT NULL constraint failed: books.{nulled[0]}")


class InMemoryBooksRepository(BookStore):
    """Book store backed by a Python list, kept in insertion order."""

    def __init__(self, books: Optional[List[Book]] = None) -> None:
        self._books: List[Book] = list(books or [])

    def list_books(self, author: Optional[str] = None, genre: Optional[str] = None) -> List[Book]:
        items = list(self._books)
        if author:
            needle = author.lower()
            items = [b for b in items if needle in _norm(b.author)]
        if genre:
            wanted = genre.lower()
            items = [b for b in items if b.genre is not None and b.genre.lower() == wanted]
        return items

    def _search(self, query: str) -> List[Book]:
        needle = query.lower()
        return [
            b for b in self._books
            if needle in _norm(b.title) or needle in _norm(b.author)
        ]

    def get_book(self, book_id: str) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def create_book(self, new_book: NewBook) -> Book:
        book_id = Book.generate_id()
        while self.get_book(book_id) is not None:
            book_id = Book.generate_id()
        book = new_book.with_id(book_id)
        self._books.append(book)
        logger.info("Created book %s (%s)", book.id, book.title)
        return book

    def update_book(self, book_id: str, changes: BookUpdate) -> Optional[Book]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                _check_required(changes)
                updated = changes.apply_to(book)
                self._books[index] = updated
                return updated
        return None

    def delete_book(self, book_id: str) -> bool:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                del self._books[index]
                logger.info("Deleted book %s", book_id)
                return True
        return False
