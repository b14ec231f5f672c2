"""
Storage interface shared by every book store.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.models import Book, BookUpdate, NewBook


class BookStore(ABC):
    """
    CRUD capability set for books.

    A missing book is reported through the return value (``None`` or ``False``),
    never an exception. Backend failures raise ``BookStoreError``.
    """

    @abstractmethod
    def list_books(self, author: Optional[str] = None, genre: Optional[str] = None) -> List[Book]:
        """Books whose author contains ``author`` and whose genre equals ``genre``, both case-insensitive."""

    def search_books(self, query: Optional[str] = None) -> List[Book]:
        """Books whose title or author contains ``query``; everything when the query is empty."""
        if not query:
            return self.list_books()
        return self._search(query)

    @abstractmethod
    def _search(self, query: str) -> List[Book]:
        ...

    @abstractmethod
    def get_book(self, book_id: str) -> Optional[Book]:
        ...

    @abstractmethod
    def create_book(self, new_book: NewBook) -> Book:
        ...

    @abstractmethod
    def update_book(self, book_id: str, changes: BookUpdate) -> Optional[Book]:
        ...

    @abstractmethod
    def delete_book(self, book_id: str) -> bool:
        ...
