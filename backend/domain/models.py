"""
Core domain models for the book catalog.
These are framework-agnostic and shared by the API layer and every store.
"""
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional
import uuid


class _Unset:
    """Marker for an update slot that was not provided."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Book:
    """A book in the catalog. The id is assigned by the store and never changes."""
    id: str
    title: str
    author: str
    published_year: int
    genre: Optional[str] = None
    isbn: Optional[str] = None
    description: Optional[str] = None

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "published_year": self.published_year,
            "genre": self.genre,
            "isbn": self.isbn,
            "description": self.description,
        }


@dataclass
class NewBook:
    """Fields supplied by a client when creating a book (everything but the id)."""
    title: str
    author: str
    published_year: int
    genre: Optional[str] = None
    isbn: Optional[str] = None
    description: Optional[str] = None

    def with_id(self, book_id: str) -> Book:
        return Book(
            id=book_id,
            title=self.title,
            author=self.author,
            published_year=self.published_year,
            genre=self.genre,
            isbn=self.isbn,
            description=self.description,
        )


@dataclass
class BookUpdate:
    """
    Partial update of a book.

    Each slot is either UNSET (leave the stored value alone) or the new value.
    None is a real value for the optional text fields and clears them.
    The id has no slot and cannot be changed.
    """
    title: Any = UNSET
    author: Any = UNSET
    published_year: Any = UNSET
    genre: Any = UNSET
    isbn: Any = UNSET
    description: Any = UNSET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookUpdate":
        """Build an update from the keys present in ``data``; unknown keys (including id) are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def changes(self) -> Dict[str, Any]:
        """Return only the slots that were provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, book: Book) -> Book:
        """Return a copy of ``book`` with the provided slots replaced."""
        return replace(book, **self.changes())
