"""
Books API routes.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from api.database import get_book_store
from domain.models import Book, BookUpdate, NewBook
from repositories import BookStore

router = APIRouter()
logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found"


class BookCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    author: str
    published_year: int = Field(alias="publishedYear")
    genre: Optional[str] = None
    isbn: Optional[str] = None
    description: Optional[str] = None


class BookPatch(BaseModel):
    """Partial book body; only the keys the client sends are applied. Any id is ignored."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    author: Optional[str] = None
    published_year: Optional[int] = Field(default=None, alias="publishedYear")
    genre: Optional[str] = None
    isbn: Optional[str] = None
    description: Optional[str] = None


class BookResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    author: str
    published_year: int = Field(alias="publishedYear")
    genre: Optional[str] = None
    isbn: Optional[str] = None
    description: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(**book.to_dict())


@router.get("", response_model=List[BookResponse])
def list_books(
    author: Optional[str] = None,
    genre: Optional[str] = None,
    store: BookStore = Depends(get_book_store),
):
    """List books, optionally filtered by author substring and exact genre."""
    return [book_to_response(b) for b in store.list_books(author=author, genre=genre)]


@router.get("/search", response_model=List[BookResponse])
def search_books(q: Optional[str] = None, store: BookStore = Depends(get_book_store)):
    """Search titles and authors; an empty query lists everything."""
    return [book_to_response(b) for b in store.search_books(q)]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Get a book by ID."""
    book = store.get_book(book_id)
    if not book:
        raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
    return book_to_response(book)


@router.post("", response_model=BookResponse, status_code=201)
def create_book(data: BookCreate, store: BookStore = Depends(get_book_store)):
    """Create a new book."""
    book = store.create_book(NewBook(**data.model_dump()))
    return book_to_response(book)


@router.put("/{book_id}", response_model=BookResponse)
def update_book(book_id: str, data: BookPatch, store: BookStore = Depends(get_book_store)):
    """Replace the fields present in the body and return the whole book."""
    changes = BookUpdate.from_dict(data.model_dump(exclude_unset=True))
    book = store.update_book(book_id, changes)
    if not book:
        raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
    return book_to_response(book)


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Delete a book permanently."""
    if not store.delete_book(book_id):
        raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
    logger.debug("Book %s deleted via API", book_id)
    return MessageResponse(message="Book deleted successfully")
