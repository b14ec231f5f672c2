"""
Book repository backed by SQLAlchemy against the hosted ``books`` table.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import func, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from domain.errors import BookStoreError
from domain.models import Book, BookUpdate, NewBook
from repositories.base import BookStore
from repositories.models import BookORM

logger = logging.getLogger(__name__)


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        id=orm.id,
        title=orm.title,
        author=orm.author,
        published_year=orm.published_year,
        genre=orm.genre,
        isbn=orm.isbn,
        description=orm.description,
    )


LIKE_ESCAPE = "/"


def _icontains(column, needle: str):
    # % and _ in user input match literally
    escaped = (
        needle.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return column.ilike(f"%{escaped}%", escape=LIKE_ESCAPE)


class SqlBooksRepository(BookStore):
    """CRUD operations for books, one session per call."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning("Book store query failed: %s", exc)
            raise BookStoreError(str(exc)) from exc
        finally:
            session.close()

    def list_books(self, author: Optional[str] = None, genre: Optional[str] = None) -> List[Book]:
        with self._session() as session:
            query = session.query(BookORM)
            if author:
                query = query.filter(_icontains(BookORM.author, author))
            if genre:
                query = query.filter(func.lower(BookORM.genre) == genre.lower())
            return [_book_from_orm(b) for b in query.all()]

    def _search(self, query: str) -> List[Book]:
        with self._session() as session:
            rows = (
                session.query(BookORM)
                .filter(or_(_icontains(BookORM.title, query), _icontains(BookORM.author, query)))
                .all()
            )
            return [_book_from_orm(b) for b in rows]

    def get_book(self, book_id: str) -> Optional[Book]:
        with self._session() as session:
            orm = session.get(BookORM, book_id)
            if not orm:
                return None
            return _book_from_orm(orm)

    def create_book(self, new_book: NewBook) -> Book:
        with self._session() as session:
            orm = BookORM(
                title=new_book.title,
                author=new_book.author,
                published_year=new_book.published_year,
                genre=new_book.genre,
                isbn=new_book.isbn,
                description=new_book.description,
            )
            session.add(orm)
            session.commit()
            session.refresh(orm)
            logger.info("Created book %s (%s)", orm.id, orm.title)
            return _book_from_orm(orm)

    def update_book(self, book_id: str, changes: BookUpdate) -> Optional[Book]:
        if changes.is_empty():
            return self.get_book(book_id)
        with self._session() as session:
            # single UPDATE ... RETURNING; no matched row means the book is gone
            row = session.execute(
                update(BookORM)
                .where(BookORM.id == book_id)
                .values(**changes.changes())
                .returning(*BookORM.__table__.columns)
                .execution_options(synchronize_session=False)
            ).first()
            session.commit()
            if row is None:
                return None
            return _book_from_orm(row)

    def delete_book(self, book_id: str) -> bool:
        with self._session() as session:
            count = (
                session.query(BookORM)
                .filter(BookORM.id == book_id)
                .delete(synchronize_session=False)
            )
            session.commit()
            if count:
                logger.info("Deleted book %s", book_id)
            return bool(count)
