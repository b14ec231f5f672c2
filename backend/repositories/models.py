"""
SQLAlchemy ORM models for persistence.
"""
import uuid

from sqlalchemy import Column, Integer, String, Text

from db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class BookORM(Base):
    __tablename__ = "books"

    id = Column(String, primary_key=True, index=True, default=_new_id)
    title = Column(String, nullable=False)
    author = Column(String, nullable=False, index=True)
    published_year = Column(Integer, nullable=False)
    genre = Column(String, nullable=True)
    isbn = Column(String, nullable=True)
    description = Column(Text, nullable=True)
