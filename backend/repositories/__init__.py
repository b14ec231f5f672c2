from .base import BookStore
from .books import SqlBooksRepository
from .memory import InMemoryBooksRepository
from . import models

__all__ = ["BookStore", "SqlBooksRepository", "InMemoryBooksRepository", "models"]
