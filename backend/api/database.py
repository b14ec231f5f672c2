"""
Book store wiring for the FastAPI app.

The app owns exactly one store instance on ``app.state.book_store``; routes
receive it through the ``get_book_store`` dependency.
"""
import logging

from fastapi import Request

from db import build_engine, build_session_factory, init_db
from domain.errors import ConfigurationError
from repositories import BookStore, InMemoryBooksRepository, SqlBooksRepository
from settings import STORE_DATABASE, STORE_MEMORY, Settings

logger = logging.getLogger(__name__)


def build_book_store(config: Settings) -> BookStore:
    """Create the store selected by ``BOOK_STORE``. Raises ConfigurationError on bad settings."""
    if config.BOOK_STORE == STORE_MEMORY:
        logger.info("Using in-memory book store")
        return InMemoryBooksRepository()

    if config.BOOK_STORE == STORE_DATABASE:
        url, secret_key = config.require_database_credentials()
        engine = build_engine(url, secret_key, echo=config.DATABASE_ECHO)
        if config.DATABASE_CREATE_TABLES:
            init_db(engine)
        logger.info("Using database book store")
        return SqlBooksRepository(build_session_factory(engine))

    raise ConfigurationError(
        f"Unknown BOOK_STORE {config.BOOK_STORE!r}; expected {STORE_MEMORY!r} or {STORE_DATABASE!r}"
    )


def get_book_store(request: Request) -> BookStore:
    """FastAPI dependency returning the app's store."""
    return request.app.state.book_store
