"""
Database setup for the hosted book table.
Provides SQLAlchemy engine/session utilities for the relational store.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def database_url(url: str, secret_key: str | None) -> URL:
    """
    Parse ``url`` and use ``secret_key`` as its password when one is given.

    SQLite URLs reject credentials, so the key is not applied to them.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        return parsed
    if secret_key and parsed.password != secret_key:
        parsed = parsed.set(password=secret_key)
    return parsed


def build_engine(url: str, secret_key: str | None, echo: bool = False) -> Engine:
    parsed = database_url(url, secret_key)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        # check_same_thread=False allows usage across FastAPI threads
        connect_args["check_same_thread"] = False
    logger.info("Connecting to %s", parsed.render_as_string(hide_password=True))
    return create_engine(parsed, echo=echo, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=engine)
