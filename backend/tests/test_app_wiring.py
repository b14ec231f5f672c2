from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.database import build_book_store
from api.main import create_app
from db import database_url
from domain.errors import BookStoreError, ConfigurationError
from repositories import BookStore, InMemoryBooksRepository, SqlBooksRepository
from settings import Settings


def _settings(**values) -> Settings:
    config = Settings()
    config.BOOK_STORE = "memory"
    config.DATABASE_URL = None
    config.SECRET_KEY = None
    for name, value in values.items():
        setattr(config, name, value)
    return config


def test_memory_store_is_default():
    assert isinstance(build_book_store(_settings()), InMemoryBooksRepository)


def test_database_store_requires_credentials():
    with pytest.raises(ConfigurationError):
        build_book_store(_settings(BOOK_STORE="database", DATABASE_URL="postgresql://db/books"))


def test_create_app_fails_fast_without_credentials():
    with pytest.raises(ConfigurationError):
        create_app(config=_settings(BOOK_STORE="database"))


def test_unknown_store_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="redis"):
        build_book_store(_settings(BOOK_STORE="redis"))


def test_database_store_from_sqlite_url(tmp_path):
    config = _settings(
        BOOK_STORE="database",
        DATABASE_URL=f"sqlite:///{tmp_path / 'books.db'}",
        SECRET_KEY="unused-for-sqlite",
    )
    store = build_book_store(config)
    assert isinstance(store, SqlBooksRepository)
    assert store.list_books() == []


def test_database_url_injects_secret_as_password():
    url = database_url("postgresql://service@db.example.com:5432/postgres", "s3cret")
    assert url.password == "s3cret"
    assert url.username == "service"
    assert url.host == "db.example.com"
    assert "s3cret" not in repr(url)


def test_database_url_leaves_sqlite_alone():
    url = database_url("sqlite:///books.db", "s3cret")
    assert url.password is None


def test_app_uses_injected_store():
    store = InMemoryBooksRepository()
    app = create_app(store=store)
    assert app.state.book_store is store


def test_backend_failure_is_http_500_with_message():
    store = MagicMock(spec=BookStore)
    store.list_books.side_effect = BookStoreError("relation \"books\" does not exist")
    store.get_book.side_effect = BookStoreError("timeout")
    client = TestClient(create_app(store=store), raise_server_exceptions=False)

    resp = client.get("/books")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "relation \"books\" does not exist"}

    resp = client.get("/books/abc")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "timeout"}


def test_routes_pass_filters_to_store():
    store = MagicMock(spec=BookStore)
    store.list_books.return_value = []
    store.search_books.return_value = []
    client = TestClient(create_app(store=store))

    client.get("/books", params={"author": "smith", "genre": "crime"})
    store.list_books.assert_called_once_with(author="smith", genre="crime")

    client.get("/books/search", params={"q": "dune"})
    store.search_books.assert_called_once_with("dune")
