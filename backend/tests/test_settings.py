import pytest

from domain.errors import ConfigurationError
from settings import Settings

ENV_VARS = [
    "BOOK_STORE",
    "DATABASE_URL",
    "SECRET_KEY",
    "API_KEY",
    "DATABASE_CREATE_TABLES",
    "DATABASE_ECHO",
    "CORS_ALLOW_ORIGINS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Settings()
    assert config.BOOK_STORE == "memory"
    assert config.DATABASE_URL is None
    assert config.SECRET_KEY is None
    assert config.DATABASE_CREATE_TABLES is True
    assert config.DATABASE_ECHO is False
    assert config.CORS_ALLOW_ORIGINS == ["*"]
    assert config.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("BOOK_STORE", " Database ")
    monkeypatch.setenv("DATABASE_URL", "postgresql://app@db.example.com/books")
    monkeypatch.setenv("SECRET_KEY", "s3cret")
    monkeypatch.setenv("DATABASE_CREATE_TABLES", "no")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings()
    assert config.BOOK_STORE == "database"
    assert config.require_database_credentials() == ("postgresql://app@db.example.com/books", "s3cret")
    assert config.DATABASE_CREATE_TABLES is False
    assert config.CORS_ALLOW_ORIGINS == ["https://a.example", "https://b.example"]
    assert config.LOG_LEVEL == "DEBUG"


def test_api_key_is_secret_fallback(monkeypatch):
    monkeypatch.setenv("API_KEY", "fallback")
    assert Settings().SECRET_KEY == "fallback"

    monkeypatch.setenv("SECRET_KEY", "primary")
    assert Settings().SECRET_KEY == "primary"


@pytest.mark.parametrize(
    "env, missing",
    [
        ({}, "DATABASE_URL"),
        ({"DATABASE_URL": "postgresql://db/books"}, "SECRET_KEY"),
        ({"SECRET_KEY": "k"}, "DATABASE_URL"),
    ],
)
def test_missing_database_credentials(monkeypatch, env, missing):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=missing):
        Settings().require_database_credentials()
