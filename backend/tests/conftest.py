import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db import build_session_factory, init_db  # noqa: E402
from repositories import InMemoryBooksRepository, SqlBooksRepository  # noqa: E402


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def memory_store():
    return InMemoryBooksRepository()


@pytest.fixture
def sql_store(sqlite_engine):
    return SqlBooksRepository(build_session_factory(sqlite_engine))


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Each store variant in turn, fresh per test."""
    if request.param == "memory":
        return InMemoryBooksRepository()
    return request.getfixturevalue("sql_store")


@pytest.fixture
def client(store):
    from api.main import create_app

    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
