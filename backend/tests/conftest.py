"""
QuickBite Backend: Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store:     AsyncMock DataStore for service unit tests
    ├── sql_store:      real SQLDataStore on a temporary SQLite file
    ├── seeded_menu:    sql_store with three menu items
    ├── test_client:    HTTPX AsyncClient wired to the app, using sql_store
    └── password_hash:  bcrypt hash of "secret123" at test cost
"""

import os
import tempfile

# Settings are read on first import of quickbite.config, so the test
# environment must be in place before any application import.
os.environ["DATASTORE_BACKEND"] = "sql"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="quickbite_test_"), "unused.db"
)
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["BCRYPT_ROUNDS"] = "4"  # Minimum cost keeps hashing fast in tests
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quickbite.datastore.base import DataStore
from quickbite.datastore.sql_store import SQLDataStore
from quickbite.dependencies import get_datastore
from quickbite.security import hash_password


@pytest.fixture
def mock_store():
    """
    Provides a mock data store.

    `spec=DataStore` makes every async table operation an AsyncMock,
    so tests only set return values or side effects:

        mock_store.select.return_value = []
        mock_store.select_one.side_effect = StorageError("...")
    """
    return AsyncMock(spec=DataStore)


@pytest.fixture
def password_hash():
    return hash_password("secret123", rounds=4)


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    """A real SQL data store backed by a fresh SQLite file per test."""
    store = SQLDataStore(f"sqlite+aiosqlite:///{tmp_path / 'quickbite.db'}")
    await store.create_tables()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def seeded_menu(sql_store):
    await sql_store.insert(
        "menu_items",
        [
            {"name": "X-Burger", "price": 18.5},
            {"name": "Fries", "price": 9.0},
            {"name": "Lemonade", "price": 6.25},
        ],
    )
    return sql_store


@pytest_asyncio.fixture
async def test_client(sql_store):
    """
    Provides an async HTTP test client talking to the app in-process.

    ASGITransport does not run the lifespan, so the data store dependency
    is overridden to hand out `sql_store` instead.
    """
    from quickbite.main import app

    app.dependency_overrides[get_datastore] = lambda: sql_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
