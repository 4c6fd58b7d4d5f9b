"""
QuickBite Backend: SQL Engine & Session Management
===================================================

What:  Async SQLAlchemy engine/session helpers and the declarative base.
Why:   The `sql` data store backend and Alembic share one set of table
       definitions and one way of opening transactions.
How:   `build_engine()` creates an async engine for a URL, `session_scope()`
       wraps a unit of work that commits on success and rolls back on error.
Who:   Used by `SQLDataStore`, Alembic's env.py and the test fixtures.

Nothing here runs at import time. The hosted (Supabase) backend never
creates an engine, so its deployments do not need a SQL driver configured.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import BigInteger, Integer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from quickbite.config import settings


# BIGINT identity on PostgreSQL (what the hosted store uses for ids).
# SQLite only autoincrements an INTEGER PRIMARY KEY, hence the variant.
BigIntId = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`. `SQLDataStore`
    resolves table names against that metadata, and Alembic reads it
    for --autogenerate.
    """
    pass


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for `database_url`.

    pool_pre_ping validates pooled connections before use, which catches
    connections dropped by the server between requests.
    """
    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        # SQL echo is only useful while debugging locally
        echo=settings.log_level == "DEBUG",
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: rows stay readable after the commit
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Provide a session for one unit of work.

    How it works:
        1. Opens a new session from the factory
        2. Yields it to the caller
        3. On success: commits
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns the connection to the pool)
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
