"""
QuickBite Backend: SQL Data Store (async SQLAlchemy)
=====================================================

What:  `DataStore` implementation that talks to a relational database directly.
Why:   Lets the API run without the hosted store: against PostgreSQL via
       asyncpg, or against a SQLite file via aiosqlite for local development
       and the end-to-end test suite.
How:   Table names resolve to the Core `Table` objects registered on
       `Base.metadata` by the models in `quickbite.models`. Every operation
       runs in its own `session_scope` transaction.

Behaviour matched to the hosted store:
    - Filter and written values are coerced to the column's Python type,
      so a path id "42" matches an integer column and "abc" fails as a
      StorageError. Writes are rejected the same way, so a row is never
      stored with a value its own filters cannot read back.
    - `select_one` fails unless exactly one row matches.
    - Driver errors (unique violations, ...) become StorageError with the
      driver's message.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy import JSON, Column, Table, delete, insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from quickbite.database import Base, build_engine, build_session_factory, session_scope
from quickbite.datastore.base import (
    SINGLE_ROW_MESSAGE,
    DataStore,
    Filters,
    Row,
    parse_columns,
)
from quickbite.exceptions import StorageError

# Registers the tables on Base.metadata
from quickbite.models.menu_item import MenuItem  # noqa: F401
from quickbite.models.order import Order  # noqa: F401
from quickbite.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)


class SQLDataStore(DataStore):
    """
    Async SQLAlchemy table client.

    Args:
        database_url: Async SQLAlchemy URL (postgresql+asyncpg://, sqlite+aiosqlite://)
        engine: Pre-built engine; when given, `database_url` is ignored
    """

    def __init__(self, database_url: str = "", engine: Optional[AsyncEngine] = None):
        self.engine = engine if engine is not None else build_engine(database_url)
        self._session_factory = build_session_factory(self.engine)

    # ── Table operations ──────────────────────────────────────────────────

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> List[Row]:
        tbl = self._table(table)
        query = select(*self._columns(tbl, columns)).where(*self._where(tbl, filters))
        return await self._fetch(tbl, query)

    async def select_one(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> Row:
        tbl = self._table(table)
        # Two rows are enough to tell "exactly one" from "several"
        query = (
            select(*self._columns(tbl, columns))
            .where(*self._where(tbl, filters))
            .limit(2)
        )
        rows = await self._fetch(tbl, query)
        if len(rows) != 1:
            raise StorageError(
                SINGLE_ROW_MESSAGE,
                table=table,
                context={"rows": len(rows)},
            )
        return rows[0]

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        tbl = self._table(table)
        rows = [self._values(tbl, row) for row in rows]
        query = insert(tbl).values(rows).returning(*tbl.columns)
        return await self._fetch(tbl, query)

    async def update(self, table: str, values: Row, *, filters: Filters) -> List[Row]:
        tbl = self._table(table)
        values = self._values(tbl, values)
        query = (
            update(tbl)
            .where(*self._where(tbl, filters))
            .values(**values)
            .returning(*tbl.columns)
        )
        return await self._fetch(tbl, query)

    async def delete(self, table: str, *, filters: Filters) -> List[Row]:
        tbl = self._table(table)
        query = delete(tbl).where(*self._where(tbl, filters)).returning(*tbl.columns)
        return await self._fetch(tbl, query)

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def health_check(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("SQL data store unreachable: %s", str(e))
            return False

    async def create_tables(self) -> None:
        """
        Create any missing tables (CREATE TABLE IF NOT EXISTS semantics).

        Used by the test suite and throwaway SQLite setups. Long-lived
        databases are managed with Alembic instead.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _fetch(self, tbl: Table, query) -> List[Row]:
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(query)
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as e:
            # DBAPI errors carry the driver's message on .orig
            message = str(getattr(e, "orig", None) or e)
            logger.warning("SQL operation on %s failed: %s", tbl.name, message)
            raise StorageError(message, table=tbl.name) from e

    def _table(self, name: str) -> Table:
        tbl = Base.metadata.tables.get(name)
        if tbl is None:
            raise StorageError(f'relation "{name}" does not exist', table=name)
        return tbl

    def _column(self, tbl: Table, name: str) -> Column:
        if name not in tbl.c:
            raise StorageError(
                f'column {tbl.name}.{name} does not exist',
                table=tbl.name,
            )
        return tbl.c[name]

    def _columns(self, tbl: Table, columns: str) -> List[Column]:
        names = parse_columns(columns)
        if not names:
            return list(tbl.columns)
        return [self._column(tbl, name) for name in names]

    def _where(self, tbl: Table, filters: Optional[Filters]) -> list:
        clauses = []
        for name, value in (filters or {}).items():
            column = self._column(tbl, name)
            clauses.append(column == self._coerce(column, value))
        return clauses

    def _values(self, tbl: Table, row: Row) -> Row:
        """Check column names and coerce values before a write."""
        return {
            name: self._coerce(self._column(tbl, name), value)
            for name, value in row.items()
        }

    @staticmethod
    def _coerce(column: Column, value: Any) -> Any:
        """Convert a value to the column's Python type (e.g. "42" → 42)."""
        if isinstance(column.type, JSON):
            return value
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return value
        if value is None or isinstance(value, python_type):
            return value
        try:
            return python_type(value)
        except (TypeError, ValueError, ArithmeticError):
            raise StorageError(
                f'invalid input syntax for type {python_type.__name__}: "{value}"',
                table=column.table.name,
                context={"column": column.name},
            )
