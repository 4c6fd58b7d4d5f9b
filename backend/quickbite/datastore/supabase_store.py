"""
QuickBite Backend: Supabase Data Store (hosted relational store)
================================================================

What:  `DataStore` implementation backed by the Supabase Python SDK.
Why:   Production persistence lives in a hosted PostgreSQL instance that is
       reached over HTTPS (PostgREST) with a project URL and access key,
       not through a direct database connection.
How:   Each operation builds an SDK query (`table().select().eq()...`)
       and awaits `.execute()`. SDK and transport errors are translated
       into StorageError with the SDK's message.
Who:   Built by `create_datastore()` when DATASTORE_BACKEND=supabase.

Query mapping:
    select      → table(t).select(columns).eq(col, val)...
    select_one  → same, plus .single() (PostgREST rejects != 1 row)
    insert      → table(t).insert(rows)
    update      → table(t).update(values).eq(col, val)...
    delete      → table(t).delete().eq(col, val)...
"""

import logging
from typing import List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from quickbite.datastore.base import DataStore, Filters, Row
from quickbite.exceptions import StorageError

logger = logging.getLogger(__name__)


class SupabaseDataStore(DataStore):
    """
    Table client for the hosted store.

    Args:
        client: An initialized Supabase `AsyncClient`
        probe_table: Table queried by `health_check()`
    """

    def __init__(self, client: AsyncClient, probe_table: str = "users"):
        self._client = client
        self.probe_table = probe_table

    @classmethod
    async def connect(cls, url: str, key: str, probe_table: str = "users") -> "SupabaseDataStore":
        """Create the SDK client for a project URL and access key."""
        client = await acreate_client(url, key)
        logger.info("Supabase client created for %s", url)
        return cls(client, probe_table=probe_table)

    # ── Table operations ──────────────────────────────────────────────────

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> List[Row]:
        query = self._apply_filters(self._client.table(table).select(columns), filters)
        response = await self._execute(table, query)
        return list(response.data or [])

    async def select_one(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> Row:
        query = self._apply_filters(self._client.table(table).select(columns), filters)
        response = await self._execute(table, query.single())
        return response.data

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        response = await self._execute(table, self._client.table(table).insert(rows))
        return list(response.data or [])

    async def update(self, table: str, values: Row, *, filters: Filters) -> List[Row]:
        query = self._apply_filters(self._client.table(table).update(values), filters)
        response = await self._execute(table, query)
        return list(response.data or [])

    async def delete(self, table: str, *, filters: Filters) -> List[Row]:
        query = self._apply_filters(self._client.table(table).delete(), filters)
        response = await self._execute(table, query)
        return list(response.data or [])

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def health_check(self) -> bool:
        try:
            await self._client.table(self.probe_table).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning("Supabase unreachable: %s", str(e))
            return False

    async def close(self) -> None:
        await self._client.postgrest.aclose()

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _apply_filters(query, filters: Optional[Filters]):
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return query

    async def _execute(self, table: str, query):
        try:
            return await query.execute()
        except APIError as e:
            logger.warning("Supabase rejected query on %s: %s", table, e.message)
            raise StorageError(
                e.message or str(e),
                table=table,
                context={"code": e.code, "details": e.details},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Supabase request on %s failed: %s", table, str(e))
            raise StorageError(str(e), table=table) from e
