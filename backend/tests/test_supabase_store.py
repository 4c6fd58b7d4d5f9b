"""
QuickBite Backend: Supabase Data Store Unit Tests (Mocked)
===========================================================

What:  Tests for SupabaseDataStore with a mocked SDK client.
Why:   Tests should not reach the hosted store (network, credentials).
How:   The SDK's fluent query builder is replaced by a MagicMock whose
       chain methods return itself and whose execute() is an AsyncMock.

What we test:
    ✅ Filters become .eq() calls, select_one adds .single()
    ✅ Rows come back from response.data
    ✅ APIError and transport errors become StorageError with the SDK message
    ❌ Real HTTP calls (needs a Supabase project)
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from quickbite.datastore.supabase_store import SupabaseDataStore
from quickbite.exceptions import StorageError


def make_client(data=None, error=None):
    """Build a mock client whose every query resolves to `data` (or raises `error`)."""
    builder = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "single", "limit"):
        getattr(builder, method).return_value = builder

    if error is not None:
        builder.execute = AsyncMock(side_effect=error)
    else:
        builder.execute = AsyncMock(return_value=MagicMock(data=data))

    client = MagicMock()
    client.table.return_value = builder
    client.postgrest.aclose = AsyncMock()
    return client, builder


class TestSupabaseQueries:

    @pytest.mark.asyncio
    async def test_select_applies_eq_filters(self):
        client, builder = make_client(data=[{"id": 1, "user_id": 7, "items": []}])
        store = SupabaseDataStore(client)

        rows = await store.select("orders", filters={"user_id": "7"})

        assert rows == [{"id": 1, "user_id": 7, "items": []}]
        client.table.assert_called_once_with("orders")
        builder.select.assert_called_once_with("*")
        builder.eq.assert_called_once_with("user_id", "7")
        builder.single.assert_not_called()

    @pytest.mark.asyncio
    async def test_select_none_data_is_empty_list(self):
        client, _ = make_client(data=None)
        assert await SupabaseDataStore(client).select("menu_items") == []

    @pytest.mark.asyncio
    async def test_select_one_uses_single(self):
        client, builder = make_client(data={"id": 7, "name": "Ana", "email": "ana@example.com"})
        store = SupabaseDataStore(client)

        row = await store.select_one("users", columns="id, name, email", filters={"id": "7"})

        assert row["name"] == "Ana"
        builder.select.assert_called_once_with("id, name, email")
        builder.single.assert_called_once()

    @pytest.mark.asyncio
    async def test_insert_passes_rows(self):
        client, builder = make_client(data=[{"id": 1}])
        rows = [{"name": "Ana", "email": "ana@example.com", "password_hash": "h"}]

        await SupabaseDataStore(client).insert("users", rows)

        builder.insert.assert_called_once_with(rows)

    @pytest.mark.asyncio
    async def test_update_filters_by_id(self):
        client, builder = make_client(data=[])

        await SupabaseDataStore(client).update("users", {"password_hash": "h"}, filters={"id": "7"})

        builder.update.assert_called_once_with({"password_hash": "h"})
        builder.eq.assert_called_once_with("id", "7")

    @pytest.mark.asyncio
    async def test_delete_filters_by_id(self):
        client, builder = make_client(data=[{"id": 3}])

        await SupabaseDataStore(client).delete("orders", filters={"id": "3"})

        builder.delete.assert_called_once_with()
        builder.eq.assert_called_once_with("id", "3")


class TestSupabaseErrors:

    @pytest.mark.asyncio
    async def test_api_error_becomes_storage_error(self):
        error = APIError({
            "message": 'duplicate key value violates unique constraint "users_email_key"',
            "code": "23505",
            "details": "Key (email)=(ana@example.com) already exists.",
            "hint": None,
        })
        client, _ = make_client(error=error)

        with pytest.raises(StorageError) as exc_info:
            await SupabaseDataStore(client).insert("users", [{"email": "ana@example.com"}])

        assert "users_email_key" in exc_info.value.message
        assert exc_info.value.context["code"] == "23505"
        assert exc_info.value.table == "users"

    @pytest.mark.asyncio
    async def test_transport_error_becomes_storage_error(self):
        client, _ = make_client(error=httpx.ConnectError("Name or service not known"))

        with pytest.raises(StorageError, match="Name or service not known"):
            await SupabaseDataStore(client).select("menu_items")


class TestSupabaseLifecycle:

    @pytest.mark.asyncio
    async def test_health_check_true(self):
        client, builder = make_client(data=[])
        store = SupabaseDataStore(client, probe_table="users")

        assert await store.health_check() is True
        client.table.assert_called_once_with("users")
        builder.limit.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_health_check_false_on_failure(self):
        client, _ = make_client(error=httpx.ConnectTimeout("timed out"))
        assert await SupabaseDataStore(client).health_check() is False

    @pytest.mark.asyncio
    async def test_close_releases_http_client(self):
        client, _ = make_client(data=[])
        await SupabaseDataStore(client).close()
        client.postgrest.aclose.assert_awaited_once()
