"""
QuickBite Backend: SQL Data Store Tests
========================================

What:  Tests for SQLDataStore against a real SQLite file (aiosqlite).
Why:   This store backs the end-to-end tests, so its behaviour must match
       the hosted store where the services depend on it: select_one
       strictness, id coercion, unique violations as StorageError.
"""

import pytest

from quickbite.exceptions import StorageError


class TestSQLDataStoreReads:

    @pytest.mark.asyncio
    async def test_select_all_rows(self, seeded_menu):
        rows = await seeded_menu.select("menu_items")

        assert [row["name"] for row in rows] == ["X-Burger", "Fries", "Lemonade"]
        assert rows[0]["price"] == 18.5
        assert set(rows[0]) == {"id", "name", "price"}

    @pytest.mark.asyncio
    async def test_select_with_column_list(self, seeded_menu):
        rows = await seeded_menu.select("menu_items", columns="id, name")
        assert set(rows[0]) == {"id", "name"}

    @pytest.mark.asyncio
    async def test_select_no_match_is_empty_list(self, sql_store):
        assert await sql_store.select("orders", filters={"user_id": 1}) == []

    @pytest.mark.asyncio
    async def test_string_filter_coerced_to_integer_column(self, sql_store):
        await sql_store.insert("orders", [{"user_id": 5, "items": ["Fries"]}])

        rows = await sql_store.select("orders", filters={"user_id": "5"})

        assert len(rows) == 1
        assert rows[0]["items"] == ["Fries"]

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_storage_error(self, sql_store):
        with pytest.raises(StorageError, match="invalid input syntax"):
            await sql_store.select("orders", filters={"id": "abc"})

    @pytest.mark.asyncio
    async def test_select_one_exactly_one_row(self, seeded_menu):
        row = await seeded_menu.select_one("menu_items", filters={"name": "Fries"})
        assert row["price"] == 9.0

    @pytest.mark.asyncio
    async def test_select_one_no_rows(self, sql_store):
        with pytest.raises(StorageError, match="single JSON object"):
            await sql_store.select_one("users", filters={"email": "ghost@example.com"})

    @pytest.mark.asyncio
    async def test_select_one_several_rows(self, seeded_menu):
        with pytest.raises(StorageError, match="single JSON object"):
            await seeded_menu.select_one("menu_items")

    @pytest.mark.asyncio
    async def test_unknown_table(self, sql_store):
        with pytest.raises(StorageError, match="does not exist"):
            await sql_store.select("payments")

    @pytest.mark.asyncio
    async def test_unknown_column(self, sql_store):
        with pytest.raises(StorageError, match="does not exist"):
            await sql_store.select("users", columns="id, senha")


class TestSQLDataStoreWrites:

    @pytest.mark.asyncio
    async def test_insert_returns_rows_with_generated_id(self, sql_store):
        rows = await sql_store.insert(
            "users", [{"name": "Ana", "email": "ana@example.com", "password_hash": "x"}]
        )

        assert rows[0]["id"] is not None
        assert rows[0]["email"] == "ana@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_storage_error(self, sql_store):
        user = {"name": "Ana", "email": "ana@example.com", "password_hash": "x"}
        await sql_store.insert("users", [user])

        with pytest.raises(StorageError, match="UNIQUE"):
            await sql_store.insert("users", [user])

    @pytest.mark.asyncio
    async def test_update_matching_rows(self, sql_store):
        [user] = await sql_store.insert(
            "users", [{"name": "Ana", "email": "ana@example.com", "password_hash": "old"}]
        )

        updated = await sql_store.update(
            "users", {"password_hash": "new"}, filters={"id": str(user["id"])}
        )

        assert updated[0]["password_hash"] == "new"
        row = await sql_store.select_one("users", filters={"id": user["id"]})
        assert row["password_hash"] == "new"

    @pytest.mark.asyncio
    async def test_update_no_match_is_not_an_error(self, sql_store):
        assert await sql_store.update("users", {"name": "x"}, filters={"id": 999}) == []

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, sql_store):
        [order] = await sql_store.insert("orders", [{"user_id": 1, "items": []}])

        deleted = await sql_store.delete("orders", filters={"id": order["id"]})

        assert [row["id"] for row in deleted] == [order["id"]]
        assert await sql_store.select("orders") == []


class TestSQLDataStoreLifecycle:

    @pytest.mark.asyncio
    async def test_health_check(self, sql_store):
        assert await sql_store.health_check() is True


class TestSQLDataStoreWriteCoercion:

    @pytest.mark.asyncio
    async def test_numeric_string_owner_is_stored_as_integer(self, sql_store):
        [order] = await sql_store.insert("orders", [{"user_id": "5", "items": ["Fries"]}])

        assert order["user_id"] == 5
        assert len(await sql_store.select("orders", filters={"user_id": 5})) == 1

    @pytest.mark.asyncio
    async def test_non_numeric_owner_is_rejected(self, sql_store):
        with pytest.raises(StorageError, match='invalid input syntax for type int: "abc"'):
            await sql_store.insert("orders", [{"user_id": "abc", "items": []}])

        assert await sql_store.select("orders") == []

    @pytest.mark.asyncio
    async def test_json_items_are_not_coerced(self, sql_store):
        items = {"burger": 2, "notes": "no onions"}

        [order] = await sql_store.insert("orders", [{"user_id": 1, "items": items}])

        assert order["items"] == items

    @pytest.mark.asyncio
    async def test_update_rejects_value_of_wrong_type(self, sql_store):
        [order] = await sql_store.insert("orders", [{"user_id": 1, "items": []}])

        with pytest.raises(StorageError, match="invalid input syntax"):
            await sql_store.update("orders", {"user_id": "abc"}, filters={"id": order["id"]})

        [row] = await sql_store.select("orders")
        assert row["user_id"] == 1
