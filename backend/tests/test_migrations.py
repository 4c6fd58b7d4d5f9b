"""
QuickBite Backend: Migration Tests
===================================

What:  Renders the Alembic migrations as offline SQL and checks the DDL.
Why:   The ORM models take their table names from settings; the migrated
       schema has to use the same names or the SQL backend queries tables
       that do not exist.
How:   `alembic upgrade head --sql` into a buffer. No database is touched.
"""

import io
from pathlib import Path

from alembic import command
from alembic.config import Config

from quickbite.config import settings

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def render_upgrade_sql() -> str:
    buffer = io.StringIO()
    config = Config(output_buffer=buffer)
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(config, "head", sql=True)
    return buffer.getvalue()


class TestOrderingTablesMigration:

    def test_default_table_names(self):
        sql = render_upgrade_sql()

        assert "CREATE TABLE users" in sql
        assert "CREATE TABLE menu_items" in sql
        assert "CREATE TABLE orders" in sql
        assert "CREATE INDEX ix_orders_user_id ON orders (user_id)" in sql

    def test_table_names_follow_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "users_table", "qb_users")
        monkeypatch.setattr(settings, "menu_items_table", "qb_menu_items")
        monkeypatch.setattr(settings, "orders_table", "qb_orders")

        sql = render_upgrade_sql()

        assert "CREATE TABLE qb_users" in sql
        assert "CREATE TABLE qb_menu_items" in sql
        assert "CREATE TABLE qb_orders" in sql
        assert "CONSTRAINT qb_users_email_key UNIQUE (email)" in sql
        assert "CREATE INDEX ix_qb_orders_user_id ON qb_orders (user_id)" in sql
        assert "CREATE TABLE orders" not in sql
