"""Create users, menu_items and orders tables

Revision ID: 001
Revises: None
Create Date: 2025-11-03 00:00:00.000000+00:00

What:  Creates the three tables the API reads and writes.
How:   BIGINT identity ids, matching what the hosted store generates.
       users.email carries the UNIQUE constraint that rejects duplicate
       registrations. orders.user_id has no foreign key.

Table names come from settings (USERS_TABLE, MENU_ITEMS_TABLE,
ORDERS_TABLE), the same values the ORM models use.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

from quickbite.config import settings

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BigIntId = sa.BigInteger().with_variant(sa.Integer(), "sqlite")
ORDERS_USER_INDEX = f"ix_{settings.orders_table}_user_id"


def upgrade() -> None:
    op.create_table(
        settings.users_table,
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name=f"{settings.users_table}_email_key"),
    )

    op.create_table(
        settings.menu_items_table,
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        settings.orders_table,
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("user_id", BigIntId, nullable=False),
        sa.Column("items", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Orders are always listed by owner
    op.create_index(ORDERS_USER_INDEX, settings.orders_table, ["user_id"])


def downgrade() -> None:
    op.drop_index(ORDERS_USER_INDEX, table_name=settings.orders_table)
    op.drop_table(settings.orders_table)
    op.drop_table(settings.menu_items_table)
    op.drop_table(settings.users_table)
