"""
QuickBite Backend: Order SQLAlchemy Model
==========================================

What:  ORM model for the orders table.

Table Design:
    - user_id has no foreign key. Orders are accepted for any user id the
      client sends; the owning user is not checked.
    - items is a JSON array stored exactly as the client sent it. Entries
      are not matched against the menu.
    - No status column and no timestamps. An order exists until deleted.
"""

from typing import Any, List

from sqlalchemy import JSON
from sqlalchemy.orm import Mapped, mapped_column

from quickbite.config import settings
from quickbite.database import Base, BigIntId


class Order(Base):
    __tablename__ = settings.orders_table

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    # Indexed: orders are always listed by owner
    user_id: Mapped[int] = mapped_column(BigIntId, nullable=False, index=True)

    items: Mapped[List[Any]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, user_id={self.user_id})>"
