"""
QuickBite Backend: User SQLAlchemy Model
=========================================

What:  ORM model for the users table.
Who:   Registered on `Base.metadata` for `SQLDataStore` and Alembic.

Table Design:
    - email is UNIQUE. Duplicate registrations are rejected by the database,
      not checked beforehand by the service.
    - password_hash holds a bcrypt hash ($2b$10$...), 60 characters.
    - Rows are never deleted by the application.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from quickbite.config import settings
from quickbite.database import Base, BigIntId


class User(Base):
    """A registered customer account."""

    __tablename__ = settings.users_table

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)

    # Empty names are accepted at registration
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")

    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    password_hash: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
