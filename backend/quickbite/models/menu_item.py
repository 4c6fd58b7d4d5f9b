"""
QuickBite Backend: MenuItem SQLAlchemy Model
=============================================

Read-only from the API's perspective. Rows are seeded directly in the
database (or the hosted store's dashboard); no route creates or edits them.
"""

from sqlalchemy import Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from quickbite.config import settings
from quickbite.database import Base, BigIntId


class MenuItem(Base):
    __tablename__ = settings.menu_items_table

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # asdecimal=False: rows come back as floats, ready for JSON
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, name='{self.name}', price={self.price})>"
