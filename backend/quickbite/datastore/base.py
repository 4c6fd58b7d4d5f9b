"""
QuickBite Backend: Abstract Data Store Interface
=================================================

What:  Abstract base class for the persistence client every service talks to.
Why:   The app delegates all storage to an external relational store. Keeping
       the contract here lets the hosted store (Supabase SDK) and a direct
       SQL connection (SQLAlchemy) be swapped without touching services.
How:   Concrete stores implement five table operations plus lifecycle hooks.
       Each operation names a table and filters rows by column equality.
Who:   Created once in the app lifespan and injected into route handlers
       through `quickbite.dependencies.get_datastore`.

Error contract:
    Every failure reported by the store (constraint violation, bad filter
    value, unreachable host) surfaces as `StorageError` carrying the store's
    message. Callers decide whether that means 400, 401 or 404.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

Row = Dict[str, Any]
Filters = Mapping[str, Any]

# Shared by every implementation so select_one failures read the same
SINGLE_ROW_MESSAGE = "Cannot coerce the result to a single JSON object"


class DataStore(ABC):
    """
    Generic table client.

    Contract:
        - `columns` is a comma-separated column list, or "*" for all columns
        - `filters` maps column name → value; all entries must match (AND)
        - Rows are returned as plain dicts keyed by column name
        - Write operations return the affected rows
    """

    @abstractmethod
    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> List[Row]:
        """Return every row of `table` matching `filters` (empty list if none)."""
        ...

    @abstractmethod
    async def select_one(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Filters] = None,
    ) -> Row:
        """
        Return the single row matching `filters`.

        Raises:
            StorageError: the query failed, or zero or several rows matched.
        """
        ...

    @abstractmethod
    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        ...

    @abstractmethod
    async def update(self, table: str, values: Row, *, filters: Filters) -> List[Row]:
        ...

    @abstractmethod
    async def delete(self, table: str, *, filters: Filters) -> List[Row]:
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Lightweight reachability probe for the /health endpoint.

        Returns False instead of raising so the health route can report
        a degraded store without hitting the error handlers.
        """
        ...

    async def close(self) -> None:
        """Release connections. Called once during application shutdown."""
        return None


def parse_columns(columns: str) -> List[str]:
    """Split a "id, name, email" column list. Returns [] for "*"."""
    names = [part.strip() for part in columns.split(",") if part.strip()]
    if names == ["*"]:
        return []
    return names
