# Data store package init
"""
QuickBite Backend: Persistence Clients
=======================================

Store Inventory:
    - DataStore (abstract):  generic table operations contract
    - SupabaseDataStore:     hosted store through the Supabase SDK (default)
    - SQLDataStore:          direct async SQLAlchemy connection

`create_datastore()` picks one from `settings.datastore_backend`. The app
calls it once in the lifespan and keeps the result on `app.state`.
"""

import logging

from quickbite.config import Settings
from quickbite.datastore.base import DataStore

logger = logging.getLogger(__name__)


async def create_datastore(config: Settings) -> DataStore:
    """Build the persistence client selected by DATASTORE_BACKEND."""
    if config.datastore_backend == "sql":
        from quickbite.datastore.sql_store import SQLDataStore

        logger.info("Using SQL data store")
        return SQLDataStore(config.database_url)

    from quickbite.datastore.supabase_store import SupabaseDataStore

    logger.info("Using Supabase data store")
    return await SupabaseDataStore.connect(
        config.supabase_url,
        config.supabase_key,
        probe_table=config.users_table,
    )
