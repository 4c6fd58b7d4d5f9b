"""
QuickBite Backend: FastAPI Dependencies
========================================

What:  Hands the application's data store to route handlers.
How:   The lifespan stores the client on `app.state.datastore`; handlers
       declare `store: DataStore = Depends(get_datastore)`.
Why:   Tests replace the store with `app.dependency_overrides[get_datastore]`
       instead of patching a module-level client.
"""

from fastapi import Request

from quickbite.datastore.base import DataStore
from quickbite.exceptions import InternalError


def get_datastore(request: Request) -> DataStore:
    store = getattr(request.app.state, "datastore", None)
    if store is None:
        # Startup could not build the client (see lifespan logs)
        raise InternalError("Data store is not available")
    return store
