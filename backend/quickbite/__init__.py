"""
QuickBite Backend: Application Package Initializer
===================================================

What: Marks the `quickbite` directory as a Python package.
Who:  Imported by uvicorn (`quickbite.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered the same way for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← credentials, orders, menu, users
    ├─────────────────────────────────────┤
    │            Schemas (Contract)       │  ← Pydantic request/response models
    ├─────────────────────────────────────┤
    │       DataStore (Persistence)       │  ← Supabase SDK or async SQLAlchemy
    └─────────────────────────────────────┘

    Services never hold a data store of their own. The route layer receives
    the store through FastAPI's dependency injection and passes it down on
    every call, so tests can swap in any `DataStore` implementation.
"""

__version__ = "1.0.0"
