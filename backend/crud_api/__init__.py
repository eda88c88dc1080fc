"""
crud-api Backend — Application Package Initializer
===================================================

What: Marks the `crud_api` directory as a Python package.
Why:  Enables module imports like `from crud_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin REST layer over two independent collections
    (books and wines) and follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Resource & Reset)     │  ← One store operation per call
    ├─────────────────────────────────────┤
    │   Models, Schemas & Seeds (Data)    │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes parse the request and pick the status code, services talk to the
    store, and the database layer owns the connection pool.
"""

__version__ = "1.0.0"
