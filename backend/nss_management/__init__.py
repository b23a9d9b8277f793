"""
NSS Management Backend: Application Package Initializer
=========================================================

What: Marks the `nss_management` directory as a Python package.
Why:  Enables module imports like `from nss_management.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend keeps the usual layered shape:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← one router factory, mounted 3×
    ├─────────────────────────────────────┤
    │     Services (Resource Handlers)    │  ← one generic CRUD service, 3 instances
    ├─────────────────────────────────────┤
    │   Validation + Record Store         │  ← required/unique rules, SQL operations
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Volunteers, events and activities differ only in the data held by their
    ResourceType descriptor (see services/resources.py).
"""

__version__ = "1.0.0"
