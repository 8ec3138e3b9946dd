"""
TourGuide Backend — Application Package Initializer
====================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin layered CRUD service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Users, Tours, Points)   │  ← Existence checks, partial updates
    │   Media Store (flat files)          │  ← Uploaded photo/audio/video assets
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; every write goes through a service
    so cross-entity rules (creator lookup, parent tour lookup, tour → point
    cascade) live in exactly one place.
"""

__version__ = "1.0.0"
