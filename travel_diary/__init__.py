"""
Travel Diary Backend — Application Package Initializer
=======================================================

What: Marks the `travel_diary` directory as a Python package.
Who:  Used by uvicorn (`travel_diary.main:app`), pytest, and `python -m travel_diary`.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Data Access)        │  ← One statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy over SQLite
    └─────────────────────────────────────┘

    Routes never touch SQL; services never build HTTP responses. Errors
    cross the boundary as the exceptions in `travel_diary.exceptions`.
"""

__version__ = "1.0.0"
