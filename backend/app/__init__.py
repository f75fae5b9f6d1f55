"""
Userbase Backend — Application Package Initializer
====================================================

What:  Marks the `app` directory as a Python package.
Who:   Imported by uvicorn (app.main:app), Alembic, and pytest.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │      Routes + Validation (API)      │  ← HTTP concerns, field rules
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Orchestration, not-found rules
    ├─────────────────────────────────────┤
    │      Mappers, Models & Schemas      │  ← Entity ↔ DTO, ORM, Pydantic
    ├─────────────────────────────────────┤
    │     Repositories + Database         │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Failures from any layer are translated to HTTP by app/errors.py.
"""

__version__ = "1.0.0"
