"""
Userbase Backend — User SQLAlchemy Model
==========================================

What:  ORM model representing the `users` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by UserRepository for CRUD operations and by Alembic for schema management.

Table Design:
    - Integer primary key, assigned by the database on insert and never updated
    - name / email / about mirror the API contract (see app/schemas/user.py)
    - email is indexed for lookups but not unique-constrained
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """
    A persisted user row.

    Lifecycle:
        1. Created by POST /api/users (id assigned on flush)
        2. Fully overwritten by PUT /api/users/{id} (id unchanged)
        3. Hard-deleted by DELETE /api/users/{id}
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Server-generated identifier",
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name (1-100 characters)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Contact email address",
    )

    # Free text, optional; NULL means the user left it blank
    about: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Free-text description",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
