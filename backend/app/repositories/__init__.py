"""
Userbase Backend — Repositories Package
=========================================

What:  Data access classes that encapsulate database queries.
Why:   Services depend on a small CRUD contract instead of raw SQLAlchemy.

Repository Inventory:
    - user_repository.py: UserRepository (create, find_by_id, find_all, update, delete)
"""

from app.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
