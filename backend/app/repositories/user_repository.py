"""
Userbase Backend — User Repository
====================================

What:  Persistence boundary for User rows.
Why:   Keeps SQL out of the service layer; the service only sees entities.
How:   Thin async wrapper over an AsyncSession. Writes are flushed (not
       committed) so ids are assigned immediately; the per-request session
       dependency commits or rolls back the whole request.
Who:   Constructed per request by app.dependencies.get_user_repository.

Failure policy:
    Missing rows are reported as None/False, never as exceptions.
    Database errors are NOT caught here: they propagate to the service and
    on to the global error handler (→ 500).
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User

logger = logging.getLogger(__name__)

# Upper bound of the `users.id` column (Integer is int4 on PostgreSQL).
# Larger ids cannot name a row, and binding them fails in the driver.
MAX_ID = 2**31 - 1


class UserRepository:
    """CRUD operations for User against the relational store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        """
        Insert a new user and return it with its assigned id.

        Any id set on the incoming entity is discarded: ids are server-generated.
        """
        user.id = None
        self.db.add(user)
        await self.db.flush()  # Assigns the id without committing
        logger.debug("Inserted user %s", user.id)
        return user

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """The user with this id, or None. Ids outside 1..MAX_ID are never stored."""
        if not 1 <= user_id <= MAX_ID:
            return None
        result = await self.db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_all(self) -> List[User]:
        """All users in insertion order (ids are monotonically assigned)."""
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def update(self, user_id: int, changes: User) -> Optional[User]:
        """
        Overwrite every mutable field of an existing user.

        Returns:
            The updated entity, or None when no row has this id.
        """
        user = await self.find_by_id(user_id)
        if user is None:
            return None

        user.name = changes.name
        user.email = changes.email
        user.about = changes.about
        await self.db.flush()
        logger.debug("Updated user %s", user_id)
        return user

    async def delete(self, user_id: int) -> bool:
        """
        Remove a user row.

        Returns:
            True if a row was deleted, False when no row has this id.
        """
        user = await self.find_by_id(user_id)
        if user is None:
            return False

        await self.db.delete(user)
        await self.db.flush()
        logger.debug("Deleted user %s", user_id)
        return True
