"""
Userbase Backend — User Service (Business Logic)
==================================================

What:  Orchestrates user CRUD: mapping DTOs to entities, calling the
       repository, and turning "row absent" into NotFoundError.
Why:   Keeps business rules independent of HTTP and of SQL.
How:   Holds a UserRepository handle passed in at construction.
Who:   Constructed per request by app.dependencies.get_user_service.

Error Handling Strategy:
    NotFoundError is the only failure raised here. Repository errors
    (connection loss, constraint violations) are not caught: they reach the
    global error handler unchanged and become a generic 500.
"""

import logging
from typing import List

from app.exceptions import NotFoundError
from app.mappers import user_mapper
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserDto

logger = logging.getLogger(__name__)

RESOURCE = "User"


class UserService:
    """
    Business logic layer for user operations.

    Responsibilities:
        - create_user(): persist a new user, return it with its id
        - get_user_by_id(): single lookup with not-found handling
        - get_all_users(): every user, possibly none
        - update_user(): full overwrite of an existing user
        - delete_user(): remove an existing user
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(self, dto: UserDto) -> UserDto:
        user = await self.repository.create(user_mapper.to_entity(dto))
        logger.info("User created: %s", user.id)
        return user_mapper.to_dto(user)

    async def get_user_by_id(self, user_id: int) -> UserDto:
        """
        Raises:
            NotFoundError: No user has this id (→ 404)
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(resource=RESOURCE, resource_id=user_id)
        return user_mapper.to_dto(user)

    async def get_all_users(self) -> List[UserDto]:
        users = await self.repository.find_all()
        return [user_mapper.to_dto(user) for user in users]

    async def update_user(self, user_id: int, dto: UserDto) -> UserDto:
        """
        Replace name, email and about of an existing user.

        The id in the path wins over any id in the body.

        Raises:
            NotFoundError: No user has this id (→ 404)
        """
        user = await self.repository.update(user_id, user_mapper.to_entity(dto))
        if user is None:
            raise NotFoundError(resource=RESOURCE, resource_id=user_id)
        logger.info("User updated: %s", user_id)
        return user_mapper.to_dto(user)

    async def delete_user(self, user_id: int) -> None:
        """
        Raises:
            NotFoundError: No user has this id (→ 404)
        """
        deleted = await self.repository.delete(user_id)
        if not deleted:
            raise NotFoundError(resource=RESOURCE, resource_id=user_id)
        logger.info("User deleted: %s", user_id)
