"""
Userbase Backend — Dependency Providers
=========================================

What:  FastAPI dependency factories that wire the layers together per request.
How:   session → UserRepository(session) → UserService(repository).
       Every object is built explicitly from its collaborators; nothing is
       looked up from a process-wide registry.
Who:   Declared with Depends() in app/routes/users.py; tests override
       get_db_session to point at an in-memory database.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserDto
from app.services.user_service import UserService
from app.validation import ensure_valid


def get_user_repository(db: AsyncSession = Depends(get_db_session)) -> UserRepository:
    """Factory for UserRepository with FastAPI DI"""
    return UserRepository(db)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Factory for UserService with FastAPI DI"""
    return UserService(repository)


async def validated_user_dto(dto: UserDto) -> UserDto:
    """
    Request body as a UserDto that passed every field rule.

    Resolved before the route body runs, so an invalid payload never
    reaches the service.

    Raises:
        ValidationFailure: One or more fields are invalid (→ 400)
    """
    ensure_valid(dto)
    return dto
