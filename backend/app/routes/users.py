"""
Userbase Backend — Users Route Handlers
=========================================

What:  CRUD endpoints for the User resource under /api/users.
How:   Each handler receives a validated UserDto and/or a path id, calls one
       UserService method, and returns the result. Failures are raised and
       translated by app.errors; handlers contain no try/except.

Status policy:
    POST   → 201 Created
    GET    → 200 OK
    PUT    → 200 OK
    DELETE → 204 No Content (empty body)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_user_service, validated_user_dto
from app.schemas.user import ErrorResponse, UserDto, ValidationErrorResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}
INVALID = {400: {"description": "Validation failed", "model": ValidationErrorResponse}}
SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


@router.post(
    "",
    response_model=UserDto,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID, **SERVER_ERROR},
    summary="Create a user",
)
async def create_user(
    dto: UserDto = Depends(validated_user_dto),
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Any `id` in the body is ignored; the response carries the assigned one."""
    return await service.create_user(dto)


@router.get(
    "/{user_id}",
    response_model=UserDto,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a user by ID",
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    return await service.get_user_by_id(user_id)


@router.get(
    "",
    response_model=List[UserDto],
    responses=SERVER_ERROR,
    summary="List all users",
    description="Returns every user in creation order. An empty store yields `[]`.",
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserDto]:
    return await service.get_all_users()


@router.put(
    "/{user_id}",
    response_model=UserDto,
    responses={**INVALID, **NOT_FOUND, **SERVER_ERROR},
    summary="Replace a user",
    description="Overwrites name, email and about. Omitted optional fields are cleared.",
)
async def update_user(
    user_id: int,
    dto: UserDto = Depends(validated_user_dto),
    service: UserService = Depends(get_user_service),
) -> UserDto:
    return await service.update_user(user_id, dto)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a user",
)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
