"""
Userbase Backend — User Mapper
================================

What:  Converts between the User ORM entity and the UserDto wire model.
Why:   Keeps the database schema and the API contract free to evolve apart.
How:   Explicit field-by-field copies; no reflection, no shared state.
Who:   Called by UserService only.

    to_dto(entity)  → UserDto   (None → None)
    to_entity(dto)  → User      (None → None; id carried over when present)
"""

from typing import Optional

from app.models.user import User
from app.schemas.user import UserDto


def to_dto(entity: Optional[User]) -> Optional[UserDto]:
    if entity is None:
        return None
    return UserDto(
        id=entity.id,
        name=entity.name,
        email=entity.email,
        about=entity.about,
    )


def to_entity(dto: Optional[UserDto]) -> Optional[User]:
    if dto is None:
        return None
    return User(
        id=dto.id,
        name=dto.name,
        email=dto.email,
        about=dto.about,
    )
