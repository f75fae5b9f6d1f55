"""
Userbase Backend — User Mapper Unit Tests
"""

from app.mappers import user_mapper
from app.models.user import User
from app.schemas.user import UserDto


def test_to_dto_copies_every_field():
    entity = User(id=4, name="Ann", email="ann@x.com", about="hi")

    dto = user_mapper.to_dto(entity)

    assert dto == UserDto(id=4, name="Ann", email="ann@x.com", about="hi")


def test_to_entity_without_id():
    entity = user_mapper.to_entity(UserDto(name="Ann", email="ann@x.com"))

    assert entity.id is None
    assert entity.name == "Ann"
    assert entity.email == "ann@x.com"
    assert entity.about is None


def test_round_trip_is_lossless():
    dto = UserDto(id=12, name="Ann B.", email="ann@x.com", about="Line one\nLine two")

    assert user_mapper.to_dto(user_mapper.to_entity(dto)) == dto


def test_none_maps_to_none():
    assert user_mapper.to_dto(None) is None
    assert user_mapper.to_entity(None) is None
