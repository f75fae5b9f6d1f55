"""
Userbase Backend — User Service Unit Tests
============================================

What:  Tests for UserService business logic (create, get, list, update, delete).
How:   Uses a mocked UserRepository (no real DB).

What we test:
    ✅ Create maps DTO → entity → DTO and returns the assigned id
    ✅ Missing ids raise NotFoundError for get, update and delete
    ✅ Listing an empty store returns an empty list
    ✅ Repository failures propagate unchanged
"""

import pytest

from app.exceptions import NotFoundError
from app.models.user import User
from app.schemas.user import UserDto
from app.services.user_service import UserService


def make_user(user_id=1, name="Ann", email="ann@x.com", about=None):
    return User(id=user_id, name=name, email=email, about=about)


class TestUserServiceCreate:

    @pytest.mark.asyncio
    async def test_create_returns_assigned_id(self, mock_repository, sample_user_data):
        """The DTO returned carries the id the repository assigned."""
        async def assign_id(user):
            user.id = 7
            return user
        mock_repository.create.side_effect = assign_id

        service = UserService(mock_repository)
        result = await service.create_user(UserDto(**sample_user_data))

        assert result.id == 7
        assert result.name == sample_user_data["name"]
        assert result.email == sample_user_data["email"]
        assert result.about == sample_user_data["about"]
        mock_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_hands_repository_an_entity(self, mock_repository):
        async def passthrough(user):
            return user
        mock_repository.create.side_effect = passthrough

        service = UserService(mock_repository)
        await service.create_user(UserDto(name="Ann", email="ann@x.com"))

        entity = mock_repository.create.await_args.args[0]
        assert isinstance(entity, User)
        assert entity.name == "Ann"


class TestUserServiceGet:

    @pytest.mark.asyncio
    async def test_get_found(self, mock_repository):
        mock_repository.find_by_id.return_value = make_user(user_id=3)

        result = await UserService(mock_repository).get_user_by_id(3)

        assert result == UserDto(id=3, name="Ann", email="ann@x.com", about=None)
        mock_repository.find_by_id.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError, match="User with ID 42 not found"):
            await UserService(mock_repository).get_user_by_id(42)


class TestUserServiceList:

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_repository):
        """Empty store is not an error."""
        mock_repository.find_all.return_value = []

        assert await UserService(mock_repository).get_all_users() == []

    @pytest.mark.asyncio
    async def test_list_preserves_repository_order(self, mock_repository):
        mock_repository.find_all.return_value = [
            make_user(user_id=1, name="Ann"),
            make_user(user_id=2, name="Bob", email="bob@y.org"),
        ]

        result = await UserService(mock_repository).get_all_users()

        assert [u.id for u in result] == [1, 2]
        assert [u.name for u in result] == ["Ann", "Bob"]


class TestUserServiceUpdate:

    @pytest.mark.asyncio
    async def test_update_found(self, mock_repository):
        mock_repository.update.return_value = make_user(user_id=1, name="Ann B.")

        result = await UserService(mock_repository).update_user(
            1, UserDto(name="Ann B.", email="ann@x.com")
        )

        assert result.name == "Ann B."
        user_id, changes = mock_repository.update.await_args.args
        assert user_id == 1
        assert changes.name == "Ann B."

    @pytest.mark.asyncio
    async def test_update_not_found(self, mock_repository):
        mock_repository.update.return_value = None

        with pytest.raises(NotFoundError):
            await UserService(mock_repository).update_user(
                9, UserDto(name="Ann", email="ann@x.com")
            )


class TestUserServiceDelete:

    @pytest.mark.asyncio
    async def test_delete_found(self, mock_repository):
        mock_repository.delete.return_value = True

        assert await UserService(mock_repository).delete_user(1) is None
        mock_repository.delete.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_repository):
        mock_repository.delete.return_value = False

        with pytest.raises(NotFoundError) as exc_info:
            await UserService(mock_repository).delete_user(5)

        assert exc_info.value.resource_id == 5

    @pytest.mark.asyncio
    async def test_repository_errors_propagate(self, mock_repository):
        """The service only translates absence; other failures pass through."""
        mock_repository.delete.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            await UserService(mock_repository).delete_user(1)
