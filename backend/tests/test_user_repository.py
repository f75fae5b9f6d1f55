"""
Userbase Backend — User Repository Tests
==========================================

What:  Tests for UserRepository against an in-memory SQLite database.
Why:   The repository is the only code that issues SQL; mocks would hide
       ordering and flush behaviour.
"""

import pytest

from app.models.user import User
from app.repositories.user_repository import MAX_ID, UserRepository


class TestUserRepository:

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_session):
        repo = UserRepository(db_session)

        user = await repo.create(User(name="Ann", email="ann@x.com"))

        assert user.id is not None
        fetched = await repo.find_by_id(user.id)
        assert fetched.name == "Ann"
        assert fetched.about is None

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, db_session):
        repo = UserRepository(db_session)

        user = await repo.create(User(id=999, name="Ann", email="ann@x.com"))

        assert user.id != 999

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, db_session):
        assert await UserRepository(db_session).find_by_id(12345) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [0, -1, MAX_ID + 1, 99999999999999999999])
    async def test_out_of_range_ids_are_absent(self, db_session, user_id):
        """Ids the column cannot hold are reported missing, not as driver errors."""
        repo = UserRepository(db_session)

        assert await repo.find_by_id(user_id) is None
        assert await repo.update(user_id, User(name="Ann", email="ann@x.com")) is None
        assert await repo.delete(user_id) is False

    @pytest.mark.asyncio
    async def test_find_all_in_insertion_order(self, db_session):
        repo = UserRepository(db_session)
        for name in ("Cat", "Ann", "Bob"):
            await repo.create(User(name=name, email=f"{name.lower()}@x.com"))

        users = await repo.find_all()

        assert [u.name for u in users] == ["Cat", "Ann", "Bob"]

    @pytest.mark.asyncio
    async def test_find_all_empty(self, db_session):
        assert await UserRepository(db_session).find_all() == []

    @pytest.mark.asyncio
    async def test_update_overwrites_all_mutable_fields(self, db_session):
        repo = UserRepository(db_session)
        user = await repo.create(User(name="Ann", email="ann@x.com", about="old"))

        updated = await repo.update(
            user.id, User(name="Ann B.", email="annb@x.com", about=None)
        )

        assert updated.id == user.id
        assert updated.name == "Ann B."
        assert updated.email == "annb@x.com"
        assert updated.about is None

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, db_session):
        result = await UserRepository(db_session).update(
            77, User(name="Ann", email="ann@x.com")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        repo = UserRepository(db_session)
        user = await repo.create(User(name="Ann", email="ann@x.com"))

        assert await repo.delete(user.id) is True
        assert await repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self, db_session):
        assert await UserRepository(db_session).delete(77) is False
