"""Tests for UserRepository against a mocked Supabase client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from postgrest.exceptions import APIError

from shared.exceptions import DuplicateKeyError
from shared.models import Role
from modules.users.repository import PUBLIC_COLUMNS, UserRepository


USER_ROW = {
    "id": "6f9619ff-8b86-d011-b42d-00c04fc964ff",
    "name": "Jane Donor",
    "email": "jane@example.com",
    "phone": "+15550100",
    "blood_group": "O+",
    "date_of_birth": "1990-05-15",
    "city": "Springfield",
    "location": "12 Elm Street",
    "last_donation_date": None,
    "role": "donor",
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-01T00:00:00+00:00",
}


def query_result(data=None, count=None):
    return MagicMock(data=data if data is not None else [], count=count)


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return UserRepository(mock_db)


class TestGetById:
    @pytest.mark.asyncio
    async def test_found(self, repo, mock_db):
        select = mock_db.table.return_value.select
        select.return_value.eq.return_value.execute = AsyncMock(return_value=query_result([USER_ROW]))

        user = await repo.get_by_id(USER_ROW["id"])

        mock_db.table.assert_called_with("users")
        select.assert_called_with(PUBLIC_COLUMNS)
        assert user.email == "jane@example.com"
        assert user.role is Role.DONOR

    @pytest.mark.asyncio
    async def test_missing(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute = AsyncMock(
            return_value=query_result([])
        )
        assert await repo.get_by_id("missing") is None

    def test_public_columns_exclude_password_hash(self):
        assert "password_hash" not in PUBLIC_COLUMNS


class TestCredentials:
    @pytest.mark.asyncio
    async def test_returns_hash_separately(self, repo, mock_db):
        row = {**USER_ROW, "password_hash": "$2b$12$hash"}
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute = AsyncMock(return_value=query_result([row]))

        credentials = await repo.get_credentials_by_email("jane@example.com")

        assert credentials.password_hash == "$2b$12$hash"
        assert "password_hash" not in credentials.user.model_dump()
        assert "hash" not in repr(credentials)


class TestCreate:
    @pytest.mark.asyncio
    async def test_inserts_row(self, repo, mock_db):
        insert = mock_db.table.return_value.insert
        insert.return_value.execute = AsyncMock(return_value=query_result([USER_ROW]))

        user = await repo.create({"email": "jane@example.com"})

        insert.assert_called_once_with({"email": "jane@example.com"})
        assert user.id == USER_ROW["id"]

    @pytest.mark.asyncio
    async def test_duplicate_email(self, repo, mock_db):
        error = APIError({
            "code": "23505",
            "message": 'duplicate key value violates unique constraint "users_email_key"',
            "details": None,
            "hint": None,
        })
        mock_db.table.return_value.insert.return_value.execute = AsyncMock(side_effect=error)

        with pytest.raises(DuplicateKeyError) as exc_info:
            await repo.create({"email": "jane@example.com"})
        assert exc_info.value.constraint == "users_email_key"


class TestListAndCount:
    @pytest.mark.asyncio
    async def test_list_all_newest_first(self, repo, mock_db):
        order = mock_db.table.return_value.select.return_value.order
        order.return_value.execute = AsyncMock(return_value=query_result([USER_ROW]))

        users = await repo.list_all()

        order.assert_called_once_with("created_at", desc=True)
        assert [u.id for u in users] == [USER_ROW["id"]]

    @pytest.mark.asyncio
    async def test_count(self, repo, mock_db):
        select = mock_db.table.return_value.select
        select.return_value.execute = AsyncMock(return_value=query_result([], count=3))

        assert await repo.count() == 3
        select.assert_called_once_with("id", count="exact")

    @pytest.mark.asyncio
    async def test_summaries_skip_query_for_no_ids(self, repo, mock_db):
        assert await repo.get_summaries([]) == {}
        mock_db.table.assert_not_called()


class TestDelete:
    @pytest.mark.asyncio
    async def test_returns_deleted_user(self, repo, mock_db):
        chain = mock_db.table.return_value.delete.return_value.eq.return_value
        chain.execute = AsyncMock(return_value=query_result([USER_ROW]))
        assert (await repo.delete(USER_ROW["id"])).id == USER_ROW["id"]

    @pytest.mark.asyncio
    async def test_missing(self, repo, mock_db):
        chain = mock_db.table.return_value.delete.return_value.eq.return_value
        chain.execute = AsyncMock(return_value=query_result([]))
        assert await repo.delete(USER_ROW["id"]) is None


class TestRoleMapping:
    @pytest.mark.asyncio
    async def test_role_case_insensitive(self, repo, mock_db):
        row = {**USER_ROW, "role": "ADMIN"}
        mock_db.table.return_value.select.return_value.eq.return_value.execute = AsyncMock(
            return_value=query_result([row])
        )
        assert (await repo.get_by_id(row["id"])).role is Role.ADMIN
