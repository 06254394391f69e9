"""Tests for RegistrationRepository against a mocked Supabase client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from postgrest.exceptions import APIError

from shared.exceptions import DuplicateKeyError
from modules.registrations.repository import RegistrationRepository


ROW = {
    "id": "0b2c6a4e-2a4f-4f44-9d0e-6d8d3b6f1a11",
    "user_id": "6f9619ff-8b86-d011-b42d-00c04fc964ff",
    "event_id": "9a1c9c0e-6f3b-4b7e-8d6a-2f0b1e7c5d22",
    "status": "registered",
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-01T00:00:00+00:00",
}


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return RegistrationRepository(mock_db)


class TestCreate:
    @pytest.mark.asyncio
    async def test_inserts_registered_row(self, repo, mock_db):
        insert = mock_db.table.return_value.insert
        insert.return_value.execute = AsyncMock(return_value=MagicMock(data=[ROW]))

        registration = await repo.create(ROW["user_id"], ROW["event_id"])

        mock_db.table.assert_called_with("registrations")
        insert.assert_called_once_with({
            "user_id": ROW["user_id"],
            "event_id": ROW["event_id"],
            "status": "registered",
        })
        assert registration.id == ROW["id"]

    @pytest.mark.asyncio
    async def test_unique_pair_violation(self, repo, mock_db):
        """The (user_id, event_id) constraint is what decides concurrent duplicates."""
        error = APIError({
            "code": "23505",
            "message": 'duplicate key value violates unique constraint "registrations_user_event_key"',
            "details": "Key (user_id, event_id) already exists.",
            "hint": None,
        })
        mock_db.table.return_value.insert.return_value.execute = AsyncMock(side_effect=error)

        with pytest.raises(DuplicateKeyError) as exc_info:
            await repo.create(ROW["user_id"], ROW["event_id"])
        assert exc_info.value.constraint == "registrations_user_event_key"


class TestDeleteOwned:
    @pytest.mark.asyncio
    async def test_filters_by_id_and_owner(self, repo, mock_db):
        delete = mock_db.table.return_value.delete.return_value
        delete.eq.return_value.eq.return_value.execute = AsyncMock(
            return_value=MagicMock(data=[ROW])
        )

        assert await repo.delete_owned(ROW["id"], ROW["user_id"]) is True
        delete.eq.assert_called_once_with("id", ROW["id"])
        delete.eq.return_value.eq.assert_called_once_with("user_id", ROW["user_id"])

    @pytest.mark.asyncio
    async def test_nothing_matched(self, repo, mock_db):
        delete = mock_db.table.return_value.delete.return_value
        delete.eq.return_value.eq.return_value.execute = AsyncMock(return_value=MagicMock(data=[]))
        assert await repo.delete_owned(ROW["id"], "someone-else") is False


class TestFind:
    @pytest.mark.asyncio
    async def test_find_by_pair(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.limit.return_value.execute = AsyncMock(return_value=MagicMock(data=[ROW]))

        found = await repo.find_by_user_and_event(ROW["user_id"], ROW["event_id"])

        assert found.event_id == ROW["event_id"]

    @pytest.mark.asyncio
    async def test_list_for_user_newest_first(self, repo, mock_db):
        order = mock_db.table.return_value.select.return_value.eq.return_value.order
        order.return_value.execute = AsyncMock(return_value=MagicMock(data=[ROW]))

        registrations = await repo.list_for_user(ROW["user_id"])

        order.assert_called_once_with("created_at", desc=True)
        assert len(registrations) == 1
