"""
Tests for Author commands.

These tests verify that commands correctly encapsulate business logic
and can be tested independently of the HTTP layer.
"""

from unittest.mock import MagicMock

import pytest

from author_api.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorsCommand,
    UpdateAuthorCommand,
)
from author_api.exceptions import BadRequestAlertError, ValidationError
from author_api.models.author import Author


class TestCreateAuthorCommand:
    """Tests for CreateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_create_author_success(self, mock_author_store):
        """Test successfully creating an author."""
        mock_author_store.save.return_value = Author(id=1, name="New Author")
        author = Author(name="New Author")

        result = await CreateAuthorCommand(mock_author_store).execute(author)

        assert result.id == 1
        assert result.name == "New Author"
        mock_author_store.save.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_create_author_with_id(self, mock_author_store):
        """Test creating an author that already has an id is rejected."""
        command = CreateAuthorCommand(mock_author_store)

        with pytest.raises(BadRequestAlertError) as exc_info:
            await command.execute(Author(id=3, name="Existing"))

        assert exc_info.value.entity_name == "author"
        assert exc_info.value.error_key == "idexists"
        assert exc_info.value.http_status == 400
        assert isinstance(exc_info.value, ValidationError)
        # Should not attempt to save
        mock_author_store.save.assert_not_called()


class TestUpdateAuthorCommand:
    """Tests for UpdateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_update_author_saves(self, mock_author_store):
        """Test updating delegates to a single save."""
        mock_author_store.save.return_value = Author(id=5, name="New Name")
        author = Author(id=5, name="New Name")

        result = await UpdateAuthorCommand(mock_author_store).execute(author)

        assert result.id == 5
        assert result.name == "New Name"
        mock_author_store.save.assert_called_once_with(author)
        mock_author_store.find_one.assert_not_called()


class TestGetAuthorsCommand:
    """Tests for GetAuthorsCommand."""

    @pytest.mark.asyncio
    async def test_admin_gets_all(self, mock_author_store):
        """Test admins list every author."""
        access = MagicMock()
        access.current_user_has_role.return_value = True
        mock_author_store.find_all.return_value = [
            Author(id=1, name="Author 1"),
            Author(id=2, name="Author 2"),
        ]

        result = await GetAuthorsCommand(mock_author_store, access).execute()

        assert [a.id for a in result] == [1, 2]
        access.current_user_has_role.assert_called_once_with("admin")
        mock_author_store.find_all.assert_called_once()
        mock_author_store.find_all_owned_by_current_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_gets_own(self, mock_author_store):
        """Test non-admins list only their own authors."""
        access = MagicMock()
        access.current_user_has_role.return_value = False
        mock_author_store.find_all_owned_by_current_user.return_value = [
            Author(id=2, name="Mine", user_id="user-1")
        ]

        result = await GetAuthorsCommand(mock_author_store, access).execute()

        assert [a.id for a in result] == [2]
        mock_author_store.find_all_owned_by_current_user.assert_called_once()
        mock_author_store.find_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_order_preserved(self, mock_author_store):
        """Test results come back in store order."""
        access = MagicMock()
        access.current_user_has_role.return_value = True
        mock_author_store.find_all.return_value = [
            Author(id=3, name="C"),
            Author(id=1, name="A"),
        ]

        result = await GetAuthorsCommand(mock_author_store, access).execute()

        assert [a.id for a in result] == [3, 1]


class TestGetAuthorCommand:
    """Tests for GetAuthorCommand."""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_author_store):
        mock_author_store.find_one.return_value = Author(id=1, name="X")

        result = await GetAuthorCommand(mock_author_store).execute(1)

        assert result.name == "X"
        mock_author_store.find_one.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_get_missing(self, mock_author_store):
        result = await GetAuthorCommand(mock_author_store).execute(999)

        assert result is None


class TestDeleteAuthorCommand:
    """Tests for DeleteAuthorCommand."""

    @pytest.mark.asyncio
    async def test_delete_without_lookup(self, mock_author_store):
        """Test delete goes straight to the store with no existence check."""
        await DeleteAuthorCommand(mock_author_store).execute(1)

        mock_author_store.delete.assert_called_once_with(1)
        mock_author_store.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, mock_author_store):
        """Test store failures are not translated."""
        mock_author_store.delete.side_effect = RuntimeError("store down")

        with pytest.raises(RuntimeError, match="store down"):
            await DeleteAuthorCommand(mock_author_store).execute(1)
