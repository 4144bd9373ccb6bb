"""
Tests for AuthorRepository.

These tests verify that the repository correctly interacts with the
database session and implements the AuthorStore protocol, using mocks.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from author_api.models.author import Author
from author_api.protocols import AuthorStore
from author_api.repositories.author_repository import AuthorRepository
from tests.mocks.auth_mocks import FakeAccessContext


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.merge = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    return session


@pytest.fixture
def repo(mock_session):
    return AuthorRepository(mock_session, FakeAccessContext(user_id="user-1"))


def _result(items):
    result = MagicMock()
    result.all.return_value = items
    return result


def test_implements_author_store(repo):
    assert isinstance(repo, AuthorStore)


class TestAuthorRepositorySave:
    """Tests for repository save operations."""

    @pytest.mark.asyncio
    async def test_save_new_author(self, repo, mock_session):
        """Test saving an author without id inserts it."""
        author = Author(name="Test Author")

        saved = await repo.save(author)

        assert saved is author
        mock_session.add.assert_called_once_with(author)
        mock_session.merge.assert_not_called()
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_save_existing_author_merges(self, repo, mock_session):
        """Test saving an author with id replaces the stored row."""
        author = Author(id=5, name="Updated")
        merged = Author(id=5, name="Updated")
        mock_session.merge.return_value = merged

        saved = await repo.save(author)

        assert saved is merged
        mock_session.merge.assert_called_once_with(author)
        mock_session.add.assert_not_called()
        mock_session.refresh.assert_called_once_with(merged)

    @pytest.mark.asyncio
    async def test_save_rolls_back_on_error(self, repo, mock_session):
        """Test database errors roll back and propagate."""
        mock_session.flush.side_effect = SQLAlchemyError("boom")

        with pytest.raises(SQLAlchemyError):
            await repo.save(Author(name="Broken"))

        mock_session.rollback.assert_called_once()


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_find_one_found(self, repo, mock_session):
        expected_author = Author(id=1, name="Test Author")
        mock_session.get.return_value = expected_author

        found = await repo.find_one(1)

        assert found == expected_author
        mock_session.get.assert_called_once_with(Author, 1)

    @pytest.mark.asyncio
    async def test_find_one_missing(self, repo, mock_session):
        mock_session.get.return_value = None

        assert await repo.find_one(999) is None

    @pytest.mark.asyncio
    async def test_find_all(self, repo, mock_session):
        authors = [Author(id=1, name="A"), Author(id=2, name="B")]
        mock_session.exec.return_value = _result(authors)

        found = await repo.find_all()

        assert found == authors
        stmt = str(mock_session.exec.call_args[0][0])
        assert "WHERE" not in stmt
        assert "ORDER BY author.id" in stmt

    @pytest.mark.asyncio
    async def test_find_all_owned_filters_by_caller(self, repo, mock_session):
        mine = [Author(id=1, name="A", user_id="user-1")]
        mock_session.exec.return_value = _result(mine)

        found = await repo.find_all_owned_by_current_user()

        assert found == mine
        stmt = mock_session.exec.call_args[0][0]
        assert "author.user_id = :user_id_1" in str(stmt)
        assert stmt.compile().params["user_id_1"] == "user-1"

    @pytest.mark.asyncio
    async def test_find_all_owned_anonymous(self, mock_session):
        repo = AuthorRepository(mock_session, FakeAccessContext(user_id=None))

        found = await repo.find_all_owned_by_current_user()

        assert found == []
        mock_session.exec.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_all_error_propagates(self, repo, mock_session):
        mock_session.exec.side_effect = SQLAlchemyError("db down")

        with pytest.raises(SQLAlchemyError):
            await repo.find_all()


class TestAuthorRepositoryDelete:
    """Tests for repository delete operations."""

    @pytest.mark.asyncio
    async def test_delete_issues_statement(self, repo, mock_session):
        """Test delete runs one DELETE without loading the row first."""
        await repo.delete(1)

        stmt = mock_session.exec.call_args[0][0]
        assert str(stmt).startswith("DELETE FROM author")
        assert stmt.compile().params["id_1"] == 1
        mock_session.get.assert_not_called()
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_rolls_back_on_error(self, repo, mock_session):
        mock_session.exec.side_effect = SQLAlchemyError("boom")

        with pytest.raises(SQLAlchemyError):
            await repo.delete(1)

        mock_session.rollback.assert_called_once()
