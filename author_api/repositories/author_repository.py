"""
Repository for Author entity, implementing the AuthorStore protocol.

Example:
    ```python
    from author_api.repositories.author_repository import AuthorRepository
    from author_api.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session, access)
        authors = await repo.find_all()
        mine = await repo.find_all_owned_by_current_user()
    ```
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from author_api.models.author import Author
from author_api.protocols import AccessContext
from author_api.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    SQLModel-backed AuthorStore.

    Needs the caller's AccessContext to resolve "owned by the current user".
    """

    def __init__(self, session: AsyncSession, access: AccessContext):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
            access: Access context of the calling user.
        """
        super().__init__(session, Author)
        self.access = access

    async def find_one(self, id: int) -> Author | None:
        return await self.get_by_id(id)

    async def find_all(self) -> list[Author]:
        return await self.get_all()

    async def find_all_owned_by_current_user(self) -> list[Author]:
        """
        Get authors whose owning user is the caller.

        Returns:
            Authors with `user_id` equal to the caller's id; an empty list
            for anonymous callers.
        """
        user_id = self.access.current_user_id()
        if user_id is None:
            return []

        return await self.get_all(user_id=user_id)

    async def delete(self, id: int) -> None:
        await self.delete_by_id(id)
