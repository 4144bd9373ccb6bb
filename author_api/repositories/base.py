"""
Base repository with common persistence operations.

The Repository pattern separates data access logic from business logic,
making it easier to test and maintain. Repositories encapsulate all
database operations for a specific entity.

Example:
    ```python
    from author_api.repositories.base import BaseRepository
    from author_api.models.author import Author


    class AuthorRepository(BaseRepository[Author]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author)

        async def get_by_name(self, name: str) -> Author | None:
            stmt = select(Author).where(Author.name == name)
            result = await self.session.exec(stmt)
            return result.first()
    ```
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from author_api.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository providing common persistence operations.

    Each repository operates on a single model type whose primary key
    column is `id`.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
        """
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, id)

    async def get_all(self, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters, ordered by id.

        Args:
            **filters: Field name and value pairs to filter by.
                Example: get_all(user_id="abc")

        Returns:
            List of entities matching all filters.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = select(self.model)
            for key, value in filters.items():
                stmt = stmt.where(getattr(self.model, key) == value)
            stmt = stmt.order_by(self.model.id)  # type: ignore[attr-defined]
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise

    async def save(self, entity: T) -> T:
        """
        Insert a new entity or replace the stored one with the same id.

        Entities without an id are added and receive a generated id.
        Entities carrying an id are merged, so a detached instance built
        from request data replaces every column of the stored row.

        Args:
            entity: The entity instance to persist.

        Returns:
            The persisted entity with generated fields populated.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            if getattr(entity, "id", None) is None:
                self.session.add(entity)
            else:
                entity = await self.session.merge(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error saving {self.model.__name__}: {e}")
            raise

    async def delete_by_id(self, id: int) -> None:
        """
        Delete the entity with the given id.

        Issues a single DELETE statement; a missing id deletes nothing and
        is not reported.

        Args:
            id: Primary key value.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            stmt = delete(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
            await self.session.exec(stmt)  # type: ignore[call-overload]
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise
