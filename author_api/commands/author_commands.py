"""
Commands for Author business operations.

Each command performs exactly one store call; there is no cross-request
state and no retry.

Example:
    ```python
    command = GetAuthorsCommand(store, access)
    authors = await command.execute()
    ```
"""

from author_api.commands.base import BaseCommand
from author_api.constants import AUTHOR_ENTITY_NAME, ID_EXISTS_ERROR_KEY
from author_api.exceptions import BadRequestAlertError
from author_api.models.author import Author
from author_api.protocols import AccessContext, AuthorStore
from author_api.settings import app_settings


class CreateAuthorCommand(BaseCommand[Author, Author]):
    """
    Command to create a new author.

    The author must not carry an id; the store assigns one.
    """

    def __init__(self, store: AuthorStore):
        """
        Initialize command with store.

        Args:
            store: Author store for data access.
        """
        self.store = store

    async def execute(self, input_data: Author) -> Author:
        """
        Execute command to create author.

        Args:
            input_data: Author to create, without id.

        Returns:
            Persisted author with the store-assigned id.

        Raises:
            BadRequestAlertError: If the author already has an id. The store
                is not called.
        """
        if input_data.id is not None:
            raise BadRequestAlertError(
                "A new author cannot already have an ID",
                entity_name=AUTHOR_ENTITY_NAME,
                error_key=ID_EXISTS_ERROR_KEY,
            )

        return await self.store.save(input_data)


class UpdateAuthorCommand(BaseCommand[Author, Author]):
    """
    Command to replace an existing author.

    The store upserts by id. No existence or version check is made, so
    concurrent updates are last-write-wins.
    """

    def __init__(self, store: AuthorStore):
        """
        Initialize command with store.

        Args:
            store: Author store for data access.
        """
        self.store = store

    async def execute(self, input_data: Author) -> Author:
        """
        Execute command to update author.

        Args:
            input_data: Author carrying the id of the row to replace.

        Returns:
            Persisted author.
        """
        return await self.store.save(input_data)


class GetAuthorsCommand(BaseCommand[None, list[Author]]):
    """
    Command to list the authors visible to the caller.

    Holders of the admin role see every author; everyone else sees only
    the authors they own.
    """

    def __init__(self, store: AuthorStore, access: AccessContext):
        """
        Initialize command with store and access context.

        Args:
            store: Author store for data access.
            access: Access context of the calling user.
        """
        self.store = store
        self.access = access

    async def execute(self, input_data: None = None) -> list[Author]:
        """
        Execute command to list authors.

        Returns:
            Authors in store-defined order, never reordered or paginated.
        """
        if self.access.current_user_has_role(app_settings.ADMIN_ROLE):
            return await self.store.find_all()

        return await self.store.find_all_owned_by_current_user()


class GetAuthorCommand(BaseCommand[int, Author | None]):
    """Command to fetch one author by id."""

    def __init__(self, store: AuthorStore):
        self.store = store

    async def execute(self, input_data: int) -> Author | None:
        """
        Execute command to get author.

        Args:
            input_data: Author id.

        Returns:
            Author if found, None otherwise.
        """
        return await self.store.find_one(input_data)


class DeleteAuthorCommand(BaseCommand[int, None]):
    """
    Command to delete an author.

    Deletes unconditionally: a missing id is not distinguished from an
    existing one.
    """

    def __init__(self, store: AuthorStore):
        self.store = store

    async def execute(self, input_data: int) -> None:
        await self.store.delete(input_data)
