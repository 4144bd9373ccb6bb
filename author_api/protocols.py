"""
Protocol classes for the collaborators the author endpoints consume.

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, so tests can
pass in-memory fakes where production code passes the SQLModel repository
and the request-backed access context.

Example:
    ```python
    from author_api.protocols import AccessContext, AuthorStore


    async def visible_authors(
        store: AuthorStore, access: AccessContext
    ) -> list[Author]:
        if access.current_user_has_role("admin"):
            return await store.find_all()
        return await store.find_all_owned_by_current_user()
    ```
"""

from typing import Protocol, runtime_checkable

from author_api.models.author import Author


@runtime_checkable
class AuthorStore(Protocol):
    """
    Persistence interface for Author entities.

    Each call is atomic with respect to other calls on the same identity.
    The store is the sole authority assigning identities.
    """

    async def save(self, author: Author) -> Author:
        """
        Persist an author.

        Assigns an id when `author.id` is absent, otherwise replaces the
        stored author with that id.

        Args:
            author: The author to persist.

        Returns:
            The persisted author with its id populated.
        """
        ...

    async def find_one(self, id: int) -> Author | None:
        """
        Get author by id.

        Args:
            id: Primary key value.

        Returns:
            Author if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[Author]:
        """Get every author, unfiltered, in store-defined order."""
        ...

    async def find_all_owned_by_current_user(self) -> list[Author]:
        """Get the authors owned by the calling user."""
        ...

    async def delete(self, id: int) -> None:
        """
        Delete author by id. Deleting a missing id is not an error.

        Args:
            id: Primary key value.
        """
        ...


@runtime_checkable
class AccessContext(Protocol):
    """
    Resolves the caller's identity and role membership.
    """

    def current_user_has_role(self, role: str) -> bool:
        """
        Check whether the caller holds a role.

        Args:
            role: Role name, e.g. the configured admin role.

        Returns:
            True if the caller is authenticated and holds the role.
        """
        ...

    def current_user_id(self) -> str | None:
        """
        Get the caller's user id.

        Returns:
            The user id, or None for an anonymous caller.
        """
        ...
