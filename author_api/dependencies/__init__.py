"""
Dependency injection configuration for FastAPI.

This module wires the production collaborators of the author endpoints:
a database session per request, the request-backed AccessContext, and the
SQLModel AuthorStore built on both. Tests replace any of them through
`app.dependency_overrides`.

Example:
    ```python
    from author_api.dependencies import AccessDep, AuthorStoreDep

    @router.get("/authors")
    async def get_authors(
        store: AuthorStoreDep,
        access: AccessDep,
    ) -> list[Author]:
        return await GetAuthorsCommand(store, access).execute()
    ```
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from author_api.dependencies.permissions import require_authenticated
from author_api.managers.access_context import RequestAccessContext
from author_api.protocols import AccessContext, AuthorStore
from author_api.repositories.author_repository import AuthorRepository
from author_api.storage.db import get_session

__all__ = [
    "AccessDep",
    "AuthorStoreDep",
    "SessionDep",
    "get_access_context",
    "get_author_store",
    "require_authenticated",
]

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Access Context Dependencies
# ============================================================================


def get_access_context(request: Request) -> AccessContext:
    """
    Get the access context of the calling user.

    Args:
        request: The incoming request, authenticated by AuthBackend.

    Returns:
        RequestAccessContext bound to the request.
    """
    return RequestAccessContext(request)


AccessDep = Annotated[AccessContext, Depends(get_access_context)]


# ============================================================================
# Store Dependencies
# ============================================================================


def get_author_store(session: SessionDep, access: AccessDep) -> AuthorStore:
    """
    Get author store with injected database session and access context.

    Args:
        session: Database session injected by FastAPI.
        access: Access context injected by FastAPI.

    Returns:
        AuthorRepository instance.
    """
    return AuthorRepository(session, access)


AuthorStoreDep = Annotated[AuthorStore, Depends(get_author_store)]
