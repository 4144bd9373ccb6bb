"""
Author endpoints.

Business logic lives in `author_api.commands.author_commands`; these
endpoints map command results onto status codes, the Location header and
alert headers. Store and access context are injected, so tests swap them
through `app.dependency_overrides`.
"""

from fastapi import APIRouter, Depends, Response, status

from author_api.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorsCommand,
    UpdateAuthorCommand,
)
from author_api.constants import AUTHOR_ENTITY_NAME
from author_api.dependencies import AccessDep, AuthorStoreDep
from author_api.dependencies.permissions import require_authenticated
from author_api.logging import logger
from author_api.models.author import Author
from author_api.schemas.author import AuthorIn, AuthorRead
from author_api.settings import app_settings
from author_api.utils.error_handler import handle_http_errors
from author_api.utils.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)

RESOURCE_PATH = f"{app_settings.API_PREFIX}/authors"

router = APIRouter(
    prefix=RESOURCE_PATH,
    tags=["authors"],
    dependencies=[Depends(require_authenticated)],
)


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={400: {"description": "The author already has an ID"}},
)
@handle_http_errors
async def create_author(
    author: AuthorIn,
    store: AuthorStoreDep,
    response: Response,
) -> Author:
    """
    Create a new author.

    Returns 201 with the persisted author, a Location header pointing at
    it and a creation alert. Returns 400 with an empty body and a failure
    alert if the payload already carries an id.

    Example:
        POST /api/authors
        {
            "name": "John Doe"
        }
    """
    logger.debug(f"REST request to save Author : {author}")

    result = await CreateAuthorCommand(store).execute(author.to_entity())

    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{RESOURCE_PATH}/{result.id}"
    response.headers.update(
        create_entity_creation_alert(AUTHOR_ENTITY_NAME, str(result.id))
    )
    return result


@router.put(
    "",
    response_model=AuthorRead,
    summary="Update an author",
    responses={
        201: {"description": "No ID supplied, the author was created"},
        400: {"description": "The author is not valid"},
    },
)
@handle_http_errors
async def update_author(
    author: AuthorIn,
    store: AuthorStoreDep,
    response: Response,
) -> Author | Response:
    """
    Replace an existing author.

    A payload without an id is handed to `create_author` unchanged, so PUT
    then answers exactly like POST (201 and creation alert, or 400).

    Example:
        PUT /api/authors
        {
            "id": 1,
            "name": "Jane Doe"
        }
    """
    logger.debug(f"REST request to update Author : {author}")

    if author.id is None:
        return await create_author(author=author, store=store, response=response)

    result = await UpdateAuthorCommand(store).execute(author.to_entity())

    response.headers.update(
        create_entity_update_alert(AUTHOR_ENTITY_NAME, str(author.id))
    )
    return result


@router.get(
    "",
    response_model=list[AuthorRead],
    summary="Get all authors visible to the caller",
)
async def get_all_authors(
    store: AuthorStoreDep,
    access: AccessDep,
) -> list[Author]:
    """
    List authors.

    Callers holding the admin role get every author; other callers get
    the authors they own.
    """
    logger.debug("REST request to get all Authors")

    return await GetAuthorsCommand(store, access).execute()


@router.get(
    "/{id}",
    response_model=AuthorRead,
    summary="Get an author",
    responses={404: {"description": "Author not found"}},
)
async def get_author(
    id: int,
    store: AuthorStoreDep,
) -> Author | Response:
    """
    Get the author with the given id, or 404 with an empty body.
    """
    logger.debug(f"REST request to get Author : {id}")

    author = await GetAuthorCommand(store).execute(id)
    if author is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return author


@router.delete(
    "/{id}",
    summary="Delete an author",
    response_class=Response,
)
async def delete_author(
    id: int,
    store: AuthorStoreDep,
) -> Response:
    """
    Delete the author with the given id.

    Always answers 200 with a deletion alert; whether the id existed is
    not checked.
    """
    logger.debug(f"REST request to delete Author : {id}")

    await DeleteAuthorCommand(store).execute(id)

    return Response(
        status_code=status.HTTP_200_OK,
        headers=create_entity_deletion_alert(AUTHOR_ENTITY_NAME, str(id)),
    )
