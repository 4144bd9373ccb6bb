"""
Error handler decorator for HTTP endpoints.

Converts AppException instances raised by commands into HTTP responses,
eliminating duplicate try/except blocks in endpoints.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException, Response

from author_api.exceptions import AppException, BadRequestAlertError
from author_api.logging import logger
from author_api.utils.header_util import create_failure_alert


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException into responses.

    - BadRequestAlertError becomes an empty-body response carrying failure
      alert headers.
    - Any other AppException becomes an HTTPException with its status.
    - Everything else (e.g. store failures) propagates unchanged.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.post("/authors")
        @handle_http_errors
        async def create_author(author: AuthorIn, store: AuthorStoreDep):
            return await CreateAuthorCommand(store).execute(author.to_entity())
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except BadRequestAlertError as ex:
            logger.warning(
                f"Rejected request in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            return Response(
                status_code=ex.http_status,
                headers=create_failure_alert(
                    ex.entity_name, ex.error_key, ex.message
                ),
            )
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            )

    return wrapper
