"""
FastAPI dependencies for access control on HTTP endpoints.
"""

from fastapi import HTTPException, Request, status

from author_api.logging import logger


async def require_authenticated(request: Request) -> None:
    """
    Dependency that rejects anonymous callers.

    AuthBackend leaves requests without a bearer token anonymous; endpoints
    under the API prefix use this dependency to turn them away.

    Args:
        request: The incoming HTTP request containing user information.

    Raises:
        HTTPException: 401 if the caller is not authenticated.

    Example:
        ```python
        router = APIRouter(dependencies=[Depends(require_authenticated)])
        ```
    """
    if "user" not in request.scope or not request.user.is_authenticated:
        logger.debug(
            f"Anonymous request to {request.method} {request.url.path} rejected"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
