from typing import Any

from fastapi.security.utils import get_authorization_scheme_param
from jwcrypto.common import JWException
from jwcrypto.jwt import JWTExpired
from keycloak.exceptions import KeycloakAuthenticationError
from starlette.authentication import AuthCredentials, AuthenticationBackend
from starlette.requests import HTTPConnection
from starlette.responses import JSONResponse

from author_api.exceptions import AuthenticationError
from author_api.logging import logger
from author_api.managers.keycloak_manager import get_keycloak_manager
from author_api.schemas.user import UserModel
from author_api.settings import app_settings


class AuthBackend(AuthenticationBackend):  # type: ignore[misc]
    """
    Authentication backend resolving bearer tokens against Keycloak.

    The authentication process involves:
    1. Extracting the access token from the Authorization header
    2. Decoding and validating the token using KeycloakManager
    3. Creating a UserModel from the decoded token data
    4. Returning authentication credentials (client roles) and the user

    Requests to excluded paths, or without a bearer token, stay anonymous;
    endpoints that need a user reject them through `require_authenticated`.

    Raises:
        AuthenticationError: When a supplied token is rejected:
            - Expired JWT tokens (reason='token_expired')
            - Invalid Keycloak credentials (reason='invalid_credentials')
            - Token decoding errors (reason='token_decode_error')
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.excluded_paths = app_settings.EXCLUDED_PATHS

    async def authenticate(
        self, conn: HTTPConnection
    ) -> tuple[AuthCredentials, UserModel] | None:
        """
        Authenticate a request by decoding its bearer token.

        Args:
            conn: The incoming HTTP connection.

        Returns:
            Tuple of (AuthCredentials, UserModel) on success, None for
            excluded paths and requests carrying no token.

        Raises:
            AuthenticationError: When authentication fails with specific reason codes
        """
        if self.excluded_paths.match(conn.url.path):
            return None

        kc_manager = get_keycloak_manager()

        try:
            # Debug mode: bypass token validation (ONLY for development)
            if app_settings.DEBUG_AUTH:
                logger.warning(
                    "DEBUG_AUTH is enabled - using debug credentials. "
                    "NEVER enable this in production!"
                )
                token = await kc_manager.login_async(
                    app_settings.DEBUG_AUTH_USERNAME,
                    app_settings.DEBUG_AUTH_PASSWORD,
                )
                access_token = token["access_token"]
            else:
                _, access_token = get_authorization_scheme_param(
                    conn.headers.get("authorization", "")
                )

            if not access_token:
                return None

            user_data = await kc_manager.decode_token(access_token)
            user: UserModel = UserModel(**user_data)

            return AuthCredentials(user.roles), user

        except JWTExpired as ex:
            logger.error(f"JWT token expired: {ex}")
            raise AuthenticationError("token_expired", str(ex))

        except KeycloakAuthenticationError as ex:
            logger.error(f"Invalid credentials: {ex}")
            raise AuthenticationError("invalid_credentials", str(ex))

        except (JWException, ValueError) as ex:
            logger.error(f"Error occurred while decode auth token: {ex}")
            raise AuthenticationError("token_decode_error", str(ex))


def on_auth_error(conn: HTTPConnection, exc: Exception) -> JSONResponse:
    """
    Render authentication failures raised by AuthBackend as 401 responses.

    Args:
        conn: The rejected HTTP connection.
        exc: The exception raised while authenticating.

    Returns:
        JSONResponse with status 401 and the failure reason.
    """
    reason = getattr(exc, "reason", "authentication_failed")
    return JSONResponse(
        {"detail": str(exc), "reason": reason},
        status_code=401,
        headers={"WWW-Authenticate": "Bearer"},
    )
