from functools import lru_cache
from typing import Any

from keycloak import KeycloakOpenID

from author_api.settings import app_settings


class KeycloakManager:
    """
    Manager for Keycloak authentication operations.

    Provides OpenID Connect token login and decoding using the native async
    methods of the python-keycloak library. A single shared instance is
    handed out by `get_keycloak_manager()`.
    """

    def __init__(self) -> None:
        """
        Initialize the KeycloakOpenID client for OpenID Connect operations.
        """
        self.openid = KeycloakOpenID(
            server_url=f"{app_settings.KEYCLOAK_BASE_URL}/",
            client_id=app_settings.KEYCLOAK_CLIENT_ID,
            realm_name=app_settings.KEYCLOAK_REALM,
        )

    async def login_async(
        self, username: str, password: str
    ) -> dict[str, Any]:
        """
        Authenticate a user asynchronously and obtain tokens.

        Args:
            username: The username of the user to authenticate.
            password: The password of the user to authenticate.

        Returns:
            Token dictionary containing access_token, refresh_token,
            expires_in, etc.

        Raises:
            KeycloakAuthenticationError: If authentication fails.
        """
        return await self.openid.a_token(username=username, password=password)

    async def decode_token(self, access_token: str) -> dict[str, Any]:
        """
        Validate an access token and return its claims.

        Args:
            access_token: Raw bearer token.

        Returns:
            Decoded token claims (sub, exp, azp, resource_access, ...).

        Raises:
            JWTExpired: If the token is expired.
            ValueError: If the token cannot be decoded.
        """
        return await self.openid.a_decode_token(access_token)


@lru_cache
def get_keycloak_manager() -> KeycloakManager:
    """
    Get cached Keycloak manager instance.

    Uses @lru_cache to provide singleton-like behavior while maintaining
    testability. Tests patch `author_api.auth.get_keycloak_manager`.

    Returns:
        Cached KeycloakManager instance.
    """
    return KeycloakManager()
