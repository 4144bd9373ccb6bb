from starlette.requests import HTTPConnection

from author_api.logging import logger


class RequestAccessContext:
    """
    AccessContext backed by the authenticated Starlette request.

    Role membership is read from `request.auth.scopes`, which AuthBackend
    fills with the caller's Keycloak client roles. The user id is the token
    subject. Anonymous requests hold no roles and no id.
    """

    def __init__(self, conn: HTTPConnection):
        """
        Initialize the access context for one request.

        Args:
            conn: The incoming request (or any HTTP connection).
        """
        self.conn = conn

    def _is_authenticated(self) -> bool:
        return "user" in self.conn.scope and self.conn.user.is_authenticated

    def current_user_has_role(self, role: str) -> bool:
        """
        Check whether the caller holds a role.

        Args:
            role: Role name to look for.

        Returns:
            True if the caller is authenticated and holds the role.
        """
        if not self._is_authenticated():
            return False

        has_role = role in self.conn.auth.scopes
        if not has_role:
            logger.debug(
                f"User {self.conn.user.display_name} does not hold role "
                f"{role}. User roles: {self.conn.auth.scopes}"
            )

        return has_role

    def current_user_id(self) -> str | None:
        """
        Get the caller's user id.

        Returns:
            The Keycloak subject id, or None for an anonymous caller.
        """
        if not self._is_authenticated():
            return None

        return self.conn.user.identity
