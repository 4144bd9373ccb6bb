"""
Custom exception classes for the application.

Each exception carries the HTTP status code it maps to, so endpoint
decorators can translate it without per-handler try/except blocks.
"""

from starlette.authentication import (
    AuthenticationError as StarletteAuthenticationError,
)


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when client supplied data violates a precondition. Never retried.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class BadRequestAlertError(ValidationError):
    """
    Validation failure reported to the client through alert headers.

    The response carries no body; the entity kind and error key travel in
    the failure alert headers instead.

    HTTP Status: 400 Bad Request

    Attributes:
        entity_name: Entity kind the failure refers to (e.g. "author").
        error_key: Machine-readable failure code (e.g. "idexists").
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message)
        self.entity_name = entity_name
        self.error_key = error_key


class AuthenticationError(AppException, StarletteAuthenticationError):
    """
    Authentication failed.

    Raised when the bearer token cannot be turned into a user (expired token,
    invalid credentials, undecodable token). Subclasses Starlette's
    AuthenticationError so AuthenticationMiddleware hands it to on_error.

    HTTP Status: 401 Unauthorized

    Attributes:
        reason: Machine-readable error code (e.g. 'token_expired').
        detail: Human-readable error details.
    """

    http_status = 401

    def __init__(self, reason: str, detail: str) -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}")
