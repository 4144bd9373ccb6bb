"""
Builders for alert headers sent alongside API responses.

Alert headers carry success/failure signals for client-side notifications,
separate from the response body. Header names are prefixed with the
configured application name:

- ``X-<app>-alert``: translation key of a success message
- ``X-<app>-error``: translation key of a failure
- ``X-<app>-params``: message parameter (entity id, or entity kind on failure)

Example:
    >>> create_entity_creation_alert("author", "1")
    {'X-authorApp-alert': 'authorApp.author.created', 'X-authorApp-params': '1'}
"""

from author_api.logging import logger
from author_api.settings import app_settings


def create_alert(message: str, param: str) -> dict[str, str]:
    """
    Build a success alert.

    Args:
        message: Translation key or message shown to the user.
        param: Parameter interpolated into the message.

    Returns:
        Alert headers.
    """
    app_name = app_settings.APP_NAME
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{app_settings.APP_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{app_settings.APP_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{app_settings.APP_NAME}.{entity_name}.deleted", param)


def create_failure_alert(
    entity_name: str, error_key: str, default_message: str
) -> dict[str, str]:
    """
    Build a failure alert and log the human-readable message.

    Args:
        entity_name: Entity kind the failure refers to.
        error_key: Machine-readable failure code.
        default_message: Human-readable description, logged only.

    Returns:
        Alert headers.
    """
    logger.error(f"Entity processing failed, {default_message}")

    app_name = app_settings.APP_NAME
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
