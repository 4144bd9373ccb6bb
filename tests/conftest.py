"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for authentication, the author store
and a minimal FastAPI application around the author endpoints.
"""

import os

import pytest

# Set required environment variables for testing before importing app modules
os.environ.setdefault("KEYCLOAK_REALM", "test-realm")
os.environ.setdefault("KEYCLOAK_CLIENT_ID", "test-client")
os.environ.setdefault("KEYCLOAK_BASE_URL", "http://localhost:8080/")

# Database credentials (required, no hardcoded defaults)
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")

# Keep test runs from writing log files
os.environ.setdefault("LOG_FILE_PATH", os.devnull)


@pytest.fixture
def mock_user_data():
    """
    Provides mock decoded user data from Keycloak token.

    Returns:
        dict: Mock user data with client roles and claims
    """
    return {
        "sub": "f86caf01-69b4-4892-ba2d-ffa58fdd5dab",
        "preferred_username": "testuser",
        "email": "testuser@example.com",
        "exp": 9999999999,
        "azp": "test-client",
        "realm_access": {"roles": ["offline_access", "uma_authorization"]},
        "resource_access": {"test-client": {"roles": ["user"]}},
    }


@pytest.fixture
def admin_user_data():
    """
    Provides mock admin user data with elevated privileges.

    Returns:
        dict: Mock admin user data
    """
    return {
        "sub": "admin-user-id",
        "preferred_username": "admin",
        "email": "admin@example.com",
        "exp": 9999999999,
        "azp": "test-client",
        "realm_access": {"roles": ["offline_access", "admin"]},
        "resource_access": {"test-client": {"roles": ["admin", "user"]}},
    }


@pytest.fixture
def mock_user(mock_user_data):
    """
    Provides a UserModel instance for testing.

    Returns:
        UserModel: Mock user instance
    """
    from author_api.schemas.user import UserModel

    return UserModel(**mock_user_data)


@pytest.fixture
def mock_author_store():
    """
    Provides a mocked AuthorStore.

    Returns:
        AsyncMock: Store with every method stubbed
    """
    from tests.mocks.repository_mocks import create_mock_author_store

    return create_mock_author_store()


@pytest.fixture
def user_access():
    """Access context of a regular user owning authors as "user-1"."""
    from tests.mocks.auth_mocks import FakeAccessContext

    return FakeAccessContext(user_id="user-1", roles={"user"})


@pytest.fixture
def admin_access():
    """Access context of an administrator."""
    from tests.mocks.auth_mocks import FakeAccessContext

    return FakeAccessContext(user_id="admin-1", roles={"admin", "user"})


@pytest.fixture
def author_app(user_access):
    """
    Author app acting as a regular user, backed by an in-memory store.

    Returns:
        tuple[FastAPI, FakeAuthorStore]
    """
    from tests.mocks.app_mocks import build_author_app

    return build_author_app(user_access)


@pytest.fixture
def client(author_app):
    """
    Test client for the author app.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from fastapi.testclient import TestClient

    app, _ = author_app
    return TestClient(app)


@pytest.fixture
def store(author_app):
    """The in-memory store behind `client`."""
    _, store = author_app
    return store
