"""Fixtures shared by every app: role-scoped users and JWT clients."""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an administrator."""
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        name='Admin User',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def finance_user(db):
    """Create and return a finance manager."""
    return User.objects.create_user(
        email='finance@example.com',
        password='TestPass123!',
        name='Finance Manager',
        role=UserRole.FINANCE_MANAGER,
    )


@pytest.fixture
def viewer_user(db):
    """Create and return a read-only user."""
    return User.objects.create_user(
        email='viewer@example.com',
        password='TestPass123!',
        name='Viewer User',
        role=UserRole.VIEWER,
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as admin using JWT."""
    return _authenticate(APIClient(), admin_user)


@pytest.fixture
def finance_client(finance_user):
    """Return an API client authenticated as finance manager."""
    return _authenticate(APIClient(), finance_user)


@pytest.fixture
def viewer_client(viewer_user):
    """Return an API client authenticated as viewer."""
    return _authenticate(APIClient(), viewer_user)
