import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_first_user_becomes_admin(self, api_client):
        """The very first account is an administrator."""
        url = reverse('users:register')
        data = {
            'name': 'First User',
            'email': 'first@example.com',
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['role'] == UserRole.ADMIN
        assert 'password' not in response.data['user']

    def test_later_self_registration_is_viewer(self, api_client, admin_user):
        """Anonymous registrations after the first are viewers, whatever they ask."""
        url = reverse('users:register')
        data = {
            'name': 'Someone',
            'email': 'someone@example.com',
            'password': 'SecurePass123!',
            'role': UserRole.ADMIN,
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['role'] == UserRole.VIEWER

    def test_admin_can_choose_role(self, admin_client):
        url = reverse('users:register')
        data = {
            'name': 'Budget Officer',
            'email': 'budget@example.com',
            'password': 'SecurePass123!',
            'role': UserRole.FINANCE_MANAGER,
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='budget@example.com').role == UserRole.FINANCE_MANAGER

    def test_register_duplicate_email(self, api_client, admin_user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'name': 'Copy',
            'email': admin_user.email,
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'error' in response.data

    def test_register_missing_fields(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'email': 'x@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data
        assert 'password' in response.data

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'name': 'Weak',
            'email': 'weak@example.com',
            'password': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, finance_user):
        url = reverse('users:login')
        data = {
            'email': finance_user.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == finance_user.email
        assert response.data['user']['role'] == UserRole.FINANCE_MANAGER

        finance_user.refresh_from_db()
        assert finance_user.last_login is not None

    def test_login_missing_fields(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'admin@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_login_wrong_password(self, api_client, finance_user):
        url = reverse('users:login')
        data = {
            'email': finance_user.email,
            'password': 'WrongPassword123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_nonexistent_user(self, api_client):
        url = reverse('users:login')
        data = {
            'email': 'nonexistent@example.com',
            'password': 'SomePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        """Deactivated accounts get 403, not 401."""
        url = reverse('users:login')
        data = {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_refresh_token(self, api_client, finance_user):
        refresh = RefreshToken.for_user(finance_user)
        url = reverse('token_refresh')
        response = api_client.post(url, {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, viewer_client, viewer_user):
        url = reverse('users:current-user')
        response = viewer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == viewer_user.email
        assert response.data['role'] == UserRole.VIEWER

    def test_requires_authentication(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# User Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestUserAdministration:
    """Tests for /api/auth/users/"""

    def test_admin_lists_users(self, admin_client, finance_user, viewer_user):
        url = reverse('users:user-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        emails = {u['email'] for u in response.data}
        assert emails == {'admin@example.com', finance_user.email, viewer_user.email}

    def test_non_admin_cannot_list_users(self, finance_client):
        url = reverse('users:user-list')
        response = finance_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_user_role(self, admin_client, viewer_user):
        url = reverse('users:user-detail', kwargs={'pk': viewer_user.id})
        response = admin_client.patch(url, {'role': UserRole.FINANCE_MANAGER}, format='json')

        assert response.status_code == status.HTTP_200_OK
        viewer_user.refresh_from_db()
        assert viewer_user.role == UserRole.FINANCE_MANAGER

    def test_blank_password_keeps_old_one(self, admin_client, viewer_user):
        url = reverse('users:user-detail', kwargs={'pk': viewer_user.id})
        response = admin_client.put(url, {
            'name': 'Renamed',
            'email': viewer_user.email,
            'role': UserRole.VIEWER,
            'password': '',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        viewer_user.refresh_from_db()
        assert viewer_user.name == 'Renamed'
        assert viewer_user.check_password('TestPass123!')

    def test_update_password(self, admin_client, viewer_user):
        url = reverse('users:user-detail', kwargs={'pk': viewer_user.id})
        response = admin_client.patch(url, {'password': 'BrandNewPass456!'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        viewer_user.refresh_from_db()
        assert viewer_user.check_password('BrandNewPass456!')

    def test_update_duplicate_email(self, admin_client, admin_user, viewer_user):
        url = reverse('users:user-detail', kwargs={'pk': viewer_user.id})
        response = admin_client.patch(url, {'email': admin_user.email}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_update_unknown_user(self, admin_client):
        url = reverse('users:user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.patch(url, {'name': 'Ghost'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_user(self, admin_client, viewer_user):
        url = reverse('users:user-detail', kwargs={'pk': viewer_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=viewer_user.id).exists()

    def test_cannot_delete_only_user(self, admin_client, admin_user):
        url = reverse('users:user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=admin_user.id).exists()

    def test_viewer_cannot_delete(self, viewer_client, finance_user):
        url = reverse('users:user-detail', kwargs={'pk': finance_user.id})
        response = viewer_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/ under the test configuration."""

    def test_plain_http_is_served(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'ok'

    def test_ssl_redirect_disabled(self, settings):
        assert settings.SECURE_SSL_REDIRECT is False
