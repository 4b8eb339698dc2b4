"""Service layer tests for accounts."""

import pytest
from uuid import uuid4

from apps.accounts.models import User, UserRole
from apps.accounts.services import (
    register_user,
    authenticate_user,
    update_user,
    delete_user,
)
from apps.accounts.services.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    LastUserError,
)


@pytest.mark.django_db
class TestRegisterUser:

    def test_password_is_hashed(self):
        user = register_user(email='a@example.com', password='SecurePass123!', name='A')

        assert user.password != 'SecurePass123!'
        assert user.check_password('SecurePass123!')

    def test_role_ignored_for_non_admin_creator(self, admin_user, viewer_user):
        user = register_user(
            email='b@example.com',
            password='SecurePass123!',
            role=UserRole.ADMIN,
            created_by=viewer_user,
        )

        assert user.role == UserRole.VIEWER

    def test_duplicate_email_is_case_insensitive(self, admin_user):
        with pytest.raises(DuplicateEmailError):
            register_user(email='ADMIN@example.com', password='SecurePass123!')


@pytest.mark.django_db
class TestAuthenticateUser:

    def test_valid_credentials(self, finance_user):
        user = authenticate_user(email=finance_user.email, password='TestPass123!')

        assert user == finance_user
        assert user.last_login is not None

    def test_invalid_password(self, finance_user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=finance_user.email, password='nope')

    def test_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')


@pytest.mark.django_db
class TestUserManagement:

    def test_update_only_given_fields(self, viewer_user):
        user = update_user(user_id=viewer_user.id, name='New Name')

        assert user.name == 'New Name'
        assert user.email == 'viewer@example.com'
        assert user.role == UserRole.VIEWER

    def test_update_missing_user(self):
        with pytest.raises(UserNotFoundError):
            update_user(user_id=uuid4(), name='Ghost')

    def test_delete_last_user(self, admin_user):
        with pytest.raises(LastUserError):
            delete_user(user_id=admin_user.id)

    def test_delete_missing_user(self, admin_user):
        with pytest.raises(UserNotFoundError):
            delete_user(user_id=uuid4())

    def test_delete_when_others_exist(self, admin_user, viewer_user):
        delete_user(user_id=admin_user.id)

        assert list(User.objects.all()) == [viewer_user]
