"""User registration service."""

import logging
from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from .exceptions import DuplicateEmailError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    name: str = "",
    role: Optional[str] = None,
    created_by: Optional[User] = None
) -> User:
    """
    Register a new user.

    The very first account becomes an administrator. Later
    self-registrations are viewers; an authenticated administrator
    may pick the role of the account being created.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        name: Optional full name
        role: Requested role (honoured only for admin creators)
        created_by: Authenticated user performing the registration

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError("Email already registered")

    if not User.objects.exists():
        assigned_role = UserRole.ADMIN
    elif created_by is not None and created_by.is_admin and role:
        assigned_role = role
    else:
        assigned_role = UserRole.VIEWER

    user = User.objects.create_user(
        email=email,
        password=password,
        name=name,
        role=assigned_role,
    )
    logger.info("Registered user %s with role %s", user.email, user.role)
    return user
