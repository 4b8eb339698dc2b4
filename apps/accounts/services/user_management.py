"""Administrative user management."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import DuplicateEmailError, LastUserError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    name: Optional[str] = None,
    email: Optional[str] = None,
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
    password: Optional[str] = None
) -> User:
    """
    Update another user's account.

    Only the supplied fields change. The password is replaced only
    when a non-blank value is given.

    Raises:
        UserNotFoundError: If user does not exist
        DuplicateEmailError: If the new email belongs to someone else
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    update_fields = []

    if email is not None:
        email = User.objects.normalize_email(email)
        taken = User.objects.filter(email__iexact=email).exclude(id=user.id).exists()
        if taken:
            raise DuplicateEmailError("Email already registered")
        user.email = email
        update_fields.append('email')

    if name is not None:
        user.name = name
        update_fields.append('name')

    if role is not None:
        user.role = role
        update_fields.append('role')

    if is_active is not None:
        user.is_active = is_active
        update_fields.append('is_active')

    if password and password.strip():
        user.set_password(password)
        update_fields.append('password')

    if update_fields:
        user.save(update_fields=update_fields)

    return user


@transaction.atomic
def delete_user(*, user_id: UUID) -> None:
    """
    Delete a user account.

    Raises:
        UserNotFoundError: If user does not exist
        LastUserError: If it is the only account left
    """
    # Lock all rows so two concurrent deletes cannot empty the table
    users = list(User.objects.select_for_update().values_list('id', flat=True))
    if user_id not in users:
        raise UserNotFoundError("User not found")
    if len(users) <= 1:
        raise LastUserError("Cannot delete the only user")

    User.objects.filter(id=user_id).delete()
    logger.info("Deleted user %s", user_id)
