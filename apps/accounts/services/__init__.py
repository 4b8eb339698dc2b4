"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    LastUserError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .user_management import update_user, delete_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'LastUserError',
    # Services
    'register_user',
    'authenticate_user',
    'update_user',
    'delete_user',
]
