"""Services for the organization profile and application settings."""

from .exceptions import (
    OrganizationServiceError,
    EntityNotFoundError,
    UnknownSettingError,
    EntityAlreadyExistsError,
    PayloadTooLargeError,
)
from .entity_management import check_payload_size, get_entity, create_entity, update_entity
from .app_settings import RECOGNIZED_KEYS, check_setting_keys, get_app_settings, update_app_settings

__all__ = [
    # Exceptions
    'OrganizationServiceError',
    'EntityNotFoundError',
    'UnknownSettingError',
    'EntityAlreadyExistsError',
    'PayloadTooLargeError',
    # Entity
    'check_payload_size',
    'get_entity',
    'create_entity',
    'update_entity',
    # Settings
    'RECOGNIZED_KEYS',
    'check_setting_keys',
    'get_app_settings',
    'update_app_settings',
]
