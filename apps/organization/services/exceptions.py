"""
Exceptions for organization services.

Conditions that map straight to an HTTP status are APIException
subclasses; the rest are plain domain errors handled in views.
"""
from rest_framework.exceptions import APIException


class OrganizationServiceError(Exception):
    """Base exception for organization service errors."""
    pass


class EntityNotFoundError(OrganizationServiceError):
    """Raised when the entity does not exist."""
    pass


class UnknownSettingError(OrganizationServiceError):
    """Raised when a settings update names keys that are not recognized."""

    def __init__(self, keys):
        self.keys = sorted(keys)
        super().__init__(f"Unknown settings: {', '.join(self.keys)}")


class EntityAlreadyExistsError(APIException):
    """Only one entity may be registered."""
    status_code = 409
    default_detail = 'An entity is already registered.'
    default_code = 'entity_exists'


class PayloadTooLargeError(APIException):
    """Request body exceeds the allowed size."""
    status_code = 413
    default_detail = 'Images too large. Reduce the image size and try again.'
    default_code = 'payload_too_large'
