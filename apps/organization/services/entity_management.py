"""
Entity (organization profile) service.

The entity is a singleton: creating a second one is a conflict.
"""

import json
import logging
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.organization.models import Entity
from .exceptions import EntityAlreadyExistsError, EntityNotFoundError, PayloadTooLargeError

logger = logging.getLogger(__name__)


def check_payload_size(data) -> None:
    """
    Reject bodies whose JSON encoding exceeds ENTITY_MAX_PAYLOAD_BYTES.

    Raises:
        PayloadTooLargeError
    """
    size = len(json.dumps(data, default=str, separators=(',', ':'), ensure_ascii=False))
    if size > settings.ENTITY_MAX_PAYLOAD_BYTES:
        logger.warning("Entity payload rejected: %d bytes", size)
        raise PayloadTooLargeError()


def get_entity() -> Optional[Entity]:
    """The registered entity, or None."""
    return Entity.objects.order_by('created_at').first()


@transaction.atomic
def create_entity(**fields) -> Entity:
    """
    Register the organization profile.

    Raises:
        EntityAlreadyExistsError: If an entity already exists
    """
    if Entity.objects.select_for_update().exists():
        raise EntityAlreadyExistsError()
    entity = Entity.objects.create(**fields)
    logger.info("Entity registered: %s", entity.name)
    return entity


@transaction.atomic
def update_entity(*, entity_id: UUID, **fields) -> Entity:
    """
    Update the entity's fields.

    Raises:
        EntityNotFoundError: If the entity does not exist
    """
    try:
        entity = Entity.objects.select_for_update().get(id=entity_id)
    except (Entity.DoesNotExist, ValidationError):
        raise EntityNotFoundError("Entity not found")

    for name, value in fields.items():
        setattr(entity, name, value)
    entity.save()
    return entity
