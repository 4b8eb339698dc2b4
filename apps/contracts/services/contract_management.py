"""
Contract management service.

Handles contract creation and wholesale updates. The item list is always
replaced as a whole: items without an id get one, items without a consumed
quantity start at zero.
"""

import uuid
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.contracts.models import Contract
from .balance import to_decimal, to_json_number
from .exceptions import ContractNotFoundError, DuplicateItemError, InvalidQuantityError

NUMERIC_ITEM_FIELDS = ('quantity', 'unit_price', 'consumed')


def build_items(items: list) -> list:
    """
    Turn validated item input into the stored JSON representation.

    Raises:
        DuplicateItemError: If two items share an id
        InvalidQuantityError: If a numeric field is negative or not a number
    """
    stored = []
    seen = set()
    for raw in items or []:
        item_id = str(raw.get('id') or uuid.uuid4())
        if item_id in seen:
            raise DuplicateItemError(f"Duplicate item id: {item_id}")
        seen.add(item_id)

        item = {
            'id': item_id,
            'catalog_item_id': str(raw['catalog_item_id']) if raw.get('catalog_item_id') else None,
            'description': raw.get('description', ''),
            'unit': raw.get('unit') or 'un',
        }
        for field in NUMERIC_ITEM_FIELDS:
            value = to_decimal(raw.get(field) or 0)
            if value < 0:
                raise InvalidQuantityError(f"{field} cannot be negative")
            item[field] = to_json_number(value)
        stored.append(item)
    return stored


@transaction.atomic
def create_contract(*, items: Optional[list] = None, **fields) -> Contract:
    """
    Create a contract with its initial item list.

    Args:
        items: Item dicts (id optional, consumed defaults to 0)
        **fields: Contract model fields (number, description, creditor, ...)

    Returns:
        Created Contract instance
    """
    return Contract.objects.create(items=build_items(items or []), **fields)


@transaction.atomic
def update_contract(
    *,
    contract_id: UUID,
    items: Optional[list] = None,
    **fields
) -> Contract:
    """
    Update a contract. When ``items`` is given the whole list is replaced.

    Raises:
        ContractNotFoundError: If the contract does not exist
    """
    try:
        contract = Contract.objects.select_for_update().get(id=contract_id)
    except (Contract.DoesNotExist, ValidationError):
        raise ContractNotFoundError("Contract not found")

    for name, value in fields.items():
        setattr(contract, name, value)
    if items is not None:
        contract.items = build_items(items)

    contract.save()
    return contract
