"""
Contract balance model.

Tracks how much of each contracted quantity has been consumed, classifies
what is left and accepts consumption movements. All arithmetic is done in
Decimal so the 10% / 30% thresholds compare exactly.

Consumption is clamped at zero when reversing but never clamped at the
contracted quantity when consuming; over-consumption is reported as
``exceeded`` instead of being refused.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.contracts.models import Contract, BalanceStatus
from .exceptions import (
    ContractNotFoundError,
    ContractItemNotFoundError,
    InvalidQuantityError,
    InsufficientBalanceError,
)

logger = logging.getLogger(__name__)

CRITICAL_THRESHOLD = Decimal('0.10')
WARNING_THRESHOLD = Decimal('0.30')

DIRECTION_CONSUME = 'consume'
DIRECTION_REVERSE = 'reverse'
DIRECTIONS = (DIRECTION_CONSUME, DIRECTION_REVERSE)

ZERO = Decimal('0')
CENT = Decimal('0.01')


def to_decimal(value) -> Decimal:
    """
    Convert a stored or submitted number to Decimal.

    Raises:
        InvalidQuantityError: For booleans, non-numeric text, NaN or infinity
    """
    if isinstance(value, bool) or value is None:
        raise InvalidQuantityError(f"Invalid number: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidQuantityError(f"Invalid number: {value!r}")
    if not result.is_finite():
        raise InvalidQuantityError(f"Invalid number: {value!r}")
    return result


def to_json_number(value: Decimal):
    """Store integral values as int, everything else as float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def classify(quantity, consumed) -> str:
    """
    Classify an item's remaining balance.

    A zero contracted quantity is always ``ok``. Otherwise the checks run
    in order: consumed above quantity is ``exceeded``; a remaining fraction
    of at most 10% is ``critical``; at most 30% is ``warning``.
    """
    quantity = to_decimal(quantity)
    consumed = to_decimal(consumed)

    if quantity == 0:
        return BalanceStatus.OK
    if consumed > quantity:
        return BalanceStatus.EXCEEDED

    remaining_fraction = (quantity - consumed) / quantity
    if remaining_fraction <= CRITICAL_THRESHOLD:
        return BalanceStatus.CRITICAL
    if remaining_fraction <= WARNING_THRESHOLD:
        return BalanceStatus.WARNING
    return BalanceStatus.OK


def remaining_of(item: dict) -> Decimal:
    """Raw remaining quantity; negative when the item is over-consumed."""
    return to_decimal(item.get('quantity', 0)) - to_decimal(item.get('consumed') or 0)


def item_balance(item: dict) -> dict:
    """Item dict enriched with remaining quantity, percentage, status and values."""
    quantity = to_decimal(item.get('quantity', 0))
    consumed = to_decimal(item.get('consumed') or 0)
    unit_price = to_decimal(item.get('unit_price', 0))
    remaining = quantity - consumed

    if quantity > 0:
        consumed_percentage = (consumed / quantity * 100).quantize(CENT)
    else:
        consumed_percentage = ZERO

    return {
        **item,
        'consumed': to_json_number(consumed),
        'remaining': to_json_number(remaining),
        'consumed_percentage': to_json_number(consumed_percentage),
        'status': str(classify(quantity, consumed)),
        'contracted_value': to_json_number((quantity * unit_price).quantize(CENT)),
        'consumed_value': to_json_number((consumed * unit_price).quantize(CENT)),
        'remaining_value': to_json_number((max(ZERO, remaining) * unit_price).quantize(CENT)),
    }


def rollups(items: Iterable[dict]) -> dict:
    """
    Financial totals for an item list.

    Returns:
        dict with Decimal ``contracted_value`` (sum of quantity x unit price),
        ``consumed_value`` (sum of consumed x unit price) and
        ``remaining_value`` (sum of max(0, quantity - consumed) x unit price).
    """
    contracted = consumed_total = remaining_total = ZERO
    for item in items:
        quantity = to_decimal(item.get('quantity', 0))
        consumed = to_decimal(item.get('consumed') or 0)
        unit_price = to_decimal(item.get('unit_price', 0))

        contracted += quantity * unit_price
        consumed_total += consumed * unit_price
        remaining_total += max(ZERO, quantity - consumed) * unit_price

    return {
        'contracted_value': contracted,
        'consumed_value': consumed_total,
        'remaining_value': remaining_total,
    }


def contract_balance(contract: Contract) -> dict:
    """Per-item balance view plus contract-wide rollups."""
    items = [item_balance(item) for item in contract.items or []]
    totals = rollups(contract.items or [])
    return {
        'contract_id': str(contract.id),
        'number': contract.number,
        'items': items,
        'contracted_value': to_json_number(totals['contracted_value'].quantize(CENT)),
        'consumed_value': to_json_number(totals['consumed_value'].quantize(CENT)),
        'remaining_value': to_json_number(totals['remaining_value'].quantize(CENT)),
        'has_alerts': any(item['status'] != BalanceStatus.OK for item in items),
    }


def _get_locked_contract(contract_id) -> Contract:
    try:
        return Contract.objects.select_for_update().get(id=contract_id)
    except (Contract.DoesNotExist, ValidationError):
        raise ContractNotFoundError("Contract not found")


def _require_item(contract: Contract, item_id) -> dict:
    item = contract.get_item(item_id)
    if item is None:
        raise ContractItemNotFoundError("Item not found")
    return item


@transaction.atomic
def _update_consumed(
    contract_id: UUID,
    item_id: str,
    compute: Callable[[Decimal], Decimal]
) -> dict:
    """Rewrite the contract's whole item list with one item's consumed changed."""
    contract = _get_locked_contract(contract_id)
    contract.items = [dict(item) for item in contract.items or []]
    item = _require_item(contract, item_id)

    current = to_decimal(item.get('consumed') or 0)
    item['consumed'] = to_json_number(compute(current))

    contract.save(update_fields=['items', 'updated_at'])
    return item


def record_consumption(
    *,
    contract_id: UUID,
    item_id: str,
    amount,
    direction: str = DIRECTION_CONSUME
) -> dict:
    """
    Register a consumption or a reversal on one contract item.

    New consumed = max(0, consumed +/- amount).

    Args:
        contract_id: Contract holding the item
        item_id: Item id within the contract
        amount: Strictly positive quantity
        direction: ``consume`` adds, ``reverse`` subtracts

    Returns:
        The updated item dict

    Raises:
        InvalidQuantityError: If amount is not a positive number or direction is unknown
        ContractNotFoundError: If the contract does not exist
        ContractItemNotFoundError: If the item is not in the contract
    """
    if direction not in DIRECTIONS:
        raise InvalidQuantityError(f"Invalid direction: {direction!r}")

    amount = to_decimal(amount)
    if amount <= 0:
        raise InvalidQuantityError("Amount must be greater than zero")

    sign = 1 if direction == DIRECTION_CONSUME else -1
    item = _update_consumed(
        contract_id,
        item_id,
        lambda current: max(ZERO, current + sign * amount),
    )
    logger.info(
        "Contract %s item %s: %s %s -> consumed %s",
        contract_id, item_id, direction, amount, item['consumed']
    )
    return item


def set_consumed(*, contract_id: UUID, item_id: str, value) -> dict:
    """
    Set an item's consumed quantity to an absolute value.

    Calling it twice with the same value leaves the same stored state.

    Raises:
        InvalidQuantityError: If value is negative or not a finite number
        ContractNotFoundError: If the contract does not exist
        ContractItemNotFoundError: If the item is not in the contract
    """
    value = to_decimal(value)
    if value < 0:
        raise InvalidQuantityError("Consumed quantity cannot be negative")

    item = _update_consumed(contract_id, item_id, lambda current: value)
    logger.info("Contract %s item %s: consumed set to %s", contract_id, item_id, item['consumed'])
    return item


@transaction.atomic
def consume_items(*, contract_id: UUID, consumed_items: list) -> list:
    """
    Apply several consumptions against one contract in a single write.

    Every movement is checked before anything is stored: the item must
    exist, the quantity must be positive and must not exceed what is left
    on the item (counting earlier movements in the same batch).

    Args:
        contract_id: Contract to consume from
        consumed_items: List of ``{'item_id': ..., 'quantity': ...}``

    Returns:
        Updated item dicts, in the order given

    Raises:
        ContractNotFoundError, ContractItemNotFoundError,
        InvalidQuantityError, InsufficientBalanceError
    """
    contract = _get_locked_contract(contract_id)
    contract.items = [dict(item) for item in contract.items or []]
    touched = []

    for movement in consumed_items:
        item = _require_item(contract, movement['item_id'])
        quantity = to_decimal(movement['quantity'])
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be greater than zero")

        available = remaining_of(item)
        if quantity > available:
            raise InsufficientBalanceError(
                f"Quantity {quantity} exceeds remaining balance "
                f"{max(ZERO, available)} for item '{item.get('description', item['id'])}'"
            )

        item['consumed'] = to_json_number(to_decimal(item.get('consumed') or 0) + quantity)
        touched.append(item)

    contract.save(update_fields=['items', 'updated_at'])
    return touched
