"""
Expense management service.

Creating an expense can also draw quantities from the items of the linked
contract. The insert and every item increment share one transaction: if any
movement is rejected, the expense is not created either.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.contracts.services import consume_items
from apps.expenses.models import Expense, ExpenseStatus
from .exceptions import ExpenseNotFoundError, MissingContractError

logger = logging.getLogger(__name__)


def _normalize_payment(fields: dict) -> dict:
    """Paid expenses get a payment timestamp; pending ones lose it."""
    status = fields.get('status')
    if status == ExpenseStatus.PAID and not fields.get('paid_at'):
        fields['paid_at'] = timezone.now()
    elif status == ExpenseStatus.PENDING:
        fields['paid_at'] = None
    return fields


@transaction.atomic
def create_expense(*, consumed_items: Optional[list] = None, **fields) -> Expense:
    """
    Create an expense, optionally consuming contract items.

    Args:
        consumed_items: ``[{'item_id': ..., 'quantity': ...}]`` drawn from
            the expense's contract
        **fields: Expense model fields

    Returns:
        Created Expense instance

    Raises:
        MissingContractError: If consumed_items is given without a contract
        ContractNotFoundError, ContractItemNotFoundError,
        InvalidQuantityError, InsufficientBalanceError: from the contract
            balance model; nothing is written
    """
    contract = fields.get('contract')
    if consumed_items and contract is None:
        raise MissingContractError("consumed_items requires a contract")

    expense = Expense.objects.create(**_normalize_payment(fields))

    if consumed_items:
        consume_items(contract_id=contract.id, consumed_items=consumed_items)
        logger.info(
            "Expense %s created with %d item movement(s) on contract %s",
            expense.id, len(consumed_items), contract.id
        )

    return expense


@transaction.atomic
def update_expense(*, expense_id: UUID, **fields) -> Expense:
    """
    Update an expense's fields.

    Raises:
        ExpenseNotFoundError: If the expense does not exist
    """
    try:
        expense = Expense.objects.select_for_update().get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError("Expense not found")

    if 'status' in fields and 'paid_at' not in fields and fields['status'] == ExpenseStatus.PAID:
        fields['paid_at'] = expense.paid_at
    for name, value in _normalize_payment(fields).items():
        setattr(expense, name, value)

    expense.save()
    return expense
