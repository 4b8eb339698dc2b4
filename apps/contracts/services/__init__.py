"""Services for contracts business logic."""

from .exceptions import (
    ContractsServiceError,
    ContractNotFoundError,
    ContractItemNotFoundError,
    InvalidQuantityError,
    DuplicateItemError,
    InsufficientBalanceError,
)
from .balance import (
    classify,
    item_balance,
    rollups,
    contract_balance,
    record_consumption,
    set_consumed,
    consume_items,
    DIRECTION_CONSUME,
    DIRECTION_REVERSE,
)
from .alerts import (
    alerts_for_contract,
    deadline_alerts,
    balance_alerts,
    ALERT_NEW_CONTRACT,
    ALERT_ADDITIVE,
)
from .contract_management import create_contract, update_contract, build_items

__all__ = [
    # Exceptions
    'ContractsServiceError',
    'ContractNotFoundError',
    'ContractItemNotFoundError',
    'InvalidQuantityError',
    'DuplicateItemError',
    'InsufficientBalanceError',
    # Balance model
    'classify',
    'item_balance',
    'rollups',
    'contract_balance',
    'record_consumption',
    'set_consumed',
    'consume_items',
    'DIRECTION_CONSUME',
    'DIRECTION_REVERSE',
    # Alerts
    'alerts_for_contract',
    'deadline_alerts',
    'balance_alerts',
    'ALERT_NEW_CONTRACT',
    'ALERT_ADDITIVE',
    # Management
    'create_contract',
    'update_contract',
    'build_items',
]
