"""
Domain-specific exceptions for contracts app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ContractsServiceError(Exception):
    """Base exception for all contracts service errors."""
    pass


class ContractNotFoundError(ContractsServiceError):
    """Raised when a contract does not exist."""
    pass


class ContractItemNotFoundError(ContractsServiceError):
    """Raised when an item id is not part of the contract."""
    pass


class InvalidQuantityError(ContractsServiceError):
    """Raised when a quantity or amount is negative, zero where forbidden, or not a number."""
    pass


class DuplicateItemError(ContractsServiceError):
    """Raised when two items in one contract share an id."""
    pass


class InsufficientBalanceError(ContractsServiceError):
    """Raised when a consumption exceeds the item's remaining balance."""
    pass
