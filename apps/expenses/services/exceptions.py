"""Custom exceptions for expenses services."""


class ExpensesServiceError(Exception):
    """Base exception for expenses service errors."""
    pass


class ExpenseNotFoundError(ExpensesServiceError):
    """Raised when an expense does not exist."""
    pass


class MissingContractError(ExpensesServiceError):
    """Raised when consumed items are given without a contract."""
    pass


class InvalidDateRangeError(ExpensesServiceError):
    """Raised when an end date precedes the start date."""
    pass
