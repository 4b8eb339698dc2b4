"""Services for expenses business logic."""

from .exceptions import (
    ExpensesServiceError,
    ExpenseNotFoundError,
    MissingContractError,
    InvalidDateRangeError,
)
from .expense_management import create_expense, update_expense
from .reporting import filter_expenses, expenses_in_range, export_rows, summarize, date_range_label

__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'ExpenseNotFoundError',
    'MissingContractError',
    'InvalidDateRangeError',
    # Management
    'create_expense',
    'update_expense',
    # Reporting
    'filter_expenses',
    'expenses_in_range',
    'export_rows',
    'summarize',
    'date_range_label',
]
