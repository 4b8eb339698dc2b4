"""
Export row building.

Expenses are filtered (due date range, projected status, references,
reference month, amount bounds) and flattened into rows carrying the
projected status, which the exporters render without touching the ORM.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from django.utils import timezone

from apps.expenses.models import Expense, ExpenseStatus, ExpenseType
from .exceptions import InvalidDateRangeError


REFERENCE_FILTERS = ('type', 'creditor', 'category', 'contract', 'month')


def filter_expenses(queryset, today: Optional[date] = None, **filters):
    """
    Narrow an expense queryset.

    Recognized filters: ``status`` (matched against the projected status, so
    ``overdue`` and ``pending`` split the unpaid expenses on today's date),
    ``type``, ``creditor``, ``category``, ``contract``, ``month``,
    ``start_date`` / ``end_date`` (due date, inclusive), ``min_amount`` /
    ``max_amount`` (inclusive) and ``search`` (description). Missing or
    None values are ignored.
    """
    today = today or timezone.localdate()

    status = filters.get('status')
    if status == ExpenseStatus.PAID:
        queryset = queryset.filter(status=ExpenseStatus.PAID)
    elif status == ExpenseStatus.OVERDUE:
        queryset = queryset.exclude(status=ExpenseStatus.PAID).filter(due_date__lt=today)
    elif status == ExpenseStatus.PENDING:
        queryset = queryset.exclude(status=ExpenseStatus.PAID).filter(due_date__gte=today)

    for field in REFERENCE_FILTERS:
        if filters.get(field) is not None:
            queryset = queryset.filter(**{field: filters[field]})
    if filters.get('start_date'):
        queryset = queryset.filter(due_date__gte=filters['start_date'])
    if filters.get('end_date'):
        queryset = queryset.filter(due_date__lte=filters['end_date'])
    if filters.get('min_amount') is not None:
        queryset = queryset.filter(amount__gte=filters['min_amount'])
    if filters.get('max_amount') is not None:
        queryset = queryset.filter(amount__lte=filters['max_amount'])
    if filters.get('search'):
        queryset = queryset.filter(description__icontains=filters['search'])
    return queryset


def expenses_in_range(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    today: Optional[date] = None,
    **filters
):
    """
    Expenses due within [start_date, end_date] for export; either end may be
    open. Further keyword filters are those of ``filter_expenses``.
    """
    if start_date and end_date and end_date < start_date:
        raise InvalidDateRangeError("end_date must be on or after start_date")

    queryset = filter_expenses(
        Expense.objects.select_related('creditor', 'category'),
        today,
        start_date=start_date,
        end_date=end_date,
        **filters
    )
    return queryset.order_by('due_date', 'created_at')


def export_rows(expenses: Iterable[Expense], today: Optional[date] = None) -> list:
    """Flatten expenses into export rows with the projected status."""
    today = today or timezone.localdate()
    rows = []
    for expense in expenses:
        creditor = expense.creditor
        rows.append({
            'id': str(expense.id),
            'description': expense.description,
            'amount': expense.amount,
            'type': expense.type,
            'creditor': creditor.name if creditor else None,
            'creditor_document': creditor.document_number if creditor else None,
            'due_date': expense.due_date,
            'status': str(expense.display_status(today)),
            'paid_at': timezone.localtime(expense.paid_at).date() if expense.paid_at else None,
            'created_at': timezone.localtime(expense.created_at).date(),
        })
    return rows


def summarize(rows: Iterable[dict]) -> dict:
    """
    Totals over export rows.

    Anything not paid (pending or overdue) counts as pending.
    """
    totals = {
        'total_paid': Decimal('0'),
        'total_pending': Decimal('0'),
        'fixed': Decimal('0'),
        'variable': Decimal('0'),
        'count': 0,
    }
    for row in rows:
        amount = Decimal(row['amount'])
        if row['status'] == ExpenseStatus.PAID:
            totals['total_paid'] += amount
        else:
            totals['total_pending'] += amount
        if row['type'] == ExpenseType.FIXED:
            totals['fixed'] += amount
        elif row['type'] == ExpenseType.VARIABLE:
            totals['variable'] += amount
        totals['count'] += 1

    totals['total'] = totals['total_paid'] + totals['total_pending']
    return totals


def date_range_label(start_date: Optional[date] = None, end_date: Optional[date] = None) -> str:
    """File-name fragment describing the exported period."""
    if start_date and end_date:
        return f"{start_date.isoformat()}_to_{end_date.isoformat()}"
    if start_date:
        return f"from_{start_date.isoformat()}"
    if end_date:
        return f"until_{end_date.isoformat()}"
    return 'all'
