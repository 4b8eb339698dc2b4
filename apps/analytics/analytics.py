"""
Analytics Module
=================

Dashboard aggregation over the expense ledger. Everything here is derived
at read time from the stored expenses; nothing is written back.

Classes:
    DashboardQueries: Static methods for dashboard metrics, the monthly
        forecast and the fixed/variable split.

Key Features:
    - Status projection (unpaid and past due reads as ``overdue``) before
      any total is computed
    - Spending in the current month, pending totals and upcoming dues
    - Three-month moving-average forecast for this month and the next two

Example:
    Building the dashboard payload::

        from apps.analytics.analytics import DashboardQueries

        metrics = DashboardQueries.metrics()
        print(f"Spent this month: {metrics['total_spent_this_month']}")

Note:
    Methods accept an optional ``expenses`` iterable and ``today`` so the
    same rules can be applied to an in-memory list (used by the tests and
    by callers that already hold a filtered queryset).
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from django.utils import timezone

from apps.expenses.models import Expense, ExpenseStatus, ExpenseType
from apps.organization.models import AppSettings

UPCOMING_WINDOW_DAYS = 7
FORECAST_WINDOW_MONTHS = 3
FORECAST_HORIZON_MONTHS = 3

CENT = Decimal('0.01')


def month_key(value: date) -> str:
    return value.strftime('%Y-%m')


def shift_month(value: date, offset: int) -> date:
    """First day of the month ``offset`` months away from ``value``."""
    years, month_index = divmod(value.month - 1 + offset, 12)
    return date(value.year + years, month_index + 1, 1)


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT)


class DashboardQueries:
    """
    Read-only aggregations for the dashboard endpoints.

    All methods return plain dictionaries with Decimal amounts, ready for
    the response serializers.
    """

    @staticmethod
    def _load(expenses: Optional[Iterable[Expense]]) -> list:
        if expenses is None:
            expenses = Expense.objects.all()
        return list(expenses)

    @staticmethod
    def metrics(
        expenses: Optional[Iterable[Expense]] = None,
        today: Optional[date] = None,
        available_balance: Optional[Decimal] = None,
    ) -> dict:
        """
        Summary figures for the dashboard cards.

        Args:
            expenses: Expenses to aggregate. Defaults to all stored expenses.
            today: Reference date. Defaults to the local date.
            available_balance: Overrides the configured balance.

        Returns:
            dict: ``total_spent_this_month`` (paid, accounted in the current
            calendar month), ``total_pending`` (pending or overdue),
            ``available_balance`` and ``upcoming_due_count`` (unpaid, due
            within the next seven days, today included).
        """
        today = today or timezone.localdate()
        expenses = DashboardQueries._load(expenses)
        if available_balance is None:
            available_balance = AppSettings.load().available_balance

        current_month = month_key(today)
        horizon = today + timedelta(days=UPCOMING_WINDOW_DAYS)

        spent = Decimal('0')
        pending = Decimal('0')
        upcoming = 0
        for expense in expenses:
            projected = expense.display_status(today)
            if projected == ExpenseStatus.PAID:
                accounted = expense.accounting_date
                if accounted and month_key(accounted) == current_month:
                    spent += expense.amount
                continue

            pending += expense.amount
            if today <= expense.due_date <= horizon:
                upcoming += 1

        return {
            'total_spent_this_month': _money(spent),
            'total_pending': _money(pending),
            'available_balance': _money(available_balance),
            'upcoming_due_count': upcoming,
        }

    @staticmethod
    def monthly_totals(expenses: Optional[Iterable[Expense]] = None) -> dict:
        """Paid totals keyed by ``YYYY-MM`` of the accounting date."""
        totals = {}
        for expense in DashboardQueries._load(expenses):
            if not expense.is_paid:
                continue
            accounted = expense.accounting_date
            if accounted is None:
                continue
            key = month_key(accounted)
            totals[key] = totals.get(key, Decimal('0')) + expense.amount
        return totals

    @staticmethod
    def forecast(
        expenses: Optional[Iterable[Expense]] = None,
        today: Optional[date] = None,
    ) -> dict:
        """
        Three-month moving-average forecast.

        The average covers the current month and the two before it, missing
        months counting as zero. That flat average is projected for the
        current month and the next two. ``actual`` is the paid total of the
        month, which is zero for months that have not started yet.

        Returns:
            dict: ``monthly_average`` and ``months``, a list of
            ``{'month', 'projected', 'actual'}`` in chronological order.
        """
        today = today or timezone.localdate()
        totals = DashboardQueries.monthly_totals(expenses)

        window = [
            month_key(shift_month(today, -offset))
            for offset in range(FORECAST_WINDOW_MONTHS)
        ]
        average = _money(
            sum((totals.get(key, Decimal('0')) for key in window), Decimal('0'))
            / FORECAST_WINDOW_MONTHS
        )

        months = []
        for offset in range(FORECAST_HORIZON_MONTHS):
            key = month_key(shift_month(today, offset))
            months.append({
                'month': key,
                'projected': average,
                'actual': _money(totals.get(key, Decimal('0'))),
            })

        return {'monthly_average': average, 'months': months}

    @staticmethod
    def expenses_by_type(expenses: Optional[Iterable[Expense]] = None) -> dict:
        """Total amount per expense type, paid or not."""
        totals = {ExpenseType.FIXED: Decimal('0'), ExpenseType.VARIABLE: Decimal('0')}
        for expense in DashboardQueries._load(expenses):
            if expense.type in totals:
                totals[expense.type] += expense.amount
        return {
            'fixed': _money(totals[ExpenseType.FIXED]),
            'variable': _money(totals[ExpenseType.VARIABLE]),
        }

    @staticmethod
    def dashboard(today: Optional[date] = None) -> dict:
        """Metrics, forecast and type split from a single expense read."""
        today = today or timezone.localdate()
        expenses = DashboardQueries._load(None)
        return {
            'metrics': DashboardQueries.metrics(expenses, today),
            'forecast': DashboardQueries.forecast(expenses, today),
            'expenses_by_type': DashboardQueries.expenses_by_type(expenses),
        }
