import pytest
from decimal import Decimal
from django.utils import timezone
from apps.expenses.models import Expense, ExpenseStatus, ExpenseType
from apps.organization.models import AppSettings


@pytest.fixture
def make_expense(db):
    """Factory for stored expenses; paid ones get paid_at=now unless given."""
    def _make(**kwargs):
        defaults = {
            'description': 'Expense',
            'amount': Decimal('100.00'),
            'type': ExpenseType.FIXED,
            'due_date': timezone.localdate(),
            'status': ExpenseStatus.PENDING,
        }
        defaults.update(kwargs)
        if defaults['status'] == ExpenseStatus.PAID:
            defaults.setdefault('paid_at', timezone.now())
        return Expense.objects.create(**defaults)
    return _make


@pytest.fixture
def balance_1000(db):
    settings_row = AppSettings.load()
    settings_row.available_balance = Decimal('1000.00')
    settings_row.save()
    return settings_row
