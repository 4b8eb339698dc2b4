import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from apps.creditors.models import Creditor
from apps.contracts.services import create_contract
from apps.expenses.models import Category, Expense, ExpenseStatus, ExpenseType


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def creditor(db):
    return Creditor.objects.create(
        name='Auto Posto Central',
        document_number='22.333.444/0001-55',
    )


@pytest.fixture
def category(db):
    return Category.objects.create(name='Fuel', type=ExpenseType.VARIABLE, color='#ff8800')


@pytest.fixture
def contract(db, creditor, today):
    """Fuel contract: 1000 L of diesel, 200 L already drawn."""
    return create_contract(
        number='CT-FUEL',
        description='Fuel supply',
        creditor=creditor,
        start_date=today - timedelta(days=60),
        end_date=today + timedelta(days=300),
        items=[
            {'id': 'diesel', 'description': 'Diesel', 'unit': 'L', 'quantity': 1000, 'consumed': 200, 'unit_price': 6},
            {'id': 'oil', 'description': 'Engine oil', 'unit': 'L', 'quantity': 50, 'unit_price': 40},
        ],
    )


@pytest.fixture
def make_expense(db, creditor):
    """Factory for expenses with sensible defaults."""
    def _make(**kwargs):
        defaults = {
            'description': 'Expense',
            'amount': Decimal('100.00'),
            'type': ExpenseType.VARIABLE,
            'due_date': timezone.localdate(),
            'status': ExpenseStatus.PENDING,
            'creditor': creditor,
        }
        defaults.update(kwargs)
        return Expense.objects.create(**defaults)
    return _make
