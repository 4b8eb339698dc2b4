import pytest
from datetime import timedelta
from django.utils import timezone
from apps.creditors.models import Creditor
from apps.contracts.models import ContractStatus
from apps.contracts.services import create_contract


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def creditor(db):
    """Create and return a supplier."""
    return Creditor.objects.create(
        name='Distribuidora Alfa',
        document_number='11.222.333/0001-44',
    )


@pytest.fixture
def contract(db, creditor, today):
    """Active contract with a healthy item and an almost exhausted one."""
    return create_contract(
        number='CT-001/2025',
        description='Office supplies',
        creditor=creditor,
        status=ContractStatus.ACTIVE,
        start_date=today - timedelta(days=30),
        end_date=today + timedelta(days=180),
        items=[
            {'id': 'paper', 'description': 'A4 paper', 'unit': 'ream', 'quantity': 10, 'unit_price': 5},
            {'id': 'toner', 'description': 'Toner', 'unit': 'un', 'quantity': 100, 'consumed': 95, 'unit_price': 2},
        ],
    )
