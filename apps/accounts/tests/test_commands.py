import pytest
from io import StringIO
from django.core.management import call_command
from apps.accounts.models import User, UserRole
from apps.contracts.models import Contract
from apps.expenses.models import Expense
from apps.organization.models import AppSettings, Entity


@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_domain_data(self):
        out = StringIO()
        call_command('create_sample_data', stdout=out)

        assert 'Sample data created successfully!' in out.getvalue()
        assert User.objects.get(email='finance@sgfi.local').role == UserRole.FINANCE_MANAGER
        assert Entity.objects.count() == 1
        assert AppSettings.load().entity is not None
        assert Contract.objects.count() == 2
        assert Expense.objects.count() == 39

    def test_is_idempotent(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', stdout=StringIO())

        assert Entity.objects.count() == 1
        assert Expense.objects.count() == 39

    def test_clear(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', '--clear', stdout=StringIO())

        assert Contract.objects.count() == 2
        assert User.objects.filter(email='viewer@sgfi.local').exists()
