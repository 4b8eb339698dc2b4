import pytest
from datetime import timedelta
from decimal import Decimal
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.expenses.models import ExpenseStatus, ExpenseType


@pytest.fixture
def dashboard_expenses(make_expense, balance_1000):
    today = timezone.localdate()
    return [
        make_expense(amount=Decimal('100.00'), status=ExpenseStatus.PAID, type=ExpenseType.FIXED),
        make_expense(
            amount=Decimal('50.00'),
            status=ExpenseStatus.PENDING,
            type=ExpenseType.VARIABLE,
            due_date=today + timedelta(days=3),
        ),
    ]


@pytest.mark.django_db
class TestDashboard:
    """Tests for GET /api/analytics/dashboard/"""

    def test_reference_scenario(self, viewer_client, dashboard_expenses):
        response = viewer_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        metrics = response.data['metrics']
        assert metrics['total_spent_this_month'] == Decimal('100.00')
        assert metrics['total_pending'] == Decimal('50.00')
        assert metrics['available_balance'] == Decimal('1000.00')
        assert metrics['upcoming_due_count'] == 1
        assert response.data['expenses_by_type'] == {
            'fixed': Decimal('100.00'),
            'variable': Decimal('50.00'),
        }
        assert len(response.data['forecast']['months']) == 3

    def test_empty_ledger(self, viewer_client):
        response = viewer_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['metrics']['total_pending'] == 0
        assert response.data['metrics']['upcoming_due_count'] == 0

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestDashboardParts:

    def test_metrics(self, finance_client, dashboard_expenses):
        response = finance_client.get(reverse('analytics:metrics'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['upcoming_due_count'] == 1

    def test_forecast(self, viewer_client, dashboard_expenses):
        response = viewer_client.get(reverse('analytics:forecast'))

        assert response.status_code == status.HTTP_200_OK
        current = response.data['months'][0]
        assert current['month'] == timezone.localdate().strftime('%Y-%m')
        assert current['actual'] == Decimal('100.00')
        assert response.data['monthly_average'] == Decimal('33.33')

    def test_expenses_by_type(self, viewer_client, dashboard_expenses):
        response = viewer_client.get(reverse('analytics:expenses-by-type'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['variable'] == Decimal('50.00')
