"""
Serializers for analytics app.

Response serializers only: the dashboard endpoints take no input. They
document the payloads in the schema and render amounts as JSON numbers.

Response Serializers:
    DashboardMetricsSerializer - Summary cards
    ForecastSerializer - Three-month projection with actuals
    ExpensesByTypeSerializer - Fixed/variable split
    DashboardResponseSerializer - All of the above in one payload
"""

from rest_framework import serializers


def _amount(**kwargs):
    return serializers.DecimalField(max_digits=16, decimal_places=2, coerce_to_string=False, **kwargs)


class DashboardMetricsSerializer(serializers.Serializer):
    total_spent_this_month = _amount()
    total_pending = _amount()
    available_balance = _amount()
    upcoming_due_count = serializers.IntegerField()


class ForecastMonthSerializer(serializers.Serializer):
    month = serializers.CharField(help_text='Month in YYYY-MM format')
    projected = _amount()
    actual = _amount()


class ForecastSerializer(serializers.Serializer):
    monthly_average = _amount()
    months = ForecastMonthSerializer(many=True)


class ExpensesByTypeSerializer(serializers.Serializer):
    fixed = _amount()
    variable = _amount()


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for the dashboard summary."""
    metrics = DashboardMetricsSerializer()
    forecast = ForecastSerializer()
    expenses_by_type = ExpensesByTypeSerializer()
