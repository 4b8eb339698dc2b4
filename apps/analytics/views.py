from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .analytics import DashboardQueries
from .serializers import (
    DashboardResponseSerializer,
    DashboardMetricsSerializer,
    ForecastSerializer,
    ExpensesByTypeSerializer,
)


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Dashboard summary: metrics, three-month forecast and fixed/variable split.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Get comprehensive dashboard data - thin HTTP handler."""
    data = DashboardQueries.dashboard()
    return Response(DashboardResponseSerializer(data).data)


@extend_schema(
    responses={200: DashboardMetricsSerializer},
    description="Spending this month, pending total, available balance and upcoming dues.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def metrics(request):
    data = DashboardQueries.metrics()
    return Response(DashboardMetricsSerializer(data).data)


@extend_schema(
    responses={200: ForecastSerializer},
    description="Three-month moving-average forecast for this month and the next two.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def forecast(request):
    data = DashboardQueries.forecast()
    return Response(ForecastSerializer(data).data)


@extend_schema(
    responses={200: ExpensesByTypeSerializer},
    description="Total expense amount per type.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def expenses_by_type(request):
    data = DashboardQueries.expenses_by_type()
    return Response(ExpensesByTypeSerializer(data).data)
