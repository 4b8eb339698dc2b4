import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiTypes

from apps.accounts.permissions import IsFinanceManagerOrReadOnly
from apps.contracts.services import (
    ContractNotFoundError,
    ContractItemNotFoundError,
    InvalidQuantityError,
    InsufficientBalanceError,
)
from apps.organization.services import get_entity, get_app_settings
from .models import Category, Expense, ExpenseStatus
from .serializers import (
    CategorySerializer,
    ExpenseSerializer,
    ExpenseCreateSerializer,
    ExpenseFilterSerializer,
    ExportFilterSerializer,
)
from .services import (
    create_expense,
    update_expense,
    filter_expenses,
    expenses_in_range,
    export_rows,
    ExpenseNotFoundError,
    MissingContractError,
)
from .exporters import (
    build_xlsx,
    build_pdf,
    export_filename,
    XLSX_CONTENT_TYPE,
    PDF_CONTENT_TYPE,
)

logger = logging.getLogger(__name__)


class ExpensePagination(PageNumberPagination):
    """Custom pagination for expenses."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class CategoryPagination(PageNumberPagination):
    page_size = 100
    page_size_query_param = 'page_size'
    max_page_size = 500


class CategoryViewSet(viewsets.ModelViewSet):
    """ViewSet for expense categories. Deleting one clears it on its expenses."""

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
    pagination_class = CategoryPagination


DATE_PARAMETERS = [
    OpenApiParameter('start_date', OpenApiTypes.DATE, description='Due date from (inclusive)'),
    OpenApiParameter('end_date', OpenApiTypes.DATE, description='Due date until (inclusive)'),
]

EXPORT_PARAMETERS = DATE_PARAMETERS + [
    OpenApiParameter('status', str, enum=ExpenseStatus.values, description='Projected status'),
    OpenApiParameter('type', str, enum=['fixed', 'variable']),
    OpenApiParameter('creditor', OpenApiTypes.UUID),
    OpenApiParameter('category', OpenApiTypes.UUID),
    OpenApiParameter('contract', OpenApiTypes.UUID),
    OpenApiParameter('month', str, description='Reference month label'),
    OpenApiParameter('min_amount', OpenApiTypes.DECIMAL),
    OpenApiParameter('max_amount', OpenApiTypes.DECIMAL),
    OpenApiParameter('search', str),
]


@extend_schema_view(
    list=extend_schema(
        parameters=EXPORT_PARAMETERS,
        tags=['expenses'],
    ),
)
class ExpenseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Expense CRUD operations and exports.

    Statuses are projected on read: an unpaid expense due before today
    is reported as overdue.

    create: Create an expense, optionally consuming contract items
    update: Update an expense (paying it stamps paid_at)
    export_xlsx / export_pdf: Download the filtered expense list
    """

    queryset = Expense.objects.select_related('creditor', 'category', 'contract')
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
    pagination_class = ExpensePagination

    def get_queryset(self):
        """Filter expenses using input serializer validation."""
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return filter_expenses(queryset, timezone.localdate(), **filter_serializer.validated_data)

    def get_serializer_class(self):
        if self.action == 'create':
            return ExpenseCreateSerializer
        return ExpenseSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['today'] = timezone.localdate()
        return context

    @extend_schema(request=ExpenseCreateSerializer, responses={201: ExpenseSerializer}, tags=['expenses'])
    def create(self, request, *args, **kwargs):
        """
        Create an expense.

        When ``consumed_items`` is given, the expense and every item
        consumption are written together or not at all.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = create_expense(**serializer.validated_data)
        except (
            MissingContractError,
            ContractNotFoundError,
            ContractItemNotFoundError,
            InvalidQuantityError,
            InsufficientBalanceError,
        ) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output = ExpenseSerializer(expense, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            expense = update_expense(expense_id=instance.id, **serializer.validated_data)
        except ExpenseNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ExpenseSerializer(expense, context=self.get_serializer_context()).data)

    def _export_rows(self, request):
        input_serializer = ExportFilterSerializer(data=request.query_params)
        input_serializer.is_valid(raise_exception=True)
        params = input_serializer.validated_data
        filters = {key: value for key, value in params.items() if key != 'include_metrics'}
        today = timezone.localdate()
        expenses = expenses_in_range(today=today, **filters)
        return export_rows(expenses, today), params

    @staticmethod
    def _file_response(content, content_type, filename):
        response = HttpResponse(content, content_type=content_type)
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response

    @extend_schema(
        parameters=EXPORT_PARAMETERS,
        responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY},
        description='Download expenses as a spreadsheet (detail and summary sheets).',
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'], url_path='export/xlsx', url_name='export-xlsx')
    def export_xlsx(self, request):
        """GET /api/expenses/export/xlsx/"""
        rows, params = self._export_rows(request)
        filename = export_filename('xlsx', params.get('start_date'), params.get('end_date'))
        logger.info("Exporting %d expense(s) to %s for %s", len(rows), filename, request.user.email)
        return self._file_response(build_xlsx(rows), XLSX_CONTENT_TYPE, filename)

    @extend_schema(
        parameters=EXPORT_PARAMETERS + [
            OpenApiParameter('include_metrics', OpenApiTypes.BOOL, description='Include the financial summary'),
        ],
        responses={(200, PDF_CONTENT_TYPE): OpenApiTypes.BINARY},
        description='Download expenses as a PDF report with the organization header.',
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'], url_path='export/pdf', url_name='export-pdf')
    def export_pdf(self, request):
        """GET /api/expenses/export/pdf/"""
        rows, params = self._export_rows(request)
        app_settings = get_app_settings()
        filename = export_filename('pdf', params.get('start_date'), params.get('end_date'))
        logger.info("Exporting %d expense(s) to %s for %s", len(rows), filename, request.user.email)

        content = build_pdf(
            rows,
            entity=get_entity(),
            header_text=app_settings.header_text,
            footer_text=app_settings.footer_text,
            start_date=params.get('start_date'),
            end_date=params.get('end_date'),
            include_metrics=params['include_metrics'],
            generated_by=request.user.get_display_name(),
        )
        return self._file_response(content, PDF_CONTENT_TYPE, filename)
