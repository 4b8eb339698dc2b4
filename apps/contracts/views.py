from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.db.models import Q
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsFinanceManagerOrReadOnly
from .models import Contract, TERMINAL_STATUSES
from .serializers import (
    ContractSerializer,
    ContractListSerializer,
    ContractFilterSerializer,
    SetConsumedInputSerializer,
    ConsumptionInputSerializer,
    ContractItemBalanceSerializer,
    ContractBalanceSerializer,
    ContractAlertsSerializer,
)
from .services import (
    create_contract,
    update_contract,
    set_consumed,
    record_consumption,
    item_balance,
    contract_balance,
    deadline_alerts,
    balance_alerts,
    # Exceptions
    ContractNotFoundError,
    ContractItemNotFoundError,
    InvalidQuantityError,
    DuplicateItemError,
)


class ContractPagination(PageNumberPagination):
    """Custom pagination for contracts."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


ITEM_ID_PARAMETER = OpenApiParameter('item_id', str, OpenApiParameter.PATH, description='Item id within the contract')


class ContractViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Contract CRUD operations and item consumption.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get contracts (newest first)
    create: Create a contract with its initial items
    retrieve: Get a contract with item balances
    update: Replace a contract and its whole item list
    destroy: Delete a contract (expenses keep existing, reference cleared)
    """

    queryset = Contract.objects.select_related('creditor')
    serializer_class = ContractSerializer
    permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
    pagination_class = ContractPagination

    def get_queryset(self):
        """Filter contracts using input serializer validation."""
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = ContractFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'status' in params:
            queryset = queryset.filter(status=params['status'])
        if 'creditor' in params:
            queryset = queryset.filter(creditor_id=params['creditor'])
        search = params.get('search')
        if search:
            queryset = queryset.filter(
                Q(number__icontains=search) |
                Q(description__icontains=search)
            )
        return queryset

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return ContractListSerializer
        return ContractSerializer

    def create(self, request, *args, **kwargs):
        """Create a contract with its initial items."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            contract = create_contract(**serializer.validated_data)
        except (InvalidQuantityError, DuplicateItemError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ContractSerializer(contract).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update a contract; a given item list replaces the stored one."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            contract = update_contract(contract_id=instance.id, **serializer.validated_data)
        except ContractNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidQuantityError, DuplicateItemError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ContractSerializer(contract).data)

    def _item_error_response(self, error):
        if isinstance(error, (ContractNotFoundError, ContractItemNotFoundError)):
            return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
        return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)

    @extend_schema(
        request=SetConsumedInputSerializer,
        responses={200: ContractItemBalanceSerializer},
        parameters=[ITEM_ID_PARAMETER],
        description="Set an item's consumed quantity to an absolute value.",
        tags=['contracts'],
    )
    @action(
        detail=True,
        methods=['patch'],
        url_path=r'items/(?P<item_id>[^/]+)/consumed',
        url_name='item-consumed',
    )
    def item_consumed(self, request, pk=None, item_id=None):
        """
        PATCH /api/contracts/{id}/items/{item_id}/consumed/
        Body: {"consumed": 12.5}
        """
        input_serializer = SetConsumedInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            item = set_consumed(
                contract_id=pk,
                item_id=item_id,
                value=input_serializer.validated_data['consumed']
            )
        except (ContractNotFoundError, ContractItemNotFoundError, InvalidQuantityError) as e:
            return self._item_error_response(e)

        return Response(item_balance(item))

    @extend_schema(
        request=ConsumptionInputSerializer,
        responses={200: ContractItemBalanceSerializer},
        parameters=[ITEM_ID_PARAMETER],
        description="Record a consumption (consume) or a reversal (reverse) on an item.",
        tags=['contracts'],
    )
    @action(
        detail=True,
        methods=['post'],
        url_path=r'items/(?P<item_id>[^/]+)/consumption',
        url_name='item-consumption',
    )
    def item_consumption(self, request, pk=None, item_id=None):
        """
        POST /api/contracts/{id}/items/{item_id}/consumption/
        Body: {"amount": 3, "direction": "consume" | "reverse"}
        """
        input_serializer = ConsumptionInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            item = record_consumption(
                contract_id=pk,
                item_id=item_id,
                **input_serializer.validated_data
            )
        except (ContractNotFoundError, ContractItemNotFoundError, InvalidQuantityError) as e:
            return self._item_error_response(e)

        return Response(item_balance(item))

    @extend_schema(
        responses={200: ContractBalanceSerializer},
        description="Per-item balance view with contracted, consumed and remaining values.",
        tags=['contracts'],
    )
    @action(detail=True, methods=['get'])
    def balance(self, request, pk=None):
        """GET /api/contracts/{id}/balance/"""
        contract = self.get_object()
        return Response(contract_balance(contract))

    @extend_schema(
        responses={200: ContractAlertsSerializer},
        description="Deadline reminders and low-balance items for live contracts.",
        tags=['contracts'],
    )
    @action(detail=False, methods=['get'])
    def alerts(self, request):
        """GET /api/contracts/alerts/"""
        contracts = list(Contract.objects.exclude(status__in=TERMINAL_STATUSES))
        data = {
            'alerts': deadline_alerts(contracts),
            'balance_alerts': balance_alerts(contracts),
        }
        return Response(ContractAlertsSerializer(data).data)
