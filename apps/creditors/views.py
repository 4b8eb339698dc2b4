from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.pagination import PageNumberPagination
from django.db.models import Q
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter

from apps.accounts.permissions import IsFinanceManagerOrReadOnly
from .models import Creditor
from .serializers import CreditorSerializer, CreditorFilterSerializer


class CreditorPagination(PageNumberPagination):
    """Custom pagination for creditors."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Name or document number'),
            OpenApiParameter('uf', str, description='State code'),
        ],
        tags=['creditors'],
    ),
)
class CreditorViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Creditor CRUD operations.

    Deleting a creditor keeps its expenses and contracts;
    their reference is cleared.
    """

    queryset = Creditor.objects.all()
    serializer_class = CreditorSerializer
    permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
    pagination_class = CreditorPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = CreditorFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        search = params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(document_number__icontains=search)
            )
        if params.get('uf'):
            queryset = queryset.filter(uf__iexact=params['uf'])

        return queryset
