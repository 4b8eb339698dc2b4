from django.db.models import Q
from rest_framework import viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiTypes

from apps.accounts.permissions import IsFinanceManagerOrReadOnly
from .models import CatalogItem
from .serializers import (
    CatalogItemSerializer,
    CatalogItemFilterSerializer,
    PncpSearchSerializer,
    PncpSearchResultSerializer,
)
from .services import search_catalog, list_catalogs


class CatalogItemPagination(PageNumberPagination):
    """Custom pagination for catalog items."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


@extend_schema_view(
    list=extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Description, specification or keyword'),
            OpenApiParameter('category', str),
            OpenApiParameter('pncp_catalog', str, description='CATMAT or CATSERV'),
        ],
        tags=['catalog'],
    ),
)
class CatalogItemViewSet(viewsets.ModelViewSet):
    """ViewSet for the organization's material/service catalog."""

    queryset = CatalogItem.objects.all()
    serializer_class = CatalogItemSerializer
    permission_classes = [IsAuthenticated, IsFinanceManagerOrReadOnly]
    pagination_class = CatalogItemPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = CatalogItemFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        search = params.get('search')
        if search:
            queryset = queryset.filter(
                Q(description__icontains=search) |
                Q(specification__icontains=search) |
                Q(keyword1__icontains=search) |
                Q(keyword2__icontains=search) |
                Q(keyword3__icontains=search) |
                Q(keyword4__icontains=search)
            )
        if params.get('category'):
            queryset = queryset.filter(category__iexact=params['category'])
        if params.get('pncp_catalog'):
            queryset = queryset.filter(pncp_catalog__iexact=params['pncp_catalog'])
        return queryset


@extend_schema(
    responses={200: OpenApiTypes.OBJECT},
    description='Active public catalogs (CATMAT/CATSERV when the registry is unreachable).',
    tags=['pncp-catalog'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pncp_catalogs(request):
    """GET /api/pncp-catalog/catalogs/"""
    return Response(list_catalogs())


@extend_schema(
    parameters=[
        OpenApiParameter('q', str, description='Description fragment (min. 2 characters)'),
        OpenApiParameter('kind', str, enum=['material', 'service']),
        OpenApiParameter('page', int),
    ],
    responses={200: PncpSearchResultSerializer},
    description='Search the public material/service registry, falling back to a bundled list.',
    tags=['pncp-catalog'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pncp_search(request):
    """GET /api/pncp-catalog/search/?q=papel&kind=material&page=1"""
    input_serializer = PncpSearchSerializer(data=request.query_params)
    input_serializer.is_valid(raise_exception=True)
    params = input_serializer.validated_data

    result = search_catalog(query=params['q'], kind=params['kind'], page=params['page'])
    return Response(result)
