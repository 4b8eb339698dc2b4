import pytest
import requests
from decimal import Decimal
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status
from apps.catalog.models import CatalogItem


@pytest.fixture
def catalog_item(db):
    return CatalogItem.objects.create(
        description='Papel A4 75g',
        category='Material de Escritório',
        unit='RM',
        unit_price=Decimal('24.90'),
        pncp_catalog='CATMAT',
        keyword1='resma',
    )


@pytest.mark.django_db
class TestCatalogItems:
    """Tests for /api/catalog-items/"""

    def test_create_defaults(self, finance_client):
        url = reverse('catalog:catalog-item-list')
        response = finance_client.post(url, {'description': 'Caneta azul', 'unit': ''}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['unit'] == 'un'
        assert Decimal(response.data['unit_price']) == 0

    def test_negative_price(self, finance_client):
        url = reverse('catalog:catalog-item-list')
        response = finance_client.post(url, {'description': 'x', 'unit_price': '-1'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_search_by_keyword(self, viewer_client, catalog_item):
        CatalogItem.objects.create(description='Toner')
        url = reverse('catalog:catalog-item-list')
        response = viewer_client.get(url, {'search': 'resma'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['description'] == 'Papel A4 75g'

    def test_ordered_by_description(self, viewer_client, catalog_item):
        CatalogItem.objects.create(description='Borracha')
        url = reverse('catalog:catalog-item-list')
        response = viewer_client.get(url)

        assert [i['description'] for i in response.data['results']] == ['Borracha', 'Papel A4 75g']

    def test_update_and_delete(self, finance_client, catalog_item):
        url = reverse('catalog:catalog-item-detail', kwargs={'pk': catalog_item.id})
        response = finance_client.patch(url, {'unit_price': '26.00'}, format='json')
        assert response.status_code == status.HTTP_200_OK
        catalog_item.refresh_from_db()
        assert catalog_item.unit_price == Decimal('26.00')

        response = finance_client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_viewer_cannot_create(self, viewer_client):
        url = reverse('catalog:catalog-item-list')
        response = viewer_client.post(url, {'description': 'x'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestPncpEndpoints:
    """Tests for /api/pncp-catalog/"""

    def test_search_fallback(self, viewer_client):
        url = reverse('pncp:search')
        with patch('apps.catalog.services.pncp.requests.get', side_effect=requests.ConnectionError()):
            response = viewer_client.get(url, {'q': 'cadeira', 'kind': 'material'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['source'] == 'local'
        assert response.data['items'][0]['code'] == '700100'

    def test_search_short_query(self, viewer_client):
        url = reverse('pncp:search')
        response = viewer_client.get(url, {'q': 'x'})

        assert response.data == {'items': [], 'total': 0, 'source': 'local'}

    def test_search_invalid_kind(self, viewer_client):
        url = reverse('pncp:search')
        response = viewer_client.get(url, {'q': 'papel', 'kind': 'food'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_catalogs_fallback(self, viewer_client):
        url = reverse('pncp:catalogs')
        with patch('apps.catalog.services.pncp.requests.get', side_effect=requests.Timeout()):
            response = viewer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('pncp:catalogs'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
