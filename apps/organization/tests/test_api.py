import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.organization.models import Entity, AppSettings


@pytest.fixture
def entity(db):
    return Entity.objects.create(
        name='Prefeitura',
        full_name='Prefeitura Municipal de Vila Nova',
        document_number='12.345.678/0001-99',
        address='Praça Central, 1',
        phone='(11) 3000-0000',
        email='contato@vilanova.example',
    )


# =============================================================================
# Entities
# =============================================================================

@pytest.mark.django_db
class TestEntities:
    """Tests for /api/entities/"""

    def test_create(self, admin_client):
        url = reverse('entities:entity-list')
        data = {
            'name': 'Câmara',
            'full_name': 'Câmara Municipal de Vila Nova',
            'phone': None,
            'logo_url': 'data:image/png;base64,AAAA',
        }
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['full_name'] == 'Câmara Municipal de Vila Nova'
        assert response.data['phone'] == ''
        assert Entity.objects.count() == 1

    def test_name_and_full_name_required(self, admin_client):
        url = reverse('entities:entity-list')
        response = admin_client.post(url, {'name': 'Only name'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'full_name' in response.data

    def test_second_entity_conflicts(self, admin_client, entity):
        url = reverse('entities:entity-list')
        data = {'name': 'Other', 'full_name': 'Other Org'}
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Entity.objects.count() == 1

    def test_oversized_body_rejected(self, admin_client, settings):
        settings.ENTITY_MAX_PAYLOAD_BYTES = 200
        url = reverse('entities:entity-list')
        data = {
            'name': 'Big',
            'full_name': 'Big Images Org',
            'brasao_url': 'data:image/png;base64,' + 'A' * 500,
        }
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
        assert not Entity.objects.exists()

    def test_oversized_update_rejected(self, admin_client, entity, settings):
        settings.ENTITY_MAX_PAYLOAD_BYTES = 200
        url = reverse('entities:entity-detail', kwargs={'pk': entity.id})
        response = admin_client.patch(url, {'logo_url': 'x' * 500}, format='json')

        assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
        entity.refresh_from_db()
        assert entity.logo_url == ''

    def test_list(self, viewer_client, entity):
        url = reverse('entities:entity-list')
        response = viewer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['name'] == 'Prefeitura'

    def test_update(self, admin_client, entity):
        url = reverse('entities:entity-detail', kwargs={'pk': entity.id})
        response = admin_client.patch(url, {'website': 'https://vilanova.example'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        entity.refresh_from_db()
        assert entity.website == 'https://vilanova.example'

    def test_delete(self, admin_client, entity):
        url = reverse('entities:entity-detail', kwargs={'pk': entity.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Entity.objects.exists()

    def test_finance_manager_cannot_write(self, finance_client):
        url = reverse('entities:entity-list')
        response = finance_client.post(url, {'name': 'x', 'full_name': 'y'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Settings
# =============================================================================

@pytest.mark.django_db
class TestAppSettings:
    """Tests for /api/settings/"""

    def test_defaults_without_login(self, api_client):
        url = reverse('settings:app-settings')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['available_balance'] == Decimal('50000.00')
        assert response.data['login_card_bg_color'] == '#ffffff'
        assert response.data['login_card_text_color'] == '#1a1a1a'
        assert response.data['login_button_bg_color'] == '#4c4faf'
        assert response.data['login_button_text_color'] == '#ffffff'
        assert response.data['login_background_overlay'] == 'dark'
        assert response.data['header_text'] == ''

    def test_put_merges(self, admin_client):
        url = reverse('settings:app-settings')
        admin_client.put(url, {'header_text': 'Prefeitura de Vila Nova'}, format='json')
        response = admin_client.put(url, {'available_balance': '1000.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['header_text'] == 'Prefeitura de Vila Nova'
        assert response.data['available_balance'] == Decimal('1000.00')
        assert AppSettings.objects.count() == 1

    def test_put_back_fetched_settings(self, admin_client):
        url = reverse('settings:app-settings')
        body = admin_client.get(url).data
        body['header_text'] = 'Novo'

        response = admin_client.put(url, body, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['header_text'] == 'Novo'
        assert AppSettings.load().header_text == 'Novo'

    def test_link_entity(self, admin_client, entity):
        url = reverse('settings:app-settings')
        response = admin_client.patch(url, {'entity': str(entity.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert AppSettings.load().entity == entity

    def test_unknown_key_rejected(self, admin_client):
        url = reverse('settings:app-settings')
        data = {'header_text': 'Should not be stored', 'theme': 'blue'}
        response = admin_client.put(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'theme' in response.data['error']
        assert AppSettings.load().header_text == ''

    def test_invalid_color(self, admin_client):
        url = reverse('settings:app-settings')
        response = admin_client.put(url, {'login_card_bg_color': 'white'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'login_card_bg_color' in response.data

    def test_invalid_overlay(self, admin_client):
        url = reverse('settings:app-settings')
        response = admin_client.put(url, {'login_background_overlay': 'blur'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_body_must_be_object(self, admin_client):
        url = reverse('settings:app-settings')
        response = admin_client.put(url, ['header_text'], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_viewer_cannot_write(self, viewer_client):
        url = reverse('settings:app-settings')
        response = viewer_client.put(url, {'header_text': 'x'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous_cannot_write(self, api_client, db):
        url = reverse('settings:app-settings')
        response = api_client.put(url, {'header_text': 'x'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
