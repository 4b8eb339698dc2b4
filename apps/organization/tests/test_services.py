import pytest
from apps.organization.models import AppSettings
from apps.organization.services import (
    create_entity,
    get_entity,
    update_app_settings,
    check_payload_size,
    EntityAlreadyExistsError,
    PayloadTooLargeError,
    UnknownSettingError,
)


@pytest.mark.django_db
class TestEntityService:

    def test_get_entity_none(self):
        assert get_entity() is None

    def test_singleton(self):
        entity = create_entity(name='Org', full_name='Organization')
        assert get_entity() == entity

        with pytest.raises(EntityAlreadyExistsError):
            create_entity(name='Org 2', full_name='Organization 2')

    def test_payload_size(self, settings):
        settings.ENTITY_MAX_PAYLOAD_BYTES = 50
        check_payload_size({'name': 'short'})
        with pytest.raises(PayloadTooLargeError):
            check_payload_size({'logo_url': 'x' * 100})


@pytest.mark.django_db
class TestSettingsService:

    def test_unknown_keys_write_nothing(self):
        with pytest.raises(UnknownSettingError) as exc_info:
            update_app_settings(values={'footer_text': 'x', 'colour': 'red', 'api_key': 'y'})

        assert exc_info.value.keys == ['api_key', 'colour']
        assert AppSettings.load().footer_text == ''

    def test_merge_keeps_other_keys(self):
        update_app_settings(values={'footer_text': 'Rodapé'})
        update_app_settings(values={'header_text': 'Cabeçalho'})

        app_settings = AppSettings.load()
        assert app_settings.footer_text == 'Rodapé'
        assert app_settings.header_text == 'Cabeçalho'
