"""
Application settings service.

Settings are one typed record. Updates merge the given keys into it;
keys outside RECOGNIZED_KEYS are refused before anything is written.
"""

import logging

from django.db import transaction

from apps.organization.models import AppSettings
from .exceptions import UnknownSettingError

logger = logging.getLogger(__name__)

RECOGNIZED_KEYS = frozenset({
    'header_text',
    'footer_text',
    'logo_url',
    'brasao_url',
    'entity',
    'available_balance',
    'login_background',
    'login_logo',
    'login_card_bg_color',
    'login_card_text_color',
    'login_button_bg_color',
    'login_button_text_color',
    'login_background_overlay',
})


def check_setting_keys(keys) -> None:
    """
    Raises:
        UnknownSettingError: If any key is not a recognized setting
    """
    unknown = set(keys) - RECOGNIZED_KEYS
    if unknown:
        raise UnknownSettingError(unknown)


def get_app_settings() -> AppSettings:
    """Settings record; keys never saved hold their defaults."""
    return AppSettings.load()


@transaction.atomic
def update_app_settings(*, values: dict) -> AppSettings:
    """
    Merge values into the settings record.

    Args:
        values: Validated setting values keyed by setting name

    Raises:
        UnknownSettingError: If any key is not a recognized setting
    """
    check_setting_keys(values)

    AppSettings.load()
    app_settings = AppSettings.objects.select_for_update().get(pk=AppSettings.SINGLETON_ID)
    for name, value in values.items():
        setattr(app_settings, name, value)
    app_settings.save()

    logger.info("Settings updated: %s", ', '.join(sorted(values)))
    return app_settings
