from rest_framework import serializers
from .models import Entity, AppSettings


class EntitySerializer(serializers.ModelSerializer):
    """Organization profile. Optional text fields accept null as empty."""

    class Meta:
        model = Entity
        fields = [
            'id',
            'name',
            'full_name',
            'document_number',
            'address',
            'phone',
            'email',
            'website',
            'logo_url',
            'brasao_url',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {
            field: {'required': False, 'allow_blank': True, 'allow_null': True}
            for field in (
                'document_number', 'address', 'phone', 'email',
                'website', 'logo_url', 'brasao_url',
            )
        }

    def validate(self, attrs):
        for field, value in attrs.items():
            if value is None:
                attrs[field] = ''
        return attrs


class AppSettingsSerializer(serializers.ModelSerializer):
    """
    The settings record.

    Every recognized key is always present in the output; keys never
    saved carry their defaults.
    """

    available_balance = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        required=False,
        coerce_to_string=False
    )

    class Meta:
        model = AppSettings
        fields = [
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
            'updated_at',
        ]
        read_only_fields = ['updated_at']
