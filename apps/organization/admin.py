from django.contrib import admin
from .models import Entity, AppSettings


@admin.register(Entity)
class EntityAdmin(admin.ModelAdmin):
    list_display = ['name', 'full_name', 'document_number', 'email', 'created_at']
    search_fields = ['name', 'full_name', 'document_number']
    readonly_fields = ['id', 'created_at']


@admin.register(AppSettings)
class AppSettingsAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'available_balance', 'updated_at']
    readonly_fields = ['updated_at']

    fieldsets = (
        ('Reports', {
            'fields': ('header_text', 'footer_text', 'logo_url', 'brasao_url', 'entity')
        }),
        ('Dashboard', {
            'fields': ('available_balance',),
        }),
        ('Login page', {
            'fields': (
                'login_background', 'login_logo',
                'login_card_bg_color', 'login_card_text_color',
                'login_button_bg_color', 'login_button_text_color',
                'login_background_overlay',
            ),
            'classes': ('collapse',),
        }),
    )

    def has_add_permission(self, request):
        return not AppSettings.objects.exists()
