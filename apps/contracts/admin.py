from django.contrib import admin
from django.utils.html import format_html
from .models import Contract, BalanceStatus
from .services import contract_balance


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = [
        'number',
        'description',
        'creditor',
        'status',
        'start_date',
        'end_date',
        'balance_badge',
    ]
    list_filter = ['status', 'end_date']
    search_fields = ['number', 'description', 'creditor__name']
    ordering = ['-created_at']
    date_hierarchy = 'end_date'
    readonly_fields = ['id', 'created_at', 'updated_at']
    list_select_related = ['creditor']

    fieldsets = (
        ('Contract', {
            'fields': ('id', 'number', 'description', 'creditor', 'status', 'notes')
        }),
        ('Term', {
            'fields': ('start_date', 'end_date', 'alert_new_contract', 'alert_additive'),
        }),
        ('Items', {
            'fields': ('items',),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def balance_badge(self, obj):
        """Worst item status as a colored badge."""
        statuses = {item['status'] for item in contract_balance(obj)['items']}
        for status, color in (
            (BalanceStatus.EXCEEDED, '#7b1fa2'),
            (BalanceStatus.CRITICAL, '#c62828'),
            (BalanceStatus.WARNING, '#ef6c00'),
        ):
            if status in statuses:
                return format_html(
                    '<span style="background: {}; color: white; padding: 3px 8px; '
                    'border-radius: 10px; font-size: 11px;">{}</span>',
                    color,
                    status.label,
                )
        return 'OK'
    balance_badge.short_description = 'Balance'
