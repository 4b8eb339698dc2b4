from django.contrib import admin
from django.utils.html import format_html
from .models import Category, Expense, ExpenseStatus


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'color_swatch']
    list_filter = ['type']
    search_fields = ['name']

    def color_swatch(self, obj):
        if not obj.color:
            return '-'
        return format_html(
            '<span style="background-color: {}; padding: 2px 12px; border-radius: 3px;">&nbsp;</span> {}',
            obj.color,
            obj.color
        )
    color_swatch.short_description = 'Color'


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'amount', 'type', 'due_date', 'status_badge', 'creditor', 'contract']
    list_filter = ['status', 'type', 'category']
    search_fields = ['description', 'creditor__name', 'contract__number']
    readonly_fields = ['id', 'created_at']
    raw_id_fields = ['creditor', 'contract']
    date_hierarchy = 'due_date'

    fieldsets = (
        ('Expense', {
            'fields': ('id', 'description', 'amount', 'type', 'month', 'category')
        }),
        ('Payment', {
            'fields': ('due_date', 'status', 'paid_at'),
        }),
        ('References', {
            'fields': ('creditor', 'contract'),
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',),
        }),
    )

    def status_badge(self, obj):
        colors = {
            ExpenseStatus.PAID: '#28a745',
            ExpenseStatus.PENDING: '#ffc107',
            ExpenseStatus.OVERDUE: '#dc3545',
        }
        current = obj.display_status()
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            colors[current],
            current.label
        )
    status_badge.short_description = 'Status'
